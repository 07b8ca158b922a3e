"""
measura.core.unit
=================

Static unit definitions.

Every `Unit` knows how to move a value to and from its category's base unit.
Converting between two units of one category is always the two-step
``to.from_base(frm.to_base(x))``, so no unit needs to know about any other
unit besides the base.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite
from typing import Callable, Iterable, Iterator, Optional, Tuple

from measura.core.errors import UnitNotFoundError

Converter = Callable[[float], float]


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit of one category, with conversion callables relative to the base unit."""

    id: str
    name: str
    symbol: str
    to_base: Converter = field(default=_identity, repr=False, compare=False)
    from_base: Converter = field(default=_identity, repr=False, compare=False)
    aliases: Tuple[str, ...] = ()
    plural_name: Optional[str] = None
    base_unit: bool = False
    conversion_factor: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("unit id must be a non-empty string")
        # accept any iterable of aliases but store an immutable tuple
        if not isinstance(self.aliases, tuple):
            object.__setattr__(self, "aliases", tuple(self.aliases))

    @classmethod
    def base(
        cls,
        id: str,
        name: str,
        symbol: str,
        *,
        aliases: Iterable[str] = (),
        plural_name: Optional[str] = None,
    ) -> Unit:
        """Factory for the category's reference unit (identity conversions)."""
        return cls(
            id, name, symbol,
            aliases=tuple(aliases),
            plural_name=plural_name,
            base_unit=True,
        )

    @classmethod
    def linear(
        cls,
        id: str,
        name: str,
        symbol: str,
        factor: float,
        *,
        aliases: Iterable[str] = (),
        plural_name: Optional[str] = None,
    ) -> Unit:
        """Factory for purely multiplicative units: ``base = value * factor``."""
        if not (factor > 0 and isfinite(factor)):
            raise ValueError("factor must be a positive, finite number")
        return cls(
            id, name, symbol,
            to_base=lambda value: value * factor,
            from_base=lambda value: value / factor,
            aliases=tuple(aliases),
            plural_name=plural_name,
            conversion_factor=factor,
        )

    @classmethod
    def affine(
        cls,
        id: str,
        name: str,
        symbol: str,
        scale: float,
        offset: float = 0.0,
        *,
        aliases: Iterable[str] = (),
        plural_name: Optional[str] = None,
    ) -> Unit:
        """Factory for offset scales: ``base = (value - offset) * scale``.

        Temperature scales are the typical case (Fahrenheit: scale 5/9,
        offset 32). A negative scale is allowed (Delisle runs backwards).
        """
        if scale == 0 or not isfinite(scale):
            raise ValueError("scale must be a non-zero, finite number")
        return cls(
            id, name, symbol,
            to_base=lambda value: (value - offset) * scale,
            from_base=lambda value: value / scale + offset,
            aliases=tuple(aliases),
            plural_name=plural_name,
        )

    def summary(self) -> dict:
        """JSON-safe description of the unit (no callables)."""
        return {"id": self.id, "name": self.name, "symbol": self.symbol}


@dataclass(frozen=True, slots=True)
class SubCategory:
    id: str
    name: str
    units: Tuple[Unit, ...]
    description: str = ""
    popular_units: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UnitCategory:
    """A category of mutually convertible units.

    The full unit set is the direct ``units`` followed by the units of each
    subcategory, in declaration order. Lookups walk that order and the first
    match wins, so an id duplicated across subcategories resolves to the
    earliest declaration.
    """

    id: str
    name: str
    units: Tuple[Unit, ...] = ()
    subcategories: Tuple[SubCategory, ...] = ()
    base_unit_id: Optional[str] = None
    popular_units: Tuple[str, ...] = ()
    description: str = ""

    def all_units(self) -> list[Unit]:
        return [unit for unit, _ in self.iter_indexed_units()]

    def iter_indexed_units(self) -> Iterator[Tuple[Unit, Optional[str]]]:
        """Yield ``(unit, subcategory_id)`` pairs in lookup order."""
        for unit in self.units:
            yield unit, None
        for sub in self.subcategories:
            for unit in sub.units:
                yield unit, sub.id

    def lookup_unit(self, unit_id: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        for sub in self.subcategories:
            for unit in sub.units:
                if unit.id == unit_id:
                    return unit
        return None

    def require_unit(self, unit_id: str, role: str = "") -> Unit:
        unit = self.lookup_unit(unit_id)
        if unit is None:
            raise UnitNotFoundError(unit_id, self.id, role)
        return unit

    def has_unit(self, unit_id: str) -> bool:
        return self.lookup_unit(unit_id) is not None

    @property
    def base_unit(self) -> Optional[Unit]:
        if self.base_unit_id is not None:
            unit = self.lookup_unit(self.base_unit_id)
            if unit is not None:
                return unit
        for unit in self.all_units():
            if unit.base_unit:
                return unit
        return None


__all__ = ["Converter", "Unit", "SubCategory", "UnitCategory"]
