"""
measura.core.conversion
=======================

Scalar conversion between two units of one category.

Every conversion goes through the category's base unit::

    result = to_unit.from_base(from_unit.to_base(value))

then a precision is picked (explicitly, or from per-category defaults
adjusted to the magnitude of the result), the rounding mode is applied and
the number is formatted for display.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Union

from measura.core.errors import InvalidInputError
from measura.core.formatting import format_number_by_category, format_plain
from measura.core.unit import Unit

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.units.loader import CategoryLoader

Number = Union[int, float]


class RoundingMode(str, Enum):
    ROUND = "round"
    CEIL = "ceil"
    FLOOR = "floor"
    TRUNC = "trunc"


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Per-call knobs. ``precision=None`` means "pick one dynamically"."""

    precision: Optional[int] = None
    rounding_mode: RoundingMode = RoundingMode.ROUND
    format: bool = True
    timestamp: Optional[int] = None

    def __post_init__(self) -> None:
        if self.precision is not None and self.precision < 0:
            raise InvalidInputError("precision must be >= 0")
        if not isinstance(self.rounding_mode, RoundingMode):
            try:
                mode = RoundingMode(str(self.rounding_mode).lower())
            except ValueError:
                raise InvalidInputError(
                    f"Unknown rounding mode: {self.rounding_mode!r}"
                ) from None
            object.__setattr__(self, "rounding_mode", mode)


@dataclass(frozen=True, slots=True)
class PrecisionDefaults:
    default: int
    min: int
    max: int


DEFAULT_PRECISION: Dict[str, PrecisionDefaults] = {
    "length": PrecisionDefaults(4, 0, 10),
    "mass": PrecisionDefaults(4, 0, 10),
    "volume": PrecisionDefaults(4, 0, 10),
    "area": PrecisionDefaults(4, 0, 10),
    "temperature": PrecisionDefaults(2, 0, 6),
    "time": PrecisionDefaults(3, 0, 9),
}
FALLBACK_PRECISION = PrecisionDefaults(4, 0, 10)


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------

def coerce_value(value: Union[Number, str]) -> float:
    """Turn user input into a finite float, or raise `InvalidInputError`."""
    if isinstance(value, bool):
        raise InvalidInputError(f"Not a numeric value: {value!r}")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Not a numeric value: {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInputError(f"Value must be finite, got {value!r}")
    return number


def select_precision(value: float, defaults: PrecisionDefaults) -> int:
    """Category default, widened for tiny results and narrowed for huge ones."""
    magnitude = abs(value)
    if magnitude == 0:
        return defaults.default
    if magnitude < 0.001:
        return defaults.max
    if magnitude < 0.01:
        return min(defaults.max, 6)
    if magnitude < 0.1:
        return min(defaults.max, 5)
    if magnitude < 1:
        return min(defaults.max, 4)
    if magnitude > 1_000_000:
        return defaults.min
    if magnitude > 10_000:
        return max(defaults.min, 1)
    return defaults.default


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


_ROUNDERS: Dict[RoundingMode, Callable[[float], float]] = {
    RoundingMode.ROUND: _round_half_up,
    RoundingMode.CEIL: math.ceil,
    RoundingMode.FLOOR: math.floor,
    RoundingMode.TRUNC: math.trunc,
}


def apply_rounding(value: float, precision: int, mode: RoundingMode = RoundingMode.ROUND) -> float:
    """``op(value * 10**precision) / 10**precision``.

    ``round`` is half-up (towards +inf), so ``-2.5`` rounds to ``-2``.
    Values too large to scale, or precisions beyond float range, are
    returned unchanged.
    """
    try:
        factor = 10.0 ** precision
    except OverflowError:
        return value
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return _ROUNDERS[mode](scaled) / factor


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UnitConversionResult:
    value: float
    formatted_value: str
    from_unit: Unit
    to_unit: Unit
    category: str
    precision: int
    timestamp: int  # ms since epoch

    def to_dict(self) -> dict:
        """JSON-safe snapshot, suitable for a history store."""
        return {
            "value": self.value,
            "formatted_value": self.formatted_value,
            "from_unit": self.from_unit.summary(),
            "to_unit": self.to_unit.summary(),
            "category": self.category,
            "precision": self.precision,
            "timestamp": self.timestamp,
        }


def _now_ms() -> int:
    return int(time.time() * 1000)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ConversionEngine:
    """Converts scalar values using categories supplied by a `CategoryLoader`."""

    def __init__(
        self,
        loader: "CategoryLoader",
        precision_overrides: Optional[Mapping[str, PrecisionDefaults]] = None,
    ) -> None:
        self.loader = loader
        self.precision_table: Dict[str, PrecisionDefaults] = dict(DEFAULT_PRECISION)
        if precision_overrides:
            self.precision_table.update(precision_overrides)

    def precision_defaults(self, category_id: str) -> PrecisionDefaults:
        return self.precision_table.get(category_id, FALLBACK_PRECISION)

    async def convert(
        self,
        value: Union[Number, str],
        category_id: str,
        from_unit_id: str,
        to_unit_id: str,
        options: Optional[ConversionOptions] = None,
    ) -> UnitConversionResult:
        """Convert ``value`` from one unit to another within ``category_id``.

        Raises
        ------
        UnknownCategoryError
            The category has no registered provider.
        UnitNotFoundError
            Either unit is absent from the category.
        InvalidInputError
            ``value`` is not a finite number.
        """
        options = options or ConversionOptions()
        number = coerce_value(value)
        category = await self.loader.load_unit_category(category_id)
        from_unit = category.require_unit(from_unit_id, "Source")
        to_unit = category.require_unit(to_unit_id, "Target")

        if from_unit_id == to_unit_id:
            result = number
        else:
            result = to_unit.from_base(from_unit.to_base(number))
            if not math.isfinite(result):
                raise InvalidInputError(
                    f"Converting {value!r} {from_unit_id} to {to_unit_id} overflows"
                )

        if options.precision is not None:
            precision = options.precision
        else:
            precision = select_precision(result, self.precision_defaults(category.id))

        rounded = apply_rounding(result, precision, options.rounding_mode) + 0.0
        if options.format:
            formatted = format_number_by_category(rounded, category.id, to_unit)
        else:
            formatted = format_plain(rounded)

        return UnitConversionResult(
            value=rounded,
            formatted_value=formatted,
            from_unit=from_unit,
            to_unit=to_unit,
            category=category.id,
            precision=precision,
            timestamp=options.timestamp if options.timestamp is not None else _now_ms(),
        )

    async def get_compatible_units(self, category_id: str, unit_id: str) -> List[Unit]:
        """Every other unit of the category, in lookup order."""
        category = await self.loader.load_unit_category(category_id)
        category.require_unit(unit_id)
        return [unit for unit in category.all_units() if unit.id != unit_id]

    async def get_popular_units(self, category_id: str, limit: int = 5) -> List[Unit]:
        """Declared popular units, or a base-first heuristic ranking."""
        category = await self.loader.load_unit_category(category_id)
        if category.popular_units:
            units = [
                unit
                for unit in map(category.lookup_unit, category.popular_units)
                if unit is not None
            ]
        else:
            # stable: base units, then units with a factor, then the rest
            units = sorted(
                category.all_units(),
                key=lambda u: (not u.base_unit, u.conversion_factor is None),
            )
        return units[: max(limit, 0)]


__all__ = [
    "RoundingMode",
    "ConversionOptions",
    "PrecisionDefaults",
    "DEFAULT_PRECISION",
    "FALLBACK_PRECISION",
    "UnitConversionResult",
    "ConversionEngine",
    "coerce_value",
    "select_precision",
    "apply_rounding",
]
