"""
measura.core.compound
=====================

Compound (multi-unit) measurements: ``5 ft 10 in``, ``1 cup 2 tbsp``.

`CompoundEngine.convert_compound` sums every component in the category's
base unit and decomposes the total greedily over the target units, largest
first::

    70 in  ->  [foot, inch]  ->  5 ft 10 in

Every target but the last receives a whole number; the last absorbs the
remainder, rounded half-up to 2 decimals.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union

from measura.core.conversion import (
    ConversionEngine,
    ConversionOptions,
    UnitConversionResult,
    apply_rounding,
)
from measura.core.errors import InvalidInputError
from measura.core.unit import Unit, UnitCategory
from measura.units.compound_formats import CompoundFormatType, get_compound_format
from measura.units.parser import fill_display_pattern, read_compound_text

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.units.loader import CategoryLoader

logger = logging.getLogger(__name__)

# floored components this close below an integer snap up to it
_SNAP_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class MeasurementComponent:
    value: float
    unit_id: str
    unit: Optional[Unit] = None

    @property
    def label(self) -> str:
        return self.unit.symbol if self.unit is not None else self.unit_id


@dataclass(frozen=True, slots=True)
class CompoundMeasurement:
    components: Tuple[MeasurementComponent, ...]
    category_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    def total_in_base(self, category: UnitCategory) -> float:
        """Sum of ``to_base(value)`` over components; unknown unit ids raise."""
        total = 0.0
        for component in self.components:
            unit = category.require_unit(component.unit_id)
            total += unit.to_base(component.value)
        return total


@dataclass(frozen=True, slots=True)
class CompoundConversionResult:
    original: CompoundMeasurement
    converted: CompoundMeasurement
    single_unit_equivalent: Optional[UnitConversionResult]
    timestamp: int


def _whole_part(amount: float) -> float:
    return float(math.floor(amount + _SNAP_EPSILON))


def decompose(total: float, targets: Sequence[Unit]) -> Tuple[MeasurementComponent, ...]:
    """Greedy split of a base-unit ``total`` over ``targets`` (largest first)."""
    remaining = total
    components = []
    for unit in targets[:-1]:
        whole = _whole_part(unit.from_base(remaining))
        components.append(MeasurementComponent(whole, unit.id, unit))
        remaining -= unit.to_base(whole)
    last = targets[-1]
    last_value = apply_rounding(last.from_base(remaining), 2) + 0.0
    components.append(MeasurementComponent(last_value, last.id, last))
    return tuple(components)


class CompoundEngine:
    def __init__(self, loader: "CategoryLoader", conversion: ConversionEngine) -> None:
        self.loader = loader
        self.conversion = conversion

    async def convert_compound(
        self,
        measurement: CompoundMeasurement,
        target_unit_ids: Sequence[str],
        precision: Optional[int] = None,
        format: bool = True,
    ) -> CompoundConversionResult:
        """Re-express ``measurement`` over ``target_unit_ids``.

        Raises
        ------
        InvalidInputError
            No components, no targets, or a non-finite total.
        UnitNotFoundError
            A component or target unit is not part of the category.
        """
        if not measurement.components:
            raise InvalidInputError("Invalid source measurement: missing components")
        if not target_unit_ids:
            raise InvalidInputError("No target units specified for conversion")

        category = await self.loader.load_unit_category(measurement.category_id)
        total = measurement.total_in_base(category)
        if not math.isfinite(total):
            raise InvalidInputError("Compound measurement total is not finite")
        targets = [category.require_unit(uid, "Target") for uid in target_unit_ids]

        converted = CompoundMeasurement(decompose(total, targets), measurement.category_id)

        single = None
        base = category.base_unit
        if base is not None:
            single = await self.conversion.convert(
                total,
                category.id,
                base.id,
                targets[0].id,
                ConversionOptions(precision=precision, format=format),
            )
        else:
            logger.debug("Category %r has no base unit; skipping single-unit equivalent", category.id)

        return CompoundConversionResult(
            original=measurement,
            converted=converted,
            single_unit_equivalent=single,
            timestamp=int(time.time() * 1000),
        )

    async def parse_compound_input(
        self,
        text: str,
        format_type: Union[CompoundFormatType, str],
    ) -> Optional[CompoundMeasurement]:
        """Parse free text such as ``5'10"``; ``None`` when it is not understood."""
        config = get_compound_format(format_type)
        category = await self.loader.load_unit_category(config.category_id)
        parsed = read_compound_text(text, config, category)
        if parsed is None:
            logger.debug("Could not parse %r as %s", text, config.id.value)
            return None
        return CompoundMeasurement(
            tuple(MeasurementComponent(value, unit.id, unit) for value, unit in parsed),
            config.category_id,
        )

    def format_compound_measurement(
        self,
        measurement: CompoundMeasurement,
        format_type: Union[CompoundFormatType, str],
    ) -> str:
        config = get_compound_format(format_type)
        return fill_display_pattern(
            config.display_pattern,
            [(c.value, c.label) for c in measurement.components],
        )

    async def create_compound_measurement(
        self,
        values: Sequence[float],
        unit_ids: Sequence[str],
        category_id: str,
    ) -> CompoundMeasurement:
        if len(values) != len(unit_ids):
            raise InvalidInputError("values and unit_ids must have the same length")
        category = await self.loader.load_unit_category(category_id)
        components = []
        for value, unit_id in zip(values, unit_ids):
            if not math.isfinite(value):
                raise InvalidInputError(f"Component value must be finite, got {value!r}")
            components.append(MeasurementComponent(float(value), unit_id, category.require_unit(unit_id)))
        return CompoundMeasurement(tuple(components), category.id)


__all__ = [
    "MeasurementComponent",
    "CompoundMeasurement",
    "CompoundConversionResult",
    "CompoundEngine",
    "decompose",
]
