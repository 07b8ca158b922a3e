"""
measura.units.compound_formats
==============================

Static configuration for compound (multi-unit) measurements such as
``5 ft 10 in`` or ``1 cup 2 tbsp``.

Each `CompoundFormatConfig` carries its own lookup tables so the parser
never needs format-specific branches:

- ``component_units``: capture-group index -> unit id.
- ``pattern_units``: parse pattern -> unit ids for its capture groups
  (overrides ``component_units`` for that pattern).
- ``informal_names``: free text such as ``"tbsp"`` -> unit id, used when
  only a single ``<number> <unit>`` is entered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from measura.core.errors import InvalidInputError

# integer or decimal capture
_NUM = r"(\d+(?:\.\d+)?)"


class CompoundFormatType(str, Enum):
    HEIGHT = "height"
    COOKING = "cooking"
    DISTANCE = "distance"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CompoundFormatConfig:
    id: CompoundFormatType
    name: str
    description: str
    category_id: str
    default_from_format: Tuple[str, ...]
    default_to_format: Tuple[str, ...]
    allowed_unit_ids: Tuple[str, ...]
    display_pattern: str
    parse_patterns: Tuple[str, ...] = ()
    component_units: Mapping[int, str] = field(default_factory=dict)
    pattern_units: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    informal_names: Mapping[str, str] = field(default_factory=dict)

    def unit_for_capture(self, pattern: str, index: int) -> Union[str, None]:
        """Unit id for capture group ``index`` (0-based) of ``pattern``."""
        explicit = self.pattern_units.get(pattern)
        if explicit is not None and index < len(explicit):
            return explicit[index]
        if index in self.component_units:
            return self.component_units[index]
        if index < len(self.default_from_format):
            return self.default_from_format[index]
        return None


# ---------------------------------------------------------------------------
# Height: feet + inches
# ---------------------------------------------------------------------------

_HEIGHT_METRIC = (
    _NUM + r"\s*(?:m|meters?|metres?)\b\s*" + _NUM + r"\s*(?:cm|centimeters?|centimetres?)\b"
)

_HEIGHT_PATTERNS = (
    # 5'10"
    _NUM + r"\s*['′]\s*" + _NUM + r"\s*[\"″]",
    # 5ft 10in, 5 feet 10 inches
    _NUM + r"\s*(?:ft|feet|foot)\s*" + _NUM + r"\s*(?:in|inch|inches)?",
    # 5' 10
    _NUM + r"\s*['′]\s*" + _NUM,
    # 1 m 77.8 cm
    _HEIGHT_METRIC,
)

HEIGHT = CompoundFormatConfig(
    id=CompoundFormatType.HEIGHT,
    name="Height",
    description="Human height in feet/inches or meters/centimeters",
    category_id="length",
    default_from_format=("foot", "inch"),
    default_to_format=("meter", "centimeter"),
    allowed_unit_ids=("foot", "inch", "meter", "centimeter", "millimeter"),
    display_pattern="{0} {0:unit} {1} {1:unit}",
    parse_patterns=_HEIGHT_PATTERNS,
    pattern_units=MappingProxyType({_HEIGHT_METRIC: ("meter", "centimeter")}),
    informal_names=MappingProxyType({
        "ft": "foot", "feet": "foot", "foot": "foot", "'": "foot", "′": "foot",
        "in": "inch", "inch": "inch", "inches": "inch", '"': "inch", "″": "inch",
        "m": "meter", "cm": "centimeter", "mm": "millimeter",
    }),
)


# ---------------------------------------------------------------------------
# Cooking: cups + tablespoons + teaspoons
# ---------------------------------------------------------------------------

_CUP = r"(?:cups?|c)\b"
_TBSP = r"(?:tbsp|tbs|tablespoons?)\b"
_TSP = r"(?:tsp|teaspoons?)\b"

_COOKING_CUP_TBSP_TSP = (
    _NUM + r"\s*" + _CUP + r"\s*" + _NUM + r"\s*" + _TBSP
    + r"(?:\s*" + _NUM + r"\s*" + _TSP + r")?"
)
_COOKING_MIXED_CUPS = r"(\d+)\s+(\d+)\s*/\s*(\d+)\s*" + _CUP
_COOKING_TBSP_TSP = _NUM + r"\s*" + _TBSP + r"\s*" + _NUM + r"\s*" + _TSP

COOKING = CompoundFormatConfig(
    id=CompoundFormatType.COOKING,
    name="Cooking",
    description="Cooking measurements with mixed units",
    category_id="volume",
    default_from_format=("cup_us", "tablespoon_us", "teaspoon_us"),
    default_to_format=("milliliter",),
    allowed_unit_ids=(
        "cup_us", "tablespoon_us", "teaspoon_us", "fluid_ounce_us", "pint_us",
        "quart_us", "gallon_us", "milliliter", "liter", "deciliter",
    ),
    display_pattern="{0} {0:unit} {1} {1:unit} {2} {2:unit}",
    parse_patterns=(
        # 1 cup 2 tbsp [1 tsp]
        _COOKING_CUP_TBSP_TSP,
        # 2 1/2 cups
        _COOKING_MIXED_CUPS,
        # 2 tbsp 1 tsp
        _COOKING_TBSP_TSP,
    ),
    component_units=MappingProxyType({0: "cup_us", 1: "tablespoon_us", 2: "teaspoon_us"}),
    pattern_units=MappingProxyType({
        _COOKING_TBSP_TSP: ("tablespoon_us", "teaspoon_us"),
    }),
    informal_names=MappingProxyType({
        "cup": "cup_us", "cups": "cup_us", "c": "cup_us",
        "tbsp": "tablespoon_us", "tbs": "tablespoon_us",
        "tablespoon": "tablespoon_us", "tablespoons": "tablespoon_us",
        "tsp": "teaspoon_us", "teaspoon": "teaspoon_us", "teaspoons": "teaspoon_us",
        "oz": "fluid_ounce_us", "fl oz": "fluid_ounce_us",
        "fluid ounce": "fluid_ounce_us", "fluid ounces": "fluid_ounce_us",
        "pt": "pint_us", "pint": "pint_us", "pints": "pint_us",
        "qt": "quart_us", "quart": "quart_us", "quarts": "quart_us",
        "gal": "gallon_us", "gallon": "gallon_us", "gallons": "gallon_us",
        "ml": "milliliter", "l": "liter", "dl": "deciliter",
    }),
)


# ---------------------------------------------------------------------------
# Distance: miles + yards + feet, or kilometers + meters
# ---------------------------------------------------------------------------

_DISTANCE_MILES = (
    _NUM + r"\s*(?:mi|miles?)\b\s*" + _NUM + r"\s*(?:yd|yards?)\b"
    + r"(?:\s*" + _NUM + r"\s*(?:ft|feet|foot)\b)?"
)
_DISTANCE_KM = _NUM + r"\s*(?:km|kilometers?|kilometres?)\s*" + _NUM + r"\s*(?:m|meters?|metres?)\b"

DISTANCE = CompoundFormatConfig(
    id=CompoundFormatType.DISTANCE,
    name="Distance",
    description="Distance with mixed units like miles/yards/feet",
    category_id="length",
    default_from_format=("mile", "yard", "foot"),
    default_to_format=("kilometer", "meter"),
    allowed_unit_ids=("mile", "yard", "foot", "inch", "kilometer", "meter", "centimeter"),
    display_pattern="{0} {0:unit} {1} {1:unit} {2} {2:unit}",
    parse_patterns=(
        # 2 mi 300 yd [10 ft]
        _DISTANCE_MILES,
        # 2 km 350 m
        _DISTANCE_KM,
    ),
    pattern_units=MappingProxyType({_DISTANCE_KM: ("kilometer", "meter")}),
    informal_names=MappingProxyType({
        "mi": "mile", "mile": "mile", "miles": "mile",
        "yd": "yard", "yard": "yard", "yards": "yard",
        "ft": "foot", "feet": "foot", "foot": "foot",
        "km": "kilometer", "m": "meter",
    }),
)


# ---------------------------------------------------------------------------
# Custom: any unit of the category, no patterns
# ---------------------------------------------------------------------------

CUSTOM = CompoundFormatConfig(
    id=CompoundFormatType.CUSTOM,
    name="Custom",
    description="User-defined compound format",
    category_id="length",
    default_from_format=("foot", "inch"),
    default_to_format=("meter", "centimeter"),
    allowed_unit_ids=(),
    display_pattern="{0} {0:unit} {1} {1:unit}",
)


COMPOUND_FORMATS: Mapping[CompoundFormatType, CompoundFormatConfig] = MappingProxyType({
    cfg.id: cfg for cfg in (HEIGHT, COOKING, DISTANCE, CUSTOM)
})


def get_compound_format(format_type: Union[CompoundFormatType, str]) -> CompoundFormatConfig:
    """Lookup a format by enum member or by its value (``"height"``...)."""
    try:
        key = CompoundFormatType(format_type.lower() if isinstance(format_type, str) else format_type)
    except ValueError:
        raise InvalidInputError(f"Unknown compound format: {format_type!r}") from None
    return COMPOUND_FORMATS[key]


__all__ = [
    "CompoundFormatType",
    "CompoundFormatConfig",
    "COMPOUND_FORMATS",
    "HEIGHT",
    "COOKING",
    "DISTANCE",
    "CUSTOM",
    "get_compound_format",
]
