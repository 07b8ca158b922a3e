"""
measura.preferences
===================

Locale heuristics for picking sensible default units.

Only the region part of a locale tag is inspected: the United States,
Liberia and Myanmar get imperial defaults, everyone else metric.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

UnitPair = Tuple[str, str]  # (from unit id, to unit id)

IMPERIAL_REGIONS = frozenset({"US", "LR", "MM"})

_LOCALE_SPLIT_RE = re.compile(r"[-_.@]")


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


_DEFAULT_UNITS: Dict[UnitSystem, Dict[str, UnitPair]] = {
    UnitSystem.METRIC: {
        "length": ("meter", "kilometer"),
        "mass": ("kilogram", "gram"),
        "volume": ("liter", "milliliter"),
        "temperature": ("celsius", "fahrenheit"),
        "time": ("second", "minute"),
    },
    UnitSystem.IMPERIAL: {
        "length": ("foot", "inch"),
        "mass": ("pound", "ounce"),
        "volume": ("gallon_us", "quart_us"),
        "temperature": ("fahrenheit", "celsius"),
        "time": ("second", "minute"),
    },
}


def region_of(locale: Optional[str]) -> str:
    """Upper-cased region subtag: ``"en-US" -> "US"``, ``"fr" -> ""``."""
    if not locale:
        return ""
    for part in _LOCALE_SPLIT_RE.split(locale)[1:]:
        if len(part) == 2 and part.isalpha():
            return part.upper()
    return ""


def detect_unit_system(locale: Optional[str]) -> UnitSystem:
    if region_of(locale) in IMPERIAL_REGIONS:
        return UnitSystem.IMPERIAL
    return UnitSystem.METRIC


def regional_default_units(locale: Optional[str]) -> Mapping[str, UnitPair]:
    """Default ``(from, to)`` pair per category for the locale's unit system."""
    return dict(_DEFAULT_UNITS[detect_unit_system(locale)])


def default_units(category_id: str, locale: Optional[str] = None) -> Optional[UnitPair]:
    """The default pair for one category, or ``None`` if it has no default."""
    return regional_default_units(locale).get(category_id)


__all__ = [
    "UnitSystem",
    "IMPERIAL_REGIONS",
    "region_of",
    "detect_unit_system",
    "regional_default_units",
    "default_units",
]
