"""
measura.units.parser
====================

Free-text reading and writing of compound measurements.

`read_compound_text` turns ``"5'10\""`` or ``"2 1/2 cups"`` into
``(value, unit)`` pairs using the patterns and lookup tables of a
`CompoundFormatConfig`; unrecognised text yields ``None``.
`fill_display_pattern` is its inverse, rendering pairs through the format's
``display_pattern``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence, Tuple

from measura.core.conversion import apply_rounding
from measura.core.formatting import format_plain
from measura.core.unit import Unit, UnitCategory
from measura.units.compound_formats import CompoundFormatConfig

ParsedComponents = List[Tuple[float, Unit]]

# <number> <unit text>, e.g. "2 cups", "5'", "3 fl oz"
_SINGLE_VALUE_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*([a-zA-Z'\"′″][a-zA-Z'\"′″ .]*)$")
_LEFTOVER_PLACEHOLDER_RE = re.compile(r"\{[0-9]+(?::[^}]+)?\}")
_WHITESPACE_RE = re.compile(r"\s+")


# Patterns are plain strings in the format table; compile each only once.
@lru_cache(maxsize=256)
def _compile_pattern(source: str) -> Pattern[str]:
    return re.compile(source, re.IGNORECASE)


def _match_values(pattern: str, groups: Sequence[Optional[str]]) -> Optional[List[Tuple[int, float]]]:
    """Numbers captured by ``pattern``, keyed by the index of their first group.

    In a pattern containing ``/`` three consecutive groups form a mixed
    number (``whole num/den``). ``None`` when a denominator is zero.
    """
    is_fraction_pattern = "/" in pattern
    values: List[Tuple[int, float]] = []
    j = 0
    while j < len(groups):
        text = groups[j]
        if text is None:
            j += 1
            continue
        if (
            is_fraction_pattern
            and j + 2 < len(groups)
            and groups[j + 1] is not None
            and groups[j + 2] is not None
        ):
            denominator = float(groups[j + 2])
            if denominator == 0:
                return None
            values.append((j, float(text) + float(groups[j + 1]) / denominator))
            j += 3
        else:
            values.append((j, float(text)))
            j += 1
    return values


def _match_unit_text(text: str, config: CompoundFormatConfig, category: UnitCategory) -> Optional[Unit]:
    needle = " ".join(text.lower().split())
    unit_id = config.informal_names.get(needle)
    if unit_id is not None:
        unit = category.lookup_unit(unit_id)
        if unit is not None:
            return unit

    if config.allowed_unit_ids:
        candidates = [category.lookup_unit(uid) for uid in config.allowed_unit_ids]
    else:
        candidates = category.all_units()
    for unit in candidates:
        if unit is None:
            continue
        if (
            unit.symbol.lower() == needle
            or unit.name.lower() == needle
            or any(alias.lower() == needle for alias in unit.aliases)
        ):
            return unit
    return None


def read_compound_text(
    text: str,
    config: CompoundFormatConfig,
    category: UnitCategory,
) -> Optional[ParsedComponents]:
    """Parse ``text`` into ``(value, unit)`` pairs, or ``None`` if unrecognised.

    Patterns are tried in order and the first match wins. When none matches,
    a single ``<number> <unit>`` entry is resolved through the format's
    informal names and then its allowed units.
    """
    if not text or not text.strip():
        return None
    text = text.strip()

    for pattern in config.parse_patterns:
        match = _compile_pattern(pattern).search(text)
        if match is None:
            continue
        values = _match_values(pattern, match.groups())
        if values is None:
            continue

        components: ParsedComponents = []
        for index, value in values:
            unit_id = config.unit_for_capture(pattern, index)
            if unit_id is None:
                continue
            unit = category.lookup_unit(unit_id)
            if unit is None:
                continue
            components.append((value, unit))
        if components:
            return components

    single = _SINGLE_VALUE_RE.match(text)
    if single is None:
        return None
    unit = _match_unit_text(single.group(2).strip(), config, category)
    if unit is None:
        return None
    return [(float(single.group(1)), unit)]


def fill_display_pattern(display_pattern: str, components: Sequence[Tuple[float, str]]) -> str:
    """Render ``(value, unit label)`` pairs through a display pattern.

    ``{i}`` becomes the value rounded half-up to 2 decimals, ``{i:unit}`` the label.
    Placeholders without a component are dropped and whitespace collapsed.
    """
    text = display_pattern
    for index, (value, label) in enumerate(components):
        text = text.replace(f"{{{index}}}", format_plain(apply_rounding(value, 2)))
        text = text.replace(f"{{{index}:unit}}", label)
    text = _LEFTOVER_PLACEHOLDER_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


__all__ = ["ParsedComponents", "read_compound_text", "fill_display_pattern"]
