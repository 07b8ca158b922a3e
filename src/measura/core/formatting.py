"""
measura.core.formatting
=======================

Category-aware display rules shared by the scalar and compound engines.

The rules are deliberately presentation-oriented: temperature always shows a
single decimal, time values are bucketed into ``d/h/m/s/ms`` strings, digital
storage keeps whole numbers whole, and every other category picks a number of
decimals from the magnitude of the value.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Optional, Pattern, Union

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.core.unit import Unit

Number = Union[int, float]

_EXPONENT_RE: Pattern[str] = re.compile(r"^[^e]*e(?P<exp>[+-]?\d+)$", re.I)

_MINUTE = 60
_HOUR = 3600
_DAY = 86400


def _is_missing(value: Optional[Number]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _grouped(value: float, decimals: int) -> str:
    """Fixed-point text with thousands separators, e.g. ``12,345.60``."""
    return f"{value:,.{decimals}f}"


def _magnitude_decimals(value: float) -> Optional[int]:
    """Decimals for the generic formatter; ``None`` means use exponent form."""
    a = abs(value)
    if a < 0.0001:
        return None
    if a < 0.001:
        return 6
    if a < 0.01:
        return 5
    if a < 0.1:
        return 4
    if a < 1:
        return 3
    if a < 10:
        return 2
    if a < 100:
        return 1
    return 0


def format_number(value: Number, precision: int = 6) -> str:
    """Format a number by magnitude, dropping trailing zeros.

    Whole numbers keep their digits (grouped), values below ``1e-6`` collapse
    to ``"0"``, and very large or very small values switch to exponent form.
    """
    if _is_missing(value):
        return ""
    value = float(value)
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if value.is_integer():
        return f"{int(value):,}"

    a = abs(value)
    if a < 0.000001:
        return "0"
    if a > 1e9 or a < 0.0001:
        return f"{value:.{precision}e}"

    text = _grouped(value, precision)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_time(seconds: float) -> str:
    if seconds >= _DAY:
        days = math.floor(seconds / _DAY)
        hours = math.floor((seconds % _DAY) / _HOUR)
        return f"{days}d {hours}h"
    if seconds >= _HOUR:
        hours = math.floor(seconds / _HOUR)
        minutes = math.floor((seconds % _HOUR) / _MINUTE)
        return f"{hours}h {minutes}m"
    if seconds >= _MINUTE:
        minutes = math.floor(seconds / _MINUTE)
        secs = math.floor(seconds % _MINUTE)
        return f"{minutes}m {secs}s"
    if seconds >= 1:
        return f"{seconds:.2f}s"
    return f"{seconds * 1000:.0f}ms"


def _format_default(value: float) -> str:
    if value == 0:
        return "0"
    decimals = _magnitude_decimals(value)
    if decimals is None:
        return f"{value:.4e}"
    return _grouped(value, decimals)


def format_number_by_category(
    value: Optional[Number],
    category_id: str,
    unit: Optional["Unit"] = None,
) -> str:
    """Format ``value`` for display according to the rules of ``category_id``.

    Parameters
    ----------
    value : float
        The (already rounded) number to display.
    category_id : str
        Category whose display rule applies; unknown ids use the generic rule.
    unit : Unit, optional
        The unit ``value`` is expressed in. Only the time rule uses it, to
        normalise the value to seconds before bucketing.

    Returns
    -------
    str
        ``"-"`` for missing/NaN values, otherwise the display string.
    """
    if _is_missing(value):
        return "-"
    value = float(value)
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    if category_id == "temperature":
        return _grouped(value, 1)

    if category_id == "time":
        seconds = unit.to_base(value) if unit is not None else value
        return _format_time(seconds)

    if category_id == "digital":
        if value % 1 == 0:
            return _grouped(value, 0)
        return format_number(value, 2)

    if category_id == "currency":
        return _grouped(value, 2)

    if category_id == "angle":
        return _grouped(value, 2) + "°"

    return _format_default(value)


def format_scientific_notation(value: Union[str, Number]) -> str:
    """Turn ``1e3`` into ``"× 1,000"`` and ``1e-3`` into ``"÷ 1,000"``.

    Values without an exponent are returned unchanged (as text).
    """
    text = value if isinstance(value, str) else repr(float(value))
    m = _EXPONENT_RE.match(text.strip())
    if not m:
        return text
    exp = int(m.group("exp"))
    if exp > 0:
        return f"× {10 ** exp:,}"
    return f"÷ {10 ** abs(exp):,}"


def format_conversion_relationship(
    from_value: Number,
    to_value: Number,
    from_symbol: str,
    to_symbol: str,
) -> str:
    """Describe the ratio between two units, e.g. ``"1 ft = 12 in"``."""
    if from_value == 0 or to_value == 0:
        return ""

    ratio = to_value / from_value
    if ratio == 1:
        return f"1 {from_symbol} = 1 {to_symbol}"

    if ratio >= 1000 or ratio < 0.001:
        return f"1 {from_symbol} = {ratio:.4e} {to_symbol}"
    if ratio >= 1:
        return f"1 {from_symbol} = {format_number(ratio, 4)} {to_symbol}"

    inverse = 1 / ratio
    if float(inverse).is_integer():
        return f"1 {from_symbol} = 1/{int(inverse)} {to_symbol}"
    return f"1 {from_symbol} = {format_number(ratio, 4)} {to_symbol}"


def format_plain(value: Number) -> str:
    """Shortest plain text for a number: ``5.0 -> "5"``, ``10.5 -> "10.5"``."""
    return f"{float(value) + 0.0:.15g}"


__all__ = [
    "format_number",
    "format_number_by_category",
    "format_scientific_notation",
    "format_conversion_relationship",
    "format_plain",
]
