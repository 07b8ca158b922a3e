"""
measura.core.errors
===================

Exception hierarchy shared by the loader, the conversion engines and the CLI.

Parse failures of free-text compound input are *not* errors; the parser
returns ``None`` for those.
"""

from __future__ import annotations

from typing import Optional


class MeasuraError(Exception):
    """Root of every error raised by measura."""


class UnknownCategoryError(MeasuraError, LookupError):
    """No data provider is registered for the requested category id."""

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Unknown unit category: {category_id}")
        self.category_id = category_id


class UnitNotFoundError(MeasuraError, LookupError):
    """A unit id is absent from a loaded category (including subcategories)."""

    def __init__(self, unit_id: str, category_id: Optional[str] = None, role: str = "") -> None:
        label = f"{role} unit" if role else "Unit"
        where = f" in category '{category_id}'" if category_id else ""
        super().__init__(f"{label.capitalize()} not found: {unit_id}{where}")
        self.unit_id = unit_id
        self.category_id = category_id


class InvalidInputError(MeasuraError, ValueError):
    """Malformed caller input: empty compound measurement, no targets, NaN..."""


__all__ = [
    "MeasuraError",
    "UnknownCategoryError",
    "UnitNotFoundError",
    "InvalidInputError",
]
