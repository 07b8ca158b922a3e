"""
measura.units.registry
======================

A structured, extensible, and testable registry of unit *categories*.

The registry does not hold unit data itself. It maps a category id to an
asynchronous provider that produces the `UnitCategory` on demand, which keeps
start-up cheap: a category's data module is only imported when something
actually asks for it.

Key points
----------
- Encapsulates state in a `CategoryRegistry` class (thread-safe).
- Normalization of ids (Unicode NFC, trimmed, case-folded).
- Support for aliases (e.g., "weight" → "mass", "data" → "digital").
- Clear public API: `register`, `register_alias`, `get_provider`, `has`, `all`.
- Easily testable (build as many isolated registries as needed).
"""
from __future__ import annotations

import importlib
import threading
import unicodedata
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Mapping, Tuple

from measura.core.errors import UnknownCategoryError
from measura.core.unit import UnitCategory

CategoryProvider = Callable[[], Awaitable[UnitCategory]]

_DATA_PACKAGE = "measura.units.data"


def normalize_category_id(category_id: str) -> str:
    """Normalize user-provided category ids.

    Rules:
    - Unicode normalize to NFC.
    - Strip surrounding whitespace and case-fold.
    - Underscores and spaces become dashes ("fuel economy" → "fuel-economy").
    """
    if not category_id:
        return category_id
    s = unicodedata.normalize("NFC", category_id.strip()).casefold()
    return s.replace("_", "-").replace(" ", "-")


@dataclass(frozen=True)
class CategoryInfo:
    """Navigation metadata, available before the category data is loaded."""

    id: str
    name: str
    description: str = ""


def module_provider(module_name: str, attribute: str = "CATEGORY") -> CategoryProvider:
    """Provider that lazily imports ``module_name`` and returns its category.

    Relative names resolve inside ``measura.units.data``.
    """
    qualified = module_name if "." in module_name else f"{_DATA_PACKAGE}.{module_name}"

    async def _provide() -> UnitCategory:
        module = importlib.import_module(qualified)
        return getattr(module, attribute)

    return _provide


def static_provider(category: UnitCategory) -> CategoryProvider:
    """Provider for a category that is already in memory."""

    async def _provide() -> UnitCategory:
        return category

    return _provide


class CategoryRegistry:
    """Thread-safe map from category id to an async data provider."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._providers: Dict[str, CategoryProvider] = {}
        self._info: Dict[str, CategoryInfo] = {}
        self._aliases: Dict[str, str] = {}

    def __contains__(self, category_id: str) -> bool:
        return self.has(category_id)

    # -------------------------- public API ---------------------------------
    def register(
        self,
        category_id: str,
        provider: CategoryProvider,
        *,
        name: str = "",
        description: str = "",
        replace: bool = False,
    ) -> None:
        """Register (or overwrite if replace is True) the provider for a category."""
        key = normalize_category_id(category_id)
        if not key:
            raise ValueError("category id must be a non-empty string")

        with self._lock:
            if not replace:
                if key in self._providers:
                    raise ValueError(
                        f"Cannot register category '{category_id}': "
                        "a provider for this id already exists."
                    )
                if key in self._aliases:
                    raise ValueError(
                        f"Cannot register category '{category_id}': "
                        "an alias with this name already exists."
                    )
            self._providers[key] = provider
            self._info[key] = CategoryInfo(key, name or key.replace("-", " ").title(), description)

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        key = normalize_category_id(alias)
        target = normalize_category_id(canonical)
        with self._lock:
            if not replace and key in self._providers and key != target:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    f"a category with the id '{key}' already exists."
                )
            self._aliases[key] = target

    def resolve(self, category_id: str) -> str:
        """Return the canonical id for ``category_id`` (alias-aware)."""
        key = normalize_category_id(category_id)
        with self._lock:
            return self._aliases.get(key, key)

    def has(self, category_id: str) -> bool:
        with self._lock:
            return self.resolve(category_id) in self._providers

    def get_provider(self, category_id: str) -> CategoryProvider:
        """Lookup the provider for a category.

        Raises `UnknownCategoryError` if nothing is registered under the id.
        """
        key = self.resolve(category_id)
        with self._lock:
            provider = self._providers.get(key)
        if provider is None:
            raise UnknownCategoryError(category_id)
        return provider

    def info(self, category_id: str) -> CategoryInfo:
        key = self.resolve(category_id)
        with self._lock:
            found = self._info.get(key)
        if found is None:
            raise UnknownCategoryError(category_id)
        return found

    def all(self) -> Mapping[str, CategoryProvider]:
        with self._lock:
            return dict(self._providers)

    def categories(self) -> Tuple[CategoryInfo, ...]:
        with self._lock:
            return tuple(self._info.values())


# ---------------------------------------------------------------------------
# Bootstrap a default registry with the built-in categories
# ---------------------------------------------------------------------------

_BUILTIN_CATEGORIES = (
    # (id, module, name, description)
    ("length",      "length",      "Length",      "Units for measuring distance or length"),
    ("mass",        "mass",        "Mass",        "Units for measuring mass or weight"),
    ("temperature", "temperature", "Temperature", "Units for measuring temperature"),
    ("volume",      "volume",      "Volume",      "Units for measuring three-dimensional space"),
    ("area",        "area",        "Area",        "Units for measuring two-dimensional space"),
    ("time",        "time",        "Time",        "Units for measuring time intervals"),
    ("speed",       "speed",       "Speed",       "Units for measuring velocity"),
    ("digital",     "digital",     "Digital",     "Units for measuring digital information"),
    ("energy",      "energy",      "Energy",      "Units for measuring energy"),
    ("pressure",    "pressure",    "Pressure",    "Units for measuring pressure"),
    ("angle",       "angle",       "Angle",       "Units for measuring plane angles"),
)


def _bootstrap_default_registry() -> CategoryRegistry:
    reg = CategoryRegistry()

    for category_id, module, name, description in _BUILTIN_CATEGORIES:
        reg.register(category_id, module_provider(module), name=name, description=description)

    reg.register_alias("weight", "mass")
    reg.register_alias("distance", "length")
    reg.register_alias("data", "digital")
    reg.register_alias("data-storage", "digital")
    reg.register_alias("velocity", "speed")

    return reg


# Public, shared default registry
DEFAULT_REGISTRY: CategoryRegistry = _bootstrap_default_registry()


__all__ = [
    "CategoryProvider",
    "CategoryInfo",
    "CategoryRegistry",
    "DEFAULT_REGISTRY",
    "module_provider",
    "static_provider",
    "normalize_category_id",
]
