"""
measura.service
===============

`UnitService` wires the category loader, search index and both conversion
engines around one `LoaderState` and one `SearchIndexState`. Build one per
application (or per test) instead of sharing module-level caches.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from measura.config import ConverterSettings
from measura.core.compound import CompoundConversionResult, CompoundEngine, CompoundMeasurement
from measura.core.conversion import ConversionEngine, ConversionOptions, UnitConversionResult
from measura.core.unit import Unit, UnitCategory
from measura.units.compound_formats import CompoundFormatType
from measura.units.loader import CategoryLoader, LoaderState
from measura.units.registry import DEFAULT_REGISTRY, CategoryInfo, CategoryRegistry
from measura.units.search import SearchIndex, SearchIndexState, UnitSearchResult


class UnitService:
    def __init__(
        self,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
        settings: Optional[ConverterSettings] = None,
        *,
        loader_state: Optional[LoaderState] = None,
        search_state: Optional[SearchIndexState] = None,
    ) -> None:
        self.settings = settings if settings is not None else ConverterSettings()
        self.registry = registry
        self.search_index = SearchIndex(
            search_state,
            min_query_length=self.settings.min_query_length,
            default_limit=self.settings.search_limit,
        )
        self.loader = CategoryLoader(registry, loader_state, self.search_index, self.settings)
        self.conversion = ConversionEngine(self.loader, self.settings.precision)
        self.compound = CompoundEngine(self.loader, self.conversion)

    # -------------------------- loading ------------------------------------
    async def load_unit_category(self, category_id: str) -> UnitCategory:
        return await self.loader.load_unit_category(category_id)

    async def initialize_essential_categories(self) -> Tuple[str, ...]:
        return await self.loader.initialize_essential_categories()

    def preload_categories(
        self, category_ids: Iterable[str], delay: Optional[float] = None
    ) -> "asyncio.Task[Tuple[str, ...]]":
        return self.loader.preload_categories(category_ids, delay)

    async def load_all_categories(self) -> List[UnitCategory]:
        """Load every registered category (used to search the full catalogue)."""
        return list(
            await asyncio.gather(*(self.loader.load_unit_category(cid) for cid in self.registry.all()))
        )

    def categories(self) -> Tuple[CategoryInfo, ...]:
        return self.registry.categories()

    # -------------------------- scalar -------------------------------------
    async def convert(
        self,
        value: Union[float, str],
        category_id: str,
        from_unit_id: str,
        to_unit_id: str,
        options: Optional[ConversionOptions] = None,
    ) -> UnitConversionResult:
        return await self.conversion.convert(value, category_id, from_unit_id, to_unit_id, options)

    async def get_compatible_units(self, category_id: str, unit_id: str) -> List[Unit]:
        return await self.conversion.get_compatible_units(category_id, unit_id)

    async def get_popular_units(self, category_id: str, limit: int = 5) -> List[Unit]:
        return await self.conversion.get_popular_units(category_id, limit)

    # -------------------------- compound -----------------------------------
    async def convert_compound(
        self,
        measurement: CompoundMeasurement,
        target_unit_ids: Sequence[str],
        precision: Optional[int] = None,
        format: bool = True,
    ) -> CompoundConversionResult:
        return await self.compound.convert_compound(measurement, target_unit_ids, precision, format)

    async def parse_compound_input(
        self, text: str, format_type: Union[CompoundFormatType, str]
    ) -> Optional[CompoundMeasurement]:
        return await self.compound.parse_compound_input(text, format_type)

    def format_compound_measurement(
        self, measurement: CompoundMeasurement, format_type: Union[CompoundFormatType, str]
    ) -> str:
        return self.compound.format_compound_measurement(measurement, format_type)

    async def create_compound_measurement(
        self, values: Sequence[float], unit_ids: Sequence[str], category_id: str
    ) -> CompoundMeasurement:
        return await self.compound.create_compound_measurement(values, unit_ids, category_id)

    # -------------------------- search -------------------------------------
    def search_units(
        self,
        query: str,
        limit: Optional[int] = None,
        categories: Optional[Iterable[str]] = None,
    ) -> List[UnitSearchResult]:
        """Search the units of every category loaded so far.

        ``categories`` may use aliases (``"weight"`` for ``"mass"``).
        """
        if categories is not None:
            categories = [self.registry.resolve(c) for c in categories]
        return self.search_index.search_units(query, limit, categories)

    def search_stats(self) -> dict[str, Any]:
        return {**self.search_index.stats(), "categories": len(self.loader.loaded_categories())}


__all__ = ["UnitService"]
