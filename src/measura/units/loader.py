"""
measura.units.loader
====================

On-demand loading and caching of unit categories.

At most one load per category id runs at any time: concurrent callers that
ask for the same uncached category all await the same task. Loaded
categories are cached for the lifetime of the `LoaderState` and fed to the
search index as they arrive.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Set, Tuple

from measura.config import ConverterSettings
from measura.core.unit import UnitCategory
from measura.units.registry import DEFAULT_REGISTRY, CategoryProvider, CategoryRegistry
from measura.units.search import SearchIndex

logger = logging.getLogger(__name__)


@dataclass
class LoaderState:
    """Cache plus in-flight bookkeeping for one loader."""

    cache: Dict[str, UnitCategory] = field(default_factory=dict)
    in_flight: Dict[str, "asyncio.Task[UnitCategory]"] = field(default_factory=dict)
    # strong references to fire-and-forget preload tasks
    background: Set["asyncio.Task[Any]"] = field(default_factory=set)


class CategoryLoader:
    def __init__(
        self,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
        state: Optional[LoaderState] = None,
        search_index: Optional[SearchIndex] = None,
        settings: Optional[ConverterSettings] = None,
    ) -> None:
        self.registry = registry
        self.state = state if state is not None else LoaderState()
        self.search_index = search_index
        self.settings = settings if settings is not None else ConverterSettings()

    # -------------------------- single category -----------------------------
    async def load_unit_category(self, category_id: str) -> UnitCategory:
        """Return the category, loading it on first use.

        Raises
        ------
        UnknownCategoryError
            If no provider is registered for ``category_id``.
        """
        key = self.registry.resolve(category_id)
        cached = self.state.cache.get(key)
        if cached is not None:
            return cached

        task = self.state.in_flight.get(key)
        if task is None:
            provider = self.registry.get_provider(category_id)
            task = asyncio.get_running_loop().create_task(self._load(key, provider))
            self.state.in_flight[key] = task
            logger.debug("Loading unit category %r", key)

        # a cancelled caller must not cancel the shared load
        return await asyncio.shield(task)

    async def _load(self, key: str, provider: CategoryProvider) -> UnitCategory:
        try:
            category = await provider()
            self.state.cache[key] = category
            if self.search_index is not None:
                self.search_index.add_to_search_index(key, category)
            logger.debug("Loaded unit category %r (%d units)", key, len(category.all_units()))
            return category
        except Exception:
            logger.error("Failed to load unit category %r", key, exc_info=True)
            raise
        finally:
            self.state.in_flight.pop(key, None)

    def is_category_loaded(self, category_id: str) -> bool:
        return self.registry.resolve(category_id) in self.state.cache

    def loaded_categories(self) -> Tuple[str, ...]:
        return tuple(self.state.cache)

    # -------------------------- bulk loading --------------------------------
    def preload_categories(
        self,
        category_ids: Iterable[str],
        delay: Optional[float] = None,
    ) -> "asyncio.Task[Tuple[str, ...]]":
        """Schedule best-effort background loads after ``delay`` seconds.

        Must be called from a running event loop. The returned task resolves
        to the ids that were loaded; failures are logged, never raised.
        """
        if delay is None:
            delay = self.settings.preload_delay
        task = asyncio.get_running_loop().create_task(self._preload(tuple(category_ids), delay))
        self.state.background.add(task)
        task.add_done_callback(self.state.background.discard)
        return task

    async def _preload(self, category_ids: Tuple[str, ...], delay: float) -> Tuple[str, ...]:
        if delay > 0:
            await asyncio.sleep(delay)

        pending = []
        for category_id in category_ids:
            key = self.registry.resolve(category_id)
            if key in self.state.cache or key in self.state.in_flight or key in pending:
                continue
            pending.append(key)

        outcomes = await asyncio.gather(
            *(self.load_unit_category(key) for key in pending),
            return_exceptions=True,
        )
        loaded = []
        for key, outcome in zip(pending, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning("Background preload of category %r failed: %s", key, outcome)
            else:
                loaded.append(key)
        return tuple(loaded)

    async def initialize_essential_categories(self) -> Tuple[str, ...]:
        """Load the configured essential categories in parallel.

        Individual failures are logged and skipped; returns the ids loaded.
        """
        category_ids = tuple(self.settings.essential_categories)
        outcomes = await asyncio.gather(
            *(self.load_unit_category(cid) for cid in category_ids),
            return_exceptions=True,
        )
        loaded = []
        for category_id, outcome in zip(category_ids, outcomes):
            if isinstance(outcome, Exception):
                logger.error("Could not initialise essential category %r: %s", category_id, outcome)
            else:
                loaded.append(self.registry.resolve(category_id))
        logger.info("Essential categories ready: %s", ", ".join(loaded) or "none")
        return tuple(loaded)

    def preload_common_categories(
        self,
        history: Iterable[Any],
        limit: int = 3,
    ) -> Optional["asyncio.Task[Tuple[str, ...]]"]:
        """Preload the ``limit`` categories used most often in ``history``.

        History items are conversion results or their ``to_dict()`` form;
        only the ``category`` field is read. Returns ``None`` when there is
        nothing to preload.
        """
        counts: Counter[str] = Counter()
        for item in history:
            category = item.get("category") if isinstance(item, Mapping) else getattr(item, "category", None)
            if category:
                counts[category] += 1
        top = [category for category, _ in counts.most_common(limit)]
        if not top:
            return None
        return self.preload_categories(top)


__all__ = ["LoaderState", "CategoryLoader"]
