"""
measura.units.search
====================

Inverted term index over unit names, symbols, aliases and plural names.

The index is built incrementally: the category loader calls
`SearchIndex.add_to_search_index` every time a category finishes loading, so
a query only ever sees categories that have been loaded so far.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from measura.core.unit import Unit, UnitCategory

logger = logging.getLogger(__name__)

MIN_TERM_LENGTH = 2
MIN_WORD_LENGTH = 3


@dataclass(frozen=True, slots=True)
class UnitIndexEntry:
    unit_id: str
    category_id: str
    subcategory_id: Optional[str]
    name: str
    symbol: str
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UnitSearchResult:
    unit_id: str
    category_id: str
    subcategory_id: Optional[str]
    name: str
    symbol: str
    relevance: int


@dataclass
class SearchIndexState:
    """Raw index storage, keyed by ``"category:unit"``.

    ``term_map`` values are dicts used as insertion-ordered sets.
    """

    term_map: Dict[str, Dict[str, None]] = field(default_factory=dict)
    unit_map: Dict[str, UnitIndexEntry] = field(default_factory=dict)


def unit_key(category_id: str, unit_id: str) -> str:
    return f"{category_id}:{unit_id}"


def _normalize(text: str) -> str:
    return text.strip().lower()


def _unit_terms(unit: Unit) -> List[str]:
    terms = [unit.name, unit.symbol, *unit.aliases]
    if unit.plural_name:
        terms.append(unit.plural_name)
    return [_normalize(t) for t in terms]


def calculate_relevance(entry: UnitIndexEntry, query: str) -> int:
    """Score how well ``entry`` matches an already-normalised ``query``.

    The first applicable rule wins:

    ======================================  =====
    rule                                    score
    ======================================  =====
    name equals query                       100
    symbol equals query                     90
    name starts with query                  80
    symbol starts with query                75
    name contains query                     60
    symbol contains query                   55
    an alias equals query                   50
    an alias contains query                 40
    a word of the name starts with query    30
    anything else                           10
    ======================================  =====
    """
    name = entry.name.lower()
    symbol = entry.symbol.lower()

    if name == query:
        return 100
    if symbol == query:
        return 90
    if name.startswith(query):
        return 80
    if symbol.startswith(query):
        return 75
    if query in name:
        return 60
    if query in symbol:
        return 55

    aliases = [a.lower() for a in entry.aliases]
    if any(a == query for a in aliases):
        return 50
    if any(query in a for a in aliases):
        return 40
    if any(word.startswith(query) for word in name.split()):
        return 30
    return 10


class SearchIndex:
    """Incremental, relevance-ranked unit search over a `SearchIndexState`."""

    def __init__(
        self,
        state: Optional[SearchIndexState] = None,
        *,
        min_query_length: int = MIN_TERM_LENGTH,
        default_limit: int = 10,
    ) -> None:
        self.state = state if state is not None else SearchIndexState()
        self.min_query_length = min_query_length
        self.default_limit = default_limit

    # -------------------------- indexing -----------------------------------
    def add_to_search_index(self, category_id: str, category: UnitCategory) -> None:
        """Index every unit of ``category``; re-adding a category overwrites its entries."""
        count = 0
        for unit, subcategory_id in category.iter_indexed_units():
            self._index_unit(unit, category_id, subcategory_id)
            count += 1
        logger.debug("Indexed %d units of category %r", count, category_id)

    def _index_unit(self, unit: Unit, category_id: str, subcategory_id: Optional[str]) -> None:
        key = unit_key(category_id, unit.id)
        self.state.unit_map[key] = UnitIndexEntry(
            unit_id=unit.id,
            category_id=category_id,
            subcategory_id=subcategory_id,
            name=unit.name,
            symbol=unit.symbol,
            aliases=tuple(unit.aliases),
        )

        for term in _unit_terms(unit):
            self._add_term(term, key)
            if " " in term:
                for word in term.split():
                    if len(word) >= MIN_WORD_LENGTH:
                        self._add_term(word, key)

    def _add_term(self, term: str, key: str) -> None:
        if len(term) < MIN_TERM_LENGTH:
            return
        self.state.term_map.setdefault(term, {})[key] = None

    # -------------------------- querying -----------------------------------
    def search_units(
        self,
        query: str,
        limit: Optional[int] = None,
        categories: Optional[Iterable[str]] = None,
    ) -> List[UnitSearchResult]:
        """Return units matching ``query``, best match first.

        A term is a candidate when it contains the query or the query
        contains it. Each unit appears at most once. Ties keep index order.
        """
        needle = _normalize(query or "")
        if len(needle) < self.min_query_length:
            return []
        if limit is None:
            limit = self.default_limit
        allowed = set(categories) if categories is not None else None

        seen: Dict[str, None] = {}
        results: List[UnitSearchResult] = []
        for term, keys in self.state.term_map.items():
            if needle not in term and term not in needle:
                continue
            for key in keys:
                if key in seen:
                    continue
                entry = self.state.unit_map.get(key)
                if entry is None:
                    continue
                if allowed is not None and entry.category_id not in allowed:
                    continue
                seen[key] = None
                results.append(
                    UnitSearchResult(
                        unit_id=entry.unit_id,
                        category_id=entry.category_id,
                        subcategory_id=entry.subcategory_id,
                        name=entry.name,
                        symbol=entry.symbol,
                        relevance=calculate_relevance(entry, needle),
                    )
                )

        results.sort(key=lambda r: r.relevance, reverse=True)
        return results[: max(limit, 0)]

    # -------------------------- housekeeping -------------------------------
    def stats(self) -> Dict[str, int]:
        return {"terms": len(self.state.term_map), "units": len(self.state.unit_map)}

    def clear(self) -> None:
        self.state.term_map.clear()
        self.state.unit_map.clear()


__all__ = [
    "UnitIndexEntry",
    "UnitSearchResult",
    "SearchIndexState",
    "SearchIndex",
    "calculate_relevance",
    "unit_key",
]
