import pytest

from measura.core.unit import SubCategory, Unit, UnitCategory
from measura.units.search import (
    SearchIndex,
    SearchIndexState,
    UnitIndexEntry,
    calculate_relevance,
)


def entry(name, symbol, aliases=()):
    return UnitIndexEntry("id", "cat", None, name, symbol, tuple(aliases))


@pytest.fixture()
def index():
    length = UnitCategory(
        "length", "Length",
        subcategories=(
            SubCategory("metric", "Metric", (
                Unit.base("meter", "Meter", "m", aliases=("metre",), plural_name="meters"),
                Unit.linear("kilometer", "Kilometer", "km", 1000.0, aliases=("kilometre",)),
            )),
            SubCategory("imperial", "Imperial", (
                Unit.linear("mile", "Mile", "mi", 1609.344, aliases=("statute mile",)),
                Unit.linear("foot", "Foot", "ft", 0.3048, aliases=("feet",)),
            )),
        ),
    )
    speed = UnitCategory(
        "speed", "Speed",
        units=(
            Unit.base("meter_per_second", "Meter per Second", "m/s"),
            Unit.linear("mile_per_hour", "Mile per Hour", "mph", 0.44704,
                        aliases=("miles per hour",)),
        ),
    )
    idx = SearchIndex(SearchIndexState())
    idx.add_to_search_index("length", length)
    idx.add_to_search_index("speed", speed)
    return idx


# ---------------------------------------------------------------------------
# Relevance rules
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "e, query, expected",
    [
        (entry("Meter", "m"), "meter", 100),
        (entry("Kilometer", "km"), "km", 90),
        (entry("Meter", "m"), "met", 80),
        (entry("Kilobyte", "kB"), "kb", 90),
        (entry("Mile per Hour", "mph"), "mp", 75),
        (entry("Kilometer", "km"), "meter", 60),
        (entry("Square Meter", "m²"), "m²", 90),
        (entry("Cubic Meter", "cu m"), "u m", 55),
        (entry("Liter", "L", ["litre"]), "litre", 50),
        (entry("Inch", "in", ["inches", '"']), "inches", 50),
        (entry("Foot", "ft", ["feet"]), "fee", 40),
        (entry("Nautical Mile", "nmi", ["nautical miles"]), "mile", 60),
        (entry("Gram", "g"), "grams", 10),
    ],
)
def test_relevance_rules(e, query, expected):
    assert calculate_relevance(e, query) == expected


# ---------------------------------------------------------------------------
# Indexing
# ---------------------------------------------------------------------------

def test_terms_are_lowercased_and_short_terms_skipped(index):
    terms = index.state.term_map
    assert "meter" in terms
    assert "metre" in terms
    assert "meters" in terms
    assert "m" not in terms  # single character
    assert "km" in terms


def test_words_of_multi_word_terms_are_indexed(index):
    terms = index.state.term_map
    assert "statute mile" in terms
    assert "statute" in terms
    assert "speed:meter_per_second" in terms["second"]
    assert "per" in terms  # 3 characters qualifies
    assert "length:mile" in terms["mile"]


def test_entries_keep_subcategory(index):
    e = index.state.unit_map["length:foot"]
    assert e.subcategory_id == "imperial"
    assert e.aliases == ("feet",)
    assert index.state.unit_map["speed:mile_per_hour"].subcategory_id is None


def test_re_adding_a_category_does_not_duplicate(index):
    before = index.stats()
    cat = UnitCategory("length", "Length", units=(Unit.base("meter", "Meter", "m"),))
    index.add_to_search_index("length", cat)
    assert index.stats() == before
    assert list(index.state.term_map["meter"]).count("length:meter") == 1


def test_stats_and_clear(index):
    assert index.stats()["units"] == 6
    assert index.stats()["terms"] > 6
    index.clear()
    assert index.stats() == {"terms": 0, "units": 0}
    assert index.search_units("meter") == []


# ---------------------------------------------------------------------------
# Querying
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("query", ["", "m", " m ", None])
def test_short_queries_return_nothing(index, query):
    assert index.search_units(query) == []


def test_name_prefix_beats_alias_only_matches(index):
    results = index.search_units("met")
    ids = [r.unit_id for r in results]
    assert ids[0] == "meter"
    meter = results[0]
    assert meter.relevance == 80
    assert all(r.relevance <= meter.relevance for r in results)


def test_exact_symbol_match(index):
    results = index.search_units("mph")
    assert results[0].unit_id == "mile_per_hour"
    assert results[0].relevance == 90
    assert results[0].category_id == "speed"


def test_results_are_deduplicated(index):
    results = index.search_units("mile")
    keys = [(r.category_id, r.unit_id) for r in results]
    assert len(keys) == len(set(keys))
    assert keys[0] == ("length", "mile")


def test_query_containing_a_term_matches(index):
    # "kilometers" contains the indexed term "kilometer"
    results = index.search_units("kilometers")
    assert "kilometer" in [r.unit_id for r in results]


def test_results_sorted_by_relevance(index):
    results = index.search_units("mi")
    scores = [r.relevance for r in results]
    assert scores == sorted(scores, reverse=True)


def test_limit_and_category_filter(index):
    assert len(index.search_units("me", limit=2)) == 2
    only_speed = index.search_units("mile", categories=["speed"])
    assert {r.category_id for r in only_speed} == {"speed"}


def test_query_is_case_insensitive(index):
    assert index.search_units("METER")[0].unit_id == "meter"


def test_configurable_minimum_query_length():
    idx = SearchIndex(min_query_length=4)
    idx.add_to_search_index("length", UnitCategory("length", "Length", units=(
        Unit.base("meter", "Meter", "m"),
    )))
    assert idx.search_units("met") == []
    assert idx.search_units("mete")[0].unit_id == "meter"


@pytest.mark.asyncio
@pytest.mark.regression
async def test_service_search_resolves_category_aliases(service):
    await service.load_unit_category("mass")
    results = service.search_units("kg", categories=["weight"])
    assert results
    assert results[0].unit_id == "kilogram"
    assert {r.category_id for r in results} == {"mass"}
