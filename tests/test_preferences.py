import importlib

import pytest

from measura.preferences import (
    UnitSystem,
    default_units,
    detect_unit_system,
    region_of,
    regional_default_units,
)


@pytest.mark.parametrize(
    "locale, region",
    [
        ("en-US", "US"),
        ("en_us", "US"),
        ("en_US.UTF-8", "US"),
        ("de-DE", "DE"),
        ("zh-Hant-TW", "TW"),
        ("sr_RS@latin", "RS"),
        ("fr", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_region_of(locale, region):
    assert region_of(locale) == region


@pytest.mark.parametrize(
    "locale, system",
    [
        ("en-US", UnitSystem.IMPERIAL),
        ("en-LR", UnitSystem.IMPERIAL),
        ("my-MM", UnitSystem.IMPERIAL),
        ("en-GB", UnitSystem.METRIC),
        ("en", UnitSystem.METRIC),
        (None, UnitSystem.METRIC),
    ],
)
def test_detect_unit_system(locale, system):
    assert detect_unit_system(locale) is system


def test_imperial_defaults():
    defaults = regional_default_units("en-US")
    assert defaults["length"] == ("foot", "inch")
    assert defaults["temperature"] == ("fahrenheit", "celsius")
    assert defaults["volume"] == ("gallon_us", "quart_us")


def test_metric_defaults():
    defaults = regional_default_units("de-DE")
    assert defaults["length"] == ("meter", "kilometer")
    assert defaults["mass"] == ("kilogram", "gram")


def test_regional_defaults_are_copies():
    regional_default_units("en-US")["length"] = ("mile", "yard")
    assert default_units("length", "en-US") == ("foot", "inch")


def test_default_units_for_single_category():
    assert default_units("temperature") == ("celsius", "fahrenheit")
    assert default_units("mass", "en_US") == ("pound", "ounce")
    assert default_units("angle", "en-US") is None


def test_default_units_exist_in_their_categories():
    for system_locale in ("en-US", "en-GB"):
        for category_id, pair in regional_default_units(system_locale).items():
            category = importlib.import_module(f"measura.units.data.{category_id}").CATEGORY
            for unit_id in pair:
                assert category.has_unit(unit_id), (category_id, unit_id)
