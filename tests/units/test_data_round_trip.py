import importlib

import pytest

from measura.units.registry import _BUILTIN_CATEGORIES

CATEGORY_MODULES = [(cid, module) for cid, module, _, _ in _BUILTIN_CATEGORIES]
SAMPLES = [0.0, 1.0, -12.5, 1e6, 1e-6]


def load(module):
    return importlib.import_module(f"measura.units.data.{module}").CATEGORY


@pytest.mark.parametrize("category_id, module", CATEGORY_MODULES)
def test_category_module_shape(category_id, module):
    category = load(module)
    assert category.id == category_id
    assert category.all_units()
    assert category.base_unit is not None


@pytest.mark.parametrize("category_id, module", CATEGORY_MODULES)
def test_base_unit_is_identity(category_id, module):
    base = load(module).base_unit
    assert base.to_base(42.0) == 42.0
    assert base.from_base(42.0) == 42.0


@pytest.mark.parametrize("category_id, module", CATEGORY_MODULES)
def test_every_unit_round_trips_through_base(category_id, module):
    for unit in load(module).all_units():
        for value in SAMPLES:
            assert unit.from_base(unit.to_base(value)) == pytest.approx(value, rel=1e-9, abs=1e-9), (
                f"{category_id}:{unit.id} failed for {value}"
            )


@pytest.mark.parametrize("category_id, module", CATEGORY_MODULES)
def test_popular_units_exist(category_id, module):
    category = load(module)
    for unit_id in category.popular_units:
        assert category.has_unit(unit_id)


def test_known_factors():
    volume = load("volume")
    assert volume.require_unit("gallon_us").to_base(1) == pytest.approx(3.785411784)
    assert volume.require_unit("cup_us").to_base(16) == pytest.approx(3.785411784)
    length = load("length")
    assert length.require_unit("foot").to_base(1) == pytest.approx(0.3048)
    temperature = load("temperature")
    assert temperature.require_unit("fahrenheit").to_base(212) == pytest.approx(100)
    assert temperature.require_unit("kelvin").from_base(0) == pytest.approx(273.15)
