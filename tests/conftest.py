# tests/conftest.py
import pytest

from measura.config import ConverterSettings
from measura.core.unit import SubCategory, Unit, UnitCategory
from measura.service import UnitService
from measura.units.registry import CategoryRegistry, _bootstrap_default_registry, static_provider


@pytest.fixture()
def registry():
    """Fresh, fully-bootstrapped CategoryRegistry for isolation per test."""
    return _bootstrap_default_registry()


@pytest.fixture()
def settings():
    return ConverterSettings(preload_delay=0)


@pytest.fixture()
def service(registry, settings):
    """A UnitService with its own loader cache and search index."""
    return UnitService(registry, settings)


@pytest.fixture()
def toy_category():
    """Small category with a duplicated unit id across subcategories."""
    return UnitCategory(
        id="toy",
        name="Toy",
        units=(Unit.base("unit", "Unit", "u", aliases=("units",)),),
        subcategories=(
            SubCategory("big", "Big", (
                Unit.linear("dozen", "Dozen", "dz", 12.0, aliases=("dozens",)),
                Unit.linear("gross", "Gross", "gr", 144.0),
            )),
            SubCategory("other", "Other", (
                Unit.linear("dozen", "Baker's Dozen", "bdz", 13.0),
            )),
        ),
        base_unit_id="unit",
    )


@pytest.fixture()
def toy_registry(toy_category):
    reg = CategoryRegistry()
    reg.register("toy", static_provider(toy_category), name="Toy")
    return reg
