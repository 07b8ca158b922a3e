import pytest

from measura.core.compound import CompoundMeasurement, MeasurementComponent, decompose
from measura.core.conversion import ConversionOptions
from measura.core.errors import InvalidInputError, UnitNotFoundError
from measura.core.unit import Unit, UnitCategory
from measura.service import UnitService
from measura.units.compound_formats import CompoundFormatType
from measura.units.registry import CategoryRegistry, static_provider


def inches(value):
    return CompoundMeasurement((MeasurementComponent(value, "inch"),), "length")


def pairs(measurement):
    return [(c.value, c.unit_id) for c in measurement.components]


# ---------------------------------------------------------------------------
# Decomposition
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_seventy_inches_is_five_foot_ten(service):
    result = await service.convert_compound(inches(70), ["foot", "inch"])
    assert pairs(result.converted) == [(5, "foot"), (10, "inch")]
    assert result.converted.category_id == "length"


@pytest.mark.asyncio
async def test_last_component_carries_the_fraction(service):
    result = await service.convert_compound(inches(71.5), ["foot", "inch"])
    assert pairs(result.converted) == [(5, "foot"), (11.5, "inch")]


@pytest.mark.asyncio
async def test_intermediate_components_are_whole_numbers(service):
    miles = CompoundMeasurement((MeasurementComponent(1.5, "mile"),), "length")
    result = await service.convert_compound(miles, ["mile", "yard", "foot"])
    assert pairs(result.converted) == [(1, "mile"), (880, "yard"), (0, "foot")]


@pytest.mark.asyncio
async def test_components_are_summed_before_decomposing(service):
    m = await service.create_compound_measurement([5, 22], ["foot", "inch"], "length")
    result = await service.convert_compound(m, ["foot", "inch"])
    assert pairs(result.converted) == [(6, "foot"), (10, "inch")]


@pytest.mark.asyncio
async def test_converted_components_carry_units(service):
    result = await service.convert_compound(inches(70), ["foot", "inch"])
    assert [c.unit.symbol for c in result.converted.components] == ["ft", "in"]


@pytest.mark.asyncio
async def test_single_unit_equivalent_uses_first_target(service):
    result = await service.convert_compound(inches(70), ["foot", "inch"])
    single = result.single_unit_equivalent
    assert single is not None
    assert single.from_unit.id == "meter"
    assert single.to_unit.id == "foot"
    assert single.value == pytest.approx(5.8333)


@pytest.mark.asyncio
async def test_single_unit_equivalent_honours_precision(service):
    result = await service.convert_compound(inches(70), ["foot", "inch"], precision=1, format=False)
    assert result.single_unit_equivalent.value == pytest.approx(5.8)
    assert result.single_unit_equivalent.formatted_value == "5.8"


@pytest.mark.asyncio
async def test_single_unit_equivalent_needs_a_base_unit():
    category = UnitCategory("plain", "Plain", units=(
        Unit.linear("a", "A", "a", 1.0),
        Unit.linear("b", "B", "b", 10.0),
    ))
    reg = CategoryRegistry()
    reg.register("plain", static_provider(category))
    svc = UnitService(reg)

    m = CompoundMeasurement((MeasurementComponent(25, "a"),), "plain")
    result = await svc.convert_compound(m, ["b", "a"])
    assert pairs(result.converted) == [(2, "b"), (5, "a")]
    assert result.single_unit_equivalent is None


@pytest.mark.asyncio
async def test_result_keeps_the_original(service):
    original = inches(70)
    result = await service.convert_compound(original, ["foot", "inch"])
    assert result.original is original
    assert result.timestamp > 0


@pytest.mark.asyncio
async def test_empty_components_rejected(service):
    with pytest.raises(InvalidInputError):
        await service.convert_compound(CompoundMeasurement((), "length"), ["foot"])


@pytest.mark.asyncio
async def test_empty_targets_rejected(service):
    with pytest.raises(InvalidInputError):
        await service.convert_compound(inches(70), [])


@pytest.mark.asyncio
async def test_unknown_component_unit(service):
    m = CompoundMeasurement((MeasurementComponent(3, "cubit"),), "length")
    with pytest.raises(UnitNotFoundError):
        await service.convert_compound(m, ["foot"])


@pytest.mark.asyncio
async def test_unknown_target_unit(service):
    with pytest.raises(UnitNotFoundError):
        await service.convert_compound(inches(70), ["foot", "cubit"])


@pytest.mark.regression
def test_decompose_snaps_float_error_up():
    # 0.3 / 0.1 is 2.9999999999999996 in binary floating point
    tenth = Unit.linear("tenth", "Tenth", "t", 0.1)
    base = Unit.base("one", "One", "1")
    parts = decompose(0.3, [tenth, base])
    assert parts[0].value == 3
    assert parts[1].value == 0


@pytest.mark.regression
def test_decompose_rounds_last_component_half_up():
    dozen = Unit.linear("dozen", "Dozen", "dz", 12.0)
    base = Unit.base("unit", "Unit", "u")
    parts = decompose(12.125, [dozen, base])
    assert [p.value for p in parts] == [1, 0.13]


@pytest.mark.asyncio
@pytest.mark.regression
async def test_compound_and_scalar_rounding_agree(toy_registry, settings):
    svc = UnitService(toy_registry, settings)
    m = CompoundMeasurement((MeasurementComponent(12.125, "unit"),), "toy")
    result = await svc.convert_compound(m, ["dozen", "unit"])
    scalar = await svc.convert(0.125, "toy", "unit", "unit", ConversionOptions(precision=2))
    assert result.converted.components[-1].value == scalar.value == 0.13


# ---------------------------------------------------------------------------
# Creating measurements
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_compound_measurement_resolves_units(service):
    m = await service.create_compound_measurement([5, 10], ["foot", "inch"], "length")
    assert m.category_id == "length"
    assert [c.unit.id for c in m.components] == ["foot", "inch"]
    assert isinstance(m.components, tuple)


@pytest.mark.asyncio
async def test_create_compound_measurement_length_mismatch(service):
    with pytest.raises(InvalidInputError):
        await service.create_compound_measurement([5, 10], ["foot"], "length")


@pytest.mark.asyncio
async def test_create_compound_measurement_unknown_unit(service):
    with pytest.raises(UnitNotFoundError):
        await service.create_compound_measurement([5], ["cubit"], "length")


def test_measurement_total_in_base(toy_category):
    m = CompoundMeasurement([MeasurementComponent(1, "gross"), MeasurementComponent(2, "dozen")], "toy")
    assert isinstance(m.components, tuple)
    assert m.total_in_base(toy_category) == 168


# ---------------------------------------------------------------------------
# Parsing and formatting through the engine
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_cups_and_tablespoons_parse_and_reformat(service):
    m = await service.parse_compound_input("5 cups 2 tbsp", CompoundFormatType.COOKING)
    assert pairs(m) == [(5, "cup_us"), (2, "tablespoon_us")]
    assert m.category_id == "volume"

    text = service.format_compound_measurement(m, CompoundFormatType.COOKING)
    assert text == "5 cup 2 tbsp"
    again = await service.parse_compound_input(text, CompoundFormatType.COOKING)
    assert pairs(again) == pairs(m)


@pytest.mark.asyncio
async def test_unparseable_input_returns_none(service):
    assert await service.parse_compound_input("tall-ish", "height") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "values, unit_ids, fmt",
    [
        ([5, 10], ["foot", "inch"], CompoundFormatType.HEIGHT),
        ([5.5, 3.25], ["foot", "inch"], CompoundFormatType.HEIGHT),
        ([2], ["inch"], CompoundFormatType.HEIGHT),
        ([1, 77.8], ["meter", "centimeter"], CompoundFormatType.HEIGHT),
        ([1, 2, 1], ["cup_us", "tablespoon_us", "teaspoon_us"], CompoundFormatType.COOKING),
        ([3], ["tablespoon_us"], CompoundFormatType.COOKING),
        ([2, 300], ["mile", "yard"], CompoundFormatType.DISTANCE),
        ([2, 350], ["kilometer", "meter"], CompoundFormatType.DISTANCE),
    ],
)
async def test_format_parse_format_round_trip(service, values, unit_ids, fmt):
    from measura.units.compound_formats import get_compound_format

    category_id = get_compound_format(fmt).category_id
    m = await service.create_compound_measurement(values, unit_ids, category_id)
    text = service.format_compound_measurement(m, fmt)
    parsed = await service.parse_compound_input(text, fmt)
    assert parsed is not None
    assert service.format_compound_measurement(parsed, fmt) == text


@pytest.mark.asyncio
async def test_convert_parsed_height_to_metric(service):
    m = await service.parse_compound_input("5'10\"", "height")
    result = await service.convert_compound(m, ["meter", "centimeter"])
    assert pairs(result.converted) == [(1, "meter"), (77.8, "centimeter")]
    assert service.format_compound_measurement(result.converted, "height") == "1 m 77.8 cm"
