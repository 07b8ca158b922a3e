import pytest

from measura.config import ENV_CONFIG, ConverterSettings, load_settings, settings_from_mapping
from measura.core.conversion import PrecisionDefaults
from measura.core.errors import InvalidInputError


def write(tmp_path, text):
    path = tmp_path / "measura.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    settings = ConverterSettings()
    assert settings.essential_categories == ("length", "mass", "temperature")
    assert settings.preload_delay == 1.0
    assert settings.search_limit == 10
    assert settings.precision == {}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"preload_delay": -1},
        {"search_limit": 0},
        {"min_query_length": 0},
        {"log_level": "chatty"},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(InvalidInputError):
        ConverterSettings(**kwargs)


def test_load_from_file(tmp_path):
    path = write(tmp_path, """
[measura]
essential_categories = ["length", "volume"]
preload_delay = 0.25
search_limit = 5
log_level = "debug"

[measura.precision.length]
default = 3
max = 8
""")
    settings = load_settings(path)
    assert settings.essential_categories == ("length", "volume")
    assert settings.preload_delay == 0.25
    assert settings.search_limit == 5
    assert settings.log_level == "DEBUG"
    assert settings.precision == {"length": PrecisionDefaults(3, 0, 8)}


def test_file_without_measura_table_gives_defaults(tmp_path):
    path = write(tmp_path, "[other]\nkey = 1\n")
    assert load_settings(path) == ConverterSettings()


def test_path_from_environment(tmp_path, monkeypatch):
    path = write(tmp_path, "[measura]\nsearch_limit = 3\n")
    monkeypatch.setenv(ENV_CONFIG, str(path))
    assert load_settings().search_limit == 3


def test_no_path_and_no_environment(monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    assert load_settings() == ConverterSettings()


def test_missing_file(tmp_path):
    with pytest.raises(InvalidInputError, match="Cannot read settings file"):
        load_settings(tmp_path / "absent.toml")


def test_invalid_toml(tmp_path):
    path = write(tmp_path, "[measura\nsearch_limit = ")
    with pytest.raises(InvalidInputError, match="Invalid TOML"):
        load_settings(path)


def test_unknown_setting():
    with pytest.raises(InvalidInputError, match="Unknown settings: colour"):
        settings_from_mapping({"colour": "blue"})


@pytest.mark.parametrize(
    "precision, message",
    [
        ({"length": 3}, "must be a table"),
        ({"length": {"max": 3}}, "needs a 'default' value"),
        ({"length": {"default": 3, "step": 1}}, "Unknown keys in precision.length"),
        ({"length": {"default": "three"}}, "values must be integers"),
        ({"length": {"default": 3, "max": [8]}}, "values must be integers"),
        (5, "must be a table of category tables"),
    ],
)
def test_invalid_precision_tables(precision, message):
    with pytest.raises(InvalidInputError, match=message):
        settings_from_mapping({"precision": precision})


@pytest.mark.asyncio
async def test_precision_override_reaches_the_engine():
    from measura.service import UnitService
    from measura.units.registry import _bootstrap_default_registry

    settings = settings_from_mapping({"precision": {"length": {"default": 1}}})
    service = UnitService(_bootstrap_default_registry(), settings)
    result = await service.convert(1, "length", "foot", "inch")
    assert result.precision == 1


@pytest.mark.parametrize(
    "table",
    [
        {"preload_delay": "soon"},
        {"search_limit": "many"},
        {"essential_categories": "length"},
    ],
)
def test_mistyped_settings(table):
    with pytest.raises(InvalidInputError):
        settings_from_mapping(table)


def test_mistyped_precision_file(tmp_path):
    path = write(tmp_path, '[measura.precision.length]\ndefault = "x"\n')
    with pytest.raises(InvalidInputError, match="precision.length"):
        load_settings(path)
