"""
measura.config
==============

Runtime settings for the loader, search index and conversion engine.

Settings come from the ``[measura]`` table of a TOML file::

    [measura]
    essential_categories = ["length", "mass", "temperature"]
    preload_delay = 0.5
    search_limit = 20
    log_level = "INFO"

    [measura.precision.length]
    default = 3
    min = 0
    max = 8

`load_settings` reads the file named by its argument, else the one named by
``$MEASURA_CONFIG``, else returns the built-in defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from measura.core.conversion import PrecisionDefaults
from measura.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

ENV_CONFIG = "MEASURA_CONFIG"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ConverterSettings:
    """Tunable knobs shared by every component of a `UnitService`."""

    essential_categories: Tuple[str, ...] = ("length", "mass", "temperature")
    preload_delay: float = 1.0  # seconds
    search_limit: int = 10
    min_query_length: int = 2
    log_level: str = "WARNING"
    precision: Mapping[str, PrecisionDefaults] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.preload_delay < 0:
            raise InvalidInputError("preload_delay must be >= 0")
        if self.search_limit < 1:
            raise InvalidInputError("search_limit must be >= 1")
        if self.min_query_length < 1:
            raise InvalidInputError("min_query_length must be >= 1")
        if self.log_level.upper() not in _LEVELS:
            raise InvalidInputError(f"Unknown log level: {self.log_level!r}")


_FIELD_NAMES = frozenset(f.name for f in fields(ConverterSettings))


def _precision_from_mapping(category_id: str, entry: Any) -> PrecisionDefaults:
    if not isinstance(entry, Mapping):
        raise InvalidInputError(f"precision.{category_id} must be a table")
    unknown = set(entry) - {"default", "min", "max"}
    if unknown:
        raise InvalidInputError(
            f"Unknown keys in precision.{category_id}: {', '.join(sorted(unknown))}"
        )
    try:
        return PrecisionDefaults(
            default=int(entry["default"]),
            min=int(entry.get("min", 0)),
            max=int(entry.get("max", 10)),
        )
    except KeyError:
        raise InvalidInputError(f"precision.{category_id} needs a 'default' value") from None
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"precision.{category_id} values must be integers: {exc}") from None


def settings_from_mapping(table: Mapping[str, Any]) -> ConverterSettings:
    """Build settings from a parsed ``[measura]`` table."""
    unknown = set(table) - _FIELD_NAMES
    if unknown:
        raise InvalidInputError(f"Unknown settings: {', '.join(sorted(unknown))}")

    kwargs: dict[str, Any] = dict(table)
    if "essential_categories" in kwargs:
        if isinstance(kwargs["essential_categories"], str):
            raise InvalidInputError("essential_categories must be a list of category ids")
        kwargs["essential_categories"] = tuple(kwargs["essential_categories"])
    if "precision" in kwargs:
        if not isinstance(kwargs["precision"], Mapping):
            raise InvalidInputError("precision must be a table of category tables")
        kwargs["precision"] = {
            cat: _precision_from_mapping(cat, entry) for cat, entry in kwargs["precision"].items()
        }
    if "log_level" in kwargs:
        kwargs["log_level"] = str(kwargs["log_level"]).upper()
    try:
        return ConverterSettings(**kwargs)
    except TypeError as exc:
        raise InvalidInputError(f"Invalid settings value: {exc}") from None


def load_settings(path: Optional[Union[str, Path]] = None) -> ConverterSettings:
    """Read settings from ``path`` (or ``$MEASURA_CONFIG``); defaults otherwise."""
    if path is None:
        path = os.environ.get(ENV_CONFIG) or None
    if path is None:
        return ConverterSettings()

    path = Path(path).expanduser()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise InvalidInputError(f"Cannot read settings file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise InvalidInputError(f"Invalid TOML in {path}: {exc}") from exc

    settings = settings_from_mapping(data.get("measura", {}))
    logger.info("Loaded settings from %s", path)
    return settings


__all__ = ["ConverterSettings", "ENV_CONFIG", "load_settings", "settings_from_mapping"]
