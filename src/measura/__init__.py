"""
measura: unit conversion with category-aware precision, compound units and search.

The public entry point is `measura.service.UnitService`. This module exposes a
minimal, stable API; the service and the default category registry are
imported lazily so that importing the package stays cheap.
"""

from importlib import metadata as _metadata
from typing import Any


__app_name__ = "measura"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("measura")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__app_name__", "__license__", "UnitService", "DEFAULT_REGISTRY"]


def __getattr__(name: str) -> Any:
    # Import here to avoid import-time side-effects / circular imports.
    if name == "UnitService":
        from measura.service import UnitService
        return UnitService
    if name == "DEFAULT_REGISTRY":
        from measura.units.registry import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["UnitService", "DEFAULT_REGISTRY"])
