from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measura.units.registry import CategoryRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "CategoryRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from measura.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. 'default_registry' is the package's default category
    registry; 'categories' lists the ids registered on it.
    """
    if name == "default_registry":
        return _get_default_registry()
    if name == "categories":
        return tuple(info.id for info in _get_default_registry().categories())
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_registry", "categories"])
