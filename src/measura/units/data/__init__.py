"""
Built-in unit data, one module per category.

Each module exposes a module-level ``CATEGORY`` (`UnitCategory`). Modules are
imported lazily by the category registry, never at package import time.
"""
