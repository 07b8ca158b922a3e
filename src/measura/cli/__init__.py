"""measura command-line interface package.

Supports ``python -m measura.cli`` as an alternative to the ``measura`` entry point.
"""

from measura.cli.main import cli, main

__all__ = ["cli", "main"]
