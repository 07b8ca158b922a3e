"""measura command-line interface.

Entry point for the ``measura`` CLI tool.
"""

from __future__ import annotations

import click
from rich.console import Console

from measura import __app_name__, __version__
from measura.config import load_settings
from measura.core.errors import MeasuraError
from measura.logging_utils import setup_logging
from measura.service import UnitService

console = Console()

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML settings file (defaults to $MEASURA_CONFIG).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """measura: unit conversion from the command line.

    Convert values between units, split quantities into compound units such
    as feet and inches, and search the unit catalogue.
    """
    ctx.ensure_object(dict)
    try:
        settings = load_settings(config_path)
    except MeasuraError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(log_level or settings.log_level)
    ctx.obj["console"] = console
    ctx.obj["settings"] = settings
    ctx.obj["service"] = UnitService(settings=settings)


# Import and register sub-commands
from measura.cli.convert_cmd import convert  # noqa: E402
from measura.cli.compound_cmd import compound  # noqa: E402
from measura.cli.search_cmd import search  # noqa: E402
from measura.cli.info_cmd import categories  # noqa: E402

cli.add_command(convert)
cli.add_command(compound)
cli.add_command(search)
cli.add_command(categories)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
