"""CLI command for compound measurements (feet + inches, cups + tablespoons...)."""

from __future__ import annotations

import click
from rich.markup import escape

from measura.cli.utils import get_console, get_service, run_async
from measura.units.compound_formats import CompoundFormatType, get_compound_format


@click.command("compound")
@click.argument("text")
@click.option(
    "--format", "-f", "format_name",
    type=click.Choice([t.value for t in CompoundFormatType if t is not CompoundFormatType.CUSTOM],
                      case_sensitive=False),
    default=CompoundFormatType.HEIGHT.value,
    show_default=True,
    help="Compound format used to read TEXT.",
)
@click.option(
    "--to", "targets", multiple=True,
    help="Target unit id, largest first (repeatable). Defaults to the format's target units.",
)
@click.pass_context
def compound(ctx: click.Context, text: str, format_name: str, targets: tuple[str, ...]) -> None:
    """Parse TEXT (e.g. "5'10\\"" or "2 1/2 cups") and convert it."""
    console = get_console(ctx)
    service = get_service(ctx)
    config = get_compound_format(format_name)

    measurement = run_async(service.parse_compound_input(text, config.id))
    if measurement is None:
        raise click.ClickException(f"Could not read {text!r} as a {config.name.lower()} measurement")

    result = run_async(service.convert_compound(measurement, targets or config.default_to_format))

    original = service.format_compound_measurement(result.original, config.id)
    converted = service.format_compound_measurement(result.converted, config.id)
    console.print(f"{escape(original)} = [bold green]{escape(converted)}[/bold green]")
    single = result.single_unit_equivalent
    if single is not None:
        console.print(f"  ≈ {escape(single.formatted_value)} {escape(single.to_unit.symbol)}")
