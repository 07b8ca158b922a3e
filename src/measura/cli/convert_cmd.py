"""CLI command for scalar conversions."""

from __future__ import annotations

import json

import click
from rich.markup import escape

from measura.cli.utils import get_console, get_service, run_async
from measura.core.conversion import ConversionOptions, RoundingMode


@click.command("convert")
@click.argument("value")
@click.argument("category")
@click.argument("from_unit")
@click.argument("to_unit")
@click.option(
    "--precision", "-p", type=click.IntRange(min=0), default=None,
    help="Decimal places (chosen from the result's magnitude when omitted).",
)
@click.option(
    "--rounding",
    type=click.Choice([mode.value for mode in RoundingMode], case_sensitive=False),
    default=RoundingMode.ROUND.value,
    show_default=True,
    help="Rounding mode applied at the chosen precision.",
)
@click.option("--raw", is_flag=True, help="Print the plain number without display formatting.")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_context
def convert(
    ctx: click.Context,
    value: str,
    category: str,
    from_unit: str,
    to_unit: str,
    precision: int | None,
    rounding: str,
    raw: bool,
    as_json: bool,
) -> None:
    """Convert VALUE in CATEGORY from FROM_UNIT to TO_UNIT.

    Example: measura convert 100 temperature celsius fahrenheit
    """
    console = get_console(ctx)
    service = get_service(ctx)
    options = ConversionOptions(precision=precision, rounding_mode=rounding, format=not raw)

    result = run_async(service.convert(value, category, from_unit, to_unit, options))

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
        return
    if raw:
        click.echo(result.formatted_value)
        return
    console.print(
        f"{escape(str(value))} {escape(result.from_unit.symbol)} = "
        f"[bold green]{escape(result.formatted_value)}[/bold green] "
        f"{escape(result.to_unit.symbol)}"
    )
