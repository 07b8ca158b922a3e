"""CLI command for searching the unit catalogue."""

from __future__ import annotations

import click
from rich.table import Table

from measura.cli.utils import get_console, get_service, run_async


@click.command("search")
@click.argument("query")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum number of results.")
@click.option(
    "--category", "-c", "categories", multiple=True,
    help="Restrict results to a category (repeatable).",
)
@click.pass_context
def search(ctx: click.Context, query: str, limit: int | None, categories: tuple[str, ...]) -> None:
    """Search unit names, symbols and aliases for QUERY."""
    console = get_console(ctx)
    service = get_service(ctx)

    if categories:
        run_async(_load(service, categories))
    else:
        run_async(service.load_all_categories())
    results = service.search_units(query, limit, categories or None)

    if not results:
        console.print(f"No units match [bold]{query!r}[/bold].")
        return

    table = Table(title=f"Units matching {query!r}")
    table.add_column("Unit", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Name")
    table.add_column("Symbol", style="yellow")
    table.add_column("Score", justify="right")
    for r in results:
        table.add_row(r.unit_id, r.category_id, r.name, r.symbol, str(r.relevance))
    console.print(table)


async def _load(service, category_ids):
    for category_id in category_ids:
        await service.load_unit_category(category_id)
