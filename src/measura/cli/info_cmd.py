"""CLI command for listing the registered unit categories."""

from __future__ import annotations

import click
from rich.table import Table

from measura.cli.utils import get_console, get_service, run_async


@click.command("categories")
@click.pass_context
def categories(ctx: click.Context) -> None:
    """List the unit categories and how many units each holds."""
    console = get_console(ctx)
    service = get_service(ctx)
    loaded = {category.id: category for category in run_async(service.load_all_categories())}

    table = Table(title="Unit Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Units", justify="right")
    table.add_column("Base unit", style="yellow")
    table.add_column("Description", style="dim")

    for info in service.categories():
        category = loaded.get(info.id)
        base = category.base_unit if category is not None else None
        table.add_row(
            info.id,
            info.name,
            str(len(category.all_units())) if category is not None else "-",
            base.id if base is not None else "-",
            info.description,
        )
    console.print(table)
