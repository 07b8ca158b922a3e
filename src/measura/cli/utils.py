"""Helpers shared by the CLI sub-commands."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

import click
from rich.console import Console

from measura.core.errors import MeasuraError
from measura.service import UnitService

T = TypeVar("T")


def get_console(ctx: click.Context) -> Console:
    return ctx.obj.get("console") or Console()


def get_service(ctx: click.Context) -> UnitService:
    service = ctx.obj.get("service")
    if service is None:
        service = ctx.obj["service"] = UnitService()
    return service


def run_async(awaitable: Awaitable[T]) -> T:
    """Run a coroutine to completion, reporting measura errors click-style."""

    async def _runner() -> T:
        return await awaitable

    try:
        return asyncio.run(_runner())
    except MeasuraError as exc:
        raise click.ClickException(str(exc)) from exc
