"""CLI entry-point (Typer).

Cada comando abre su propio `httpx.AsyncClient`, ejecuta una operación del
Core y presenta el resultado con Rich. Los errores de la capa de datos se
muestran en rojo y terminan con código 1.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.json_exporter import export_models_json
from cli import doctor
from cli.ui_components import (
    build_mapping_groups_table,
    build_merchants_table,
    build_tags_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import MerchantTag
from core.errors import DataAccessError
from core.logging_config import setup_logging
from core.services.entity_service import FETCH_ALL
from core.services.mappings import MappingAggregator
from core.services.merchants import DEFAULT_IMPORT_HEADERS, build_merchant_service
from core.services.tags import TAG_MODEL, build_tag_service

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Client for the merchant REST API.")
merchants_app = typer.Typer(no_args_is_help=True, help="Merchant records.")
mappings_app = typer.Typer(no_args_is_help=True, help="Field label mappings.")
tags_app = typer.Typer(no_args_is_help=True, help="Merchant tags.")

app.add_typer(merchants_app, name="merchants")
app.add_typer(mappings_app, name="mappings")
app.add_typer(tags_app, name="tags")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    setup_logging(AppSettings())
    if not quiet:
        print_banner(_console)


def _execute(operation: Callable[[Any, AppSettings], Awaitable[T]]) -> T:
    """Run `operation(client, settings)` on a fresh client, mapping errors to exit code 1."""

    settings = AppSettings()

    async def _runner() -> T:
        async with build_async_client(settings) as client:
            return await operation(client, settings)

    try:
        return asyncio.run(_runner())
    except DataAccessError as exc:
        logger.debug("Command failed", exc_info=exc)
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@merchants_app.command("list")
def merchants_list(
    all_pages: bool = typer.Option(False, "--all", help="Fetch every page."),
    page: int = typer.Option(1, "--page", min=1, help="Page to fetch (ignored with --all)."),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Server-side text search."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the result as JSON."),
) -> None:
    """List merchants."""

    async def _op(client, settings):
        service = build_merchant_service(client, settings)
        extra = {"s": search} if search else None
        return await service.get_all(extra_params=extra, page=FETCH_ALL if all_pages else page)

    merchants = _execute(_op)
    _console.print(build_merchants_table(merchants))
    if output:
        path = export_models_json(items=merchants, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")


@merchants_app.command("import")
def merchants_import(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="XLSX file to upload."),
) -> None:
    """Import merchants from a spreadsheet."""

    async def _op(client, settings):
        service = build_merchant_service(client, settings)
        return await service.import_from_file(file, DEFAULT_IMPORT_HEADERS)

    merchants = _execute(_op)
    _console.print(build_merchants_table(merchants))
    _console.print(f"[green]Imported {len(merchants)} merchant(s).[/green]")


@merchants_app.command("bulk-delete")
def merchants_bulk_delete(
    ids: list[int] = typer.Argument(..., help="Merchant ids to delete."),
) -> None:
    """Delete several merchants in one request."""

    async def _op(client, settings):
        return await build_merchant_service(client, settings).bulk_delete(ids)

    ack = _execute(_op)
    _console.print(f"[green]Deleted:[/green] {ack if ack is not None else len(ids)}")


@mappings_app.command("list")
def mappings_list(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the groups as JSON."),
) -> None:
    """Show every mapping, grouped by field."""

    async def _op(client, settings):
        return await MappingAggregator.from_client(client, settings).load_all_mappings()

    groups = _execute(_op)
    _console.print(build_mapping_groups_table(groups))
    if output:
        path = export_models_json(items=groups, output_path=output, by_alias=True)
        _console.print(f"[green]Saved:[/green] {path}")


@mappings_app.command("delete-fields")
def mappings_delete_fields(
    fields: list[str] = typer.Argument(..., help="Field names whose mappings are removed."),
) -> None:
    """Delete all mappings of the given fields."""

    async def _op(client, settings):
        return await MappingAggregator.from_client(client, settings).bulk_delete_by_fields(fields)

    _execute(_op)
    _console.print(f"[green]Removed mappings for:[/green] {', '.join(fields)}")


@tags_app.command("list")
def tags_list(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only tags of this category."),
) -> None:
    """List merchant tags."""

    async def _op(client, settings):
        service = build_tag_service(client, settings)
        query = TAG_MODEL.hydrate({"category": category}) if category else None
        return await service.get_all(query_entity=query, page=FETCH_ALL)

    tags: list[MerchantTag] = _execute(_op)
    _console.print(build_tags_table(tags))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
