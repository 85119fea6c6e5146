"""GOVCAT services CLI: browse, search and register catalogue entries.

Every command reads ``GOVCAT_DB_URL`` (and ``GOVCAT_STRICT_LOAD``) and
operates on the already-migrated catalogue database. Results are rendered
as a Rich table by default; ``--json`` prints the serialized record shape
instead, one JSON document on stdout:

    {"id", "name", "description", "owner", "tags", "docs_link", "created_at"}

Examples
    $ govcat services seed
    $ govcat services search -q passport -t travel,identity
    $ govcat services show 01J9Z3K6... --json
    $ govcat services create --name "Fishing Licences" --description "..." \\
          --owner "Ministry of Fisheries" --docs-link https://... -t licensing
"""

from __future__ import annotations

import functools
import json
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click
import click_extra as clickx
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from govcat import config
from govcat.bootstrap import AppContainer, bootstrap, initialize
from govcat.domain import ServiceRecord, ValidationError
from govcat.domain.utils import format_timestamp
from govcat.interfaces.record_store import StoreError
from govcat.service_layer.errors import RepositoryError
from govcat.service_layer.record_mapper import ServiceRecordMapper

from .db import MISSING_DB_URL_MSG
from .helpers import parse_tags, success

F = TypeVar("F", bound=Callable[..., object])


def _open_app() -> AppContainer:
    try:
        return bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e


def _json_option(func: F) -> F:
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print JSON instead of a table.",
    )(func)


def _tags_option(help_text: str, required: bool = False) -> Callable[[F], F]:
    return click.option(
        "--tag",
        "-t",
        "tags",
        multiple=True,
        callback=parse_tags,
        required=required,
        help=help_text + " Repeatable or comma-separated.",
    )


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _render_table(records: Sequence[ServiceRecord], title: str) -> None:
    table = Table(title=title, show_lines=False)
    table.add_column("ID", no_wrap=True, style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Owner")
    table.add_column("Tags", style="magenta")
    table.add_column("Created (UTC)", no_wrap=True)
    for record in records:
        table.add_row(
            Text(record.id),
            Text(record.name),
            Text(record.owner),
            Text(", ".join(record.tags)),
            format_timestamp(record.created_at),
        )
    Console().print(table)


def _emit(records: Sequence[ServiceRecord], *, as_json: bool, title: str) -> None:
    if as_json:
        _echo_json([ServiceRecordMapper.to_entry(record) for record in records])
    elif records:
        _render_table(records, f"{title} ({len(records)})")
    else:
        click.echo("No services found.", err=True)


def _catalogue_errors(func: F) -> F:
    """Report storage and decoding failures as clean CLI errors."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (StoreError, RepositoryError) as e:
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]


@click.group(cls=clickx.ExtraGroup)
def services() -> None:
    """Browse and manage catalogue services."""


@services.command("list")
@_json_option
@_catalogue_errors
def list_services(as_json: bool) -> None:
    """List every service, newest first."""
    _emit(_open_app().catalogue.list_all(), as_json=as_json, title="Services")


@services.command()
@click.option(
    "--query",
    "-q",
    "text",
    default="",
    help="Case-insensitive text matched against name, description and owner.",
)
@_tags_option("Keep services with a tag containing any of these.")
@_json_option
@_catalogue_errors
def search(text: str, tags: tuple[str, ...], as_json: bool) -> None:
    """Search services by free text and tags."""
    results = _open_app().catalogue.search(text, tags)
    _emit(results, as_json=as_json, title="Search results")


@services.command()
@click.argument("service_id")
@_json_option
@_catalogue_errors
def show(service_id: str, as_json: bool) -> None:
    """Show one service and the services related to it."""
    catalogue = _open_app().catalogue
    if (record := catalogue.get_by_id(service_id)) is None:
        raise click.ClickException(f"Service {service_id} not found")

    if as_json:
        _echo_json(ServiceRecordMapper.to_entry(record))
        return

    # stored text goes through Text so it is never parsed as Rich markup
    details = Table.grid(padding=(0, 2))
    details.add_column(style="dim", no_wrap=True)
    details.add_column()
    details.add_row("ID", Text(record.id, style="cyan"))
    details.add_row("Name", Text(record.name, style="bold"))
    details.add_row("Description", Text(record.description))
    details.add_row("Owner", Text(record.owner))
    details.add_row("Tags", Text(", ".join(record.tags) or "-", style="magenta"))
    details.add_row(
        "Docs", Text(record.docs_link, style=Style(link=record.docs_link))
    )
    details.add_row("Created (UTC)", format_timestamp(record.created_at))
    Console().print(details)

    related_records = catalogue.related(record.tags, exclude_id=record.id)
    if related_records:
        _render_table(related_records, "Related services")


@services.command()
@_tags_option("Tags to match exactly (case-insensitive).", required=True)
@click.option(
    "--exclude",
    "exclude_id",
    default=None,
    help="Service id to leave out of the result (usually the one being viewed).",
)
@_json_option
@_catalogue_errors
def related(tags: tuple[str, ...], exclude_id: str | None, as_json: bool) -> None:
    """List up to six services sharing the most tags."""
    results = _open_app().catalogue.related(tags, exclude_id=exclude_id)
    _emit(results, as_json=as_json, title="Related services")


@services.command()
@click.option("--name", default=None, help="Service name.")
@click.option("--description", default=None, help="What the service does.")
@click.option("--owner", default=None, help="Owning agency or department.")
@click.option("--docs-link", "docs_link", default=None, help="Documentation URL.")
@_tags_option("Free-form tags.")
@_catalogue_errors
def create(
    name: str | None,
    description: str | None,
    owner: str | None,
    docs_link: str | None,
    tags: tuple[str, ...],
) -> None:
    """Register a new service and print it as JSON."""
    fields = {
        "name": name,
        "description": description,
        "owner": owner,
        "docs_link": docs_link,
        "tags": list(tags),
    }
    try:
        record = _open_app().catalogue.create(fields)
    except ValidationError as e:
        raise click.ClickException(str(e)) from e
    _echo_json(ServiceRecordMapper.to_entry(record))
    success(f"Created service {record.id}")


@services.command()
@_catalogue_errors
def seed() -> None:
    """Load the sample services into an empty catalogue."""
    written = initialize(_open_app().store)
    if written:
        success(f"Seeded {written} sample services")
    else:
        click.echo("Catalogue already populated; nothing to seed.", err=True)
