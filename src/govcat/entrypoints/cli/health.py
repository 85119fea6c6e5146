"""``govcat health``: liveness report."""

import json

import click

from govcat.domain.utils import format_timestamp, utc_now_ms


@click.command()
def health() -> None:
    """Print a JSON liveness report with the current UTC time."""
    report = {"status": "ok", "timestamp": format_timestamp(utc_now_ms())}
    click.echo(json.dumps(report))
