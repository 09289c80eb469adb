"""Commands that inspect a connection string without connecting."""

from __future__ import annotations

import dataclasses
import json

import click

from cogsimple.commands._helpers import require_uri
from cogsimple.errors import ConfigurationError
from cogsimple.storage import CogSimpleStorage
from cogsimple.uri import parse_uri


@click.command("parse-uri")
@click.argument("uri")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def parse_uri_cmd(uri: str, as_json: bool) -> None:
    """Show the scheme, host, port and remainder of URI."""
    try:
        parsed = parse_uri(uri)
    except ConfigurationError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None

    if as_json:
        click.echo(json.dumps(dataclasses.asdict(parsed)))
        return
    for key, value in dataclasses.asdict(parsed).items():
        click.echo(f"{key}: {value}")


@click.command("stats")
@click.option("--uri", default=None, metavar="URI", help="Default: $COGSIMPLE_URI.")
def stats_cmd(uri: str | None) -> None:
    """Print connection statistics for URI."""
    try:
        store = CogSimpleStorage(require_uri(uri))
    except ConfigurationError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None
    store.print_stats()
