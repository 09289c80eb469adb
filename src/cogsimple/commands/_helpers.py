"""Shared CLI command helpers for CogServer connections."""

from __future__ import annotations

import os
from typing import Any

import click

from cogsimple.errors import CogStorageError
from cogsimple.storage import SHELLS, CogSimpleStorage
from cogsimple.uri import default_uri

__all__ = [
    "TIMEOUT_ENV",
    "connection_options",
    "default_timeout",
    "open_storage",
    "require_uri",
]

TIMEOUT_ENV = "COGSIMPLE_TIMEOUT"


def default_timeout() -> float | None:
    """Return the timeout from ``$COGSIMPLE_TIMEOUT``, or None when unset."""
    raw = os.environ.get(TIMEOUT_ENV)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise click.BadParameter(f"{TIMEOUT_ENV}={raw!r} is not a number") from None
    if value <= 0:
        raise click.BadParameter(f"{TIMEOUT_ENV} must be > 0")
    return value


def require_uri(uri: str | None) -> str:
    """Return *uri* or ``$COGSIMPLE_URI``, or exit with error."""
    resolved = uri or default_uri()
    if resolved is None:
        click.echo("error: no URI given (use --uri or set COGSIMPLE_URI)", err=True)
        raise SystemExit(1)
    return resolved


def open_storage(uri: str | None, shell: str, timeout: float | None) -> CogSimpleStorage:
    """Build and open a storage connection, or exit with error."""
    if timeout is None:
        timeout = default_timeout()
    try:
        store = CogSimpleStorage(require_uri(uri), shell=shell, timeout=timeout)
        store.open()
    except CogStorageError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None
    return store


def connection_options(fn: Any) -> Any:
    """Attach the shared --uri/--shell/--timeout options to a command."""
    fn = click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        help="Socket timeout in seconds (default: $COGSIMPLE_TIMEOUT or none).",
    )(fn)
    fn = click.option(
        "--shell",
        type=click.Choice(sorted(SHELLS)),
        default="sexpr",
        show_default=True,
        help="CogServer shell to enter after connecting.",
    )(fn)
    fn = click.option(
        "--uri",
        default=None,
        metavar="URI",
        help="cog://host[:port]/name (default: $COGSIMPLE_URI).",
    )(fn)
    return fn
