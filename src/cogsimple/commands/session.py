from __future__ import annotations

import click

from cogsimple.commands._helpers import connection_options, open_storage
from cogsimple.errors import CogStorageError


@click.command("eval")
@connection_options
@click.argument("command", nargs=-1, required=True)
def eval_cmd(uri: str | None, shell: str, timeout: float | None, command: tuple[str, ...]) -> None:
    """Send COMMAND to the cogserver and print its reply."""
    store = open_storage(uri, shell, timeout)
    try:
        reply = store.eval(" ".join(command))
    except CogStorageError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None
    finally:
        store.close()
    click.echo(reply, nl=not reply.endswith("\n"))


@click.command("ping")
@connection_options
def ping_cmd(uri: str | None, shell: str, timeout: float | None) -> None:
    """Connect, complete the shell handshake, and disconnect."""
    store = open_storage(uri, shell, timeout)
    host, port = store.uri.address
    store.close()
    click.echo(f"ok: {host}:{port}")
