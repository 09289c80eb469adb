"""CogServer-backed storage connection.

A cheap, simple client for the CogServer: one TCP socket per instance,
newline-terminated commands going out, newline-terminated replies coming
back. The server's initial prompt is the only message without a trailing
newline and is discarded during :meth:`CogSimpleStorage.open`.
"""

from __future__ import annotations

import logging
import socket
import threading
from types import TracebackType
from typing import Any

import click

from cogsimple import _platform
from cogsimple._transport import PeerClosed, recv_message, send_all
from cogsimple.errors import (
    ConfigurationError,
    ConnectError,
    ConnectionClosedError,
    HostResolutionError,
    NotConnectedError,
    ReceiveError,
    SendError,
)
from cogsimple.uri import CogUri, parse_uri

log = logging.getLogger(__name__)

# Shell name -> (handshake line, follow-up setup commands).
SHELLS: dict[str, tuple[str, tuple[str, ...]]] = {
    "sexpr": ("sexpr\n", ()),
    "scm": (
        "scm hush\n",
        ("(use-modules (opencog exec))\n", "(cog-set-server-mode! #t)\n"),
    ),
}


class CogSimpleStorage:
    def __init__(self, uri: str, *, shell: str = "sexpr", timeout: float | None = None) -> None:
        if shell not in SHELLS:
            raise ConfigurationError(f"unknown shell {shell!r}; choose from {', '.join(SHELLS)}")
        self._uri_text = uri
        self.uri: CogUri = parse_uri(uri)
        self.shell = shell
        self.timeout = timeout
        self._sock: socket.socket | None = None
        self._mtx = threading.Lock()

    def __repr__(self) -> str:
        state = "connected" if self.connected() else "disconnected"
        return f"<CogSimpleStorage {self._uri_text} {state}>"

    def __enter__(self) -> CogSimpleStorage:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Lifecycle

    def open(self) -> None:
        """Connect, select the command shell and discard the server prompt."""
        if self.connected():
            return

        with self._mtx:
            if self.connected():
                return
            host, port = self.uri.address
            sock = self._connect(host, port)
            _platform.tune_socket(sock)
            self._sock = sock
            try:
                self._handshake()
            except BaseException:
                self.close()
                raise
            log.debug("connected to %s:%d (%s shell)", host, port, self.shell)

    def _connect(self, host: str, port: int) -> socket.socket:
        try:
            infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
        except (OSError, UnicodeError) as exc:
            raise HostResolutionError(host, exc) from exc
        if not infos:
            raise HostResolutionError(host, OSError("no addresses returned"))

        family, socktype, proto, _, sockaddr = infos[0]
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            raise ConnectError(host, exc) from exc
        try:
            if self.timeout is not None:
                sock.settimeout(self.timeout)
            sock.connect(sockaddr)
        except OSError as exc:
            sock.close()
            raise ConnectError(host, exc) from exc
        return sock

    def _handshake(self) -> None:
        line, setup = SHELLS[self.shell]
        self.send(line)
        # The prompt is not newline-terminated and may carry color codes.
        prompt = self.receive(garbage=True)
        log.debug("discarded prompt %r", prompt)
        for command in setup:
            self.send(command)
            self.receive()

    def connected(self) -> bool:
        return self._sock is not None

    def close(self) -> None:
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()
            log.debug("closed connection to %s:%d", *self.uri.address)

    # ------------------------------------------------------------------
    # I/O

    def send(self, payload: str) -> None:
        """Write *payload* in full. No reply is read."""
        if self._sock is None:
            raise NotConnectedError()
        try:
            send_all(self._sock, payload.encode("utf-8"))
        except OSError as exc:
            self.close()
            raise SendError(exc) from exc

    def receive(self, garbage: bool = False) -> str:
        """Read one complete message; see :func:`recv_message` for framing."""
        if self._sock is None:
            raise NotConnectedError()
        try:
            data = recv_message(self._sock, garbage)
        except PeerClosed:
            self.close()
            raise ConnectionClosedError() from None
        except OSError as exc:
            # A partly read reply leaves the stream out of step.
            self.close()
            raise ReceiveError(exc) from exc
        return data.decode("utf-8", errors="replace")

    def eval(self, command: str) -> str:
        """Send one command line and return the server's reply."""
        if not command.endswith("\n"):
            command += "\n"
        self.send(command)
        return self.receive()

    # ------------------------------------------------------------------
    # StorageNode surface

    def barrier(self, atomspace: Any = None) -> None:
        """Write fence. Every send is already applied in order, so nothing to drain."""

    def clear_stats(self) -> None:
        pass

    def print_stats(self) -> None:
        click.echo(f"Connected to {self._uri_text}")
        click.echo("no stats yet")
