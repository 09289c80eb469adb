"""Connection-string parsing for ``cog://host[:port]/atomspace`` URIs."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cogsimple.errors import ConfigurationError

URI_SCHEME = "cog://"
DEFAULT_PORT = 17001
URI_ENV = "COGSIMPLE_URI"


@dataclass(frozen=True)
class CogUri:
    scheme: str
    host: str
    port: int
    remainder: str = ""

    @property
    def address(self) -> tuple[str, int]:
        return self.host, self.port

    def __str__(self) -> str:
        text = f"{self.scheme}{self.host}:{self.port}"
        if self.remainder:
            text += f"/{self.remainder}"
        return text


def parse_uri(uri: str) -> CogUri:
    """Split a connection string into scheme, host, port and remainder.

    The host runs up to the first ``:`` or ``/``. The port, when present,
    runs from the ``:`` to the next ``/`` and defaults to 17001. The
    remainder (usually an atomspace name) is kept verbatim.

    Raises:
        ConfigurationError: On an unknown scheme, empty host or bad port.
    """
    if not uri.startswith(URI_SCHEME):
        raise ConfigurationError(f"unknown URI {uri!r}: expected {URI_SCHEME}host[:port]/name")
    rest = uri[len(URI_SCHEME) :]

    authority, _, remainder = rest.partition("/")
    host, sep, port_str = authority.partition(":")
    if not host:
        raise ConfigurationError(f"missing host in URI {uri!r}")
    if not sep:
        return CogUri(scheme=URI_SCHEME, host=host, port=DEFAULT_PORT, remainder=remainder)

    if not (port_str.isascii() and port_str.isdigit()):
        raise ConfigurationError(f"invalid port: {port_str!r}")
    port = int(port_str)
    if not (1 <= port <= 65535):
        raise ConfigurationError(f"invalid port: {port_str!r}")
    return CogUri(scheme=URI_SCHEME, host=host, port=port, remainder=remainder)


def default_uri() -> str | None:
    """Return the connection string from ``$COGSIMPLE_URI``, if set."""
    return os.environ.get(URI_ENV) or None
