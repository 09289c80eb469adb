"""Platform abstraction layer for cogsimple.

Centralises all OS-specific socket behaviour behind a single module so
that callers never need ``sys.platform`` checks themselves.
"""

from __future__ import annotations

import logging
import socket
import sys

log = logging.getLogger(__name__)

_WIN: bool = sys.platform == "win32"
_MAC: bool = sys.platform == "darwin"


def low_latency_options() -> list[tuple[int, int, int]]:
    """Return ``(level, option, value)`` triples for small-packet traffic."""
    opts = [(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)]
    quickack = getattr(socket, "TCP_QUICKACK", None)
    if quickack is not None and not (_MAC or _WIN):
        opts.append((socket.IPPROTO_TCP, quickack, 1))
    return opts


def tune_socket(sock: socket.socket) -> int:
    """Apply low-latency options to *sock*; return how many were applied.

    Failures are logged and skipped: these are performance hints only.
    """
    applied = 0
    for level, option, value in low_latency_options():
        try:
            sock.setsockopt(level, option, value)
        except OSError as exc:
            log.warning("error setting sockopt %d: %s", option, exc)
            continue
        applied += 1
    return applied
