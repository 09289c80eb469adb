"""Socket-level send and receive helpers for the CogServer line protocol."""

from __future__ import annotations

import socket

RECV_BUFSIZE = 4096
IDLE_BYTE = 0x16
_NEWLINE = 0x0A


class PeerClosed(Exception):
    """Raised by :func:`recv_message` when a read returns zero bytes."""


def send_all(sock: socket.socket, data: bytes) -> int:
    """Write every byte of *data*, looping over partial sends.

    Returns:
        Number of bytes written, always ``len(data)``.

    Raises:
        OSError: From the underlying ``send`` call.
    """
    view = memoryview(data)
    total = 0
    while total < len(data):
        sent = sock.send(view[total:])
        if sent <= 0:
            raise OSError("socket send returned no progress")
        total += sent
    return total


def recv_message(sock: socket.socket, garbage: bool = False) -> bytes:
    """Read one complete server message from *sock*.

    Messages end with a newline. The one exception is the prompt the
    server sends on connect, which is not newline-terminated; pass
    ``garbage=True`` to accept a short first read as complete.

    Solitary SYN (0x16) bytes are keep-alive checks from a congested
    server and are dropped. They do not count as the first read.

    Args:
        sock: Connected socket to read from.
        garbage: Treat a short first read as complete even without a
            trailing newline.

    Returns:
        The raw message bytes, trailing newline included.

    Raises:
        PeerClosed: If the peer closed the connection.
        OSError: From the underlying ``recv`` call.
    """
    chunks: list[bytes] = []
    first_time = True
    while True:
        buf = sock.recv(RECV_BUFSIZE)
        if not buf:
            raise PeerClosed
        if len(buf) == 1 and buf[0] == IDLE_BYTE:
            continue

        ends_line = buf[-1] == _NEWLINE
        if first_time and len(buf) < RECV_BUFSIZE and (ends_line or garbage):
            return buf

        first_time = False
        chunks.append(buf)
        if ends_line:
            return b"".join(chunks)
