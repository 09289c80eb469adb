"""Shared fixtures for the cogsimple test suite."""

from __future__ import annotations

import socket
from collections.abc import Generator

import pytest
from fake_cogserver import FakeCogServer


@pytest.fixture()
def cogserver() -> Generator[FakeCogServer, None, None]:
    """Start an echoing fake CogServer on a free local port."""
    server = FakeCogServer()
    yield server
    server.stop()


@pytest.fixture()
def closed_port() -> int:
    """Return a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])
