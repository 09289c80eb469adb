"""Exception types raised by the CogServer storage client."""

from __future__ import annotations


class CogStorageError(Exception):
    """Base class for every error raised by cogsimple."""


class ConfigurationError(CogStorageError):
    """Malformed connection string or unknown shell selection."""


class HostResolutionError(CogStorageError):
    def __init__(self, host: str, cause: BaseException) -> None:
        super().__init__(f"unknown host {host}: {cause}")
        self.host = host
        self.cause = cause


class ConnectError(CogStorageError):
    def __init__(self, host: str, cause: BaseException) -> None:
        super().__init__(f"unable to connect to host {host}: {cause}")
        self.host = host
        self.cause = cause


class NotConnectedError(CogStorageError):
    def __init__(self) -> None:
        super().__init__("not connected to cogserver")


class SendError(CogStorageError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"unable to talk to cogserver: {cause}")
        self.cause = cause


class ReceiveError(CogStorageError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"unable to read from cogserver: {cause}")
        self.cause = cause


class ConnectionClosedError(CogStorageError):
    def __init__(self) -> None:
        super().__init__("cogserver unexpectedly closed connection")
