"""cogsimple package."""

from importlib.metadata import PackageNotFoundError, version

from cogsimple.errors import (
    CogStorageError,
    ConfigurationError,
    ConnectError,
    ConnectionClosedError,
    HostResolutionError,
    NotConnectedError,
    ReceiveError,
    SendError,
)
from cogsimple.storage import CogSimpleStorage
from cogsimple.uri import DEFAULT_PORT, CogUri, parse_uri

__all__ = [
    "__version__",
    "DEFAULT_PORT",
    "CogSimpleStorage",
    "CogStorageError",
    "CogUri",
    "ConfigurationError",
    "ConnectError",
    "ConnectionClosedError",
    "HostResolutionError",
    "NotConnectedError",
    "ReceiveError",
    "SendError",
    "parse_uri",
]

try:
    __version__ = version("cog-simple")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
