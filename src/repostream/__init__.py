"""Repostream public package API."""

from .client import RepoStreamClient
from .errors import MethodNotAllowedError, RepoStreamError, UpstreamError
from .server import RepositoryStreamServer
from .settings import RepoStreamSettings
from .stream import ConsoleObserver, RepositoryChannel, RepositoryInfo, Subscription

__version__ = "0.1.0"

__all__ = [
    "ConsoleObserver",
    "MethodNotAllowedError",
    "RepoStreamClient",
    "RepoStreamError",
    "RepoStreamSettings",
    "RepositoryChannel",
    "RepositoryInfo",
    "RepositoryStreamServer",
    "Subscription",
    "UpstreamError",
]
