"""Core domain layer."""

from podcast_catalog.core.entities import Item, PageResult, RepositoryState
from podcast_catalog.core.errors import (
    BadRequestError,
    InvalidDataError,
    NoConnectivityError,
    PageSourceError,
    RequestTimeoutError,
    ServerError,
    UnknownError,
)
from podcast_catalog.core.interfaces import FavoriteStore, PageSource

__all__ = [
    "Item",
    "PageResult",
    "RepositoryState",
    "PageSource",
    "FavoriteStore",
    "PageSourceError",
    "NoConnectivityError",
    "RequestTimeoutError",
    "ServerError",
    "InvalidDataError",
    "BadRequestError",
    "UnknownError",
]
