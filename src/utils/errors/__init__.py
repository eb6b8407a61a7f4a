"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    ContentFetchError,
    StorageError,
    StorageObjectNotFoundError,
    UpstreamCallError,
)

__all__ = [
    "ConfigurationError",
    "ContentFetchError",
    "StorageError",
    "StorageObjectNotFoundError",
    "UpstreamCallError",
]
