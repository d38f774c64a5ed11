"""Error types raised or emitted by the persistence layer."""

from __future__ import annotations


class StorageError(Exception):
    """Base class for failures while reading or writing persisted state."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class DecodeFailure(StorageError):
    """Persisted bytes for a key could not be read or parsed."""


class EncodeFailure(StorageError):
    """An in-memory value could not be serialised; nothing was written."""


class WriteFailure(StorageError):
    """The backing store rejected a write; the previous value is kept."""


class PersistenceWarning(UserWarning):
    """Emitted when a mutation could not be persisted and was skipped."""


class CatalogLoadError(ValueError):
    """A catalog source could not be read or contained invalid titles."""
