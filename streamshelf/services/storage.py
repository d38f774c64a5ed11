"""Key-value persistence used by the history and saved-list stores."""

from __future__ import annotations

import logging
import warnings
from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..db_models import StoredValue
from ..errors import (
    DecodeFailure,
    EncodeFailure,
    PersistenceWarning,
    StorageError,
    WriteFailure,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueStore:
    """Interface for durable string storage addressed by key."""

    async def get(self, key: str) -> str | None:
        raise NotImplementedError

    async def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value

    async def delete(self, key: str) -> None:
        self._values.pop(key, None)


class DatabaseKeyValueStore(KeyValueStore):
    """Store each key as one row of the ``stored_values`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        try:
            async with self._session_factory() as session:
                record = await session.get(StoredValue, key)
                return record.value if record is not None else None
        except SQLAlchemyError as exc:
            raise DecodeFailure(key, f"read failed: {exc}") from exc

    async def set(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                record = await session.get(StoredValue, key)
                if record is None:
                    session.add(StoredValue(key=key, value=value))
                else:
                    record.value = value
                await session.commit()
        except SQLAlchemyError as exc:
            raise WriteFailure(key, f"write failed: {exc}") from exc

    async def delete(self, key: str) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(delete(StoredValue).where(StoredValue.key == key))
                await session.commit()
        except SQLAlchemyError as exc:
            raise WriteFailure(key, f"delete failed: {exc}") from exc


class JsonDocument(Generic[T]):
    """A whole collection serialised as JSON under a single key.

    Values are encoded completely before anything is written, so an encode
    failure never replaces the stored document.
    """

    def __init__(self, store: KeyValueStore, key: str, adapter: TypeAdapter[T]):
        self._store = store
        self.key = key
        self._adapter = adapter

    async def load(self) -> T | None:
        """Return the decoded document, or ``None`` when nothing is stored."""

        raw = await self._store.get(self.key)
        if raw is None:
            return None
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise DecodeFailure(
                self.key, f"{exc.error_count()} validation error(s)"
            ) from exc

    async def load_or_default(self, default: T) -> T:
        """Return the stored document, treating unreadable data as ``default``."""

        try:
            value = await self.load()
        except DecodeFailure as exc:
            logger.warning("Discarding unreadable %s: %s", self.key, exc)
            return default
        return default if value is None else value

    async def save(self, value: T) -> None:
        try:
            payload = self._adapter.dump_json(value, by_alias=True).decode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodeFailure(self.key, str(exc)) from exc
        await self._store.set(self.key, payload)


def report_skipped_write(exc: StorageError) -> None:
    """Log and surface a write that was skipped to keep prior state intact."""

    logger.warning("Skipped persisting %s: %s", exc.key, exc)
    warnings.warn(
        f"Could not persist {exc.key}; previous data kept ({exc})",
        PersistenceWarning,
        stacklevel=3,
    )
