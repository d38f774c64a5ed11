"""Bounded, case-insensitively deduplicated log of recent search queries."""

from __future__ import annotations

import asyncio
import logging

from pydantic import TypeAdapter

from ..errors import StorageError
from .storage import JsonDocument, KeyValueStore, report_skipped_write

logger = logging.getLogger(__name__)

_QUERY_LIST = TypeAdapter(list[str])


class SearchHistory:
    """Persisted search history, newest query first."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = "search_history",
        limit: int = 20,
        recent_limit: int = 5,
    ) -> None:
        if limit < 1 or recent_limit < 1:
            raise ValueError("History limits must be positive")
        self._document: JsonDocument[list[str]] = JsonDocument(
            store, key, _QUERY_LIST
        )
        self._limit = limit
        self._recent_limit = min(recent_limit, limit)
        self._entries: list[str] = []
        self._lock = asyncio.Lock()

    @property
    def entries(self) -> list[str]:
        """Full history as last loaded or written."""

        return list(self._entries)

    @property
    def recent(self) -> list[str]:
        """The short list shown under an empty search field."""

        return self._entries[: self._recent_limit]

    async def load(self) -> list[str]:
        """Refresh the in-memory view from storage."""

        async with self._lock:
            self._entries = await self._read()
            return self.entries

    async def record(self, query: str) -> None:
        """Move ``query`` to the front of the history, inserting it if new."""

        trimmed = query.strip()
        if not trimmed:
            return
        folded = trimmed.lower()
        async with self._lock:
            entries = [
                entry for entry in await self._read() if entry.lower() != folded
            ]
            entries.insert(0, trimmed)
            await self._write(entries[: self._limit])

    async def remove(self, query: str) -> None:
        folded = query.strip().lower()
        async with self._lock:
            current = await self._read()
            entries = [entry for entry in current if entry.lower() != folded]
            if len(entries) == len(current):
                self._entries = current
                return
            await self._write(entries)

    async def clear(self) -> None:
        async with self._lock:
            await self._write([])

    async def _read(self) -> list[str]:
        entries = await self._document.load_or_default([])
        return entries[: self._limit]

    async def _write(self, entries: list[str]) -> None:
        try:
            await self._document.save(entries)
        except StorageError as exc:
            report_skipped_write(exc)
            return
        self._entries = entries
