"""Per-profile saved list ("My List") persistence."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID

from pydantic import TypeAdapter

from ..errors import StorageError
from ..models import ListEntry, Title
from ..utils import profile_key
from .storage import JsonDocument, KeyValueStore, report_skipped_write

logger = logging.getLogger(__name__)

_ENTRY_LIST = TypeAdapter(list[ListEntry])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MyListStore:
    """Saved titles for every profile, stored as one flat collection.

    Each mutation reads the full collection, changes it in memory and writes
    it back. ``items`` mirrors the list of the profile most recently loaded
    with :meth:`load_for_profile` so a caller can re-render after a mutation.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = "my_list_items",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._document: JsonDocument[list[ListEntry]] = JsonDocument(
            store, key, _ENTRY_LIST
        )
        self._clock = clock
        self._lock = asyncio.Lock()
        self._active_profile: str | None = None
        self._items: list[Title] = []

    @property
    def active_profile_id(self) -> str | None:
        return self._active_profile

    @property
    def items(self) -> list[Title]:
        return list(self._items)

    async def is_in_list(self, title_key: str, profile_id: UUID | str) -> bool:
        profile = profile_key(profile_id)
        async with self._lock:
            entries = await self._read()
        return any(_belongs(entry, title_key, profile) for entry in entries)

    async def add(self, title: Title, profile_id: UUID | str) -> None:
        """Save ``title`` for the profile; does nothing if it is already saved."""

        profile = profile_key(profile_id)
        async with self._lock:
            entries = await self._read()
            if any(_belongs(entry, title.key, profile) for entry in entries):
                return
            entries.append(
                ListEntry(profile_id=profile, snapshot=title, added_at=self._clock())
            )
            if not await self._write(entries):
                return
            logger.info("Added %s to list for profile %s", title.key, profile)
            if profile == self._active_profile:
                self._items.append(title)

    async def remove(self, title_key: str, profile_id: UUID | str) -> None:
        profile = profile_key(profile_id)
        async with self._lock:
            entries = await self._read()
            remaining = [
                entry for entry in entries if not _belongs(entry, title_key, profile)
            ]
            if len(remaining) == len(entries):
                return
            if not await self._write(remaining):
                return
            logger.info("Removed %s from list for profile %s", title_key, profile)
            if profile == self._active_profile:
                self._items = [item for item in self._items if item.key != title_key]

    async def load_for_profile(self, profile_id: UUID | str) -> list[Title]:
        """Return the profile's saved titles in storage order and publish them."""

        profile = profile_key(profile_id)
        async with self._lock:
            entries = await self._read()
            titles = [entry.snapshot for entry in entries if entry.profile_id == profile]
            logger.debug(
                "Loaded %d of %d saved titles for profile %s",
                len(titles),
                len(entries),
                profile,
            )
            self._active_profile = profile
            self._items = titles
            return list(titles)

    def clear(self) -> None:
        """Forget the published view; persisted entries are untouched."""

        self._active_profile = None
        self._items = []

    async def _read(self) -> list[ListEntry]:
        return await self._document.load_or_default([])

    async def _write(self, entries: list[ListEntry]) -> bool:
        try:
            await self._document.save(entries)
        except StorageError as exc:
            report_skipped_write(exc)
            return False
        return True


def _belongs(entry: ListEntry, title_key: str, profile: str) -> bool:
    return entry.title_key == title_key and entry.profile_id == profile
