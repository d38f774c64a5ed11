"""Utility helpers for the StreamShelf core."""

from __future__ import annotations

from typing import Iterable
from uuid import UUID


def split_csv(value: str) -> list[str]:
    """Split a comma-separated string into stripped, non-empty parts."""

    return [part.strip() for part in value.split(",") if part.strip()]


def unique_casefolded(values: Iterable[str]) -> list[str]:
    """Return ``values`` without case-insensitive duplicates, first one wins."""

    seen: set[str] = set()
    cleaned: list[str] = []
    for value in values:
        text = str(value).strip()
        if not text:
            continue
        folded = text.lower()
        if folded in seen:
            continue
        seen.add(folded)
        cleaned.append(text)
    return cleaned


def profile_key(profile_id: UUID | str) -> str:
    """Return the partition key used to store entries for a profile.

    UUID-shaped strings are canonicalised so ``"0D5C..."`` and
    ``UUID("0d5c...")`` share a partition; other ids are kept as given.
    """

    if isinstance(profile_id, UUID):
        return str(profile_id)
    text = str(profile_id).strip()
    try:
        return str(UUID(text))
    except ValueError:
        return text
