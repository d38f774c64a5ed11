"""Read-only catalog of browsable titles for the current session."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import TypeAdapter, ValidationError

from ..errors import CatalogLoadError
from ..models import Title
from ..sample_catalog import SAMPLE_TITLES

logger = logging.getLogger(__name__)

_TITLE_LIST = TypeAdapter(list[Title])


class CatalogStore:
    """Holds the session's titles in their original iteration order."""

    def __init__(self, titles: Iterable[Title]) -> None:
        self._titles: tuple[Title, ...] = tuple(titles)

    @classmethod
    def sample(cls) -> "CatalogStore":
        """Return a store backed by the built-in demo catalog."""

        return cls(SAMPLE_TITLES)

    @classmethod
    def from_json_file(cls, path: Path) -> "CatalogStore":
        """Load titles from a JSON array of title objects."""

        try:
            raw = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogLoadError(f"Unable to read catalog file {path}") from exc
        try:
            titles = _TITLE_LIST.validate_json(raw)
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid catalog file {path}: {exc}") from exc
        logger.info("Loaded %d titles from %s", len(titles), path)
        return cls(titles)

    def __iter__(self) -> Iterator[Title]:
        return iter(self._titles)

    def __len__(self) -> int:
        return len(self._titles)

    @property
    def titles(self) -> tuple[Title, ...]:
        return self._titles

    def get(self, key: str) -> Title | None:
        """Return the first title whose identity key equals ``key``."""

        for title in self._titles:
            if title.key == key:
                return title
        return None

    def trending(self) -> list[Title]:
        return [title for title in self._titles if title.is_trending]

    def featured(self) -> list[Title]:
        return [title for title in self._titles if title.is_featured]

    def by_genre(self, genre: str) -> list[Title]:
        """Titles whose genre text contains ``genre``, ignoring case."""

        needle = genre.strip().lower()
        if not needle:
            return []
        return [title for title in self._titles if needle in title.genre_text.lower()]

    def by_year(self, year: int) -> list[Title]:
        return [title for title in self._titles if title.release_year == year]

    def by_rating(self, rating: str) -> list[Title]:
        return [title for title in self._titles if title.rating == rating]
