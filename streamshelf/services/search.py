"""Free-text search combined with structured filters over the catalog."""

from __future__ import annotations

import asyncio
import logging

from ..filter_options import (
    AVAILABLE_GENRES,
    AVAILABLE_RATINGS,
    DURATION_RANGE,
    YEAR_RANGE,
)
from ..models import FilterSet, Title
from .catalog import CatalogStore
from .filters import matches
from .history import SearchHistory

logger = logging.getLogger(__name__)


def rank_key(title: Title, query: str) -> tuple[bool, bool, bool, bool, int]:
    """Sort key ordering results by relevance to a lowercased ``query``.

    Exact title matches come first, then title prefix matches, trending
    titles, featured titles and finally newer releases.
    """

    name = title.title.lower()
    return (
        name != query,
        not name.startswith(query),
        not title.is_trending,
        not title.is_featured,
        -title.release_year,
    )


class SearchEngine:
    """Runs searches against a catalog and records queries in the history.

    :meth:`search` waits ``delay_seconds`` before producing results so
    callers can show a loading state. Only the most recently issued search
    updates ``results`` and the history; completions of superseded calls are
    returned to their own caller and otherwise discarded.
    """

    # Choices offered by the filter controls.
    available_genres: tuple[str, ...] = AVAILABLE_GENRES
    available_ratings: tuple[str, ...] = AVAILABLE_RATINGS
    year_range: range = YEAR_RANGE
    duration_range: range = DURATION_RANGE

    def __init__(
        self,
        catalog: CatalogStore,
        history: SearchHistory,
        *,
        delay_seconds: float = 0.3,
    ) -> None:
        self._catalog = catalog
        self._history = history
        self._delay = max(0.0, delay_seconds)
        self._generation = 0
        self._results: list[Title] = []
        self._is_searching = False
        self._current_filters = FilterSet()
        self._last_query = ""

    @property
    def results(self) -> list[Title]:
        return list(self._results)

    @property
    def is_searching(self) -> bool:
        return self._is_searching

    @property
    def current_filters(self) -> FilterSet:
        return self._current_filters.model_copy(deep=True)

    @property
    def has_active_filters(self) -> bool:
        return self._current_filters.has_active_filters

    @property
    def last_query(self) -> str:
        return self._last_query

    @property
    def history(self) -> SearchHistory:
        return self._history

    async def search(self, query: str, filters: FilterSet | None = None) -> list[Title]:
        """Return catalog titles matching ``query`` and ``filters``, ranked.

        An empty query without active filters yields an empty list rather
        than the whole catalog.
        """

        filters = filters.model_copy(deep=True) if filters is not None else FilterSet()
        self._generation += 1
        generation = self._generation
        trimmed = query.strip()
        self._current_filters = filters
        self._last_query = trimmed

        if not trimmed and not filters.has_active_filters:
            self._results = []
            self._is_searching = False
            return []

        self._is_searching = True
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._is_searching = False
            raise

        results = self.run_query(trimmed, filters)
        if generation != self._generation:
            logger.debug("Discarding superseded search for %r", trimmed)
            return results

        self._results = results
        self._is_searching = False
        if trimmed:
            await self._history.record(trimmed)
        return list(results)

    def run_query(self, query: str, filters: FilterSet | None = None) -> list[Title]:
        """Filter and rank the catalog immediately, without side effects."""

        filters = filters if filters is not None else FilterSet()
        needle = query.strip().lower()
        candidates = [
            title
            for title in self._catalog
            if (not needle or _contains_text(title, needle)) and matches(title, filters)
        ]
        # sorted() is stable, so ties keep catalog order.
        return sorted(candidates, key=lambda title: rank_key(title, needle))

    def trending(self) -> list[Title]:
        return self._catalog.trending()

    def featured(self) -> list[Title]:
        return self._catalog.featured()

    def by_genre(self, genre: str) -> list[Title]:
        return self._catalog.by_genre(genre)

    def by_year(self, year: int) -> list[Title]:
        return self._catalog.by_year(year)

    def by_rating(self, rating: str) -> list[Title]:
        return self._catalog.by_rating(rating)


def _contains_text(title: Title, needle: str) -> bool:
    return (
        needle in title.title.lower()
        or needle in title.description.lower()
        or needle in title.genre_text.lower()
    )
