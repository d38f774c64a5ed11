"""Predicate deciding whether a title satisfies a filter set."""

from __future__ import annotations

from ..models import ContentType, FilterSet, Title


def matches(title: Title, filters: FilterSet) -> bool:
    """Return whether ``title`` passes every active constraint in ``filters``.

    Genre selection is permissive: a selected genre matches when it is a
    case-insensitive substring of any of the title's genres, so "Fi" picks up
    "Sci-Fi".
    """

    if filters.genres and not _matches_genre(title, filters.genres):
        return False

    if filters.content_type is ContentType.MOVIES and not title.is_movie:
        return False
    if filters.content_type is ContentType.SHOWS and title.is_movie:
        return False

    if filters.ratings and title.rating not in filters.ratings:
        return False

    if filters.min_year is not None and title.release_year < filters.min_year:
        return False
    if filters.max_year is not None and title.release_year > filters.max_year:
        return False

    if (
        filters.min_duration is not None
        and title.duration_minutes < filters.min_duration
    ):
        return False
    if (
        filters.max_duration is not None
        and title.duration_minutes > filters.max_duration
    ):
        return False

    return True


def _matches_genre(title: Title, selected: set[str]) -> bool:
    title_genres = [genre.lower() for genre in title.genres]
    return any(
        choice.lower() in genre for choice in selected for genre in title_genres
    )
