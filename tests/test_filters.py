"""Filter predicate behaviour tests."""

from __future__ import annotations

import pytest

from streamshelf.models import ContentType, FilterSet, Title
from streamshelf.sample_catalog import SAMPLE_TITLES
from streamshelf.services.filters import matches


def _title(**overrides) -> Title:
    data = {
        "title": "Arrival",
        "release_year": 2016,
        "rating": "PG-13",
        "duration_minutes": 116,
        "genres": "Drama, Sci-Fi",
        "is_movie": True,
    }
    data.update(overrides)
    return Title(**data)


@pytest.mark.parametrize("title", SAMPLE_TITLES, ids=lambda title: title.title)
def test_empty_filter_set_matches_every_title(title: Title) -> None:
    assert matches(title, FilterSet())


def test_genre_selection_matches_substrings_case_insensitively() -> None:
    """Selected genres only need to appear inside one of the title's genres."""

    title = _title(genres="Sci-Fi, Horror")

    assert matches(title, FilterSet(genres={"sci-fi"}))
    assert matches(title, FilterSet(genres={"Fi"}))
    assert matches(title, FilterSet(genres={"Comedy", "HORROR"}))
    assert not matches(title, FilterSet(genres={"Comedy"}))


def test_content_type_separates_movies_from_shows() -> None:
    movie = _title(is_movie=True)
    show = _title(title="Dark", is_movie=False)

    movies_only = FilterSet(content_type=ContentType.MOVIES)
    shows_only = FilterSet(content_type=ContentType.SHOWS)

    assert matches(movie, movies_only) and not matches(show, movies_only)
    assert matches(show, shows_only) and not matches(movie, shows_only)
    assert matches(movie, FilterSet(content_type=ContentType.ALL))


def test_rating_must_match_exactly() -> None:
    title = _title(rating="PG-13")

    assert matches(title, FilterSet(ratings={"PG-13", "R"}))
    assert not matches(title, FilterSet(ratings={"PG"}))
    assert not matches(title, FilterSet(ratings={"pg-13"}))


def test_year_and_duration_bounds_are_inclusive() -> None:
    title = _title(release_year=2016, duration_minutes=116)

    assert matches(title, FilterSet(min_year=2016, max_year=2016))
    assert not matches(title, FilterSet(min_year=2017))
    assert not matches(title, FilterSet(max_year=2015))
    assert matches(title, FilterSet(min_duration=116, max_duration=116))
    assert not matches(title, FilterSet(min_duration=117))
    assert not matches(title, FilterSet(max_duration=90))


def test_inverted_range_is_accepted_and_matches_nothing() -> None:
    filters = FilterSet(min_year=2020, max_year=2010)

    assert not any(matches(title, filters) for title in SAMPLE_TITLES)


def test_all_constraints_must_pass() -> None:
    title = _title(genres="Action, Thriller", rating="R", release_year=2020)
    filters = FilterSet(
        content_type=ContentType.MOVIES,
        genres={"Action"},
        ratings={"R"},
        min_year=2018,
    )

    assert matches(title, filters)
    assert not matches(title.model_copy(update={"is_movie": False}), filters)
