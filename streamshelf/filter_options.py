"""Selectable values offered by search filter controls."""

from __future__ import annotations


AVAILABLE_GENRES: tuple[str, ...] = (
    "Action",
    "Comedy",
    "Drama",
    "Horror",
    "Sci-Fi",
    "Romance",
    "Thriller",
    "Fantasy",
    "Adventure",
    "Crime",
)

AVAILABLE_RATINGS: tuple[str, ...] = (
    "G",
    "PG",
    "PG-13",
    "R",
    "TV-G",
    "TV-PG",
    "TV-14",
    "TV-MA",
)

# Inclusive bounds for the year and duration pickers.
YEAR_RANGE = range(1950, 2024 + 1)
DURATION_RANGE = range(30, 300 + 1)
