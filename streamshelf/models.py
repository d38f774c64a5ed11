"""Pydantic models describing catalog titles, filters and saved-list entries."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

from .utils import split_csv, unique_casefolded


class ContentType(str, Enum):
    """Which kind of title a search is restricted to."""

    ALL = "All"
    MOVIES = "Movies"
    SHOWS = "TV Shows"

    @classmethod
    def parse(cls, value: object) -> "ContentType":
        """Return the content type for a label or one of its common synonyms."""

        if isinstance(value, cls):
            return value
        if value is None:
            return cls.ALL
        text = " ".join(str(value).replace("_", " ").replace("-", " ").split()).lower()
        if not text:
            return cls.ALL
        try:
            return _CONTENT_TYPE_SYNONYMS[text]
        except KeyError:
            raise ValueError(f"Unknown content type: {value!r}") from None


_CONTENT_TYPE_SYNONYMS: dict[str, ContentType] = {
    "all": ContentType.ALL,
    "any": ContentType.ALL,
    "movies": ContentType.MOVIES,
    "movie": ContentType.MOVIES,
    "film": ContentType.MOVIES,
    "films": ContentType.MOVIES,
    "tv shows": ContentType.SHOWS,
    "tv show": ContentType.SHOWS,
    "tvshows": ContentType.SHOWS,
    "shows": ContentType.SHOWS,
    "show": ContentType.SHOWS,
    "series": ContentType.SHOWS,
    "tv": ContentType.SHOWS,
}


class Title(BaseModel):
    """A single browsable movie or show."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    title: str = Field(min_length=1, validation_alias=AliasChoices("title", "name"))
    description: str = Field(
        default="",
        validation_alias=AliasChoices("description", "overview"),
    )
    poster_url: str = Field(
        default="",
        validation_alias=AliasChoices("poster_url", "posterUrl", "posterURL"),
        serialization_alias="posterUrl",
    )
    backdrop_url: str = Field(
        default="",
        validation_alias=AliasChoices("backdrop_url", "backdropUrl", "backdropURL"),
        serialization_alias="backdropUrl",
    )
    release_year: int = Field(
        validation_alias=AliasChoices("release_year", "releaseYear", "year"),
        serialization_alias="releaseYear",
    )
    rating: str = ""
    duration_minutes: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("duration_minutes", "durationMinutes", "duration"),
        serialization_alias="durationMinutes",
    )
    genres: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("genres", "genre"),
    )
    is_movie: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_movie", "isMovie"),
        serialization_alias="isMovie",
    )
    is_trending: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_trending", "isTrending"),
        serialization_alias="isTrending",
    )
    is_featured: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_featured", "isFeatured"),
        serialization_alias="isFeatured",
    )

    @field_validator("id", mode="before")
    @classmethod
    def _strip_blank_id(cls, value: object) -> object:
        if value is None:
            return None
        stripped = str(value).strip()
        return stripped or None

    @field_validator("rating", mode="before")
    @classmethod
    def _strip_rating(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("genres", mode="before")
    @classmethod
    def _parse_genres(cls, value: object) -> tuple[str, ...]:
        """Accept either a comma-separated string or a sequence of genres."""

        if value is None:
            return ()
        if isinstance(value, str):
            raw_values = split_csv(value)
        elif isinstance(value, Iterable):
            raw_values = [str(part) for part in value]
        else:
            raise TypeError("genres must be a string or iterable of strings")
        return tuple(unique_casefolded(raw_values))

    @property
    def key(self) -> str:
        """Identity used for saved-list membership.

        Catalogs without stable identifiers fall back to the display title,
        so two distinct titles sharing a name collide.
        """

        return self.id or self.title

    @property
    def genre_text(self) -> str:
        """Genres joined the way they are shown on detail screens."""

        return ", ".join(self.genres)


class FilterSet(BaseModel):
    """Structured constraints narrowing a search.

    Ranges are not checked for ``min <= max``; an inverted range simply
    matches nothing.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    content_type: ContentType = Field(
        default=ContentType.ALL,
        validation_alias=AliasChoices("content_type", "contentType", "type"),
    )
    genres: set[str] = Field(
        default_factory=set,
        validation_alias=AliasChoices("genres", "genre", "selectedGenres"),
    )
    ratings: set[str] = Field(
        default_factory=set,
        validation_alias=AliasChoices("ratings", "rating", "selectedRatings"),
    )
    min_year: int | None = Field(
        default=None, validation_alias=AliasChoices("min_year", "minYear")
    )
    max_year: int | None = Field(
        default=None, validation_alias=AliasChoices("max_year", "maxYear")
    )
    min_duration: int | None = Field(
        default=None, validation_alias=AliasChoices("min_duration", "minDuration")
    )
    max_duration: int | None = Field(
        default=None, validation_alias=AliasChoices("max_duration", "maxDuration")
    )

    @classmethod
    def from_query(cls, params: Mapping[str, object]) -> "FilterSet":
        """Build filters from request-style parameters."""

        return cls.model_validate(dict(params))

    @field_validator("content_type", mode="before")
    @classmethod
    def _parse_content_type(cls, value: object) -> ContentType:
        return ContentType.parse(value)

    @field_validator("genres", "ratings", mode="before")
    @classmethod
    def _parse_selection(cls, value: object) -> set[str]:
        if value is None:
            return set()
        if isinstance(value, str):
            return set(split_csv(value))
        if isinstance(value, Iterable):
            return {str(part).strip() for part in value if str(part).strip()}
        raise TypeError("Selections must be a string or iterable of strings")

    @field_validator(
        "min_year",
        "max_year",
        "min_duration",
        "max_duration",
        mode="before",
    )
    @classmethod
    def _parse_optional_int(cls, value: object) -> object:
        if value is None or value == "":
            return None
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except (TypeError, ValueError) as exc:
            raise ValueError("Value must be an integer") from exc

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.genres
            or self.content_type is not ContentType.ALL
            or self.ratings
            or self.min_year is not None
            or self.max_year is not None
            or self.min_duration is not None
            or self.max_duration is not None
        )

    def reset(self) -> None:
        """Clear every constraint in place."""

        self.content_type = ContentType.ALL
        self.genres = set()
        self.ratings = set()
        self.min_year = None
        self.max_year = None
        self.min_duration = None
        self.max_duration = None


class ListEntry(BaseModel):
    """A title saved to a profile's list.

    Persisted flat: the title snapshot fields side by side with
    ``profileId`` and ``addedAt``.
    """

    model_config = ConfigDict(frozen=True)

    profile_id: str
    snapshot: Title
    added_at: datetime

    @property
    def title_key(self) -> str:
        return self.snapshot.key

    @model_validator(mode="before")
    @classmethod
    def _unflatten(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "snapshot" in data:
            return data
        payload = dict(data)
        profile_id = payload.pop("profileId", payload.pop("profile_id", None))
        added_at = payload.pop("addedAt", payload.pop("added_at", None))
        return {"profile_id": profile_id, "added_at": added_at, "snapshot": payload}

    @model_serializer(mode="wrap")
    def _flatten(self, handler) -> dict[str, Any]:
        data = handler(self)
        record = dict(data.pop("snapshot"))
        record["profileId"] = data["profile_id"]
        record["addedAt"] = data["added_at"]
        return record
