"""Configuration settings behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from streamshelf.config import Settings


def test_defaults_match_search_contract() -> None:
    """Defaults mirror the 20-entry history and 5-entry recent view."""

    settings = Settings(_env_file=None)

    assert settings.search_history_limit == 20
    assert settings.recent_search_limit == 5
    assert settings.search_history_key == "search_history"
    assert settings.my_list_key == "my_list_items"
    assert settings.storage_backend == "database"
    assert settings.catalog_path is None


def test_log_level_is_case_insensitive() -> None:
    settings = Settings(_env_file=None, LOG_LEVEL="debug")

    assert settings.log_level == "DEBUG"


def test_unknown_log_level_raises() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        Settings(_env_file=None, LOG_LEVEL="chatty")


def test_recent_limit_cannot_exceed_history_limit() -> None:
    """The recent view is a prefix of the history, so it must be smaller."""

    with pytest.raises(ValueError, match="must not exceed SEARCH_HISTORY_LIMIT"):
        Settings(_env_file=None, SEARCH_HISTORY_LIMIT=3, RECENT_SEARCH_LIMIT=4)


def test_blank_catalog_path_means_sample_catalog() -> None:
    settings = Settings(_env_file=None, CATALOG_PATH="  ")

    assert settings.catalog_path is None


def test_catalog_path_and_backend_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_PATH", "/srv/catalog.json")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("SEARCH_DELAY", "0")

    settings = Settings(_env_file=None)

    assert settings.catalog_path == Path("/srv/catalog.json")
    assert settings.storage_backend == "memory"
    assert settings.search_delay_seconds == 0
