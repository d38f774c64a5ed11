from __future__ import annotations

import asyncio

import pytest
from pydantic import TypeAdapter
from sqlalchemy import create_engine, inspect

from streamshelf.database import Database
from streamshelf.db_models import StoredValue
from streamshelf.errors import DecodeFailure, EncodeFailure
from streamshelf.services.storage import (
    DatabaseKeyValueStore,
    InMemoryKeyValueStore,
    JsonDocument,
)


def test_create_all_creates_stored_values_table(tmp_path) -> None:
    """Table creation should register the key-value table."""

    database_path = tmp_path / "store.db"
    database = Database(f"sqlite+aiosqlite:///{database_path}")
    asyncio.run(database.create_all())
    asyncio.run(database.dispose())

    inspector_engine = create_engine(f"sqlite:///{database_path}")
    try:
        inspector = inspect(inspector_engine)
        columns = {column["name"] for column in inspector.get_columns("stored_values")}
    finally:
        inspector_engine.dispose()

    assert {"key", "value", "updated_at"} <= columns


def test_database_store_round_trips_and_overwrites(tmp_path) -> None:
    async def runner() -> None:
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}")
        await database.create_all()
        store = DatabaseKeyValueStore(database.session_factory)

        assert await store.get("search_history") is None
        await store.set("search_history", '["dark"]')
        await store.set("search_history", '["ozark", "dark"]')
        assert await store.get("search_history") == '["ozark", "dark"]'

        await store.delete("search_history")
        assert await store.get("search_history") is None
        await store.delete("search_history")

        await database.dispose()

    asyncio.run(runner())


def test_database_store_survives_reopening(tmp_path) -> None:
    """Values written by one engine are visible to a fresh one."""

    database_url = f"sqlite+aiosqlite:///{tmp_path / 'durable.db'}"

    async def write() -> None:
        database = Database(database_url)
        await database.create_all()
        await DatabaseKeyValueStore(database.session_factory).set("k", "v")
        await database.dispose()

    async def read() -> str | None:
        database = Database(database_url)
        await database.create_all()
        value = await DatabaseKeyValueStore(database.session_factory).get("k")
        await database.dispose()
        return value

    asyncio.run(write())
    assert asyncio.run(read()) == "v"


def test_database_store_read_errors_become_decode_failures(tmp_path) -> None:
    async def runner() -> None:
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing-table.db'}")
        store = DatabaseKeyValueStore(database.session_factory)
        with pytest.raises(DecodeFailure):
            await store.get("search_history")
        await database.dispose()

    asyncio.run(runner())


def test_json_document_treats_garbage_as_decode_failure() -> None:
    async def runner() -> None:
        store = InMemoryKeyValueStore({"search_history": "{not json"})
        document = JsonDocument(store, "search_history", TypeAdapter(list[str]))

        with pytest.raises(DecodeFailure):
            await document.load()
        assert await document.load_or_default([]) == []

    asyncio.run(runner())


def test_json_document_does_not_write_when_encoding_fails() -> None:
    async def runner() -> None:
        store = InMemoryKeyValueStore({"numbers": "[1, 2]"})
        document = JsonDocument(store, "numbers", TypeAdapter(list[float]))

        with pytest.raises(EncodeFailure):
            await document.save([1.0, object()])  # type: ignore[list-item]
        assert await store.get("numbers") == "[1, 2]"

    asyncio.run(runner())


def test_stored_values_carry_timestamps(tmp_path) -> None:
    async def runner() -> None:
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'stamps.db'}")
        await database.create_all()
        store = DatabaseKeyValueStore(database.session_factory)

        await store.set("my_list_items", "[]")
        await store.set("my_list_items", '[{"title": "Dark"}]')

        async with database.session_factory() as session:
            record = await session.get(StoredValue, "my_list_items")
        assert record is not None
        assert record.created_at is not None
        assert record.updated_at is not None
        assert record.updated_at >= record.created_at

        await database.dispose()

    asyncio.run(runner())
