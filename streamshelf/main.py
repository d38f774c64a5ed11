"""Composition root wiring the catalog, search and list services together."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from .config import Settings, get_settings
from .database import Database
from .errors import CatalogLoadError
from .services.catalog import CatalogStore
from .services.history import SearchHistory
from .services.my_list import MyListStore
from .services.search import SearchEngine
from .services.storage import (
    DatabaseKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
)

logger = logging.getLogger(__name__)


@dataclass
class CoreServices:
    """Explicitly constructed service handles shared with the presentation layer."""

    settings: Settings
    store: KeyValueStore
    catalog: CatalogStore
    history: SearchHistory
    my_list: MyListStore
    search: SearchEngine
    database: Database | None = None

    async def aclose(self) -> None:
        """Release the database engine, if one was opened."""

        if self.database is not None:
            await self.database.dispose()
            self.database = None


def load_catalog(settings: Settings) -> CatalogStore:
    """Return the configured catalog, falling back to the sample titles."""

    if settings.catalog_path is None:
        return CatalogStore.sample()
    try:
        return CatalogStore.from_json_file(settings.catalog_path)
    except CatalogLoadError as exc:
        logger.warning("Falling back to sample catalog: %s", exc)
        return CatalogStore.sample()


async def create_core(
    settings: Settings | None = None,
    *,
    catalog: CatalogStore | None = None,
) -> CoreServices:
    """Build every service once; callers pass the result to their consumers."""

    if settings is None:
        settings = get_settings()
    database: Database | None = None
    store: KeyValueStore
    if settings.storage_backend == "memory":
        store = InMemoryKeyValueStore()
    else:
        database = Database(settings.database_url)
        await database.create_all()
        store = DatabaseKeyValueStore(database.session_factory)

    catalog = catalog if catalog is not None else load_catalog(settings)
    history = SearchHistory(
        store,
        key=settings.search_history_key,
        limit=settings.search_history_limit,
        recent_limit=settings.recent_search_limit,
    )
    await history.load()
    my_list = MyListStore(store, key=settings.my_list_key)
    engine = SearchEngine(
        catalog, history, delay_seconds=settings.search_delay_seconds
    )
    logger.info(
        "%s ready with %d titles (%s storage)",
        settings.app_name,
        len(catalog),
        settings.storage_backend,
    )
    return CoreServices(
        settings=settings,
        store=store,
        catalog=catalog,
        history=history,
        my_list=my_list,
        search=engine,
        database=database,
    )


@asynccontextmanager
async def open_core(
    settings: Settings | None = None,
    *,
    catalog: CatalogStore | None = None,
) -> AsyncIterator[CoreServices]:
    """Configure logging, build the services and dispose of them on exit."""

    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    core = await create_core(settings, catalog=catalog)
    try:
        yield core
    finally:
        await core.aclose()
