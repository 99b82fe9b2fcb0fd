"""
StoreManager: owns the shared Redis client and store handle.

The application's composition root opens one manager and passes
manager.connection to the accessors. For code that cannot thread the
handle through, init_store_manager() memoizes one manager per process:

    manager = await init_store_manager("redis://127.0.0.1:6379/0")
    store = get_redis_connection()
    await add_user(store, 1001, {"name": "Alex"})

The first successful init wins. Later calls return the same manager
whatever URL they pass; nothing is reopened.
"""

from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as aioredis

from clientdb.core.config import RedisConfig
from clientdb.core.errors import NotInitializedError, StoreConnectionError, StoreError
from clientdb.store.base import KeyValueStore
from clientdb.store.redis import RedisStore

logger = logging.getLogger(__name__)


class StoreManager:
    """Raw redis.asyncio client plus the KeyValueStore handle built on it."""

    def __init__(self, client: aioredis.Redis, connection: KeyValueStore, url: str = "") -> None:
        self.client = client
        self.connection = connection
        self.url = url

    @classmethod
    async def open(cls, url: str, **options: Any) -> StoreManager:
        """
        Create a client for url and verify it with PING.

        Raises:
            StoreConnectionError: URL is invalid or the store is unreachable
        """
        store = RedisStore.from_url(url, **options)
        try:
            await store.ping()
        except StoreError as e:
            await store.close()
            raise StoreConnectionError(f"Failed to connect to {url}: {e.message}", url=url) from e
        logger.info(f"Connected to key-value store at {url}")
        return cls(store.client, store, url=url)

    @classmethod
    async def from_config(cls, config: RedisConfig) -> StoreManager:
        return await cls.open(config.url, **config.client_options())

    async def close(self) -> None:
        await self.connection.close()
        logger.info(f"Closed connection to {self.url or 'key-value store'}")

    def __repr__(self) -> str:
        return f"StoreManager(url={self.url!r})"


_manager: StoreManager | None = None


async def init_store_manager(url: str, **options: Any) -> StoreManager:
    """
    Open the process-wide manager, or return the one already open.

    Raises:
        StoreConnectionError: the first open failed (no retry)
    """
    global _manager

    if _manager is not None:
        if url != _manager.url:
            logger.warning(
                f"Store manager already initialized for {_manager.url}; ignoring {url}"
            )
        return _manager

    manager = await StoreManager.open(url, **options)

    # Another task may have finished opening while we awaited PING
    if _manager is not None:
        await manager.close()
        return _manager

    _manager = manager
    return _manager


def get_store_manager() -> StoreManager | None:
    return _manager


def require_store_manager() -> StoreManager:
    """Like get_store_manager(), but raises NotInitializedError instead of returning None."""
    if _manager is None:
        raise NotInitializedError("Store manager not initialized. Call init_store_manager() first.")
    return _manager


def get_redis_client() -> aioredis.Redis | None:
    return _manager.client if _manager is not None else None


def get_redis_connection() -> KeyValueStore | None:
    return _manager.connection if _manager is not None else None


async def close_store_manager() -> None:
    """Close and forget the process-wide manager. No-op if none is open."""
    global _manager

    if _manager is None:
        return
    manager, _manager = _manager, None
    await manager.close()
