"""
Redis store backend.

Uses redis.asyncio. The client multiplexes commands over its own
connection pool, so one RedisStore is shared by every caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from clientdb.core.errors import CommandError, StoreConnectionError
from clientdb.store.base import KeyValueStore, Member

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


class RedisStore(KeyValueStore):
    """
    Redis-backed key-value store.

    Usage:
        store = RedisStore.from_url("redis://127.0.0.1:6379/0")
        await store.ping()

        await store.hset("users:1001", {"name": "Alex"})
        user = await store.hgetall("users:1001")  # {"name": "Alex"}
    """

    def __init__(self, client: aioredis.Redis, url: str = "") -> None:
        self._client = client
        self._url = url

    @classmethod
    def from_url(cls, url: str, **options: Any) -> RedisStore:
        """Build a store over a new client. No connection is made until the first command."""
        options.setdefault("decode_responses", True)
        try:
            client = aioredis.from_url(url, **options)
        except ValueError as e:
            raise StoreConnectionError(f"Invalid Redis URL '{url}': {e}", url=url) from e
        return cls(client, url=url)

    @property
    def client(self) -> aioredis.Redis:
        """The underlying redis.asyncio client."""
        return self._client

    @contextmanager
    def _command(self, command: str, key: str = "") -> Iterator[None]:
        try:
            yield
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise StoreConnectionError(
                f"{command} {key}: store unreachable: {e}", url=self._url
            ) from e
        except RedisError as e:
            raise CommandError(f"{command} {key} failed: {e}", command=command, key=key) from e

    async def sadd(self, key: str, members: Iterable[Member]) -> int:
        with self._command("SADD", key):
            return await self._client.sadd(key, *members)

    async def srem(self, key: str, members: Iterable[Member]) -> int:
        with self._command("SREM", key):
            return await self._client.srem(key, *members)

    async def smembers(self, key: str) -> set[str]:
        with self._command("SMEMBERS", key):
            result = await self._client.smembers(key)
        return {_text(m) for m in result}

    async def hset(self, key: str, mapping: Mapping[str, str]) -> int:
        with self._command("HSET", key):
            return await self._client.hset(key, mapping=dict(mapping))

    async def hgetall(self, key: str) -> dict[str, str]:
        with self._command("HGETALL", key):
            result = await self._client.hgetall(key)
        return {_text(k): _text(v) for k, v in result.items()}

    async def exists(self, key: str) -> bool:
        with self._command("EXISTS", key):
            return await self._client.exists(key) > 0

    async def delete(self, key: str) -> bool:
        with self._command("DEL", key):
            return await self._client.delete(key) > 0

    async def rename(self, src: str, dst: str) -> None:
        with self._command("RENAME", src):
            await self._client.rename(src, dst)

    async def ping(self) -> bool:
        with self._command("PING"):
            return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()
        logger.debug(f"Closed Redis client for {self._url or 'store'}")
