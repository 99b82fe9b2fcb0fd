"""
In-memory store backend for testing.

Dict-based stand-in for Redis with the same reply semantics for the
commands clientdb uses. Data lost when process exits.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from clientdb.core.errors import CommandError
from clientdb.store.base import KeyValueStore, Member

_WRONGTYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class InMemoryStore(KeyValueStore):
    """
    In-memory key-value store for testing.

    Usage:
        store = InMemoryStore()
        await store.sadd("group:1", [2, 3])
        assert await store.smembers("group:1") == {"2", "3"}

    Like Redis, a structure that becomes empty is removed, a command
    against a key of the other type raises CommandError, and RENAME
    of a missing key raises CommandError.
    """

    def __init__(self) -> None:
        self._data: dict[str, set[str] | dict[str, str]] = {}

    def _get_set(self, key: str, command: str) -> set[str] | None:
        value = self._data.get(key)
        if value is not None and not isinstance(value, set):
            raise CommandError(_WRONGTYPE, command=command, key=key)
        return value

    def _get_hash(self, key: str, command: str) -> dict[str, str] | None:
        value = self._data.get(key)
        if value is not None and not isinstance(value, dict):
            raise CommandError(_WRONGTYPE, command=command, key=key)
        return value

    async def sadd(self, key: str, members: Iterable[Member]) -> int:
        values = {str(m) for m in members}
        if not values:
            raise CommandError("wrong number of arguments for 'sadd' command", command="SADD", key=key)
        current = self._get_set(key, "SADD")
        if current is None:
            current = self._data[key] = set()
        added = len(values - current)
        current |= values
        return added

    async def srem(self, key: str, members: Iterable[Member]) -> int:
        values = {str(m) for m in members}
        if not values:
            raise CommandError("wrong number of arguments for 'srem' command", command="SREM", key=key)
        current = self._get_set(key, "SREM")
        if current is None:
            return 0
        removed = len(values & current)
        current -= values
        if not current:
            del self._data[key]
        return removed

    async def smembers(self, key: str) -> set[str]:
        current = self._get_set(key, "SMEMBERS")
        return set(current) if current else set()

    async def hset(self, key: str, mapping: Mapping[str, str]) -> int:
        if not mapping:
            raise CommandError("wrong number of arguments for 'hset' command", command="HSET", key=key)
        current = self._get_hash(key, "HSET")
        if current is None:
            current = self._data[key] = {}
        added = sum(1 for field in mapping if field not in current)
        current.update({str(k): str(v) for k, v in mapping.items()})
        return added

    async def hgetall(self, key: str) -> dict[str, str]:
        current = self._get_hash(key, "HGETALL")
        return dict(current) if current else {}

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def delete(self, key: str) -> bool:
        if key in self._data:
            del self._data[key]
            return True
        return False

    async def rename(self, src: str, dst: str) -> None:
        if src not in self._data:
            raise CommandError("ERR no such key", command="RENAME", key=src)
        self._data[dst] = self._data.pop(src)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()
