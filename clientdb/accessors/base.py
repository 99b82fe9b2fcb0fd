"""
Generic entity accessors.

Every entity kind is either a set of integer ids or a string hash under
a prefixed key. SetAccessor and HashAccessor carry the shared CRUD
template; the per-entity modules only pick a key builder.

Each method issues exactly one store command on the handle it is given.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from clientdb.store.base import KeyValueStore

logger = logging.getLogger(__name__)

# A single client id, or (client id, sub id) for composite keys
KeyArgs = int | tuple[int, ...]


class _Accessor:
    def __init__(self, name: str, key_fn: Callable[..., str]) -> None:
        self.name = name
        self._key_fn = key_fn

    def key(self, ids: KeyArgs) -> str:
        """Build the store key for an id (or id tuple)."""
        if isinstance(ids, tuple):
            return self._key_fn(*ids)
        return self._key_fn(ids)

    async def exists(self, store: KeyValueStore, ids: KeyArgs) -> bool:
        key = self.key(ids)
        logger.debug(f"EXISTS {key}")
        return await store.exists(key)

    async def delete(self, store: KeyValueStore, ids: KeyArgs) -> bool:
        """Delete the whole key. True if a key was removed."""
        key = self.key(ids)
        removed = await store.delete(key)
        logger.debug(f"DEL {key} -> {removed}")
        return removed

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SetAccessor(_Accessor):
    """
    Set of integer ids under one key.

    Usage:
        groups = SetAccessor("group", group_key)
        await groups.add(store, 123, {456, 789})
        await groups.members(store, 123)   # {456, 789}
    """

    async def add(self, store: KeyValueStore, ids: KeyArgs, members: Iterable[int]) -> None:
        """SADD members. The store rejects an empty collection with CommandError."""
        values = list(members)
        key = self.key(ids)
        added = await store.sadd(key, values)
        logger.debug(f"SADD {key} ({len(values)} given, {added} new)")

    async def remove(self, store: KeyValueStore, ids: KeyArgs, members: Iterable[int]) -> None:
        """SREM members. The store rejects an empty collection with CommandError."""
        values = list(members)
        key = self.key(ids)
        removed = await store.srem(key, values)
        logger.debug(f"SREM {key} ({len(values)} given, {removed} removed)")

    async def members(self, store: KeyValueStore, ids: KeyArgs) -> set[int]:
        """SMEMBERS, decoded to ints. Empty set if the key is absent."""
        key = self.key(ids)
        raw = await store.smembers(key)
        logger.debug(f"SMEMBERS {key} -> {len(raw)} members")
        return {int(m) for m in raw}


class HashAccessor(_Accessor):
    """
    String field → string value hash under one key.

    Usage:
        users = HashAccessor("user", user_key)
        await users.put(store, 1001, {"name": "Alex"})
        await users.get(store, 1001)   # {"name": "Alex"}
    """

    async def put(self, store: KeyValueStore, ids: KeyArgs, fields: Mapping[str, str]) -> None:
        """HSET fields, overwriting existing ones. The store rejects an empty mapping."""
        key = self.key(ids)
        added = await store.hset(key, fields)
        logger.debug(f"HSET {key} ({len(fields)} given, {added} new)")

    async def get(self, store: KeyValueStore, ids: KeyArgs) -> dict[str, str]:
        """HGETALL. Empty dict if the key is absent."""
        key = self.key(ids)
        result = await store.hgetall(key)
        logger.debug(f"HGETALL {key} -> {len(result)} fields")
        return result
