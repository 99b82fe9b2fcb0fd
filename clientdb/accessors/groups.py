"""Group membership sets: group:<clt> → member ids."""

from __future__ import annotations

from collections.abc import Iterable

from clientdb.accessors.base import SetAccessor
from clientdb.keys import group_key
from clientdb.store.base import KeyValueStore

_groups = SetAccessor("group", group_key)


async def add_group(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    """Add member ids to the group (set union)."""
    await _groups.add(store, clt, hs)


async def del_group(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    """Remove member ids from the group."""
    await _groups.remove(store, clt, hs)


async def get_group(store: KeyValueStore, clt: int) -> set[int]:
    return await _groups.members(store, clt)


async def exists_group(store: KeyValueStore, clt: int) -> bool:
    return await _groups.exists(store, clt)


async def remove_group(store: KeyValueStore, clt: int) -> bool:
    """Delete the whole group. True if it existed."""
    return await _groups.delete(store, clt)
