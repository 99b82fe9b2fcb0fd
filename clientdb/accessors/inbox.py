"""Inbox of a client: inbox:<clt> hash. Whole-key delete only."""

from __future__ import annotations

from collections.abc import Mapping

from clientdb.accessors.base import HashAccessor
from clientdb.keys import inbox_key
from clientdb.store.base import KeyValueStore

_inbox = HashAccessor("inbox", inbox_key)


async def add_inbox(store: KeyValueStore, clt: int, hm: Mapping[str, str]) -> None:
    await _inbox.put(store, clt, hm)


async def get_inbox(store: KeyValueStore, clt: int) -> dict[str, str]:
    return await _inbox.get(store, clt)


async def exists_inbox(store: KeyValueStore, clt: int) -> bool:
    return await _inbox.exists(store, clt)


async def remove_inbox(store: KeyValueStore, clt: int) -> bool:
    return await _inbox.delete(store, clt)
