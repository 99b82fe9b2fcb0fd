"""Outbox of a client: outbox:<clt> hash. Whole-key delete only."""

from __future__ import annotations

from collections.abc import Mapping

from clientdb.accessors.base import HashAccessor
from clientdb.keys import outbox_key
from clientdb.store.base import KeyValueStore

_outbox = HashAccessor("outbox", outbox_key)


async def add_outbox(store: KeyValueStore, clt: int, hm: Mapping[str, str]) -> None:
    await _outbox.put(store, clt, hm)


async def get_outbox(store: KeyValueStore, clt: int) -> dict[str, str]:
    return await _outbox.get(store, clt)


async def exists_outbox(store: KeyValueStore, clt: int) -> bool:
    return await _outbox.exists(store, clt)


async def remove_outbox(store: KeyValueStore, clt: int) -> bool:
    return await _outbox.delete(store, clt)
