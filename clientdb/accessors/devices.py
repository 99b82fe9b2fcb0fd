"""
Client devices.

    client_device:<clt>         set    device ids of the client
    client_device:<clt>:<dev>   hash   device record

The list and the records are independent keys; removing a device record
does not touch the list and vice versa.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from clientdb.accessors.base import HashAccessor, SetAccessor
from clientdb.keys import device_key, device_list_key
from clientdb.store.base import KeyValueStore

_device_lists = SetAccessor("device_list", device_list_key)
_devices = HashAccessor("device", device_key)


# ━━━ Device list ━━━


async def add_dev2clt(store: KeyValueStore, clt: int, devs: Iterable[int]) -> None:
    """Add device ids to the client's device list."""
    await _device_lists.add(store, clt, devs)


async def del_dev4clt(store: KeyValueStore, clt: int, devs: Iterable[int]) -> None:
    """Remove device ids from the client's device list."""
    await _device_lists.remove(store, clt, devs)


async def get_devclt_set(store: KeyValueStore, clt: int) -> set[int]:
    return await _device_lists.members(store, clt)


async def exists_devclt(store: KeyValueStore, clt: int) -> bool:
    return await _device_lists.exists(store, clt)


async def remove_devclt_set(store: KeyValueStore, clt: int) -> bool:
    return await _device_lists.delete(store, clt)


# ━━━ Device record ━━━


async def add_dev2clt_hash(
    store: KeyValueStore, clt: int, dev: int, hm: Mapping[str, str]
) -> None:
    """Write (or overwrite) fields of a device record."""
    await _devices.put(store, (clt, dev), hm)


async def get_device(store: KeyValueStore, clt: int, dev: int) -> dict[str, str]:
    return await _devices.get(store, (clt, dev))


async def exists_device(store: KeyValueStore, clt: int, dev: int) -> bool:
    return await _devices.exists(store, (clt, dev))


async def remove_device(store: KeyValueStore, clt: int, dev: int) -> bool:
    return await _devices.delete(store, (clt, dev))
