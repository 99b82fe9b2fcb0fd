"""
User records and contact lists.

    users:<clt>        hash   user record
    del_users:<clt>    hash   record moved here by remove_user()
    conts_user:<clt>   set    user contacts
    conts_group:<clt>  set    group contacts
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from clientdb.accessors.base import HashAccessor, SetAccessor
from clientdb.keys import deleted_user_key, group_contacts_key, user_contacts_key, user_key
from clientdb.store.base import KeyValueStore

logger = logging.getLogger(__name__)

_users = HashAccessor("user", user_key)
_deleted_users = HashAccessor("deleted_user", deleted_user_key)
_user_contacts = SetAccessor("user_contacts", user_contacts_key)
_group_contacts = SetAccessor("group_contacts", group_contacts_key)


# ━━━ User record ━━━


async def add_user(store: KeyValueStore, clt: int, hm: Mapping[str, str]) -> None:
    """Write (or overwrite) fields of the user record."""
    await _users.put(store, clt, hm)


async def get_user(store: KeyValueStore, clt: int) -> dict[str, str]:
    return await _users.get(store, clt)


async def exists_user(store: KeyValueStore, clt: int) -> bool:
    return await _users.exists(store, clt)


async def remove_user(store: KeyValueStore, clt: int) -> None:
    """
    Soft-delete a user by renaming users:<clt> to del_users:<clt>.

    An earlier deleted record for the same id is overwritten.

    Raises:
        CommandError: users:<clt> does not exist
    """
    src, dst = user_key(clt), deleted_user_key(clt)
    await store.rename(src, dst)
    logger.info(f"User {clt} moved {src} -> {dst}")


async def get_deleted_user(store: KeyValueStore, clt: int) -> dict[str, str]:
    """Read a soft-deleted user record."""
    return await _deleted_users.get(store, clt)


async def exists_deleted_user(store: KeyValueStore, clt: int) -> bool:
    return await _deleted_users.exists(store, clt)


# ━━━ User contacts ━━━


async def add_user_contacts(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    await _user_contacts.add(store, clt, hs)


async def del_user_contacts(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    await _user_contacts.remove(store, clt, hs)


async def get_user_contacts(store: KeyValueStore, clt: int) -> set[int]:
    return await _user_contacts.members(store, clt)


async def exists_user_contacts(store: KeyValueStore, clt: int) -> bool:
    return await _user_contacts.exists(store, clt)


async def remove_user_contacts(store: KeyValueStore, clt: int) -> bool:
    return await _user_contacts.delete(store, clt)


# ━━━ Group contacts ━━━


async def add_group_contacts(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    await _group_contacts.add(store, clt, hs)


async def del_group_contacts(store: KeyValueStore, clt: int, hs: Iterable[int]) -> None:
    await _group_contacts.remove(store, clt, hs)


async def get_group_contacts(store: KeyValueStore, clt: int) -> set[int]:
    return await _group_contacts.members(store, clt)


async def exists_group_contacts(store: KeyValueStore, clt: int) -> bool:
    return await _group_contacts.exists(store, clt)


async def remove_group_contacts(store: KeyValueStore, clt: int) -> bool:
    return await _group_contacts.delete(store, clt)
