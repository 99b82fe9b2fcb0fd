"""Tests for group membership sets."""

import asyncio

import pytest
from clientdb.accessors.groups import add_group, del_group, exists_group, get_group, remove_group
from clientdb.accessors.users import add_user
from clientdb.core.errors import CommandError
from clientdb.store.memory import InMemoryStore


@pytest.mark.asyncio
async def test_add_then_remove_members(store):
    await add_group(store, 123, {456, 789})
    assert await get_group(store, 123) == {456, 789}

    await del_group(store, 123, {456})
    assert await get_group(store, 123) == {789}


@pytest.mark.asyncio
async def test_add_is_set_union(store):
    await add_group(store, 123, {1, 2})
    await add_group(store, 123, {2, 3})
    assert await get_group(store, 123) == {1, 2, 3}


@pytest.mark.asyncio
async def test_missing_group_is_empty(store):
    assert await get_group(store, 404) == set()
    assert await exists_group(store, 404) is False


@pytest.mark.asyncio
async def test_remove_group_true_once(store):
    await add_group(store, 123, {456})
    assert await exists_group(store, 123) is True
    assert await remove_group(store, 123) is True
    assert await remove_group(store, 123) is False
    assert await exists_group(store, 123) is False


@pytest.mark.asyncio
async def test_del_group_of_absent_members_is_noop(store):
    await add_group(store, 123, {1})
    await del_group(store, 123, {99})
    assert await get_group(store, 123) == {1}


@pytest.mark.asyncio
async def test_concurrent_adds_all_land(store: InMemoryStore):
    await asyncio.gather(*(add_group(store, 1, {member}) for member in range(50)))
    assert await get_group(store, 1) == set(range(50))


@pytest.mark.asyncio
async def test_group_and_user_keys_do_not_collide(store):
    await add_user(store, 1, {"name": "Alex"})
    await add_group(store, 1, {2})
    assert await get_group(store, 1) == {2}


@pytest.mark.asyncio
async def test_wrong_type_surfaces_as_command_error(store: InMemoryStore):
    await store.hset("group:5", {"oops": "hash"})
    with pytest.raises(CommandError, match="WRONGTYPE"):
        await get_group(store, 5)
