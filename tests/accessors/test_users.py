"""Tests for user records and contact lists."""

import pytest
from clientdb.accessors.users import (
    add_group_contacts,
    add_user,
    add_user_contacts,
    del_group_contacts,
    del_user_contacts,
    exists_deleted_user,
    exists_group_contacts,
    exists_user,
    exists_user_contacts,
    get_deleted_user,
    get_group_contacts,
    get_user,
    get_user_contacts,
    remove_group_contacts,
    remove_user,
    remove_user_contacts,
)
from clientdb.core.errors import CommandError


# ━━━ User record ━━━


@pytest.mark.asyncio
async def test_add_then_get_user(store):
    await add_user(store, 1001, {"name": "Alex", "phone": "555"})
    assert await get_user(store, 1001) == {"name": "Alex", "phone": "555"}


@pytest.mark.asyncio
async def test_add_user_overwrites_fields(store):
    await add_user(store, 1001, {"name": "Alex", "phone": "555"})
    await add_user(store, 1001, {"name": "Sam"})
    assert await get_user(store, 1001) == {"name": "Sam", "phone": "555"}


@pytest.mark.asyncio
async def test_get_missing_user_is_empty(store):
    assert await get_user(store, 404) == {}


@pytest.mark.asyncio
async def test_exists_user(store):
    assert await exists_user(store, 1001) is False
    await add_user(store, 1001, {"name": "Alex"})
    assert await exists_user(store, 1001) is True


@pytest.mark.asyncio
async def test_remove_user_moves_record_to_deleted(store):
    await add_user(store, 1001, {"name": "Alex"})

    await remove_user(store, 1001)

    assert await exists_user(store, 1001) is False
    assert await get_user(store, 1001) == {}
    assert await exists_deleted_user(store, 1001) is True
    assert await get_deleted_user(store, 1001) == {"name": "Alex"}


@pytest.mark.asyncio
async def test_remove_user_twice_fails(store):
    await add_user(store, 1001, {"name": "Alex"})
    await remove_user(store, 1001)

    with pytest.raises(CommandError) as exc_info:
        await remove_user(store, 1001)
    assert exc_info.value.command == "RENAME"
    # The deleted record survives the failed second call
    assert await get_deleted_user(store, 1001) == {"name": "Alex"}


@pytest.mark.asyncio
async def test_remove_never_created_user_fails(store):
    with pytest.raises(CommandError):
        await remove_user(store, 404)


@pytest.mark.asyncio
async def test_remove_user_replaces_older_deleted_record(store):
    await add_user(store, 1001, {"name": "first"})
    await remove_user(store, 1001)
    await add_user(store, 1001, {"name": "second"})
    await remove_user(store, 1001)

    assert await get_deleted_user(store, 1001) == {"name": "second"}


# ━━━ Contacts ━━━


@pytest.mark.asyncio
async def test_user_contacts_lifecycle(store):
    assert await exists_user_contacts(store, 1) is False

    await add_user_contacts(store, 1, {2, 3, 4})
    assert await get_user_contacts(store, 1) == {2, 3, 4}
    assert await exists_user_contacts(store, 1) is True

    await del_user_contacts(store, 1, {3})
    assert await get_user_contacts(store, 1) == {2, 4}

    assert await remove_user_contacts(store, 1) is True
    assert await remove_user_contacts(store, 1) is False
    assert await get_user_contacts(store, 1) == set()


@pytest.mark.asyncio
async def test_group_contacts_lifecycle(store):
    await add_group_contacts(store, 1, [10, 20])
    await add_group_contacts(store, 1, [20, 30])
    assert await get_group_contacts(store, 1) == {10, 20, 30}
    assert await exists_group_contacts(store, 1) is True

    await del_group_contacts(store, 1, [10, 20, 30])
    assert await get_group_contacts(store, 1) == set()
    assert await exists_group_contacts(store, 1) is False
    assert await remove_group_contacts(store, 1) is False


@pytest.mark.asyncio
async def test_user_and_group_contacts_are_separate(store):
    await add_user_contacts(store, 1, {2})
    await add_group_contacts(store, 1, {3})
    assert await get_user_contacts(store, 1) == {2}
    assert await get_group_contacts(store, 1) == {3}


@pytest.mark.asyncio
async def test_contacts_do_not_touch_user_record(store):
    await add_user(store, 1, {"name": "Alex"})
    await add_user_contacts(store, 1, {2})
    await remove_user(store, 1)
    assert await get_user_contacts(store, 1) == {2}
