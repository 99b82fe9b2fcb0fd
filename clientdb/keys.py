"""
Key builders.

Every entity lives under a fixed prefix followed by the client id:

    users:1001                 hash   user record
    del_users:1001             hash   soft-deleted user record
    conts_user:1001            set    user contacts
    conts_group:1001           set    group contacts
    group:1001                 set    group members
    client_device:1001         set    device ids of a client
    client_device:1001:1       hash   device record
    inbox:1001                 hash   inbox entries
    outbox:1001                hash   outbox entries

Ids are not range-checked; any integer produces a key.
"""

from __future__ import annotations

USER_PREFIX = "users:"
DEL_USER_PREFIX = "del_users:"
USER_CONTS_PREFIX = "conts_user:"
GROUP_CONTS_PREFIX = "conts_group:"
GROUP_PREFIX = "group:"
CLIENT_DEVICE_PREFIX = "client_device:"
INBOX_PREFIX = "inbox:"
OUTBOX_PREFIX = "outbox:"


def user_key(clt: int) -> str:
    return f"{USER_PREFIX}{clt}"


def deleted_user_key(clt: int) -> str:
    return f"{DEL_USER_PREFIX}{clt}"


def user_contacts_key(clt: int) -> str:
    return f"{USER_CONTS_PREFIX}{clt}"


def group_contacts_key(clt: int) -> str:
    return f"{GROUP_CONTS_PREFIX}{clt}"


def group_key(clt: int) -> str:
    return f"{GROUP_PREFIX}{clt}"


def device_list_key(clt: int) -> str:
    return f"{CLIENT_DEVICE_PREFIX}{clt}"


def device_key(clt: int, dev: int) -> str:
    """Key of a single device record: client_device:<clt>:<dev>."""
    return f"{CLIENT_DEVICE_PREFIX}{clt}:{dev}"


def inbox_key(clt: int) -> str:
    return f"{INBOX_PREFIX}{clt}"


def outbox_key(clt: int) -> str:
    return f"{OUTBOX_PREFIX}{clt}"
