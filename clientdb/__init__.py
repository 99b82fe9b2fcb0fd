"""
clientdb: async data-access layer for client records in Redis.

Public API:
    from clientdb import init_store_manager, get_redis_connection
    from clientdb import add_user, get_user, add_group, get_group, ...
"""

__version__ = "0.1.0"

# Core
from clientdb.core.config import ClientDBConfig, LoggingConfig, RedisConfig
from clientdb.core.errors import (
    ClientDBError,
    CommandError,
    ConfigError,
    NotInitializedError,
    StoreConnectionError,
    StoreError,
)
from clientdb.core.logging import setup_logging

# Store
from clientdb.store.base import KeyValueStore
from clientdb.store.memory import InMemoryStore
from clientdb.store.redis import RedisStore
from clientdb.manager import (
    StoreManager,
    close_store_manager,
    get_redis_client,
    get_redis_connection,
    get_store_manager,
    init_store_manager,
    require_store_manager,
)

# Accessors
from clientdb.accessors.devices import (
    add_dev2clt,
    add_dev2clt_hash,
    del_dev4clt,
    exists_devclt,
    exists_device,
    get_devclt_set,
    get_device,
    remove_devclt_set,
    remove_device,
)
from clientdb.accessors.groups import add_group, del_group, exists_group, get_group, remove_group
from clientdb.accessors.inbox import add_inbox, exists_inbox, get_inbox, remove_inbox
from clientdb.accessors.outbox import add_outbox, exists_outbox, get_outbox, remove_outbox
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

__all__ = [
    # Core
    "ClientDBConfig",
    "RedisConfig",
    "LoggingConfig",
    "ClientDBError",
    "ConfigError",
    "StoreError",
    "StoreConnectionError",
    "CommandError",
    "NotInitializedError",
    "setup_logging",
    # Store
    "KeyValueStore",
    "InMemoryStore",
    "RedisStore",
    "StoreManager",
    "init_store_manager",
    "get_store_manager",
    "require_store_manager",
    "get_redis_client",
    "get_redis_connection",
    "close_store_manager",
    # Users
    "add_user",
    "get_user",
    "exists_user",
    "remove_user",
    "get_deleted_user",
    "exists_deleted_user",
    "add_user_contacts",
    "del_user_contacts",
    "get_user_contacts",
    "exists_user_contacts",
    "remove_user_contacts",
    "add_group_contacts",
    "del_group_contacts",
    "get_group_contacts",
    "exists_group_contacts",
    "remove_group_contacts",
    # Groups
    "add_group",
    "del_group",
    "get_group",
    "exists_group",
    "remove_group",
    # Devices
    "add_dev2clt",
    "del_dev4clt",
    "get_devclt_set",
    "exists_devclt",
    "remove_devclt_set",
    "add_dev2clt_hash",
    "get_device",
    "exists_device",
    "remove_device",
    # Inbox / outbox
    "add_inbox",
    "get_inbox",
    "exists_inbox",
    "remove_inbox",
    "add_outbox",
    "get_outbox",
    "exists_outbox",
    "remove_outbox",
]
