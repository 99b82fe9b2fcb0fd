"""
clientdb exception hierarchy.

Every error raised by the library inherits from ClientDBError.
Store failures are split into connection and command errors so callers
can tell "the store is unreachable" apart from "this command was rejected".

Usage:
    try:
        await remove_user(store, 1001)
    except CommandError as e:
        # RENAME rejected (no such key, wrong type, ...)
    except StoreConnectionError as e:
        # Store unreachable
    except ClientDBError as e:
        # Any clientdb error
"""


class ClientDBError(Exception):
    """Base exception for all clientdb errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


# ━━━ Configuration ━━━


class ConfigError(ClientDBError):
    """Configuration is invalid, missing, or malformed."""

    pass


# ━━━ Store ━━━


class StoreError(ClientDBError):
    """Key-value store failure."""

    pass


class StoreConnectionError(StoreError):
    """The store could not be reached or the connection could not be opened."""

    def __init__(
        self,
        message: str,
        url: str = "",
        details: dict | None = None,
    ):
        self.url = url
        super().__init__(message, details)


class CommandError(StoreError):
    """A single store command failed."""

    def __init__(
        self,
        message: str,
        command: str = "",
        key: str = "",
        details: dict | None = None,
    ):
        self.command = command
        self.key = key
        super().__init__(message, details)


class NotInitializedError(StoreError):
    """The shared store handle was requested before init_store_manager()."""

    pass
