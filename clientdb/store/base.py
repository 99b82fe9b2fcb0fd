"""
Key-value store interface.

The minimal command set the entity accessors need: sets, hashes,
EXISTS, DEL and RENAME. Every method is exactly one store command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

Member = str | int


class KeyValueStore(ABC):
    """
    Abstract base class for store backends.

    Keys are flat strings: "users:1001", "client_device:1001:1".
    Set members and hash values are stored as strings; decoding
    them is the caller's responsibility.

    Implementations:
        RedisStore: redis.asyncio client, default
        InMemoryStore: for testing

    Failures raise CommandError (command rejected) or
    StoreConnectionError (store unreachable).
    """

    @abstractmethod
    async def sadd(self, key: str, members: Iterable[Member]) -> int:
        """Add members to a set. Returns the number of new members."""
        ...

    @abstractmethod
    async def srem(self, key: str, members: Iterable[Member]) -> int:
        """Remove members from a set. Returns the number removed."""
        ...

    @abstractmethod
    async def smembers(self, key: str) -> set[str]:
        """All members of a set. Empty if the key does not exist."""
        ...

    @abstractmethod
    async def hset(self, key: str, mapping: Mapping[str, str]) -> int:
        """Set hash fields. Returns the number of new fields."""
        ...

    @abstractmethod
    async def hgetall(self, key: str) -> dict[str, str]:
        """All fields of a hash. Empty if the key does not exist."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""
        ...

    @abstractmethod
    async def rename(self, src: str, dst: str) -> None:
        """Rename src to dst, overwriting dst. Fails if src is absent."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Round-trip check against the store."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the store backend."""
        ...
