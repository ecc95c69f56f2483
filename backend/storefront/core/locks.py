"""
Keyed asyncio locks.

Serializes read-modify-write sequences on a single record (a user's cart,
the catalog id counter) within the process.
"""

import asyncio
from weakref import WeakValueDictionary


class KeyedLocks:
    """
    Registry handing out one ``asyncio.Lock`` per key.

    Locks are held weakly, so a key disappears once nobody is waiting on it.

    Usage:
        async with record_locks.get(f"cart:{user_id}"):
            ...
    """

    def __init__(self) -> None:
        self._locks: WeakValueDictionary[str, asyncio.Lock] = WeakValueDictionary()

    def get(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def __len__(self) -> int:
        return len(self._locks)


record_locks = KeyedLocks()
