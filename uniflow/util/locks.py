"""In-process keyed locking."""

import asyncio
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class KeyedLock:
    """One ``asyncio.Lock`` per key, created on demand.

    Locks live in a weak-valued map, so a key's lock disappears once no
    holder or waiter references it. Only serializes work within a single
    event loop / process.
    """

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for ``key`` for the duration of the block."""
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
