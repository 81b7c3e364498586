"""Keyed Lock — per-key asyncio mutual exclusion for the classification miss path.

Invariants:
    - Callers holding different keys never wait on each other
    - An entry exists only while some caller holds or awaits its key

Design Decisions:
    - Process-local by construction: cross-process duplicates are caught by the
      unique fingerprint constraint instead
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class KeyedLock:
    """A lazily created asyncio.Lock per key, dropped when nobody needs it."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
