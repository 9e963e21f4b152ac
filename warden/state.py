"""Global synchronization primitives.

The policy tables themselves are immutable; the only shared mutable resource
is the log file, so the only global here is the lock guarding it. An
``asyncio.Lock`` binds to one event loop, so each running loop gets its own.
"""

from __future__ import annotations

import asyncio
import weakref

_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = weakref.WeakKeyDictionary()


def shard_lock() -> asyncio.Lock:
    """Return the log lock for the running event loop."""
    loop = asyncio.get_running_loop()
    lock = _locks.get(loop)
    if lock is None:
        lock = _locks[loop] = asyncio.Lock()
    return lock
