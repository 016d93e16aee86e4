"""Registry-wide exclusive locking."""

from contextlib import contextmanager
from typing import TYPE_CHECKING

from ._exceptions import LockError

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterator


@contextmanager
def exclusive_lock(
    lock: "threading.RLock", timeout: float | None = None
) -> "Iterator[None]":
    """Hold a registry lock for the duration of the block.

    The lock is re-entrant, so an operation that calls another operation on
    the same registry from the same thread does not deadlock.

    Args:
        lock: The registry's lock.
        timeout: Maximum seconds to wait. None waits indefinitely; 0 makes a
            single non-blocking attempt.

    Raises:
        LockError: If the lock cannot be acquired within the timeout.
    """
    if timeout is None:
        acquired = lock.acquire()
    elif timeout <= 0:
        acquired = lock.acquire(blocking=False)
    else:
        acquired = lock.acquire(timeout=timeout)
    if not acquired:
        msg = f"could not acquire registry lock within {timeout} seconds"
        raise LockError(msg)
    try:
        yield
    finally:
        lock.release()
