"""First-come, first-served mutual exclusion for the shared store connection."""

from __future__ import annotations

import threading
from collections import deque


class FairLock:
    """A non-reentrant lock that hands ownership to waiters in arrival order.

    ``threading.Lock`` makes no promise about which blocked thread wins the
    next acquire. Here every waiter parks on its own private lock, and
    ``release()`` passes ownership directly to the oldest waiter, so the
    lock is never observably free while someone is queued.
    """

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._waiters: deque[threading.Lock] = deque()
        self._locked = False

    def acquire(self) -> bool:
        """Block until the lock is owned by the calling thread."""
        with self._mutex:
            if not self._locked:
                self._locked = True
                return True
            waiter = threading.Lock()
            waiter.acquire()
            self._waiters.append(waiter)
        # Released by release() once this waiter is at the head of the queue
        waiter.acquire()
        return True

    def release(self) -> None:
        """Release the lock, handing it to the next waiter if any.

        Raises:
            RuntimeError: If the lock is not held
        """
        with self._mutex:
            if not self._locked:
                raise RuntimeError("release unlocked lock")
            if self._waiters:
                # Ownership passes on; the lock stays locked
                self._waiters.popleft().release()
            else:
                self._locked = False

    def locked(self) -> bool:
        """Check if the lock is currently held."""
        with self._mutex:
            return self._locked

    @property
    def waiting(self) -> int:
        """Number of threads queued for the lock."""
        with self._mutex:
            return len(self._waiters)

    def __enter__(self) -> FairLock:
        self.acquire()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.release()
