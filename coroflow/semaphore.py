"""A counting semaphore whose acquire operation is awaited by tasks."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Generator, List


class SemaphoreAcquireResult(Enum):
    """Outcome of awaiting :meth:`Semaphore.acquire`."""

    ACQUIRED = "acquired"
    SHUTDOWN = "shutdown"


class _AcquireOperation:
    """Awaitable returned by :meth:`Semaphore.acquire`."""

    __slots__ = ("_semaphore",)

    def __init__(self, semaphore: "Semaphore") -> None:
        self._semaphore = semaphore

    def __await__(self) -> Generator[Any, None, SemaphoreAcquireResult]:
        if not self._semaphore._ready():
            yield self
        return self._semaphore._acquire_result()

    def suspend(self, resume: Callable[[], Any]) -> bool:
        return self._semaphore._enqueue(resume)


class Semaphore:
    """Hands out up to ``max_value`` resources; waiters suspend until one is released."""

    def __init__(self, max_value: int, starting_value: int) -> None:
        self._max_value = max_value
        self._counter = starting_value
        self._lock = threading.RLock()
        self._waiters: List[Callable[[], Any]] = []
        self._shutdown = False

    def release(self) -> None:
        """Give a resource back, handing it directly to a waiter if there is one."""
        with self._lock:
            waiter = self._waiters.pop() if self._waiters else None
            if waiter is None and self._counter < self._max_value:
                self._counter += 1
        if waiter is not None:
            waiter()

    def acquire(self) -> _AcquireOperation:
        """Return an awaitable that resolves once a resource is acquired or on shutdown."""
        return _AcquireOperation(self)

    def try_acquire(self) -> bool:
        """Take a resource if one is available; True on success."""
        with self._lock:
            if self._counter <= 0:
                return False
            self._counter -= 1
            return True

    def max(self) -> int:
        """The maximum number of resources the semaphore can hold."""
        return self._max_value

    def value(self) -> int:
        """The number of resources currently available."""
        return self._counter

    def shutdown(self) -> None:
        """Stop the semaphore for good and wake every waiter with a shutdown result."""
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
            waiters, self._waiters = self._waiters, []
        for resume in reversed(waiters):
            resume()

    def is_shutdown(self) -> bool:
        """True once :meth:`shutdown` has been called."""
        return self._shutdown

    def _ready(self) -> bool:
        if self._shutdown:
            return True
        return self.try_acquire()

    def _enqueue(self, resume: Callable[[], Any]) -> bool:
        with self._lock:
            if self._ready():
                return False
            self._waiters.append(resume)
            return True

    def _acquire_result(self) -> SemaphoreAcquireResult:
        if self._shutdown:
            return SemaphoreAcquireResult.SHUTDOWN
        return SemaphoreAcquireResult.ACQUIRED