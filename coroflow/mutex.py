"""An awaitable mutual-exclusion lock whose waiters are resumed in FIFO order."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Deque, Generator, Optional


class ScopedLock:
    """Owns a locked :class:`Mutex` and releases it on :meth:`unlock` or on leaving a ``with`` block."""

    def __init__(self, mutex: "Mutex") -> None:
        self._mutex: Optional[Mutex] = mutex

    def __repr__(self) -> str:
        return f"<ScopedLock {'held' if self._mutex is not None else 'released'}>"

    def unlock(self) -> None:
        """Release the mutex; further calls do nothing."""
        mutex, self._mutex = self._mutex, None
        if mutex is not None:
            mutex.unlock()

    def __enter__(self) -> "ScopedLock":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.unlock()


class _LockOperation:
    """Awaitable that acquires a mutex, optionally yielding a :class:`ScopedLock`."""

    __slots__ = ("_mutex", "_scoped")

    def __init__(self, mutex: "Mutex", scoped: bool) -> None:
        self._mutex = mutex
        self._scoped = scoped

    def __await__(self) -> Generator[Any, None, Optional[ScopedLock]]:
        if not self._mutex.try_lock():
            yield self
        if self._scoped:
            return ScopedLock(self._mutex)
        return None

    def suspend(self, resume: Callable[[], Any]) -> bool:
        return self._mutex._enqueue(resume)


class Mutex:
    """A lock for tasks: awaiting it suspends the task instead of blocking the thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._locked = False
        self._waiters: Deque[Callable[[], Any]] = deque()

    def __repr__(self) -> str:
        return f"<Mutex {'locked' if self._locked else 'unlocked'} waiters={len(self._waiters)}>"

    def scoped_lock(self) -> _LockOperation:
        """Return an awaitable that acquires the mutex and resolves to a :class:`ScopedLock`."""
        return _LockOperation(self, scoped=True)

    def lock(self) -> _LockOperation:
        """Return an awaitable that acquires the mutex and resolves to None."""
        return _LockOperation(self, scoped=False)

    def try_lock(self) -> bool:
        """Acquire the mutex if it is free; True on success."""
        with self._lock:
            if self._locked:
                return False
            self._locked = True
            return True

    def unlock(self) -> None:
        """Release the mutex, handing it straight to the longest waiting task if any."""
        with self._lock:
            if not self._locked:
                return
            if self._waiters:
                resume = self._waiters.popleft()
            else:
                self._locked = False
                resume = None
        if resume is not None:
            resume()

    def _enqueue(self, resume: Callable[[], Any]) -> bool:
        with self._lock:
            if not self._locked:
                self._locked = True
                return False
            self._waiters.append(resume)
            return True