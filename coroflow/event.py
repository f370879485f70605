"""A manually triggered, thread-safe signal that many tasks can await."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Generator, List, Optional


class ResumeOrderPolicy(Enum):
    """Order in which waiters are resumed when an event is set."""

    LIFO = "lifo"
    FIFO = "fifo"


class _EventWaiter:
    __slots__ = ("_event",)

    def __init__(self, event: "Event") -> None:
        self._event = event

    def suspend(self, resume: Callable[[], Any]) -> bool:
        return self._event._add_waiter(resume)


class Event:
    """Awaiting tasks suspend until :meth:`set` is called; :meth:`reset` re-arms it."""

    def __init__(self, initially_set: bool = False) -> None:
        self._lock = threading.Lock()
        self._set = bool(initially_set)
        self._waiters: List[Callable[[], Any]] = []

    def is_set(self) -> bool:
        """True if the event is currently set."""
        return self._set

    def set(self, policy: ResumeOrderPolicy = ResumeOrderPolicy.LIFO, executor: Optional[Any] = None) -> None:
        """Set the event and resume every waiter, inline or through ``executor.resume``."""
        with self._lock:
            if self._set:
                return
            self._set = True
            waiters, self._waiters = self._waiters, []
        if policy is ResumeOrderPolicy.LIFO:
            waiters.reverse()
        for resume in waiters:
            if executor is None:
                resume()
            else:
                executor.resume(resume)

    def reset(self) -> None:
        """Return a set event to the unset state; no effect if it is not set."""
        with self._lock:
            self._set = False

    def __await__(self) -> Generator[Any, None, None]:
        if not self._set:
            yield _EventWaiter(self)

    def _add_waiter(self, resume: Callable[[], Any]) -> bool:
        with self._lock:
            if self._set:
                return False
            self._waiters.append(resume)
            return True