"""A thread-safe countdown that resumes its awaiters when it reaches zero."""

from __future__ import annotations

import threading
from typing import Any, Generator, Optional

from coroflow.event import Event


class Latch:
    """Wait for a number of other tasks to count down to zero."""

    def __init__(self, count: int) -> None:
        self._lock = threading.Lock()
        self._count = count
        self._event = Event(count <= 0)

    def is_ready(self) -> bool:
        """True once the latch has been counted down to zero."""
        return self._event.is_set()

    def remaining(self) -> int:
        """Number of count-downs still outstanding."""
        return max(self._count, 0)

    def count_down(self, n: int = 1, executor: Optional[Any] = None) -> None:
        """Count down by ``n``; on reaching zero resume the awaiters, optionally on ``executor``."""
        with self._lock:
            previous = self._count
            self._count -= n
        if previous <= n:
            self._event.set(executor=executor)

    def __await__(self) -> Generator[Any, None, None]:
        return self._event.__await__()