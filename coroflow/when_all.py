"""Await many awaitables at once and collect each one's outcome."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generator, Iterable, List, Optional, Sequence, Tuple, Union

from coroflow.task import Task, VoidValue


class _WhenAllLatch:
    """Counts outstanding tasks plus the awaiting task itself."""

    def __init__(self, count: int) -> None:
        self._lock = threading.Lock()
        self._count = count + 1
        self._awaiting: Optional[Callable[[], Any]] = None
        self.completed = False

    def try_await(self, resume: Callable[[], Any]) -> bool:
        with self._lock:
            self._awaiting = resume
            previous = self._count
            self._count -= 1
            if previous == 1:
                self.completed = True
            return previous > 1

    def notify_awaitable_completed(self) -> None:
        with self._lock:
            previous = self._count
            self._count -= 1
            resume = None
            if previous == 1:
                self.completed = True
                resume = self._awaiting
        if resume is not None:
            resume()


class WhenAllTask:
    """Runs one awaitable for :func:`when_all` and keeps its outcome."""

    def __init__(self, awaitable: Any) -> None:
        self._latch: Optional[_WhenAllLatch] = None
        self._has_value = False
        self._value: Any = None
        self._exception: Optional[BaseException] = None
        self._task = Task(self._drive(awaitable))

    async def _drive(self, awaitable: Any) -> None:
        try:
            self._value = await awaitable
            self._has_value = True
        except Exception as exc:
            self._exception = exc
        self._latch.notify_awaitable_completed()

    def _start(self, latch: _WhenAllLatch) -> None:
        self._latch = latch
        self._task.resume()

    def return_value(self) -> Any:
        """The awaited value, :class:`VoidValue` for none, or the raised exception."""
        if self._exception is not None:
            raise self._exception
        if not self._has_value:
            raise RuntimeError("The return value was never set, did you execute the coroutine?")
        if self._value is None:
            return VoidValue()
        return self._value


class _WhenAllAwaiter:
    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: "WhenAllReadyAwaitable") -> None:
        self._awaitable = awaitable

    def suspend(self, resume: Callable[[], Any]) -> bool:
        return self._awaitable._try_await(resume)


class WhenAllReadyAwaitable:
    """Starts every task when awaited and resumes once all of them have finished."""

    def __init__(self, tasks: Union[Tuple[WhenAllTask, ...], List[WhenAllTask]]) -> None:
        self._tasks = tasks
        self._latch = _WhenAllLatch(len(tasks))
        self._started = False

    def is_ready(self) -> bool:
        """True once every task has completed after being awaited."""
        return self._latch.completed

    def __await__(self) -> Generator[Any, None, Sequence[WhenAllTask]]:
        if not self.is_ready():
            yield _WhenAllAwaiter(self)
        return self._tasks

    def _try_await(self, resume: Callable[[], Any]) -> bool:
        if not self._started:
            self._started = True
            for when_all_task in self._tasks:
                when_all_task._start(self._latch)
        return self._latch.try_await(resume)


def when_all(*args: Any) -> WhenAllReadyAwaitable:
    """Await all given awaitables; the result is a tuple of :class:`WhenAllTask`."""
    return WhenAllReadyAwaitable(tuple(WhenAllTask(a) for a in args))


def when_all_range(awaitables: Iterable[Any]) -> WhenAllReadyAwaitable:
    """Await every awaitable in an iterable; the result is a list of :class:`WhenAllTask`."""
    return WhenAllReadyAwaitable([WhenAllTask(a) for a in awaitables])