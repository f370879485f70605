"""Lazily started coroutine tasks that are driven by explicit resumption.

A coroutine run by a :class:`Task` suspends by yielding an object that has a
``suspend(resume)`` method. The task calls it with a callable that resumes the
task. ``suspend`` returns True to keep the task suspended until that callable
is invoked, or False to continue running immediately.
"""

from __future__ import annotations

import functools
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generator, Optional

_NEVER_SET = "The return value was never set, did you execute the coroutine?"


@dataclass(frozen=True)
class VoidValue:
    """Placeholder result for awaitables that produce no value."""


def now() -> float:
    """Return the current reading of the monotonic clock, in seconds."""
    return time.monotonic()


class _TaskAwaiter:
    """Starts an awaited task and links the awaiting task as its continuation."""

    __slots__ = ("_task",)

    def __init__(self, task: "Task") -> None:
        self._task = task

    def suspend(self, resume: Callable[[], Any]) -> bool:
        return self._task._start_with_continuation(resume)


class Task:
    """A coroutine that does not run until it is resumed or awaited."""

    def __init__(self, coroutine: Any) -> None:
        if not all(hasattr(coroutine, name) for name in ("send", "throw", "close")):
            raise TypeError(f"Task requires a coroutine, got {type(coroutine).__name__}")
        self._coroutine = coroutine
        self._lock = threading.RLock()
        self._done = False
        self._has_value = False
        self._value: Any = None
        self._exception: Optional[BaseException] = None
        self._continuation: Optional[Callable[[], Any]] = None

    def __repr__(self) -> str:
        state = "done" if self._done else ("destroyed" if self._coroutine is None else "pending")
        return f"<Task {state}>"

    def __del__(self) -> None:
        coroutine = getattr(self, "_coroutine", None)
        if coroutine is not None:
            try:
                coroutine.close()
            except Exception:
                pass

    def is_ready(self) -> bool:
        """True if the task has finished or has been destroyed."""
        return self._coroutine is None or self._done

    def resume(self) -> bool:
        """Run the task until it suspends or finishes; True if it is still running."""
        with self._lock:
            if self._coroutine is None or self._done:
                return False
            finished = self._step()
            continuation = None
            if finished:
                continuation, self._continuation = self._continuation, None
        if continuation is not None:
            continuation()
        return not self.is_ready()

    def destroy(self) -> bool:
        """Close the underlying coroutine; True if there was one to close."""
        with self._lock:
            coroutine, self._coroutine = self._coroutine, None
        if coroutine is None:
            return False
        coroutine.close()
        return True

    def result(self) -> Any:
        """Return the task's value or raise the exception it finished with."""
        if self._has_value:
            return self._value
        if self._exception is not None:
            raise self._exception
        raise RuntimeError(_NEVER_SET)

    def __await__(self) -> Generator[Any, None, Any]:
        if not self.is_ready():
            yield _TaskAwaiter(self)
        return self.result()

    def _start_with_continuation(self, resume: Callable[[], Any]) -> bool:
        if not self.resume():
            return False
        with self._lock:
            if self._done:
                return False
            self._continuation = resume
            return True

    def _step(self) -> bool:
        """Drive the coroutine; return True once it has finished."""
        coroutine = self._coroutine
        error: Optional[BaseException] = None
        while True:
            try:
                if error is None:
                    request = coroutine.send(None)
                else:
                    pending, error = error, None
                    request = coroutine.throw(pending)
            except StopIteration as stop:
                self._value = stop.value
                self._has_value = True
                self._done = True
                return True
            except Exception as exc:
                self._exception = exc
                self._done = True
                return True

            suspend = getattr(request, "suspend", None)
            if not callable(suspend):
                error = TypeError(f"a Task cannot suspend on {request!r}")
                continue
            if suspend(self.resume):
                return False


def task(func: Callable[..., Any]) -> Callable[..., Task]:
    """Decorate a coroutine function so that calling it returns a :class:`Task`."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Task:
        return Task(func(*args, **kwargs))

    return wrapper