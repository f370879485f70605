# coroflow

Coroutine building blocks that need no event loop. A `Task` wraps a coroutine
and runs it only when it is resumed or awaited. The synchronisation primitives
resume waiting coroutines directly, on the thread that wakes them:

- `coroflow.task`: `Task`, the `task` decorator, `VoidValue` and `now()`, which reads the monotonic clock.
- `coroflow.event`: `Event` and `ResumeOrderPolicy`. An `Event` is a manually set signal that many coroutines can await.
- `coroflow.latch`: `Latch`, a countdown that wakes its awaiters once the count reaches zero.
- `coroflow.mutex`: `Mutex` and `ScopedLock`. Waiters on a `Mutex` get the lock in FIFO order.
- `coroflow.semaphore`: `Semaphore` and `SemaphoreAcquireResult`. A `Semaphore` is a counter with a maximum value and a shutdown state.
- `coroflow.when_all`: `when_all`, `when_all_range`, `WhenAllTask` and `WhenAllReadyAwaitable`. These run several awaitables and collect their results.

The package also holds small networking value types:

- `coroflow.net.ip_address`: `IpAddress` and `Domain`.
- `coroflow.net.hostname`: `Hostname`.
- `coroflow.net.status`: `ConnectStatus`, `RecvStatus` and `SendStatus`.
- `coroflow.net.tls.status`: `ConnectionStatus`, `TlsRecvStatus` and `TlsSendStatus`.

## Installing

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Tasks

```python
from coroflow.task import task

@task
async def double(x):
    return x * 2

@task
async def double_and_add_5(x):
    doubled = await double(x)
    return doubled + 5

t = double_and_add_5(2)
t.resume()
print(t.result())   # 9
```

`Task.resume()` runs the coroutine until it suspends or finishes. It returns
True while the task is still running. `Task.is_ready()` is True once the task
has finished or has been closed with `Task.destroy()`.

Awaiting a finished task again gives back the same result. If the coroutine
raised, `result()` raises that same exception again. If the task never ran,
`result()` raises `RuntimeError`.

A coroutine run by a `Task` suspends by yielding an object with a
`suspend(resume)` method. The task calls that method with a callable that
resumes the task. `suspend` returns True to stay suspended until the callable
is invoked, or False to continue at once. `Event`, `Latch`, `Mutex`,
`Semaphore` and `when_all` all work through this method.

## Events and when_all

```python
from coroflow.event import Event
from coroflow.task import task
from coroflow.when_all import when_all

e = Event()

@task
async def waiter(i):
    await e
    return i

@task
async def setter():
    e.set()
    return 0

@task
async def main():
    results = await when_all(waiter(1), waiter(2), setter())
    return [r.return_value() for r in results]

t = main()
t.resume()
print(t.result())   # [1, 2, 0]
```

`Event.set()` resumes waiters in LIFO order by default. Pass
`ResumeOrderPolicy.FIFO` to resume them in the order they began waiting.
`Event.set()` and `Latch.count_down()` also take an `executor` argument. When it
is given, each waiter's resume callable goes to `executor.resume(...)` instead
of being called inline. `Event.reset()` returns a set event to the unset state.

`when_all(*awaitables)` gives a tuple of `WhenAllTask`, and
`when_all_range(iterable)` gives a list of them. `WhenAllTask.return_value()`
returns the awaited value, or `VoidValue()` if the awaitable produced `None`. If
the awaitable raised, it raises that same exception.

## Latch

```python
from coroflow.latch import Latch

latch = Latch(3)

async def wait_for_workers():
    await latch          # resumes after three count_down() calls

latch.count_down()
print(latch.remaining())  # 2
```

A latch created with a count of zero or less starts out ready.

## Mutex

```python
from coroflow.mutex import Mutex

m = Mutex()

async def critical(output, i):
    with await m.scoped_lock():
        output.append(i)
```

`await m.lock()` acquires the mutex without a `ScopedLock`; release it with
`m.unlock()`. `m.try_lock()` takes the mutex only if it is free.

## Semaphore

```python
from coroflow.semaphore import Semaphore, SemaphoreAcquireResult

sem = Semaphore(2, 2)   # max_value, starting_value

async def limited():
    if await sem.acquire() is SemaphoreAcquireResult.ACQUIRED:
        try:
            ...
        finally:
            sem.release()
```

`release()` hands the resource straight to a waiter if there is one. If not, it
adds to the counter, up to `max()`. `shutdown()` wakes every waiter with
`SemaphoreAcquireResult.SHUTDOWN`. Every acquire after that returns
`SHUTDOWN` too.

## IP addresses

```python
from coroflow.net.ip_address import IpAddress, Domain

addr = IpAddress.from_string("127.0.0.1")
print(addr.to_string(), addr.domain())   # 127.0.0.1 Domain.IPV4
v6 = IpAddress.from_string("::1", Domain.IPV6)
print(len(v6.data()))                     # 16
```

An invalid address string raises `ValueError`. So does a binary address that is
too long for its domain. Addresses compare, sort and hash by domain and bytes.

## What the package does not do

There is no I/O scheduler, no thread pool, no timer, and no condition variable
or queue. Tasks run on whichever thread resumes them. The `coroflow.net`
modules hold only value types and status enumerations. They open no sockets and
provide no TCP, UDP or TLS clients or servers, and no DNS resolution.