from coroflow.event import Event
from coroflow.mutex import Mutex, ScopedLock
from coroflow.task import task


def test_try_lock_and_unlock():
    m = Mutex()
    assert m.try_lock() is True
    assert m.try_lock() is False
    m.unlock()
    assert m.try_lock() is True


def test_scoped_lock_uncontended_releases_on_exit():
    m = Mutex()

    @task
    async def worker():
        lk = await m.scoped_lock()
        with lk:
            inside = m.try_lock()
        return inside

    t = worker()
    t.resume()
    assert t.is_ready()
    assert t.result() is False
    assert m.try_lock() is True


def test_scoped_lock_returns_scoped_lock():
    m = Mutex()

    @task
    async def worker():
        return await m.scoped_lock()

    t = worker()
    t.resume()
    lk = t.result()
    assert isinstance(lk, ScopedLock)
    assert m.try_lock() is False
    lk.unlock()
    assert m.try_lock() is True


def test_lock_returns_none_and_holds_mutex():
    m = Mutex()

    @task
    async def worker():
        return await m.lock()

    t = worker()
    t.resume()
    assert t.result() is None
    assert m.try_lock() is False
    m.unlock()
    assert m.try_lock() is True


def test_waiters_resume_in_fifo_order():
    m = Mutex()
    e = Event()
    order = []

    @task
    async def holder():
        with await m.scoped_lock():
            order.append("a")
            await e
            order.append("a-done")

    @task
    async def waiter(name):
        with await m.scoped_lock():
            order.append(name)

    a, b, c = holder(), waiter("b"), waiter("c")
    a.resume()
    b.resume()
    c.resume()
    assert order == ["a"]
    assert not b.is_ready()
    assert not c.is_ready()

    e.set()
    assert order == ["a", "a-done", "b", "c"]
    assert a.is_ready() and b.is_ready() and c.is_ready()
    assert m.try_lock() is True


def test_scoped_unlock_twice_does_not_release_again():
    m = Mutex()
    lk = ScopedLock(m) if m.try_lock() else None
    lk.unlock()
    assert m.try_lock() is True
    lk.unlock()
    assert m.try_lock() is False


def test_unlock_hands_ownership_to_waiter():
    m = Mutex()
    assert m.try_lock()

    @task
    async def waiter():
        await m.lock()
        return "acquired"

    t = waiter()
    t.resume()
    assert not t.is_ready()
    m.unlock()
    assert t.result() == "acquired"
    assert m.try_lock() is False