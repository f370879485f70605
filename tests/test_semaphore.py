import pytest

from coroflow.semaphore import Semaphore, SemaphoreAcquireResult
from coroflow.task import task


@task
async def acquire_once(semaphore, log):
    result = await semaphore.acquire()
    log.append(result)
    return result


def test_try_acquire_until_empty():
    s = Semaphore(2, 2)
    assert s.try_acquire() is True
    assert s.try_acquire() is True
    assert s.try_acquire() is False
    assert s.value() == 0


def test_max_and_initial_value():
    s = Semaphore(5, 3)
    assert s.max() == 5
    assert s.value() == 3


def test_release_is_capped_at_max():
    s = Semaphore(2, 2)
    s.release()
    assert s.value() == 2
    assert s.try_acquire()
    s.release()
    assert s.value() == 2


def test_acquire_without_waiting():
    s = Semaphore(1, 1)
    log = []
    t = acquire_once(s, log)
    assert t.resume() is False
    assert t.result() is SemaphoreAcquireResult.ACQUIRED
    assert s.value() == 0


def test_acquire_waits_for_release_and_transfers_ownership():
    s = Semaphore(1, 0)
    log = []
    t = acquire_once(s, log)
    assert t.resume() is True
    assert log == []
    s.release()
    assert t.is_ready()
    assert log == [SemaphoreAcquireResult.ACQUIRED]
    assert s.value() == 0


def test_waiters_resumed_one_per_release():
    s = Semaphore(2, 0)
    log = []
    t1 = acquire_once(s, log)
    t2 = acquire_once(s, log)
    t1.resume()
    t2.resume()
    s.release()
    assert len(log) == 1
    s.release()
    assert len(log) == 2
    assert t1.is_ready() and t2.is_ready()


def test_shutdown_wakes_waiters():
    s = Semaphore(1, 0)
    log = []
    tasks = [acquire_once(s, log) for _ in range(3)]
    for t in tasks:
        assert t.resume() is True
    s.shutdown()
    assert s.is_shutdown()
    assert log == [SemaphoreAcquireResult.SHUTDOWN] * 3
    assert all(t.is_ready() for t in tasks)


def test_acquire_after_shutdown_returns_immediately():
    s = Semaphore(1, 0)
    s.shutdown()
    log = []
    t = acquire_once(s, log)
    assert t.resume() is False
    assert t.result() is SemaphoreAcquireResult.SHUTDOWN


def test_result_strings():
    assert SemaphoreAcquireResult("acquired") is SemaphoreAcquireResult.ACQUIRED
    assert SemaphoreAcquireResult("shutdown") is SemaphoreAcquireResult.SHUTDOWN
    with pytest.raises(ValueError):
        SemaphoreAcquireResult("unknown")


@pytest.mark.parametrize("starting", [0, 1, 4])
def test_value_tracks_acquisitions(starting):
    s = Semaphore(4, starting)
    taken = sum(1 for _ in range(6) if s.try_acquire())
    assert taken == starting
    assert s.value() == 0