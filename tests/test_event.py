from coroflow.event import Event, ResumeOrderPolicy
from coroflow.task import Task


class RecordingExecutor:
    def __init__(self):
        self.pending = []

    def resume(self, handle):
        self.pending.append(handle)

    def run(self):
        while self.pending:
            self.pending.pop(0)()


def make_waiter(event, order, i):
    async def waiter():
        await event
        order.append(i)
        return i

    return Task(waiter())


def test_default_not_set():
    e = Event()
    assert not e.is_set()


def test_initially_set():
    e = Event(initially_set=True)
    assert e.is_set()


def test_await_set_event_does_not_suspend():
    e = Event(True)
    order = []
    t = make_waiter(e, order, 1)
    assert t.resume() is False
    assert order == [1]


def test_set_resumes_all_lifo_by_default():
    e = Event()
    order = []
    tasks = [make_waiter(e, order, i) for i in (1, 2, 3)]
    assert all(t.resume() for t in tasks)
    assert order == []
    e.set()
    assert e.is_set()
    assert order == [3, 2, 1]
    assert all(t.is_ready() for t in tasks)


def test_set_fifo_order():
    e = Event()
    order = []
    tasks = [make_waiter(e, order, i) for i in (1, 2, 3)]
    for t in tasks:
        t.resume()
    e.set(ResumeOrderPolicy.FIFO)
    assert order == [1, 2, 3]


def test_set_twice_resumes_once():
    e = Event()
    order = []
    t = make_waiter(e, order, 1)
    t.resume()
    e.set()
    e.set()
    assert order == [1]
    assert t.result() == 1


def test_set_task_triggers_waiters():
    e = Event()
    order = []
    waiters = [make_waiter(e, order, i) for i in (1, 2, 3)]

    async def setter():
        e.set()

    for t in waiters:
        t.resume()
    s = Task(setter())
    s.resume()
    assert sorted(order) == [1, 2, 3]
    assert s.is_ready()


def test_reset_rearms_event():
    e = Event(True)
    e.reset()
    assert not e.is_set()
    order = []
    t = make_waiter(e, order, 7)
    assert t.resume() is True
    assert order == []
    e.set()
    assert order == [7]


def test_reset_when_not_set_keeps_waiters():
    e = Event()
    order = []
    t = make_waiter(e, order, 1)
    t.resume()
    e.reset()
    assert not e.is_set()
    e.set()
    assert order == [1]


def test_set_with_executor_defers_resumption():
    e = Event()
    order = []
    executor = RecordingExecutor()
    tasks = [make_waiter(e, order, i) for i in (1, 2)]
    for t in tasks:
        t.resume()
    e.set(ResumeOrderPolicy.FIFO, executor=executor)
    assert e.is_set()
    assert order == []
    assert len(executor.pending) == 2
    executor.run()
    assert order == [1, 2]
    assert all(t.is_ready() for t in tasks)