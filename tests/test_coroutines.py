from coroutines import Scheduler, Wait


class Flag:
    def __init__(self):
        self.done = False


def test_start_runs_to_first_suspension():
    log = []

    def job():
        log.append("started")
        yield Wait(1.0)
        log.append("finished")

    scheduler = Scheduler()
    task = scheduler.start(job())
    assert log == ["started"]
    assert not task.done
    assert not scheduler.idle


def test_wait_resumes_after_elapsed_time():
    log = []

    def job():
        yield Wait(0.5)
        log.append("resumed")

    scheduler = Scheduler()
    scheduler.start(job())
    scheduler.update(0.25)
    assert log == []
    scheduler.update(0.3)
    assert log == ["resumed"]
    assert scheduler.idle


def test_none_waits_one_frame():
    log = []

    def job():
        log.append(1)
        yield
        log.append(2)
        yield
        log.append(3)

    scheduler = Scheduler()
    scheduler.start(job())
    assert log == [1]
    scheduler.update(0.0)
    assert log == [1, 2]
    scheduler.update(0.0)
    assert log == [1, 2, 3]


def test_waits_on_anything_with_done():
    flag = Flag()
    log = []

    def job():
        yield flag
        log.append("go")

    scheduler = Scheduler()
    scheduler.start(job())
    scheduler.update(1.0)
    assert log == []
    flag.done = True
    scheduler.update(0.0)
    assert log == ["go"]


def test_result_and_composition():
    def inner():
        yield Wait(0.1)
        return 7

    def outer():
        value = yield from inner()
        return value * 2

    scheduler = Scheduler()
    task = scheduler.start(outer())
    scheduler.update(0.2)
    assert task.done
    assert task.result == 14


def test_task_without_suspension_finishes_in_start():
    def job():
        if False:
            yield
        return "now"

    scheduler = Scheduler()
    task = scheduler.start(job())
    assert task.done and task.result == "now"
    assert scheduler.idle


def test_cancel_is_silent_and_runs_finally():
    log = []

    def job():
        try:
            yield Wait(10.0)
            log.append("never")
        finally:
            log.append("cleanup")

    scheduler = Scheduler()
    task = scheduler.start(job())
    scheduler.stop(task)
    assert task.cancelled and task.done
    assert log == ["cleanup"]
    assert scheduler.idle

    # Stopping again is harmless
    scheduler.stop(task)
    scheduler.stop(None)


def test_stop_all():
    def job():
        yield Wait(1.0)

    scheduler = Scheduler()
    tasks = [scheduler.start(job()) for _ in range(3)]
    scheduler.stop_all()
    assert all(t.cancelled for t in tasks)
    assert scheduler.idle
