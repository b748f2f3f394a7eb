import threading

import pytest

from sparkmatch.thread_pool import ThreadPool


def test_submit_returns_result():
    with ThreadPool(4) as pool:
        future = pool.submit(lambda: 42)
        assert future.result(timeout=5) == 42


def test_submit_passes_arguments():
    with ThreadPool(2) as pool:
        future = pool.submit(lambda a, b, sep: f"{a}{sep}{b}", "x", "y", sep="-")
        assert future.result(timeout=5) == "x-y"


def test_size_matches_requested_count():
    with ThreadPool(3) as pool:
        assert pool.size() == 3


def test_zero_count_falls_back_to_at_least_one():
    with ThreadPool(0) as pool:
        assert pool.size() >= 1


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        ThreadPool(-1)


def test_exception_propagates_through_future():
    def boom():
        raise KeyError("missing")

    with ThreadPool(1) as pool:
        future = pool.submit(boom)
        with pytest.raises(KeyError):
            future.result(timeout=5)


def test_enqueue_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError, match="stopped"):
        pool.enqueue(lambda: None)
    with pytest.raises(RuntimeError):
        pool.submit(lambda: 1)


def test_pending_counts_queued_tasks():
    pool = ThreadPool(1)
    started = threading.Event()
    release = threading.Event()

    def blocker():
        started.set()
        release.wait(timeout=5)

    pool.enqueue(blocker)
    assert started.wait(timeout=5)
    pool.enqueue(lambda: None)
    pool.enqueue(lambda: None)
    assert pool.pending() == 2
    release.set()
    pool.shutdown()
    assert pool.pending() == 0


def test_shutdown_drains_queued_tasks():
    results = []
    lock = threading.Lock()

    def record(i):
        with lock:
            results.append(i)
        return i

    pool = ThreadPool(2)
    futures = [pool.submit(record, i) for i in range(20)]
    pool.shutdown()
    assert pool.pending() == 0
    assert all(f.done() for f in futures)
    assert [f.result(timeout=5) for f in futures] == list(range(20))
    assert sorted(results) == list(range(20))


def test_many_submissions_all_complete():
    with ThreadPool(4) as pool:
        futures = [pool.submit(pow, i, 2) for i in range(50)]
        assert [f.result(timeout=5) for f in futures] == [i * i for i in range(50)]


def test_failing_enqueued_task_does_not_kill_worker():
    def boom():
        raise RuntimeError("task failed")

    with ThreadPool(1) as pool:
        pool.enqueue(boom)
        future = pool.submit(lambda: "still alive")
        assert future.result(timeout=5) == "still alive"