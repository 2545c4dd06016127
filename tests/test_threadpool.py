import threading
import time
from datetime import timedelta

import pytest

from pyrequests_core.threadpool import PoolStatus, ThreadPool


def _wait_until(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_invalid_bounds():
    with pytest.raises(ValueError):
        ThreadPool(4, 2)


def test_start_and_stop_status():
    pool = ThreadPool(1, 2)
    assert pool.status is PoolStatus.STOP
    pool.start(1)
    assert pool.status is PoolStatus.RUNNING
    assert pool.stop() is True
    assert pool.status is PoolStatus.STOP
    assert pool.thread_count == 0


def test_stop_twice_reports_false():
    pool = ThreadPool(1, 2)
    pool.start(1)
    pool.stop()
    assert pool.stop() is False


def test_start_twice_raises():
    pool = ThreadPool(1, 2)
    pool.start(1)
    try:
        with pytest.raises(RuntimeError):
            pool.start(1)
    finally:
        pool.stop()


def test_start_threads_clamped():
    pool = ThreadPool(1, 3)
    pool.start(10)
    try:
        assert pool.thread_count == pool.max_threads
    finally:
        pool.stop()
    pool.start(0)
    try:
        assert pool.thread_count == pool.min_threads
    finally:
        pool.stop()


def test_submit_returns_results():
    with ThreadPool(1, 4) as pool:
        futures = [pool.submit(pow, n, 2) for n in range(20)]
        results = [f.result(timeout=5) for f in futures]
    assert results == [n * n for n in range(20)]


def test_submit_keyword_arguments():
    with ThreadPool(1, 2) as pool:
        future = pool.submit(int, "ff", base=16)
        assert future.result(timeout=5) == int("ff", 16)


def test_exception_reaches_future():
    def fail():
        raise KeyError("missing")

    with ThreadPool(1, 2) as pool:
        future = pool.submit(fail)
        with pytest.raises(KeyError):
            future.result(timeout=5)


def test_wait_finishes_all_tasks():
    done = []
    lock = threading.Lock()

    def work(n):
        time.sleep(0.01)
        with lock:
            done.append(n)

    with ThreadPool(2, 4) as pool:
        for n in range(12):
            pool.submit(work, n)
        pool.wait()
        assert sorted(done) == list(range(12))
        assert pool.pending == 0


def test_pause_holds_tasks_until_resume():
    with ThreadPool(1, 2) as pool:
        pool.pause()
        assert pool.status is PoolStatus.PAUSE
        future = pool.submit(str, 5)
        time.sleep(0.1)
        assert future.done() is False
        pool.resume()
        assert pool.status is PoolStatus.RUNNING
        assert future.result(timeout=5) == "5"


def test_idle_threads_shrink_to_minimum():
    pool = ThreadPool(1, 4, max_idle=timedelta(milliseconds=50))
    pool.start(4)
    try:
        assert pool.thread_count == pool.max_threads
        assert _wait_until(lambda: pool.thread_count == pool.min_threads)
    finally:
        pool.stop()


def test_tasks_queued_while_stopped_run_after_start():
    pool = ThreadPool(1, 2)
    future = pool.submit(len, "abc")
    assert pool.pending == 1
    pool.start()
    try:
        assert future.result(timeout=5) == len("abc")
    finally:
        pool.stop()


def test_wait_on_stopped_pool_returns():
    pool = ThreadPool(1, 2)
    pool.wait()
    assert pool.status is PoolStatus.STOP