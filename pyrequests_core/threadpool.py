"""A thread pool that grows on demand and shrinks back after idle time."""

from __future__ import annotations

import enum
import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from typing import Any


class PoolStatus(enum.Enum):
    STOP = enum.auto()
    RUNNING = enum.auto()
    PAUSE = enum.auto()


def _seconds(max_idle: timedelta | int) -> float:
    if isinstance(max_idle, timedelta):
        return max_idle.total_seconds()
    return max_idle / 1000.0


class ThreadPool:
    """Runs submitted callables on between min_threads and max_threads workers.

    Workers beyond min_threads leave after max_idle (a timedelta or milliseconds)
    without work.
    """

    def __init__(
        self,
        min_threads: int = 1,
        max_threads: int | None = None,
        max_idle: timedelta | int = 60_000,
    ) -> None:
        if max_threads is None:
            max_threads = max(min_threads, os.cpu_count() or 1)
        if min_threads < 0 or max_threads < min_threads:
            raise ValueError(f"invalid thread bounds: min={min_threads}, max={max_threads}")
        self.min_threads = min_threads
        self.max_threads = max_threads
        self._max_idle = _seconds(max_idle)
        self._cond = threading.Condition()
        self._status = PoolStatus.STOP
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: list[threading.Thread] = []
        self._idle = 0

    @property
    def status(self) -> PoolStatus:
        return self._status

    @property
    def thread_count(self) -> int:
        with self._cond:
            return len(self._threads)

    @property
    def idle_count(self) -> int:
        with self._cond:
            return self._idle

    @property
    def pending(self) -> int:
        with self._cond:
            return len(self._tasks)

    def start(self, start_threads: int | None = None) -> None:
        """Start the pool; the thread count is clamped to the pool's bounds."""
        with self._cond:
            if self._status is not PoolStatus.STOP:
                raise RuntimeError("thread pool is already started")
            self._status = PoolStatus.RUNNING
            count = self.min_threads if start_threads is None else start_threads
            count = min(max(count, self.min_threads), self.max_threads)
            for _ in range(count):
                self._create_thread()
            self._cond.notify_all()

    def stop(self) -> bool:
        """Stop all workers and wait for them; return False if already stopped."""
        with self._cond:
            if self._status is PoolStatus.STOP:
                return False
            self._status = PoolStatus.STOP
            self._cond.notify_all()
            threads = list(self._threads)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._idle = 0
            self._cond.notify_all()
        return True

    def pause(self) -> None:
        """Hold back queued tasks until resume()."""
        with self._cond:
            if self._status is PoolStatus.RUNNING:
                self._status = PoolStatus.PAUSE
                self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            if self._status is PoolStatus.PAUSE:
                self._status = PoolStatus.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the pool is stopped or has no queued or running task."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is PoolStatus.STOP
                or (not self._tasks and self._idle == len(self._threads))
            )

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue fn(*args, **kwargs) and return a future for its result."""
        future: Future = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if (
                self._status is not PoolStatus.STOP
                and self._idle <= 0
                and len(self._threads) < self.max_threads
            ):
                self._create_thread()
            self._tasks.append(task)
            self._cond.notify_all()
        return future

    def __enter__(self) -> ThreadPool:
        if self._status is PoolStatus.STOP:
            self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _create_thread(self) -> None:
        if len(self._threads) >= self.max_threads:
            return
        thread = threading.Thread(target=self._run, daemon=True)
        self._threads.append(thread)
        self._idle += 1
        thread.start()

    def _run(self) -> None:
        with self._cond:
            while True:
                self._cond.wait_for(lambda: self._status is not PoolStatus.PAUSE)
                if self._status is PoolStatus.STOP:
                    return
                if not self._tasks:
                    self._cond.wait_for(
                        lambda: self._status is not PoolStatus.RUNNING or bool(self._tasks),
                        timeout=self._max_idle,
                    )
                    if self._status is PoolStatus.STOP:
                        return
                    if self._status is PoolStatus.PAUSE:
                        continue
                    if not self._tasks:
                        if len(self._threads) > self.min_threads:
                            self._threads.remove(threading.current_thread())
                            self._idle -= 1
                            self._cond.notify_all()
                            return
                        continue
                task = self._tasks.popleft()
                self._idle -= 1
                self._cond.release()
                try:
                    task()
                finally:
                    self._cond.acquire()
                    self._idle += 1
                    self._cond.notify_all()