"""Fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import logging
import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, TypeVar

__all__ = ["ThreadPool"]

_log = logging.getLogger(__name__)

R = TypeVar("R")


class ThreadPool:
    """Run callables on a fixed number of worker threads.

    Passing ``thread_count=0`` uses the number of CPUs (at least one).
    Queued tasks are still run when the pool shuts down; new ones are refused.
    """

    def __init__(self, thread_count: int = 0) -> None:
        if thread_count < 0:
            raise ValueError("thread_count must be non-negative")
        if thread_count == 0:
            thread_count = max(1, os.cpu_count() or 1)
        self._queue: deque[Callable[[], Any]] = deque()
        self._cond = threading.Condition()
        self._stopped = False
        self._workers = [
            threading.Thread(target=self._worker_loop, name=f"ThreadPool-{i}", daemon=True)
            for i in range(thread_count)
        ]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def submit(self, fn: Callable[..., R], *args: Any, **kwargs: Any) -> Future[R]:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future[R] = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        self.enqueue(task)
        return future

    def enqueue(self, task: Callable[[], Any]) -> None:
        """Queue a callable taking no arguments; raise RuntimeError once stopped."""
        with self._cond:
            if self._stopped:
                raise RuntimeError("ThreadPool.enqueue on stopped pool")
            self._queue.append(task)
            self._cond.notify()

    def size(self) -> int:
        """Number of worker threads."""
        return len(self._workers)

    def pending(self) -> int:
        """Number of tasks waiting in the queue."""
        with self._cond:
            return len(self._queue)

    def shutdown(self) -> None:
        """Refuse new tasks, let workers drain the queue, and join them."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def _worker_loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopped or bool(self._queue))
                if self._stopped and not self._queue:
                    return
                task = self._queue.popleft()
            try:
                task()
            except Exception:
                _log.exception("task raised an exception")