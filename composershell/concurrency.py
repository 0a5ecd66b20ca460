"""A worker pool for running console commands off the caller's thread."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

from .settings import AppSettings

T = TypeVar("T")


class WorkerPool:
    """A fixed-size pool of worker threads."""

    def __init__(self, max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="composershell-worker"
        )

    def submit(self, worker: Callable[[], T]) -> Future:
        """Run ``worker`` on the pool; its result or error lands in the future."""
        return self._executor.submit(worker)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work, optionally waiting for running work to end."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)


_shared: WorkerPool | None = None
_shared_lock = threading.Lock()


def shared_pool(max_workers: int | None = None) -> WorkerPool:
    """Return the process-wide pool, sized from the settings unless given.

    When the requested size differs from the current pool's, the old pool
    is let finish its work in the background and a new one takes its place.
    """
    global _shared
    if max_workers is None:
        max_workers = AppSettings.load().worker_threads
    with _shared_lock:
        if _shared is None or _shared.max_workers != max_workers:
            previous = _shared
            _shared = WorkerPool(max_workers)
            if previous is not None:
                previous.shutdown(wait=False)
        return _shared