"""
Execution timing utilities.

Every solver times its stages and returns the breakdown in Result.timing.
GPU work is asynchronous, so the timer accepts a synchronization hook that
is called before each clock reading.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Accumulating stage timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('lstsq'):
            x, rank = backend.lstsq(A, b)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.0004, 'lstsq': 0.0003}
    """

    def __init__(self, sync: Callable[[], None] | None = None):
        """
        Args:
            sync: Called before every clock reading, e.g.
                  torch.cuda.synchronize for a CUDA backend.
        """
        self._sync_hook = sync
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._sync_hook is not None:
            self._sync_hook()
        return time.perf_counter()

    def start(self) -> None:
        self._start_time = self._now()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named stage. Repeated sections with the same name accumulate.
        """
        begin = self._now()
        try:
            yield
        finally:
            elapsed = self._now() - begin
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
