"""
Wall-clock timing for solver backends.

Backends time their phases (forward elimination, classification, back
substitution, rank computation) and hand the totals to Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Phase timer for one backend call.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('forward_elimination'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.0005, 'forward_elimination': 0.0003}

    A phase entered more than once accumulates. Phases keep the order in
    which they were first entered.
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`, also when it raises."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        Timing dictionary for Result.timing.

        Returns:
            'total_seconds' followed by one entry per phase

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}
