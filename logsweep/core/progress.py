"""Progress reporting for sweeps."""

import threading
from typing import Callable, Optional

ProgressCallback = Callable[[float], None]


class ProgressReporter:
    """Wraps a caller-supplied callback with the sweep's progress rules.

    Values are clamped to [0, 100] and never go backwards within one run,
    and calls are serialized so the callback may be driven from worker
    threads.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None):
        self._callback = callback
        self._lock = threading.Lock()
        self._last = 0.0
        self._reported = False

    @property
    def last_value(self) -> float:
        return self._last

    def report(self, percent: float) -> None:
        """Forward ``percent`` to the callback."""
        with self._lock:
            value = min(100.0, max(0.0, float(percent)))
            if self._reported and value < self._last:
                value = self._last
            self._last = value
            self._reported = True
            if self._callback is not None:
                self._callback(value)

    def complete(self) -> None:
        """Report 100%."""
        self.report(100.0)
