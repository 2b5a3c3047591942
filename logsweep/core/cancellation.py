"""Cooperative cancellation for long-running sweeps."""

import threading
from typing import Optional


class CancellationToken:
    """A flag that one party raises and a running sweep polls.

    The sweep checks the token between files; raising it never interrupts
    a deletion that is already under way.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses."""
        return self._event.wait(timeout)

    def __repr__(self) -> str:
        state = "cancelled" if self.is_cancelled else "active"
        return f"<CancellationToken {state}>"
