"""LogSweep: scheduled log retention cleanup."""

__version__ = "0.1.0"
