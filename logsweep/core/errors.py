"""Exception types raised by the LogSweep core."""


class LogSweepError(Exception):
    """Base class for LogSweep errors."""

    pass


class EnumerationError(LogSweepError):
    """The log directory exists but could not be listed."""

    def __init__(self, directory, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Cannot list {directory}: {reason}")
