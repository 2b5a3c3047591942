"""Constants for LogSweep."""

# Only plain-text logs are swept by default; *.log files are expected to be
# rotated by the logging backend that writes them.
DEFAULT_LOG_EXTENSIONS = [".txt"]

DEFAULT_RETENTION_DAYS = 3
DEFAULT_LOG_DIRECTORY = "logs"

# Scheduler hints
DEFAULT_INTERVAL_HOURS = 24
MAINTENANCE_CATEGORY = "Maintenance"
