"""Config file templates for 'logsweep config init'."""

MINIMAL_TEMPLATE = """\
# LogSweep configuration
version: "1.0"

retention:
  days: 3
  log_directory: logs
  extensions: [".txt"]
"""

FULL_TEMPLATE = """\
# LogSweep configuration (all options)
version: "1.0"

retention:
  # Files last modified more than this many days ago are deleted (0 = anything older than now)
  days: 3
  # Directory holding the log files
  log_directory: logs
  # Only files with these extensions are swept (case-insensitive)
  extensions: [".txt"]
  # Descend into subdirectories
  recursive: true

sweep:
  # Report what would be deleted without deleting
  dry_run_default: false
  # Deletion threads (1 = sequential)
  max_workers: 1

schedule:
  # Recommended run interval for an external scheduler
  interval_hours: 24
  enabled: true
  hidden: false
  logged: true

logging:
  level: info          # debug, info, warning, error, critical
  color_output: true
  log_to_file: false
  file_path: .logsweep/logsweep.log
"""


def get_config_template(full: bool = False) -> str:
    """Return the minimal or full configuration template."""
    return FULL_TEMPLATE if full else MINIMAL_TEMPLATE
