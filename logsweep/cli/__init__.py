"""Command line interface for LogSweep."""
