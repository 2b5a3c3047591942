"""Utility helpers for LogSweep."""
