"""Logging scaffolds.

This package emits deterministic event lines for facility diagnostics.
"""

from .logger import EventLogger, configure_logging

__all__ = ["EventLogger", "configure_logging"]
