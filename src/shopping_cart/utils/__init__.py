"""
Utils module initialization.
"""

from .logger import setup_logging, LOG_FORMAT, DATE_FORMAT

__all__ = [
    "setup_logging",
    "LOG_FORMAT",
    "DATE_FORMAT",
]
