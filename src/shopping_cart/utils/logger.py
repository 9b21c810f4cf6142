"""
Logging setup shared by the cart modules.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging with the package format.

    basicConfig does nothing when the root logger already has handlers,
    so applications that configure logging themselves keep their setup.

    Args:
        level: Logging level name, defaults to INFO
    """
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT
    )
