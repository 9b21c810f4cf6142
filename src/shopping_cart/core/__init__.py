"""
Core module initialization.
"""

from .config import CartConfig
from .money import to_decimal, quantize_amount

__all__ = [
    # Configuration
    "CartConfig",
    # Money
    "to_decimal",
    "quantize_amount",
]
