"""
Cart configuration: precision and rounding of monetary totals.
"""

from decimal import ROUND_HALF_UP
from typing import Optional


class CartConfig:
    """Configuration for cart totals. amount_places=None keeps the exact sum."""

    def __init__(
        self,
        amount_places: Optional[int] = None,
        rounding: str = ROUND_HALF_UP
    ):
        self.amount_places = amount_places
        self.rounding = rounding

    def __repr__(self) -> str:
        return f"CartConfig(amount_places={self.amount_places!r}, rounding={self.rounding!r})"
