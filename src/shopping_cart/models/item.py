"""
Item model: the purchasable unit handed to the cart.
"""

from pydantic import BaseModel, field_validator
from decimal import Decimal

from ..core.money import to_decimal


class Item(BaseModel):
    """Purchasable item. qty is accepted for compatibility but the cart ignores it."""
    id: str
    name: str
    price: Decimal
    qty: int = 0

    @field_validator("id")
    @classmethod
    def check_id(cls, v):
        if not v or not v.strip():
            raise ValueError("Item id must not be empty")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v):
        return to_decimal(v)

    @field_validator("price")
    @classmethod
    def check_non_negative(cls, v):
        if v < 0:
            raise ValueError("Price must be non-negative")
        return v
