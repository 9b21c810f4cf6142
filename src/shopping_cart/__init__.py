"""
In-memory shopping cart.
"""

from .models import Item, CartEntry, CartSummary, Cart, new_cart
from .core import CartConfig

__all__ = [
    "Item",
    "CartEntry",
    "CartSummary",
    "Cart",
    "new_cart",
    "CartConfig",
]
