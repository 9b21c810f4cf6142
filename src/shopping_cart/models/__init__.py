"""
Models package - item and cart schemas.
"""

# Item models
from .item import Item

# Cart models
from .cart import CartEntry, CartSummary, Cart, new_cart

__all__ = [
    # Item
    "Item",
    # Cart
    "CartEntry",
    "CartSummary",
    "Cart",
    "new_cart",
]
