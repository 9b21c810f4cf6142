"""Pytest configuration and fixtures"""
import pytest

from shopping_cart import Item, new_cart


@pytest.fixture
def item_a():
    """Item A, 10.20 per unit"""
    return Item(id="itemA", name="Item A", price=10.20, qty=0)


@pytest.fixture
def item_b():
    """Item B, 7.66 per unit"""
    return Item(id="itemB", name="Item B", price=7.66, qty=0)


@pytest.fixture
def empty_cart():
    return new_cart()


@pytest.fixture
def cart_with_two_b(item_b):
    """Cart holding 2 units of item B, so other items are present"""
    cart = new_cart()
    cart.add_item(item_b)
    cart.add_item(item_b)
    return cart
