"""
Shopping cart models.

A cart keeps one entry per item id. Totals are computed from the entries on
every call, so they can never drift from the cart contents.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional
from datetime import datetime, timezone
from decimal import Decimal
import logging

from ..core.config import CartConfig
from ..core.money import quantize_amount
from ..utils.logger import setup_logging
from .item import Item

setup_logging()
logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartEntry(BaseModel):
    """Cart record for one item id."""
    model_config = ConfigDict(validate_assignment=True)

    item_id: str
    name: str
    price: Decimal
    quantity: int = Field(gt=0)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class CartSummary(BaseModel):
    """Snapshot of the cart totals."""
    unique_items: int
    units: int
    amount: Decimal


class Cart(BaseModel):
    """In-memory shopping cart keyed by item id. Not thread-safe."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    entries: Dict[str, CartEntry] = Field(default_factory=dict)
    settings: CartConfig = Field(default_factory=CartConfig, exclude=True)
    created_at: datetime = Field(default_factory=_utcnow)
    last_updated: datetime = Field(default_factory=_utcnow)

    def add_item(self, item: Item) -> None:
        """
        Add one unit of item to the cart.

        item.qty is ignored. An existing entry keeps its stored name and price.
        """
        entry = self.entries.get(item.id)
        if entry is None:
            self.entries[item.id] = CartEntry(
                item_id=item.id,
                name=item.name,
                price=item.price,
                quantity=1
            )
            logger.info(f"[CART] Added new entry {item.id}")
        else:
            entry.quantity += 1
            logger.debug(f"[CART] {item.id} quantity -> {entry.quantity}")

        self.last_updated = _utcnow()

    def remove_item(self, item_id: str, qty: int) -> None:
        """
        Remove up to qty units of item_id.

        Unknown ids and non-positive counts are ignored. Removing as many
        units as the entry holds, or more, deletes the entry.
        """
        entry = self.entries.get(item_id)
        if entry is None:
            logger.debug(f"[CART] {item_id} not in cart, nothing to remove")
            return
        if qty <= 0:
            logger.debug(f"[CART] Ignoring removal of {qty} units of {item_id}")
            return

        if entry.quantity > qty:
            entry.quantity -= qty
            logger.debug(f"[CART] {item_id} quantity -> {entry.quantity}")
        else:
            del self.entries[item_id]
            logger.info(f"[CART] Removed entry {item_id}")

        self.last_updated = _utcnow()

    def clear(self) -> None:
        if not self.entries:
            return
        self.entries.clear()
        self.last_updated = _utcnow()
        logger.info("[CART] Cleared cart")

    def get_entry(self, item_id: str) -> Optional[CartEntry]:
        return self.entries.get(item_id)

    def quantity_of(self, item_id: str) -> int:
        entry = self.entries.get(item_id)
        return entry.quantity if entry else 0

    def total_unique_items(self) -> int:
        return len(self.entries)

    def total_units(self) -> int:
        return sum(e.quantity for e in self.entries.values())

    def total_amount(self) -> Decimal:
        """Sum of price x quantity over all entries, rounded only when settings ask for it."""
        amount = sum((e.subtotal for e in self.entries.values()), Decimal("0"))
        return quantize_amount(amount, self.settings.amount_places, self.settings.rounding)

    def summary(self) -> CartSummary:
        return CartSummary(
            unique_items=self.total_unique_items(),
            units=self.total_units(),
            amount=self.total_amount()
        )


def new_cart(settings: Optional[CartConfig] = None) -> Cart:
    """Create an empty cart."""
    if settings is None:
        return Cart()
    return Cart(settings=settings)
