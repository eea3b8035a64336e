"""
Business logic for sweets and stock.

``SweetService`` provides CRUD over the sweet catalogue plus the
inventory operations used by the shop: search, purchase and restock.
Price and quantity never become negative: create and update reject
negative, NaN and infinite values, purchase refuses to sell more than
is in stock and both stock operations require a positive quantity.
"""

import logging
import math
from typing import List, Optional

from ..core.exceptions import InsufficientStock, InvalidArgument, NotFound
from ..core.store import Database
from ..models import Sweet
from ..schemas.sweet import SweetCreate, SweetUpdate

logger = logging.getLogger(__name__)


def _is_valid_amount(value: float) -> bool:
    """True for a finite number that is zero or more; NaN and infinities fail."""
    return math.isfinite(value) and value >= 0


class SweetService:
    """Service for managing sweets and their stock levels."""

    def __init__(self, db: Database) -> None:
        self.db = db

    # --- CRUD ---

    def create_item(self, data: SweetCreate) -> Sweet:
        """Add a sweet to the catalogue and return the stored record."""
        if not (_is_valid_amount(data.price) and _is_valid_amount(data.quantity)):
            raise InvalidArgument("Price and quantity must be non-negative")
        sweet = self.db.sweets.create(data.model_dump())
        logger.info("Created sweet %s (%s)", sweet.id, sweet.name)
        return sweet

    def list_all(self) -> List[Sweet]:
        return self.db.sweets.find_all()

    def get_by_id(self, sweet_id: str) -> Optional[Sweet]:
        return self.db.sweets.find_by_id(sweet_id)

    def update_item(self, sweet_id: str, data: SweetUpdate) -> Optional[Sweet]:
        """Update the fields set in ``data``.

        Fields left out of ``data`` keep their current value.  Returns
        ``None`` if the sweet does not exist.
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not all(_is_valid_amount(changes[key]) for key in ("price", "quantity") if key in changes):
            raise InvalidArgument("Price and quantity must be non-negative")
        sweet = self.db.sweets.update(sweet_id, changes)
        if sweet is not None:
            logger.info("Updated sweet %s: %s", sweet_id, sorted(changes))
        return sweet

    def delete_item(self, sweet_id: str) -> bool:
        deleted = self.db.sweets.delete(sweet_id)
        if deleted:
            logger.info("Deleted sweet %s", sweet_id)
        return deleted

    # --- Search and filter ---

    def search(
        self,
        name: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> List[Sweet]:
        """Return sweets matching every given filter, in catalogue order.

        ``name`` matches a case‑insensitive substring, ``category`` a
        case‑insensitive exact value; price bounds are inclusive.
        """
        sweets = list(self.db.sweets.find_all())

        if name:
            needle = name.lower()
            sweets = [s for s in sweets if needle in s.name.lower()]
        if category:
            wanted = category.lower()
            sweets = [s for s in sweets if s.category.lower() == wanted]
        if min_price is not None:
            sweets = [s for s in sweets if s.price >= min_price]
        if max_price is not None:
            sweets = [s for s in sweets if s.price <= max_price]

        return sweets

    # --- Inventory ---

    def purchase(self, sweet_id: str, quantity: int = 1) -> Sweet:
        """Sell ``quantity`` units and return the updated sweet."""
        store = self.db.sweets
        with store.lock:
            sweet = store.find_by_id(sweet_id)
            if sweet is None:
                raise NotFound("Sweet not found")
            if quantity <= 0:
                raise InvalidArgument("Purchase quantity must be positive")
            if sweet.quantity < quantity:
                raise InsufficientStock("Not enough stock available")
            updated = store.update(sweet_id, {"quantity": sweet.quantity - quantity})
        logger.info("Purchased %d x sweet %s, %d left", quantity, sweet_id, updated.quantity)
        return updated

    def restock(self, sweet_id: str, quantity: int = 1) -> Sweet:
        """Add ``quantity`` units to stock and return the updated sweet."""
        store = self.db.sweets
        with store.lock:
            sweet = store.find_by_id(sweet_id)
            if sweet is None:
                raise NotFound("Sweet not found")
            if quantity <= 0:
                raise InvalidArgument("Restock quantity must be positive")
            updated = store.update(sweet_id, {"quantity": sweet.quantity + quantity})
        logger.info("Restocked %d x sweet %s, %d in stock", quantity, sweet_id, updated.quantity)
        return updated
