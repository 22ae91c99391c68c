import logging
from typing import Iterable, List
from sqlmodel import Session
from app.schemas.cart import CartEntry, CartLineView
from app.services.store import Store

logger = logging.getLogger(__name__)

NOT_IN_CART = "Item not in cart"
CHECKOUT_COMPLETE = "Checkout complete!"

class CartService:
    """Cart rules: merge on add, decrement-or-delete on remove, checkout.

    Each public mutation runs in one transaction. Bulk variants apply all of
    their entries in a single transaction, so a storage error rolls every
    entry back. Quantities change through single UPDATE statements computed
    in SQL, never by reading a line and writing it back.
    """

    def __init__(self, session: Session):
        self.session = session
        self.store = Store(session)

    def add_to_cart(self, user_id: str, item_id: str, quantity: int) -> dict:
        """Add item to cart or merge the quantity into an existing line"""
        self._add(user_id, item_id, quantity)
        self.session.commit()
        return {"success": True}

    def add_multiple_to_cart(self, user_id: str, entries: Iterable[CartEntry]) -> dict:
        entries = list(entries)
        for entry in entries:
            self._add(user_id, entry.item_id, entry.quantity)
        self.session.commit()
        logger.info("Added %d entries to cart of user %s", len(entries), user_id)
        return {"success": True}

    def remove_from_cart(self, user_id: str, item_id: str, quantity: int) -> dict:
        """Decrement a cart line, deleting it once the quantity reaches zero"""
        if not self._remove(user_id, item_id, quantity):
            return {"success": False, "message": NOT_IN_CART}
        self.session.commit()
        return {"success": True}

    def remove_multiple_from_cart(self, user_id: str, entries: Iterable[CartEntry]) -> dict:
        # Entries that are not in the cart are skipped
        removed = 0
        for entry in entries:
            if self._remove(user_id, entry.item_id, entry.quantity):
                removed += 1
        self.session.commit()
        logger.info("Removed %d entries from cart of user %s", removed, user_id)
        return {"success": True}

    def view_cart(self, user_id: str) -> List[CartLineView]:
        return self.store.view_cart(user_id)

    def checkout(self, user_id: str) -> dict:
        """Total the user's cart at current prices and empty it"""
        cart = self.store.view_cart(user_id)
        total = sum(line.subtotal for line in cart)
        self.store.clear_cart(user_id)
        self.session.commit()
        logger.info("Checkout for user %s: %d lines, total %d", user_id, len(cart), total)
        return {"total": total, "message": CHECKOUT_COMPLETE}

    def clear_cart(self, user_id: str) -> int:
        deleted = self.store.clear_cart(user_id)
        self.session.commit()
        logger.info("Cleared %d lines from cart of user %s", deleted, user_id)
        return deleted

    def _add(self, user_id: str, item_id: str, quantity: int):
        if self.store.change_cart_line_quantity(user_id, item_id, quantity):
            logger.info("Cart %s: %s +%d", user_id, item_id, quantity)
            return
        # A concurrent first insert of the same pair fails on the primary key
        self.store.insert_cart_line(user_id, item_id, quantity)
        logger.info("Cart %s: %s -> %d", user_id, item_id, quantity)

    def _remove(self, user_id: str, item_id: str, quantity: int) -> bool:
        if not self.store.change_cart_line_quantity(user_id, item_id, -quantity):
            logger.info("Cart %s: %s not in cart", user_id, item_id)
            return False

        # Exact zero and overshoot both drop the line
        if self.store.delete_cart_line_if_empty(user_id, item_id):
            logger.info("Cart %s: %s removed", user_id, item_id)
        else:
            logger.info("Cart %s: %s -%d", user_id, item_id, quantity)
        return True
