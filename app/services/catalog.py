import logging
from typing import List, Optional
from sqlmodel import Session
from app.models.item import Item
from app.services.store import Store

logger = logging.getLogger(__name__)

ITEM_ADDED = "Item added!"
ITEM_UPDATED = "Item updated!"
ITEM_REMOVED = "Item removed!"
ITEM_NOT_FOUND = "Item not found."
NO_FIELDS_TO_UPDATE = "No fields to update."

class CatalogService:
    def __init__(self, session: Session):
        self.session = session
        self.store = Store(session)

    def list_items(self) -> List[Item]:
        return self.store.list_items()

    def add_item(self, item_id: str, name: str, price: int) -> str:
        # A duplicate id surfaces as the engine's IntegrityError
        self.store.insert_item(Item(id=item_id, name=name, price=price))
        self.session.commit()
        logger.info("Added item %s (%s, %d)", item_id, name, price)
        return ITEM_ADDED

    def update_item(self, item_id: str, name: Optional[str] = None, price: Optional[int] = None) -> str:
        fields = {}
        if name is not None:
            fields["name"] = name
        if price is not None:
            fields["price"] = price

        if not fields:
            return NO_FIELDS_TO_UPDATE

        found = self.store.update_item(item_id, fields)
        if not found:
            logger.warning("Update of unknown item %s", item_id)
            return ITEM_NOT_FOUND

        self.session.commit()
        logger.info("Updated item %s: %s", item_id, ", ".join(sorted(fields)))
        return ITEM_UPDATED

    def remove_item(self, item_id: str) -> str:
        """Delete an item together with every cart line that references it"""
        found = self.store.delete_item(item_id)
        if not found:
            logger.warning("Removal of unknown item %s", item_id)
            return ITEM_NOT_FOUND

        orphans = self.store.delete_cart_lines_for_item(item_id)
        self.session.commit()
        logger.info("Removed item %s and %d cart lines", item_id, orphans)
        return ITEM_REMOVED
