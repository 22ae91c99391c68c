"""
Thin accessor over the ``items`` and ``cart_lines`` tables.

Every method issues a single statement on the caller's session and never
commits; the cart and catalog services own the transaction boundaries.
"""
from typing import List, Optional
from sqlmodel import Session, select, update, delete
from app.models.cart import CartLine
from app.models.item import Item
from app.schemas.cart import CartLineView

class Store:
    def __init__(self, session: Session):
        self.session = session

    # Items

    def list_items(self) -> List[Item]:
        return self.session.exec(select(Item)).all()

    def insert_item(self, item: Item):
        self.session.add(item)
        self.session.flush()

    def update_item(self, item_id: str, fields: dict) -> bool:
        result = self.session.exec(
            update(Item).where(Item.id == item_id).values(**fields)
        )
        return result.rowcount > 0

    def delete_item(self, item_id: str) -> bool:
        result = self.session.exec(delete(Item).where(Item.id == item_id))
        return result.rowcount > 0

    # Cart lines

    def get_cart_line(self, user_id: str, item_id: str) -> Optional[CartLine]:
        return self.session.exec(
            select(CartLine).where(
                CartLine.user_id == user_id,
                CartLine.item_id == item_id
            )
        ).first()

    def insert_cart_line(self, user_id: str, item_id: str, quantity: int):
        self.session.add(CartLine(user_id=user_id, item_id=item_id, quantity=quantity))
        self.session.flush()

    def update_cart_line_quantity(self, user_id: str, item_id: str, quantity: int):
        self.session.exec(
            update(CartLine)
            .where(CartLine.user_id == user_id, CartLine.item_id == item_id)
            .values(quantity=quantity)
        )

    def change_cart_line_quantity(self, user_id: str, item_id: str, delta: int) -> bool:
        # Single statement: the new quantity is computed in SQL
        result = self.session.exec(
            update(CartLine)
            .where(CartLine.user_id == user_id, CartLine.item_id == item_id)
            .values(quantity=CartLine.quantity + delta)
        )
        return result.rowcount > 0

    def delete_cart_line(self, user_id: str, item_id: str):
        self.session.exec(
            delete(CartLine).where(
                CartLine.user_id == user_id,
                CartLine.item_id == item_id
            )
        )

    def delete_cart_line_if_empty(self, user_id: str, item_id: str) -> bool:
        result = self.session.exec(
            delete(CartLine).where(
                CartLine.user_id == user_id,
                CartLine.item_id == item_id,
                CartLine.quantity <= 0
            )
        )
        return result.rowcount > 0

    def delete_cart_lines_for_item(self, item_id: str) -> int:
        result = self.session.exec(delete(CartLine).where(CartLine.item_id == item_id))
        return result.rowcount

    def view_cart(self, user_id: str) -> List[CartLineView]:
        # Inner join: lines whose item no longer exists are left out
        rows = self.session.exec(
            select(Item.id, Item.name, Item.price, CartLine.quantity)
            .select_from(CartLine)
            .join(Item, CartLine.item_id == Item.id)
            .where(CartLine.user_id == user_id)
        ).all()
        return [
            CartLineView(id=item_id, name=name, price=price, quantity=quantity)
            for item_id, name, price, quantity in rows
        ]

    def clear_cart(self, user_id: str) -> int:
        result = self.session.exec(delete(CartLine).where(CartLine.user_id == user_id))
        return result.rowcount
