# Import all models to register them with SQLModel
from app.models.item import Item
from app.models.cart import CartLine

__all__ = [
    "Item",
    "CartLine",
]
