from app.schemas.cart import CartEntry, CartLineView
from app.schemas.catalog import ItemView

__all__ = [
    "CartEntry",
    "CartLineView",
    "ItemView",
]
