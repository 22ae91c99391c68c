from pydantic import BaseModel, ConfigDict, Field

class CartEntry(BaseModel):
    """One `{itemId, quantity}` entry of a bulk cart request."""
    model_config = ConfigDict(populate_by_name=True)

    item_id: str = Field(alias="itemId")
    quantity: int = Field(ge=1)

class CartLineView(BaseModel):
    id: str
    name: str
    price: int
    quantity: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity
