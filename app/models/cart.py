from sqlmodel import Field, SQLModel

class CartLine(SQLModel, table=True):
    __tablename__ = "cart_lines"

    # One row per (user, item) pair
    user_id: str = Field(primary_key=True)
    # Logical reference to items.id, no FK constraint
    item_id: str = Field(primary_key=True, index=True)

    quantity: int = Field(ge=1)
