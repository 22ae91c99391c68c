from sqlmodel import Field, SQLModel

class Item(SQLModel, table=True):
    __tablename__ = "items"

    id: str = Field(primary_key=True)
    name: str
    price: int = Field(ge=0)
