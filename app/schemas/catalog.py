from pydantic import BaseModel

class ItemView(BaseModel):
    id: str
    name: str
    price: int
