import json
import logging
from typing import Annotated, Optional
from pydantic import Field
from sqlmodel import Session
from app.db.session import run_in_session
from app.schemas.catalog import ItemView
from app.server import mcp
from app.services.catalog import CatalogService

logger = logging.getLogger(__name__)

Price = Annotated[int, Field(ge=0, description="Unit price, a non-negative integer")]

def _list_items(session: Session) -> list:
    # Serialized before the session closes
    return [
        ItemView.model_validate(item, from_attributes=True).model_dump()
        for item in CatalogService(session).list_items()
    ]

@mcp.tool(name="listItems", description="List every item in the catalog.")
async def list_items() -> str:
    return json.dumps(await run_in_session(_list_items))

@mcp.tool(name="addItem", description="Add an item to the catalog.")
async def add_item(id: str, name: str, price: Price) -> str:
    logger.debug("addItem id=%s", id)
    return await run_in_session(lambda session: CatalogService(session).add_item(id, name, price))

@mcp.tool(name="updateItem", description="Change the name and/or price of a catalog item.")
async def update_item(id: str, name: Optional[str] = None, price: Optional[Price] = None) -> str:
    logger.debug("updateItem id=%s", id)
    return await run_in_session(
        lambda session: CatalogService(session).update_item(id, name=name, price=price)
    )

@mcp.tool(name="removeItem", description="Remove an item from the catalog.")
async def remove_item(id: str) -> str:
    logger.debug("removeItem id=%s", id)
    return await run_in_session(lambda session: CatalogService(session).remove_item(id))
