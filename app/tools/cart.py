import json
import logging
from typing import Annotated, List
from pydantic import Field
from app.db.session import run_in_session
from app.schemas.cart import CartEntry
from app.server import mcp
from app.services.cart import CartService

logger = logging.getLogger(__name__)

Quantity = Annotated[int, Field(ge=1, description="Number of units, at least 1")]

# Tool arguments keep the camelCase names of the public tool contract

@mcp.tool(name="addToCart", description="Add a quantity of an item to a user's cart.")
async def add_to_cart(userId: str, itemId: str, quantity: Quantity) -> str:
    logger.debug("addToCart user=%s item=%s quantity=%s", userId, itemId, quantity)
    result = await run_in_session(
        lambda session: CartService(session).add_to_cart(userId, itemId, quantity)
    )
    return json.dumps(result)

@mcp.tool(name="addMultipleToCart", description="Add several items to a user's cart at once.")
async def add_multiple_to_cart(userId: str, items: List[CartEntry]) -> str:
    logger.debug("addMultipleToCart user=%s entries=%d", userId, len(items))
    result = await run_in_session(
        lambda session: CartService(session).add_multiple_to_cart(userId, items)
    )
    return json.dumps(result)

@mcp.tool(name="removeFromCart", description="Remove a quantity of an item from a user's cart.")
async def remove_from_cart(userId: str, itemId: str, quantity: Quantity) -> str:
    logger.debug("removeFromCart user=%s item=%s quantity=%s", userId, itemId, quantity)
    result = await run_in_session(
        lambda session: CartService(session).remove_from_cart(userId, itemId, quantity)
    )
    return json.dumps(result)

@mcp.tool(name="removeMultipleFromCart", description="Remove several items from a user's cart at once.")
async def remove_multiple_from_cart(userId: str, items: List[CartEntry]) -> str:
    logger.debug("removeMultipleFromCart user=%s entries=%d", userId, len(items))
    result = await run_in_session(
        lambda session: CartService(session).remove_multiple_from_cart(userId, items)
    )
    return json.dumps(result)

@mcp.tool(name="viewCart", description="Show the items in a user's cart.")
async def view_cart(userId: str) -> str:
    cart = await run_in_session(lambda session: CartService(session).view_cart(userId))
    return json.dumps([line.model_dump() for line in cart])

@mcp.tool(name="checkout", description="Total a user's cart and empty it.")
async def checkout(userId: str) -> str:
    result = await run_in_session(lambda session: CartService(session).checkout(userId))
    return json.dumps(result)
