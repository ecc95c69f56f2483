"""
Cart API Endpoints.

All routes require the ``auth-token`` header.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from storefront.api.deps import get_cart_service, get_current_user_id
from storefront.modules.shop.cart import CartService

router = APIRouter()


class CartItemRequest(BaseModel):
    """Cart slot to change."""

    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(alias="itemId")


@router.post("/addtocart")
async def add_to_cart(
    request: CartItemRequest,
    user_id: int = Depends(get_current_user_id),
    cart: CartService = Depends(get_cart_service),
) -> dict[str, Any]:
    """Add one unit of an item to the cart."""
    await cart.add_item(user_id, request.item_id)
    return {"success": True, "message": "Item added to cart"}


@router.post("/removefromcart")
async def remove_from_cart(
    request: CartItemRequest,
    user_id: int = Depends(get_current_user_id),
    cart: CartService = Depends(get_cart_service),
) -> dict[str, Any]:
    """Remove one unit of an item from the cart."""
    await cart.remove_item(user_id, request.item_id)
    return {"success": True, "message": "Item removed from cart"}


@router.post("/getcart")
async def get_cart(
    user_id: int = Depends(get_current_user_id),
    cart: CartService = Depends(get_cart_service),
) -> dict[str, int]:
    """Get the user's item quantity map."""
    return await cart.get_cart(user_id)
