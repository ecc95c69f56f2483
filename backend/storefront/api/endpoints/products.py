"""
Product API Endpoints.

Catalog management and the storefront's product views.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.api.deps import get_catalog_service
from storefront.modules.shop.service import CatalogService

router = APIRouter()


# ==================== Schemas ====================


class AddProductRequest(BaseModel):
    """Create new product."""

    name: str
    image: str
    category: str
    new_price: float
    old_price: float
    available: bool = True


class RemoveProductRequest(BaseModel):
    """Delete product by id."""

    id: int


# ==================== Catalog ====================


@router.post("/addproduct")
async def add_product(
    request: AddProductRequest,
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """Add product with the next free id."""
    product = await catalog.add_product(**request.model_dump())
    return {"success": True, "name": product.name}


@router.post("/removeproduct")
async def remove_product(
    request: RemoveProductRequest,
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """Remove product. Unknown ids are reported as success too."""
    await catalog.remove_product(request.id)
    return {"success": True, "message": "Product removed"}


@router.get("/allproducts")
async def all_products(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """Get all products."""
    return await catalog.list_all()


# ==================== Views ====================


@router.get("/newcollections")
async def new_collections(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """Most recently added products."""
    return await catalog.list_new_collections()


@router.get("/popularinwomen")
async def popular_in_women(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """First products of the women category."""
    return await catalog.list_popular_in_women()
