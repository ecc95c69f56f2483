"""
Upload API Endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends, File, UploadFile

from storefront.api.deps import get_image_storage
from storefront.modules.shop.uploads import ImageStorage

router = APIRouter()


@router.post("/upload")
async def upload_image(
    product: UploadFile = File(...),
    storage: ImageStorage = Depends(get_image_storage),
) -> dict[str, Any]:
    """Store one product image and return its public URL."""
    image_url = await storage.save(product)
    return {"success": True, "image_url": image_url}
