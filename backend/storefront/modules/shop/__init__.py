"""
Shop Module - E-commerce functionality.

Features:
- Product catalog with derived views
- Shopping cart stored on the user record
- Product image uploads
"""

from storefront.modules.shop.cart import CartService
from storefront.modules.shop.service import CatalogService
from storefront.modules.shop.uploads import ImageStorage

__all__ = [
    "CatalogService",
    "CartService",
    "ImageStorage",
]
