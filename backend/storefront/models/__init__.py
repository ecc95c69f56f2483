"""Database models."""

from storefront.models.shop import Product
from storefront.models.user import User

__all__ = ["Product", "User"]
