"""
Catalog Service - Product management and derived views.
"""

from typing import Any

from loguru import logger
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import Settings
from storefront.core.locks import KeyedLocks, record_locks
from storefront.models.shop import Product

CATALOG_LOCK_KEY = "catalog:id"


class CatalogService:
    """
    Service for managing products.

    Products keep their insertion order (storage ``pk``), which the
    "new collections" and "popular" views slice.

    Usage:
        catalog = CatalogService(db_session, settings)
        products = await catalog.list_new_collections()
    """

    def __init__(
        self,
        db: AsyncSession,
        settings: Settings,
        locks: KeyedLocks = record_locks,
    ) -> None:
        """Initialize catalog service with database session and settings."""
        self.db = db
        self.settings = settings
        self.locks = locks

    async def next_product_id(self) -> int:
        """Next public id: highest existing id + 1, or 0 for an empty catalog."""
        result = await self.db.execute(select(func.max(Product.id)))
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def add_product(
        self,
        name: str,
        image: str,
        category: str,
        new_price: float,
        old_price: float,
        available: bool = True,
    ) -> Product:
        """
        Create new product with the next public id.

        Id assignment and insert run under one lock so concurrent adds
        cannot pick the same id.
        """
        async with self.locks.get(CATALOG_LOCK_KEY):
            product = Product(
                id=await self.next_product_id(),
                name=name,
                image=image,
                category=category,
                new_price=new_price,
                old_price=old_price,
                available=available,
            )
            self.db.add(product)
            await self.db.commit()

        logger.info(f"Product {product.id} added: {product.name}")
        return product

    async def remove_product(self, product_id: int) -> bool:
        """
        Delete product by public id.

        Returns:
            True if a product was deleted
        """
        result = await self.db.execute(
            delete(Product).where(Product.id == product_id)
        )
        await self.db.commit()

        removed = result.rowcount > 0
        if removed:
            logger.info(f"Product {product_id} removed")
        return removed

    async def get_products(
        self,
        category: str | None = None,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[Product]:
        """Get products in insertion order, optionally filtered and limited."""
        query = select(Product)
        if category is not None:
            query = query.where(Product.category == category)
        query = query.order_by(Product.pk.desc() if newest_first else Product.pk)
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[dict[str, Any]]:
        """All products, without storage identity or timestamp."""
        products = await self.get_products()
        return [p.to_dict(include_date=False) for p in products]

    async def list_new_collections(self) -> list[dict[str, Any]]:
        """Last ``new_collection_size`` products, oldest of them first."""
        products = await self.get_products(
            limit=self.settings.new_collection_size,
            newest_first=True,
        )
        return [p.to_dict() for p in reversed(products)]

    async def list_popular(
        self,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """First ``limit`` products of a category in insertion order."""
        products = await self.get_products(
            category=category if category is not None else self.settings.popular_category,
            limit=limit if limit is not None else self.settings.popular_size,
        )
        return [p.to_dict() for p in products]

    async def list_popular_in_women(self) -> list[dict[str, Any]]:
        """Popular view with the configured category, ``women`` by default."""
        return await self.list_popular()
