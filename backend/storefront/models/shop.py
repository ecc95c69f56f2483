"""
Shop models for the product catalog.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.core.database import Base, utcnow


class Product(Base):
    """Product for sale."""

    __tablename__ = "shop_products"

    # Storage identity, also defines insertion order
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Public catalog id
    id: Mapped[int] = mapped_column(Integer, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    image: Mapped[str] = mapped_column(String(500))
    category: Mapped[str] = mapped_column(String(100), index=True)

    # Pricing
    new_price: Mapped[float] = mapped_column(Float)
    old_price: Mapped[float] = mapped_column(Float)

    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    available: Mapped[bool] = mapped_column(Boolean, default=True)

    def to_dict(self, include_date: bool = True) -> dict[str, Any]:
        """Public representation, without the storage identity."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "category": self.category,
            "new_price": self.new_price,
            "old_price": self.old_price,
            "available": self.available,
        }
        if include_date:
            data["date"] = self.date.isoformat() if self.date else None
        return data

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.name}>"
