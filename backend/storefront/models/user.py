"""
User model for authentication and carts.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.core.database import Base, utcnow


def empty_cart(size: int) -> dict[str, int]:
    """Cart with ``size`` zero-quantity slots keyed ``"0"``..``str(size - 1)``."""
    return {str(i): 0 for i in range(size)}


class User(Base):
    """User account with its cart map."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255))
    hashed_password: Mapped[str] = mapped_column(String(255))

    # Item id (as string) -> quantity
    cart_data: Mapped[dict[str, int]] = mapped_column(JSON, default=dict)

    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    def __repr__(self) -> str:
        return f"<User {self.email}>"
