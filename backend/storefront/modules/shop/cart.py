"""
Cart Service - Per-user item quantity map.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import UserNotFoundError
from storefront.core.locks import KeyedLocks, record_locks
from storefront.models.user import User


class CartService:
    """
    Shopping cart service backed by the user's ``cart_data`` column.

    Every mutation is a read-modify-write of the whole map, done under a
    per-user lock and a row lock so concurrent requests cannot lose updates.

    Usage:
        cart = CartService(db_session)
        await cart.add_item(user_id, item_id=5)
        items = await cart.get_cart(user_id)
    """

    def __init__(self, db: AsyncSession, locks: KeyedLocks = record_locks) -> None:
        """Initialize cart service with database session."""
        self.db = db
        self.locks = locks

    def _cart_key(self, user_id: int) -> str:
        """Lock key for user's cart."""
        return f"cart:{user_id}"

    async def _load_user(self, user_id: int, for_update: bool = False) -> User:
        query = select(User).where(User.id == user_id)
        if for_update:
            # Row lock, and overwrite any copy already in the identity map
            query = query.with_for_update().execution_options(populate_existing=True)
        result = await self.db.execute(query)
        user = result.scalar_one_or_none()
        if user is None:
            raise UserNotFoundError()
        return user

    async def get_cart(self, user_id: int) -> dict[str, int]:
        """Get the full quantity map."""
        user = await self._load_user(user_id)
        return dict(user.cart_data or {})

    async def _change_quantity(self, user_id: int, item_id: int, delta: int) -> int:
        async with self.locks.get(self._cart_key(user_id)):
            user = await self._load_user(user_id, for_update=True)

            cart = dict(user.cart_data or {})
            key = str(item_id)
            quantity = cart.get(key) or 0

            if delta > 0 or quantity > 0:
                quantity += delta
                cart[key] = quantity
                # Assign a new dict so the JSON column is flagged dirty
                user.cart_data = cart

            # Commit even on a no-op to release the row lock
            await self.db.commit()
            return quantity

    async def add_item(self, user_id: int, item_id: int) -> int:
        """
        Add one unit of an item.

        Returns:
            New quantity
        """
        return await self._change_quantity(user_id, item_id, 1)

    async def remove_item(self, user_id: int, item_id: int) -> int:
        """
        Remove one unit of an item, never going below zero.

        Returns:
            New quantity (unchanged if absent or already zero)
        """
        return await self._change_quantity(user_id, item_id, -1)
