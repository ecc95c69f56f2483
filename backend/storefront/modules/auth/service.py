"""
Auth Service - Signup, login and token subjects.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import Settings
from storefront.core.exceptions import (
    DuplicateEmailError,
    InvalidEmailError,
    InvalidPasswordError,
    UserNotFoundError,
)
from storefront.core.security import (
    create_access_token,
    hash_password_async,
    verify_password_async,
)
from storefront.models.user import User, empty_cart


class AuthService:
    """
    Service for user accounts and session tokens.

    Usage:
        auth = AuthService(db_session, settings)
        token = await auth.signup("alice", "a@x.com", "pw1")
    """

    def __init__(self, db: AsyncSession, settings: Settings) -> None:
        """Initialize auth service with database session and settings."""
        self.db = db
        self.settings = settings

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email."""
        query = select(User).where(User.email == email)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_user(self, user_id: int) -> User:
        """
        Resolve a token subject to its user.

        Raises:
            UserNotFoundError: user no longer exists
        """
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def signup(self, name: str | None, email: str, password: str) -> str:
        """
        Create a user with an empty cart.

        Args:
            name: Display name
            email: Unique login email, accepted as given
            password: Plain password, stored bcrypt-hashed

        Returns:
            Session token for the new user

        Raises:
            DuplicateEmailError: email already on file
        """
        if await self.get_user_by_email(email) is not None:
            raise DuplicateEmailError()

        user = User(
            name=name,
            email=email,
            hashed_password=await hash_password_async(
                password, self.settings.bcrypt_rounds
            ),
            cart_data=empty_cart(self.settings.cart_size),
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            await self.db.rollback()
            raise DuplicateEmailError() from e

        logger.info(f"User {user.id} signed up")
        return create_access_token(user.id, self.settings)

    async def login(self, email: str, password: str) -> str:
        """
        Check credentials and issue a session token.

        Raises:
            InvalidEmailError: no user with this email
            InvalidPasswordError: password does not match
        """
        user = await self.get_user_by_email(email)
        if user is None:
            raise InvalidEmailError()

        if not await verify_password_async(password, user.hashed_password):
            raise InvalidPasswordError()

        return create_access_token(user.id, self.settings)
