"""
Shared API dependencies.
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import Settings, get_settings
from storefront.core.database import get_db
from storefront.core.exceptions import UnauthenticatedError
from storefront.core.security import decode_access_token
from storefront.modules.auth.service import AuthService
from storefront.modules.shop.cart import CartService
from storefront.modules.shop.service import CatalogService
from storefront.modules.shop.uploads import ImageStorage


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, settings)


def get_catalog_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(db, settings)


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    return CartService(db)


def get_image_storage(settings: Settings = Depends(get_settings)) -> ImageStorage:
    return ImageStorage(settings)


async def get_current_user_id(
    auth_token: str | None = Header(None, alias="auth-token"),
    settings: Settings = Depends(get_settings),
    auth: AuthService = Depends(get_auth_service),
) -> int:
    """
    Verify the ``auth-token`` header and return the user id it carries.

    Raises:
        UnauthenticatedError: header missing
        InvalidTokenError: signature or payload rejected
        UserNotFoundError: token names a user that no longer exists
    """
    if not auth_token:
        raise UnauthenticatedError()
    user_id = decode_access_token(auth_token, settings)
    await auth.get_user(user_id)
    return user_id
