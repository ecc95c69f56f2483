"""
Password hashing and session tokens.

Passwords are hashed with bcrypt, sessions are stateless HS256 JWTs
carrying ``{"user": {"id": <user id>}}``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from fastapi.concurrency import run_in_threadpool
from jose import JWTError, jwt

from storefront.core.config import Settings
from storefront.core.exceptions import InvalidTokenError

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(
        _encode_password(password), bcrypt.gensalt(rounds=rounds)
    ).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            _encode_password(plain_password), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def hash_password_async(password: str, rounds: int = 10) -> str:
    """Hash in the threadpool to keep the event loop free."""
    return await run_in_threadpool(hash_password, password, rounds)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)


def create_access_token(user_id: int, settings: Settings) -> str:
    """
    Sign a session token for a user.

    An ``exp`` claim is only added when ``jwt_expire_minutes`` is configured.
    """
    to_encode: dict[str, Any] = {"user": {"id": user_id}}
    if settings.jwt_expire_minutes:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.jwt_expire_minutes
        )
        to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """
    Verify a session token and return the user id it carries.

    Raises:
        InvalidTokenError: bad signature, expired or malformed payload
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        raise InvalidTokenError() from e

    user = payload.get("user")
    if not isinstance(user, dict):
        raise InvalidTokenError()
    user_id = user.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise InvalidTokenError()
    return user_id
