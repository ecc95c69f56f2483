"""
Auth API Endpoints.

Signup and login. Failures keep the historical response shapes:
duplicate signup is a 400, bad credentials are a 200 with ``success: false``.
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from pydantic import AliasChoices, BaseModel, Field

from storefront.api.deps import get_auth_service
from storefront.core.exceptions import (
    DuplicateEmailError,
    InvalidEmailError,
    InvalidPasswordError,
)
from storefront.modules.auth.service import AuthService

router = APIRouter()


# ==================== Schemas ====================


class SignupRequest(BaseModel):
    """Create new account."""

    username: str | None = Field(
        None, validation_alias=AliasChoices("username", "name")
    )
    email: str
    password: str


class LoginRequest(BaseModel):
    """Log in with email and password."""

    email: str
    password: str


# ==================== Endpoints ====================


@router.post("/signup")
async def signup(
    request: SignupRequest,
    auth: AuthService = Depends(get_auth_service),
) -> Any:
    """Create user and return a session token."""
    try:
        token = await auth.signup(request.username, request.email, request.password)
    except DuplicateEmailError as e:
        return ORJSONResponse(
            status_code=400,
            content={"success": False, "message": e.message},
        )

    return {"success": True, "token": token}


@router.post("/login")
async def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> dict[str, Any]:
    """Check credentials and return a session token."""
    try:
        token = await auth.login(request.email, request.password)
    except (InvalidEmailError, InvalidPasswordError) as e:
        return {"success": False, "message": e.message}

    return {"success": True, "token": token}
