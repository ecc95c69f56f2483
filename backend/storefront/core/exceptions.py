"""
Domain errors raised by the storefront services.

Endpoints translate them into HTTP responses. Authentication errors are
rendered by an application-wide handler as 401 responses.
"""


class StorefrontError(Exception):
    """Base class for storefront errors."""

    message = "Storefront error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateEmailError(StorefrontError):
    message = "Email already in use"


class InvalidEmailError(StorefrontError):
    message = "Invalid email"


class InvalidPasswordError(StorefrontError):
    message = "Invalid password"


class AuthenticationError(StorefrontError):
    """Request could not be tied to a user."""

    status_code = 401


class UnauthenticatedError(AuthenticationError):
    message = "Access denied"


class InvalidTokenError(AuthenticationError):
    message = "Invalid token"


class UserNotFoundError(InvalidTokenError):
    """Token is valid but its user no longer exists."""
