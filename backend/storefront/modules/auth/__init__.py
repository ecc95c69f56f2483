"""
Auth Module - Signup, login and session tokens.
"""

from storefront.modules.auth.service import AuthService

__all__ = ["AuthService"]
