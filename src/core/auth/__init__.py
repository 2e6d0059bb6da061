"""Authentication abstraction layer."""

from core.auth.interface import AuthProvider, AuthUser, get_auth_provider
from core.auth.jwt_provider import JwtAuthProvider
from core.auth.passwords import hash_password, verify_password

__all__ = ["AuthProvider", "AuthUser", "JwtAuthProvider", "get_auth_provider", "hash_password", "verify_password"]
