from abc import ABC, abstractmethod

from pydantic import BaseModel


class AuthUser(BaseModel):
    user_id: str
    username: str = ""
    email: str = ""


class AuthProvider(ABC):
    @abstractmethod
    def issue_token(self, user_id: str) -> str: ...

    @abstractmethod
    def verify_token(self, token: str) -> AuthUser: ...

    @abstractmethod
    def decode_claims(self, token: str) -> dict[str, object]: ...


def get_auth_provider() -> AuthProvider:
    from core.config import get_config

    config = get_config()
    if not config.jwt_secret:
        raise ValueError("JWT_SECRET not configured")

    from core.auth.jwt_provider import JwtAuthProvider

    return JwtAuthProvider(secret=config.jwt_secret, expires_hours=config.jwt_expires_hours)
