from datetime import datetime, timedelta, timezone

import jwt

from core.errors import AuthenticationError, ErrorCode

from .interface import AuthProvider, AuthUser

_ALGORITHM = "HS256"


class JwtAuthProvider(AuthProvider):
    """Issues and verifies HS256 tokens carrying ``{"user": {"id": ...}}``."""

    def __init__(self, secret: str, expires_hours: int = 5):
        self._secret = secret
        self._expires = timedelta(hours=expires_hours)

    def issue_token(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"user": {"id": user_id}, "iat": now, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=_ALGORITHM)

    def verify_token(self, token: str) -> AuthUser:
        try:
            claims = jwt.decode(token, self._secret, algorithms=[_ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired", code=ErrorCode.INVALID_TOKEN) from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Token verification failed: {e}") from e

        user = claims.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id:
            raise AuthenticationError("Token verification failed: no user id in claims")
        return AuthUser(user_id=str(user_id))

    def decode_claims(self, token: str) -> dict[str, object]:
        """Decode JWT claims WITHOUT signature verification. For logging/routing only."""
        try:
            decoded: dict[str, object] = jwt.decode(token, options={"verify_signature": False})
            return decoded
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}") from e
