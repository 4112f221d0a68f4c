"""Signed, time-limited access tokens (JWT)."""

import time
from typing import Any

import jwt

from newsroom.domain.exceptions import AuthenticationError

_ACCESS = "access"


class TokenSigner:
    """Builds and verifies HS256 access tokens carrying identity and roles."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret.strip():
            raise ValueError("JWT secret is empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expire_seconds = expire_minutes * 60

    def issue(self, *, user_id: int, email: str, roles: list[str]) -> str:
        issued_at = int(time.time())
        payload = {
            "sub": str(user_id),
            "email": email,
            "roles": list(roles),
            "type": _ACCESS,
            "iat": issued_at,
            "exp": issued_at + self._expire_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature, expiry and token type; return the claims."""
        raw = (token or "").strip()
        if not raw:
            raise AuthenticationError("Access token is empty.")

        try:
            payload = jwt.decode(raw, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Access token has expired.") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid access token.") from exc

        if str(payload.get("type") or "").lower() != _ACCESS:
            raise AuthenticationError("Token is not an access token.")
        return payload
