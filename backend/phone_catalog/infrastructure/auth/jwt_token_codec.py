"""HS256 JWT implementation of the TokenCodec port, backed by PyJWT."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from phone_catalog.application.interfaces import TokenCodec
from phone_catalog.domain.exceptions import AuthenticationError

_ALGORITHM = "HS256"


class JwtTokenCodec(TokenCodec):
    def __init__(self, secret: str, expires_minutes: int = 60):
        self._secret = secret
        self._expires = timedelta(minutes=expires_minutes)

    def encode(self, claims: dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=_ALGORITHM)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret, algorithms=[_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")
