"""Login and bearer-token verification for the protected endpoints."""

import hmac
import logging
from typing import Any

from phone_catalog.application.interfaces import TokenCodec
from phone_catalog.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    """Issues bearer tokens for the single configured user and verifies them."""

    def __init__(self, token_codec: TokenCodec, username: str, password: str):
        self._codec = token_codec
        self._username = username
        self._password = password

    def issue_token(self, username: str, password: str) -> str:
        user_ok = hmac.compare_digest(username.encode(), self._username.encode())
        pass_ok = hmac.compare_digest(password.encode(), self._password.encode())
        if not (user_ok and pass_ok):
            logger.warning("Rejected login for user %r", username)
            raise AuthenticationError("Incorrect credentials", scheme="Basic")

        logger.info("Issued token for user %r", username)
        return self._codec.encode({"sub": username, "role": "user"})

    def verify_token(self, token: str) -> dict[str, Any]:
        return self._codec.decode(token)
