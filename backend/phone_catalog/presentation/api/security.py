"""Authorization header parsing for the login and protected endpoints."""

import base64
import binascii
from typing import Any

from fastapi import Depends, Header

from phone_catalog.application.services import AuthService
from phone_catalog.domain.exceptions import AuthenticationError
from phone_catalog.infrastructure.dependencies import get_auth_service


def parse_basic_credentials(authorization: str | None) -> tuple[str, str] | None:
    """Decode ``Basic <base64(user:pass)>``; None when absent or malformed."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "basic":
        return None
    try:
        decoded = base64.b64decode(parts[1], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def get_basic_credentials(authorization: str | None = Header(None)) -> tuple[str, str]:
    credentials = parse_basic_credentials(authorization)
    if credentials is None:
        raise AuthenticationError("Missing Basic Authorization", scheme="Basic")
    return credentials


def get_bearer_token(authorization: str | None = Header(None)) -> str:
    if not authorization:
        raise AuthenticationError("Authorization header missing")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Invalid authorization header format")
    return parts[1]


def require_auth(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
) -> dict[str, Any]:
    return auth.verify_token(token)
