"""Pydantic DTOs for the login / protected ping flow."""

from typing import Any

from pydantic import BaseModel


class TokenResponse(BaseModel):
    token: str


class PingResponse(BaseModel):
    ok: bool = True
    user: dict[str, Any]
