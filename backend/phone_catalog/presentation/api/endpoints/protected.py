"""Bearer-protected endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from phone_catalog.application.schemas.auth import PingResponse
from phone_catalog.presentation.api.security import require_auth

router = APIRouter(prefix="/protected", tags=["Auth"])


@router.get("/ping", response_model=PingResponse)
async def ping(claims: dict[str, Any] = Depends(require_auth)) -> PingResponse:
    """Echo the verified token claims."""
    return PingResponse(ok=True, user=claims)


@router.options("/ping", status_code=status.HTTP_204_NO_CONTENT)
async def ping_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Allow": "GET, OPTIONS"})
