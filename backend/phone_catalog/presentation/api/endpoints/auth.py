"""Login endpoint: exchanges HTTP Basic credentials for a bearer token."""

from fastapi import APIRouter, Depends, Response, status

from phone_catalog.application.schemas.auth import TokenResponse
from phone_catalog.application.services import AuthService
from phone_catalog.infrastructure.dependencies import get_auth_service
from phone_catalog.presentation.api.security import get_basic_credentials

router = APIRouter(prefix="/login", tags=["Auth"])


@router.post("", response_model=TokenResponse)
async def login(
    credentials: tuple[str, str] = Depends(get_basic_credentials),
    auth: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    username, password = credentials
    return TokenResponse(token=auth.issue_token(username, password))


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def login_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Allow": "POST, OPTIONS"})
