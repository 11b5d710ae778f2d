from .auth_service import AuthService
from .phone_query_service import PhoneQueryService
from .phone_service import PhoneService

__all__ = [
    "AuthService",
    "PhoneQueryService",
    "PhoneService",
]
