"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from phone_catalog.application.interfaces import PhoneRepository
from phone_catalog.application.services import AuthService, PhoneQueryService, PhoneService
from phone_catalog.config import get_settings
from phone_catalog.infrastructure.auth.jwt_token_codec import JwtTokenCodec
from phone_catalog.infrastructure.database import get_database
from phone_catalog.infrastructure.database.repositories import MongoPhoneRepository
from phone_catalog.infrastructure.storage.local_file_storage import LocalFileStorage


async def get_phone_repository(
    database: AsyncDatabase = Depends(get_database),
) -> AsyncGenerator[PhoneRepository, None]:
    """Provides the Mongo-backed phone repository."""
    yield MongoPhoneRepository(database)


async def get_phone_service(
    repository: PhoneRepository = Depends(get_phone_repository),
) -> AsyncGenerator[PhoneService, None]:
    """Provides a PhoneService instance with its repository wired up."""
    settings = get_settings()
    yield PhoneService(
        repository,
        placeholder_image_base=settings.placeholder_image_base,
        seed_default_amount=settings.seed_default_amount,
        seed_min_amount=settings.seed_min_amount,
        seed_max_amount=settings.seed_max_amount,
    )


async def get_phone_query_service(
    repository: PhoneRepository = Depends(get_phone_repository),
) -> AsyncGenerator[PhoneQueryService, None]:
    """Provides a PhoneQueryService instance with its repository wired up."""
    yield PhoneQueryService(repository)


def get_auth_service() -> AuthService:
    """Provides an AuthService signing tokens with the configured secret."""
    settings = get_settings()
    codec = JwtTokenCodec(settings.jwt_secret, settings.jwt_expires_minutes)
    return AuthService(codec, settings.basic_user, settings.basic_pass)


def get_file_storage() -> LocalFileStorage:
    """Provides local storage rooted at the configured upload directory."""
    return LocalFileStorage(upload_dir=get_settings().upload_dir)
