"""MongoDB client lifecycle and per-request database access."""

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from phone_catalog.config import Settings, get_settings

PHONES_COLLECTION = "phones"


def create_mongo_client(settings: Settings) -> AsyncMongoClient:
    """Build the process-wide client. Connections are opened lazily."""
    return AsyncMongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True,
    )


async def get_database(request: Request) -> AsyncDatabase:
    """FastAPI dependency: the configured database on the app-wide client."""
    client: AsyncMongoClient = request.app.state.mongo_client
    return client[get_settings().mongodb_database]
