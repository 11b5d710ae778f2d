from .client import PHONES_COLLECTION, create_mongo_client, get_database

__all__ = [
    "PHONES_COLLECTION",
    "create_mongo_client",
    "get_database",
]
