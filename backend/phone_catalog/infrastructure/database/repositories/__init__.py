from .phone_repository import MongoPhoneRepository

__all__ = [
    "MongoPhoneRepository",
]
