from .phone_repository import PhoneRepository
from .token_codec import TokenCodec

__all__ = [
    "PhoneRepository",
    "TokenCodec",
]
