from .auth import PingResponse, TokenResponse
from .phone import (
    CollectionLinks,
    LinkSchema,
    PaginationSchema,
    PhoneCollectionResponse,
    PhoneCreate,
    PhoneLinks,
    PhonePatch,
    PhoneReplace,
    PhoneResponse,
    PhoneSummaryResponse,
    SeedRequest,
    SeedResponse,
)
from .upload import UploadResponse

__all__ = [
    "PingResponse",
    "TokenResponse",
    "CollectionLinks",
    "LinkSchema",
    "PaginationSchema",
    "PhoneCollectionResponse",
    "PhoneCreate",
    "PhoneLinks",
    "PhonePatch",
    "PhoneReplace",
    "PhoneResponse",
    "PhoneSummaryResponse",
    "SeedRequest",
    "SeedResponse",
    "UploadResponse",
]
