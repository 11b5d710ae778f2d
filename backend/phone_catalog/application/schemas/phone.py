"""Pydantic DTOs (Data Transfer Objects) for the Phone feature.

Wire names are camelCase (``imageUrl``, ``hasBookmark``, ``lastModified``);
hypermedia links travel under ``_links`` as ``{"href": ...}`` objects.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[
    str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)
]

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Optional text fields where a blank value means "not supplied" on create/replace.
_BLANK_MEANS_ABSENT = frozenset({"imageUrl", "image_url", "reviews"})


# ── Requests ─────────────────────────────────────────────────────────


class PhoneCreate(BaseModel):
    """Schema for creating a phone: title, brand and description are required."""

    model_config = _CAMEL

    title: NonEmptyStr = Field(..., examples=["Pixel 9 Pro"])
    brand: NonEmptyStr = Field(..., examples=["Google"])
    description: NonEmptyStr = Field(..., examples=["Flagship with a 6.3 inch display."])
    image_url: NonEmptyStr | None = None
    reviews: NonEmptyStr | None = None
    has_bookmark: StrictBool | None = None

    @model_validator(mode="before")
    @classmethod
    def _blank_optionals_are_absent(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: None
            if key in _BLANK_MEANS_ABSENT and isinstance(value, str) and not value.strip()
            else value
            for key, value in data.items()
        }


class PhoneReplace(PhoneCreate):
    """Schema for a full replace (PUT). Absent optional fields stay unchanged."""


class PhonePatch(BaseModel):
    """Schema for a partial update: every supplied field is validated.

    Defaults are never validated, so an absent field stays ``None`` while an
    explicit ``null`` is rejected like any other wrongly typed value.
    """

    model_config = _CAMEL

    title: NonEmptyStr = None  # type: ignore[assignment]
    brand: NonEmptyStr = None  # type: ignore[assignment]
    description: NonEmptyStr = None  # type: ignore[assignment]
    image_url: NonEmptyStr = None  # type: ignore[assignment]
    reviews: NonEmptyStr = None  # type: ignore[assignment]
    has_bookmark: StrictBool = None  # type: ignore[assignment]


class SeedRequest(BaseModel):
    """Body of ``POST /phones/seed``; an unusable amount falls back to the default."""

    amount: int | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        try:
            if isinstance(value, (int, float)):
                return int(value)
            if isinstance(value, str):
                return int(value.strip())
        except (ValueError, OverflowError):
            # nan, inf and non-numeric text
            return None
        return None


# ── Responses ────────────────────────────────────────────────────────


class LinkSchema(BaseModel):
    href: str


class PhoneLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_: LinkSchema = Field(alias="self")
    collection: LinkSchema


class CollectionLinks(PhoneLinks):
    next: LinkSchema | None = None
    prev: LinkSchema | None = None


class PhoneResponse(BaseModel):
    """Full phone record returned to the client."""

    model_config = _CAMEL

    id: str
    title: str
    brand: str
    description: str
    image_url: str
    reviews: str | None = None
    has_bookmark: bool = False
    last_modified: datetime
    links: PhoneLinks = Field(alias="_links")


class PhoneSummaryResponse(BaseModel):
    """Collection item: the minimal id/title/brand projection plus links."""

    id: str
    title: str
    brand: str
    links: PhoneLinks = Field(alias="_links")

    model_config = ConfigDict(populate_by_name=True)


class PaginationSchema(BaseModel):
    model_config = _CAMEL

    page: int
    limit: int
    count: int
    total_items: int
    total_pages: int


class PhoneCollectionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: list[PhoneSummaryResponse]
    pagination: PaginationSchema | None = None
    links: CollectionLinks = Field(alias="_links")


class SeedResponse(BaseModel):
    message: str
    count: int
