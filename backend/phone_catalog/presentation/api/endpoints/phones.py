"""Phone resource endpoints: collection queries, CRUD, conditional GET and seeding."""

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

from fastapi import APIRouter, Depends, Header, Query, Response, status

from phone_catalog.application.links import LinkBuilder
from phone_catalog.application.schemas.phone import (
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
from phone_catalog.application.services import PhoneQueryService, PhoneService
from phone_catalog.domain.entities import Phone, PhoneCollection, PhoneQuery
from phone_catalog.infrastructure.dependencies import get_phone_query_service, get_phone_service
from phone_catalog.presentation.api.links import get_link_builder

router = APIRouter(prefix="/phones", tags=["Phones"])

COLLECTION_METHODS = "GET, POST, OPTIONS"
ITEM_METHODS = "GET, PUT, PATCH, DELETE, OPTIONS"


# ── Helpers ──────────────────────────────────────────────────────────

def _item_links(links: LinkBuilder, phone_id: str) -> PhoneLinks:
    return PhoneLinks(
        self_=LinkSchema(href=links.item(phone_id)),
        collection=LinkSchema(href=links.collection()),
    )


def _to_response(phone: Phone, links: LinkBuilder) -> PhoneResponse:
    return PhoneResponse(
        id=phone.id,
        title=phone.title,
        brand=phone.brand,
        description=phone.description,
        image_url=phone.image_url,
        reviews=phone.reviews,
        has_bookmark=phone.has_bookmark,
        last_modified=phone.last_modified,
        links=_item_links(links, phone.id),
    )


def _to_collection(collection: PhoneCollection, links: LinkBuilder) -> PhoneCollectionResponse:
    pagination = None
    if collection.pagination is not None:
        p = collection.pagination
        pagination = PaginationSchema(
            page=p.page,
            limit=p.limit,
            count=p.count,
            total_items=p.total_items,
            total_pages=p.total_pages,
        )

    hrefs = collection.links
    return PhoneCollectionResponse(
        items=[
            PhoneSummaryResponse(
                id=item.id,
                title=item.title,
                brand=item.brand,
                links=_item_links(links, item.id),
            )
            for item in collection.items
        ],
        pagination=pagination,
        links=CollectionLinks(
            self_=LinkSchema(href=hrefs["self"]),
            collection=LinkSchema(href=hrefs["collection"]),
            next=LinkSchema(href=hrefs["next"]) if "next" in hrefs else None,
            prev=LinkSchema(href=hrefs["prev"]) if "prev" in hrefs else None,
        ),
    )


def parse_http_date(value: str | None) -> datetime | None:
    """Parse an HTTP date header; unparseable values are treated as absent."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def http_date(value: datetime) -> str:
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


# ── Collection ───────────────────────────────────────────────────────

@router.get("", response_model=PhoneCollectionResponse, response_model_exclude_none=True)
async def list_phones(
    q: str | None = Query(None, description="Substring match on title, brand or description"),
    brand: str | None = Query(None, description="Exact (case-insensitive) brand match"),
    page: str | None = Query(None, description="Page number, used together with limit"),
    limit: str | None = Query(None, description="Page size; enables pagination"),
    service: PhoneQueryService = Depends(get_phone_query_service),
    links: LinkBuilder = Depends(get_link_builder),
) -> PhoneCollectionResponse:
    """List phones, optionally filtered and paginated."""
    query = PhoneQuery.from_params(q=q, brand=brand, page=page, limit=limit)
    collection = await service.list_phones(query, links)
    return _to_collection(collection, links)


@router.post(
    "",
    response_model=PhoneResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_phone(
    data: PhoneCreate,
    service: PhoneService = Depends(get_phone_service),
    links: LinkBuilder = Depends(get_link_builder),
) -> PhoneResponse:
    """Create a new phone."""
    phone = await service.create_phone(data)
    return _to_response(phone, links)


@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def seed_phones(
    data: SeedRequest | None = None,
    service: PhoneService = Depends(get_phone_service),
) -> SeedResponse:
    """Replace the collection with generated demo phones (at least five)."""
    count = await service.seed(data.amount if data else None)
    return SeedResponse(message=f"Seeded {count} phones", count=count)


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def collection_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Allow": COLLECTION_METHODS})


# ── Detail ───────────────────────────────────────────────────────────

@router.get("/{phone_id}", response_model=PhoneResponse, response_model_exclude_none=True)
async def get_phone(
    phone_id: str,
    response: Response,
    if_modified_since: str | None = Header(None),
    service: PhoneService = Depends(get_phone_service),
    links: LinkBuilder = Depends(get_link_builder),
):
    """Retrieve a single phone; honours If-Modified-Since."""
    phone = await service.get_phone_if_modified(phone_id, parse_http_date(if_modified_since))
    if phone is None:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)
    response.headers["Last-Modified"] = http_date(phone.last_modified)
    return _to_response(phone, links)


@router.put("/{phone_id}", response_model=PhoneResponse, response_model_exclude_none=True)
async def replace_phone(
    phone_id: str,
    data: PhoneReplace,
    service: PhoneService = Depends(get_phone_service),
    links: LinkBuilder = Depends(get_link_builder),
) -> PhoneResponse:
    """Replace a phone's title, brand and description (and any optional field sent)."""
    phone = await service.replace_phone(phone_id, data)
    return _to_response(phone, links)


@router.patch("/{phone_id}", response_model=PhoneResponse, response_model_exclude_none=True)
async def patch_phone(
    phone_id: str,
    data: PhonePatch,
    service: PhoneService = Depends(get_phone_service),
    links: LinkBuilder = Depends(get_link_builder),
) -> PhoneResponse:
    """Update only the supplied fields of a phone."""
    phone = await service.patch_phone(phone_id, data)
    return _to_response(phone, links)


@router.delete("/{phone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_phone(
    phone_id: str,
    service: PhoneService = Depends(get_phone_service),
) -> Response:
    """Delete a phone permanently."""
    await service.delete_phone(phone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.options("/{phone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def item_options(phone_id: str) -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Allow": ITEM_METHODS})
