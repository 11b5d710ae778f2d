"""Collection queries for phones: filtering, opt-in pagination and navigation links."""

import logging

from phone_catalog.application.interfaces import PhoneRepository
from phone_catalog.application.links import LinkBuilder
from phone_catalog.domain.entities import Pagination, PhoneCollection, PhoneQuery

logger = logging.getLogger(__name__)


class PhoneQueryService:
    """Runs a :class:`PhoneQuery` against the repository and shapes the result.

    Without a ``limit`` every matching phone is returned and no pagination is
    attached. With a ``limit`` exactly one page is returned together with the
    real totals, even when the requested page lies past the last one.
    """

    def __init__(self, repository: PhoneRepository):
        self._repository = repository

    async def list_phones(self, query: PhoneQuery, links: LinkBuilder) -> PhoneCollection:
        phone_filter = query.filter

        if not query.is_paginated:
            items = await self._repository.find_summaries(phone_filter)
            logger.debug("Listed %d phones (q=%r, brand=%r)", len(items), phone_filter.q, phone_filter.brand)
            return PhoneCollection(
                items=items,
                links={
                    "self": links.collection(q=phone_filter.q, brand=phone_filter.brand),
                    "collection": links.collection(),
                },
            )

        total = await self._repository.count(phone_filter)
        items = []
        if query.skip < total:
            items = await self._repository.find_summaries(
                phone_filter, skip=query.skip, limit=query.limit
            )
        pagination = Pagination(
            page=query.page,
            limit=query.limit,
            total_items=total,
            count=len(items),
        )
        logger.debug(
            "Listed page %d/%d of phones (%d of %d items)",
            pagination.page, pagination.total_pages, pagination.count, total,
        )
        return PhoneCollection(
            items=items,
            pagination=pagination,
            links=self._page_links(query, pagination, links),
        )

    @staticmethod
    def _page_links(query: PhoneQuery, pagination: Pagination, links: LinkBuilder) -> dict[str, str]:
        def page_href(page: int) -> str:
            return links.collection(
                q=query.filter.q,
                brand=query.filter.brand,
                page=page,
                limit=pagination.limit,
            )

        result = {
            "self": page_href(pagination.page),
            "collection": links.collection(),
        }
        if pagination.has_next:
            result["next"] = page_href(pagination.page + 1)
        if pagination.has_prev:
            result["prev"] = page_href(pagination.prev_page)
        return result
