"""Concrete repository implementation for Phone backed by MongoDB (pymongo async)."""

import re
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from phone_catalog.application.interfaces import PhoneRepository
from phone_catalog.domain.entities import Phone, PhoneFilter, PhoneSummary
from phone_catalog.domain.exceptions import InvalidIdentifierError
from phone_catalog.infrastructure.database.client import PHONES_COLLECTION

_SUMMARY_PROJECTION = {"title": 1, "brand": 1}


def _to_object_id(phone_id: str) -> ObjectId:
    if not ObjectId.is_valid(phone_id):
        raise InvalidIdentifierError(phone_id)
    return ObjectId(phone_id)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def build_query(phone_filter: PhoneFilter) -> dict[str, Any]:
    """Translate a PhoneFilter into a Mongo query; user text is matched literally."""
    query: dict[str, Any] = {}
    if phone_filter.brand is not None:
        query["brand"] = {"$regex": f"^{re.escape(phone_filter.brand)}$", "$options": "i"}
    if phone_filter.q is not None:
        pattern = {"$regex": re.escape(phone_filter.q), "$options": "i"}
        query["$or"] = [
            {"title": pattern},
            {"brand": pattern},
            {"description": pattern},
        ]
    return query


class MongoPhoneRepository(PhoneRepository):
    """Implements the PhoneRepository port on a MongoDB collection."""

    def __init__(self, database: AsyncDatabase):
        self._collection = database[PHONES_COLLECTION]

    def _to_entity(self, doc: dict[str, Any]) -> Phone:
        """Map Mongo document → domain entity."""
        return Phone(
            id=str(doc["_id"]),
            title=doc["title"],
            brand=doc["brand"],
            description=doc["description"],
            image_url=doc.get("imageUrl", ""),
            reviews=doc.get("reviews"),
            has_bookmark=bool(doc.get("hasBookmark", False)),
            last_modified=_as_utc(doc["lastModified"]),
        )

    def _to_document(self, entity: Phone) -> dict[str, Any]:
        """Map domain entity → Mongo document (without ``_id``)."""
        doc: dict[str, Any] = {
            "title": entity.title,
            "brand": entity.brand,
            "description": entity.description,
            "imageUrl": entity.image_url,
            "hasBookmark": entity.has_bookmark,
            "lastModified": entity.last_modified,
        }
        if entity.reviews is not None:
            doc["reviews"] = entity.reviews
        return doc

    async def get_by_id(self, phone_id: str) -> Phone | None:
        doc = await self._collection.find_one({"_id": _to_object_id(phone_id)})
        return self._to_entity(doc) if doc else None

    async def find_summaries(
        self,
        phone_filter: PhoneFilter,
        *,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[PhoneSummary]:
        cursor = (
            self._collection.find(build_query(phone_filter), _SUMMARY_PROJECTION)
            .sort("_id", 1)
            .skip(skip)
        )
        if limit is not None:
            cursor = cursor.limit(limit)
        return [
            PhoneSummary(id=str(doc["_id"]), title=doc["title"], brand=doc["brand"])
            async for doc in cursor
        ]

    async def count(self, phone_filter: PhoneFilter) -> int:
        return await self._collection.count_documents(build_query(phone_filter))

    async def create(self, phone: Phone) -> Phone:
        result = await self._collection.insert_one(self._to_document(phone))
        phone.id = str(result.inserted_id)
        return phone

    async def create_many(self, phones: list[Phone]) -> int:
        if not phones:
            return 0
        result = await self._collection.insert_many([self._to_document(p) for p in phones])
        for phone, inserted_id in zip(phones, result.inserted_ids):
            phone.id = str(inserted_id)
        return len(result.inserted_ids)

    async def update(self, phone: Phone) -> Phone | None:
        if phone.id is None:
            raise ValueError("Cannot update a phone that has no id")
        changes: dict[str, Any] = {"$set": self._to_document(phone)}
        if phone.reviews is None:
            changes["$unset"] = {"reviews": ""}
        doc = await self._collection.find_one_and_update(
            {"_id": _to_object_id(phone.id)},
            changes,
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(doc) if doc else None

    async def delete(self, phone_id: str) -> bool:
        result = await self._collection.delete_one({"_id": _to_object_id(phone_id)})
        return result.deleted_count > 0

    async def delete_all(self) -> int:
        result = await self._collection.delete_many({})
        return result.deleted_count
