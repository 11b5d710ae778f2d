"""Application service (use case) for single-phone operations and seeding."""

import logging
from datetime import datetime

from phone_catalog.application.interfaces import PhoneRepository
from phone_catalog.application.schemas.phone import PhoneCreate, PhonePatch, PhoneReplace
from phone_catalog.application.services.phone_seeder import generate_phones, placeholder_image_url
from phone_catalog.domain.entities import Phone
from phone_catalog.domain.exceptions import EntityNotFoundError, FieldValidationError

logger = logging.getLogger(__name__)


class PhoneService:
    """Orchestrates phone CRUD logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: PhoneRepository,
        *,
        placeholder_image_base: str = "https://picsum.photos/seed",
        seed_default_amount: int = 10,
        seed_min_amount: int = 5,
        seed_max_amount: int = 1000,
    ):
        self._repository = repository
        self._placeholder_image_base = placeholder_image_base
        self._seed_default_amount = seed_default_amount
        self._seed_min_amount = seed_min_amount
        self._seed_max_amount = max(seed_max_amount, seed_min_amount)

    async def get_phone(self, phone_id: str) -> Phone:
        phone = await self._repository.get_by_id(phone_id)
        if phone is None:
            raise EntityNotFoundError("Phone", phone_id)
        return phone

    async def get_phone_if_modified(
        self, phone_id: str, since: datetime | None
    ) -> Phone | None:
        """Return the phone, or None when it has not changed after ``since``.

        Comparison happens at whole-second resolution, the precision of
        HTTP dates, so edits within the same second count as unmodified.
        """
        phone = await self.get_phone(phone_id)
        if since is not None and truncate_to_seconds(phone.last_modified) <= since:
            return None
        return phone

    async def create_phone(self, data: PhoneCreate) -> Phone:
        phone = Phone(
            title=data.title,
            brand=data.brand,
            description=data.description,
            image_url=data.image_url or placeholder_image_url(self._placeholder_image_base),
            reviews=data.reviews,
            has_bookmark=bool(data.has_bookmark),
        )
        created = await self._repository.create(phone)
        logger.info("Created phone %s (%s %s)", created.id, created.brand, created.title)
        return created

    async def replace_phone(self, phone_id: str, data: PhoneReplace) -> Phone:
        phone = await self.get_phone(phone_id)

        changes: dict[str, object] = {
            "title": data.title,
            "brand": data.brand,
            "description": data.description,
        }
        # Optional fields absent from the body keep their stored value.
        for name in ("image_url", "reviews", "has_bookmark"):
            value = getattr(data, name)
            if value is not None:
                changes[name] = value

        phone.update(**changes)
        return await self._save(phone)

    async def patch_phone(self, phone_id: str, data: PhonePatch) -> Phone:
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise FieldValidationError("No valid fields to patch")

        phone = await self.get_phone(phone_id)
        phone.update(**changes)
        return await self._save(phone)

    async def delete_phone(self, phone_id: str) -> None:
        deleted = await self._repository.delete(phone_id)
        if not deleted:
            raise EntityNotFoundError("Phone", phone_id)
        logger.info("Deleted phone %s", phone_id)

    async def seed(self, amount: int | None = None) -> int:
        """Replace the whole collection with generated phones.

        Clear and insert are separate store calls; readers may briefly see
        an empty collection in between.
        """
        if amount is None:
            amount = self._seed_default_amount
        amount = min(max(amount, self._seed_min_amount), self._seed_max_amount)

        removed = await self._repository.delete_all()
        inserted = await self._repository.create_many(
            generate_phones(amount, self._placeholder_image_base)
        )
        logger.info("Seeded %d phones (removed %d)", inserted, removed)
        return inserted

    async def _save(self, phone: Phone) -> Phone:
        saved = await self._repository.update(phone)
        if saved is None:
            # Deleted between read and write.
            raise EntityNotFoundError("Phone", phone.id or "")
        logger.info("Updated phone %s", saved.id)
        return saved


def truncate_to_seconds(value: datetime) -> datetime:
    return value.replace(microsecond=0)
