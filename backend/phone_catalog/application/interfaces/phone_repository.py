"""Abstract repository interface (port) for Phone persistence."""

from abc import ABC, abstractmethod

from phone_catalog.domain.entities import Phone, PhoneFilter, PhoneSummary


class PhoneRepository(ABC):
    """Port for phone persistence: implemented in the infrastructure layer.

    Methods taking an id raise ``InvalidIdentifierError`` when the id does
    not fit the store's identifier format.
    """

    @abstractmethod
    async def get_by_id(self, phone_id: str) -> Phone | None:
        """Retrieve a single phone by its id."""
        ...

    @abstractmethod
    async def find_summaries(
        self,
        phone_filter: PhoneFilter,
        *,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[PhoneSummary]:
        """Return id/title/brand projections in insertion order; no limit means all."""
        ...

    @abstractmethod
    async def count(self, phone_filter: PhoneFilter) -> int:
        """Count phones matching the filter."""
        ...

    @abstractmethod
    async def create(self, phone: Phone) -> Phone:
        """Persist a new phone and return it with its assigned id."""
        ...

    @abstractmethod
    async def create_many(self, phones: list[Phone]) -> int:
        """Persist several phones at once. Returns the number inserted."""
        ...

    @abstractmethod
    async def update(self, phone: Phone) -> Phone | None:
        """Overwrite the stored state of an existing phone. None if it vanished."""
        ...

    @abstractmethod
    async def delete(self, phone_id: str) -> bool:
        """Delete a phone. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every phone. Returns the number removed."""
        ...
