"""Domain entity: pure Python business object for a phone catalog entry."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Fields a client may change after creation; id and last_modified are server-owned.
MUTABLE_FIELDS = ("title", "brand", "description", "image_url", "reviews", "has_bookmark")


@dataclass
class Phone:
    """Core domain entity representing one phone record.

    ``id`` is assigned by the store on creation and never changes afterwards.
    ``last_modified`` only moves forward, see :meth:`touch`.
    """

    title: str
    brand: str
    description: str
    image_url: str
    reviews: str | None = None
    has_bookmark: bool = False
    id: str | None = None
    last_modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: object) -> None:
        """Apply the given field changes and refresh ``last_modified``."""
        for name, value in changes.items():
            if name not in MUTABLE_FIELDS:
                raise AttributeError(f"Phone field '{name}' is not mutable")
            setattr(self, name, value)
        self.touch()

    def touch(self) -> None:
        """Advance ``last_modified`` to now, never backwards."""
        now = datetime.now(timezone.utc)
        self.last_modified = max(now, self.last_modified)


@dataclass
class PhoneSummary:
    """Minimal projection of a phone used in collection listings."""

    id: str
    title: str
    brand: str
