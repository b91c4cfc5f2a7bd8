# pylint: disable=too-many-instance-attributes
"""
Listing Entity - read-only marketplace listing
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import FrozenSet, Optional, Tuple

from dormdash.domain.value_objects.listing_enums import Category, Condition
from dormdash.infrastructure.utilities.exceptions import InvalidPriceError, ValidationError


@dataclass(frozen=True)
class Listing:
    """Listing domain entity"""

    id: int
    title: str
    price_cents: int
    seller_id: str = ""
    category: Category = Category.OTHER
    condition: Condition = Condition.GOOD
    description: Optional[str] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    image_urls: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate and normalise the listing after initialization"""
        if isinstance(self.price_cents, bool) or not isinstance(self.price_cents, int):
            raise InvalidPriceError(self.price_cents)
        if self.price_cents < 0:
            raise InvalidPriceError(self.price_cents)

        # Records from the backend carry plain strings
        try:
            object.__setattr__(self, "category", Category(self.category))
            object.__setattr__(self, "condition", Condition(self.condition))
        except ValueError as e:
            raise ValidationError(str(e), "category/condition") from e

        # Naive timestamps are taken as UTC so listings always compare
        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.replace(tzinfo=UTC))

        object.__setattr__(self, "tags", frozenset(self.tags or ()))
        object.__setattr__(self, "image_urls", tuple(self.image_urls or ()))

    @classmethod
    def from_record(cls, record: dict) -> "Listing":
        """Build a listing from a backend row"""
        created_at = record.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            id=record["id"],
            title=record["title"],
            price_cents=record["price_cents"],
            seller_id=record.get("user_id") or record.get("seller_id") or "",
            category=record.get("category") or Category.OTHER,
            condition=record.get("condition") or Condition.GOOD,
            description=record.get("description"),
            tags=record.get("tags") or (),
            created_at=created_at or datetime.now(UTC),
            image_urls=record.get("image_urls") or (),
        )
