"""
Cart Entity - immutable cart snapshot and derived checkout values
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from dormdash.infrastructure.utilities.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CartLine:
    """One item/quantity pairing within a cart"""

    item_id: int
    unit_price_cents: int
    quantity: int
    seller_id: str = ""

    def __post_init__(self):
        """Validate the line after initialization"""
        if not _is_whole(self.unit_price_cents) or self.unit_price_cents < 0:
            raise InvalidPriceError(self.unit_price_cents)
        if not _is_whole(self.quantity) or self.quantity < 1:
            raise InvalidQuantityError(self.quantity)

    @property
    def line_total_cents(self) -> int:
        """Price of this line"""
        return self.unit_price_cents * self.quantity

    def with_quantity(self, quantity: int) -> "CartLine":
        """Copy of this line with a different quantity"""
        return CartLine(self.item_id, self.unit_price_cents, quantity, self.seller_id)


@dataclass(frozen=True)
class Cart:
    """Ordered, immutable sequence of cart lines, at most one per item"""

    lines: Tuple[CartLine, ...] = field(default_factory=tuple)

    def __post_init__(self):
        lines = tuple(self.lines)
        item_ids = [line.item_id for line in lines]
        if len(item_ids) != len(set(item_ids)):
            raise ValidationError("Cart cannot hold two lines for the same item", "lines")
        object.__setattr__(self, "lines", lines)

    @classmethod
    def empty(cls) -> "Cart":
        """Create a cart with no lines"""
        return cls(())

    def find_line(self, item_id: int) -> Optional[CartLine]:
        """Line for ``item_id``, if any"""
        for line in self.lines:
            if line.item_id == item_id:
                return line
        return None

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class OrderTotals:
    """Checkout amounts derived from a cart snapshot, all in cents"""

    subtotal_cents: int
    tax_cents: int
    delivery_fee_cents: int
    total_cents: int

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "subtotal_cents": self.subtotal_cents,
            "tax_cents": self.tax_cents,
            "delivery_fee_cents": self.delivery_fee_cents,
            "total_cents": self.total_cents,
        }


@dataclass(frozen=True)
class PaymentRequest:
    """What the payment gateway needs to open a checkout session"""

    description: str
    amount_cents: int
    currency: str = "USD"
