"""
Money value object

Represents monetary amounts as an integer count of minor units (cents).
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from dormdash.infrastructure.utilities.exceptions import InvalidPriceError


@dataclass(frozen=True, order=True)
class Money:
    """
    Money value object over whole cents, never negative
    """

    cents: int

    def __post_init__(self):
        """Validate money object on creation"""
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidPriceError(self.cents)
        if self.cents < 0:
            raise InvalidPriceError(self.cents)

    @classmethod
    def zero(cls) -> "Money":
        """Create zero money amount"""
        return cls(0)

    def add(self, other: "Money") -> "Money":
        """Add two money amounts"""
        return Money(self.cents + other.cents)

    def multiply(self, quantity: int) -> "Money":
        """Multiply by a whole quantity"""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise ValueError(f"Cannot multiply money by {quantity!r}")
        return Money(self.cents * quantity)

    def apply_rate(self, rate: Union[float, Decimal]) -> "Money":
        """Scale by a rate, rounding half up to the nearest cent"""
        if not isinstance(rate, Decimal):
            rate = Decimal(str(rate))
        if not rate.is_finite() or rate < 0:
            raise ValueError(f"Rate must be a finite non-negative number, got {rate}")
        scaled = (Decimal(self.cents) * rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return Money(int(scaled))

    def is_zero(self) -> bool:
        """Check if amount is zero"""
        return self.cents == 0

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __mul__(self, quantity: int) -> "Money":
        return self.multiply(quantity)

    def __rmul__(self, quantity: int) -> "Money":
        return self.multiply(quantity)

    def __int__(self) -> int:
        return self.cents
