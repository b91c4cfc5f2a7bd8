"""
Cart management service

Every function takes a Cart snapshot and returns a new value; the input is
never modified, so callers can diff old and new carts to decide what to
persist or re-render.
"""

import logging
from typing import List, Protocol

from dormdash.domain.entities.cart_entity import Cart, CartLine
from dormdash.infrastructure.utilities.exceptions import InvalidQuantityError

logger = logging.getLogger(__name__)


class Purchasable(Protocol):
    """Anything that can be put in a cart (a Listing qualifies)"""

    id: int
    price_cents: int
    seller_id: str


def _require_positive_quantity(quantity) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        logger.warning("Rejected cart quantity %r", quantity)
        raise InvalidQuantityError(quantity)


def add_to_cart(cart: Cart, item: Purchasable, quantity: int = 1) -> Cart:
    """Add ``quantity`` of ``item``, merging into an existing line for the same item"""
    _require_positive_quantity(quantity)

    existing = cart.find_line(item.id)
    if existing is not None:
        return Cart(
            tuple(
                line.with_quantity(line.quantity + quantity) if line.item_id == item.id else line
                for line in cart.lines
            )
        )

    new_line = CartLine(
        item_id=item.id,
        unit_price_cents=item.price_cents,
        quantity=quantity,
        seller_id=item.seller_id,
    )
    return Cart(cart.lines + (new_line,))


def remove_from_cart(cart: Cart, item_id: int) -> Cart:
    """Drop the line for ``item_id``; unknown ids are a no-op"""
    return Cart(tuple(line for line in cart.lines if line.item_id != item_id))


def update_quantity(cart: Cart, item_id: int, quantity: int) -> Cart:
    """Set a line's quantity; zero or less removes the line"""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        logger.warning("Rejected cart quantity %r", quantity)
        raise InvalidQuantityError(quantity)
    if quantity <= 0:
        return remove_from_cart(cart, item_id)

    return Cart(
        tuple(
            line.with_quantity(quantity) if line.item_id == item_id else line
            for line in cart.lines
        )
    )


def get_cart_total(cart: Cart) -> int:
    """Subtotal in cents"""
    return sum(line.line_total_cents for line in cart.lines)


def get_cart_item_count(cart: Cart) -> int:
    """Number of units in the cart (not lines)"""
    return sum(line.quantity for line in cart.lines)


def is_cart_empty(cart: Cart) -> bool:
    return len(cart.lines) == 0


def get_seller_ids(cart: Cart) -> List[str]:
    """Distinct seller ids in the order they first appear"""
    return list(dict.fromkeys(line.seller_id for line in cart.lines))


def has_items_from_multiple_sellers(cart: Cart) -> bool:
    """True when the cart would have to be split across sellers"""
    if len(cart.lines) <= 1:
        return False
    return len(set(line.seller_id for line in cart.lines)) > 1
