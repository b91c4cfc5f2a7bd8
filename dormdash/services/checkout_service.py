"""
Checkout service

Order totals are computed in integer cents. Tax is the only rounded
component: ``subtotal * rate`` rounded half up to a whole cent, once.
"""

import logging
import math
from typing import Optional

from dormdash.config import get_config
from dormdash.domain.entities.cart_entity import Cart, OrderTotals, PaymentRequest
from dormdash.domain.value_objects.money import Money
from dormdash.infrastructure.utilities.exceptions import CartEmptyError, ValidationError
from dormdash.services.cart_service import get_cart_total

logger = logging.getLogger(__name__)


def _resolve_tax_rate(tax_rate: Optional[float]) -> float:
    if tax_rate is None:
        return get_config().tax_rate
    if isinstance(tax_rate, bool) or not isinstance(tax_rate, (int, float)):
        raise ValidationError(f"Tax rate must be a number, got {tax_rate!r}", "tax_rate")
    if not math.isfinite(tax_rate) or tax_rate < 0:
        logger.warning("Rejected tax rate %r", tax_rate)
        raise ValidationError(f"Tax rate must be finite and non-negative, got {tax_rate!r}", "tax_rate")
    return tax_rate


def _require_subtotal(subtotal_cents) -> Money:
    if isinstance(subtotal_cents, bool) or not isinstance(subtotal_cents, int) or subtotal_cents < 0:
        logger.warning("Rejected subtotal %r", subtotal_cents)
        raise ValidationError(
            f"Subtotal must be a non-negative integer number of cents, got {subtotal_cents!r}",
            "subtotal_cents",
        )
    return Money(subtotal_cents)


def calculate_tax(subtotal_cents: int, tax_rate: Optional[float] = None) -> int:
    """Tax in cents, rounded half up"""
    subtotal = _require_subtotal(subtotal_cents)
    return subtotal.apply_rate(_resolve_tax_rate(tax_rate)).cents


def calculate_delivery_fee(is_delivery: bool, fee_cents: Optional[int] = None) -> int:
    """Flat delivery fee for delivery orders, zero for pickup"""
    if not is_delivery:
        return 0
    if fee_cents is None:
        return get_config().delivery_fee_cents
    if isinstance(fee_cents, bool) or not isinstance(fee_cents, int) or fee_cents < 0:
        logger.warning("Rejected delivery fee %r", fee_cents)
        raise ValidationError(
            f"Delivery fee must be a non-negative integer number of cents, got {fee_cents!r}",
            "fee_cents",
        )
    return fee_cents


def calculate_order_totals(
    subtotal_cents: int, tax_rate: Optional[float] = None, is_delivery: bool = False
) -> OrderTotals:
    """Derive tax, delivery fee and grand total from a subtotal"""
    tax_cents = calculate_tax(subtotal_cents, tax_rate)
    delivery_fee_cents = calculate_delivery_fee(is_delivery)
    return OrderTotals(
        subtotal_cents=subtotal_cents,
        tax_cents=tax_cents,
        delivery_fee_cents=delivery_fee_cents,
        total_cents=subtotal_cents + tax_cents + delivery_fee_cents,
    )


def summarize_cart(cart: Cart, is_delivery: bool, tax_rate: Optional[float] = None) -> OrderTotals:
    """Order totals for a cart snapshot"""
    return calculate_order_totals(get_cart_total(cart), tax_rate, is_delivery)


def describe_order(cart: Cart) -> str:
    """Human-readable order name shown on the payment page"""
    count = len(cart.lines)
    return f"Order ({count} {'item' if count == 1 else 'items'})"


def build_payment_request(
    cart: Cart, is_delivery: bool, tax_rate: Optional[float] = None
) -> PaymentRequest:
    """Amount and description to hand to the payment gateway"""
    if not cart.lines:
        raise CartEmptyError()

    totals = summarize_cart(cart, is_delivery, tax_rate)
    logger.info(
        "Built payment request: %d lines, total %d cents, delivery=%s",
        len(cart.lines),
        totals.total_cents,
        is_delivery,
    )
    return PaymentRequest(
        description=describe_order(cart),
        amount_cents=totals.total_cents,
        currency=get_config().currency,
    )
