"""
Checkout Service Tests - tax rounding, delivery fee and payment handoff
"""

import os
from unittest.mock import patch

import pytest

from dormdash.config import reset_config
from dormdash.domain.entities import Cart, CartLine, OrderTotals
from dormdash.infrastructure.utilities.exceptions import CartEmptyError, ValidationError
from dormdash.services.checkout_service import (
    build_payment_request,
    calculate_delivery_fee,
    calculate_order_totals,
    calculate_tax,
    describe_order,
    summarize_cart,
)


class TestTax:
    """Test the canonical tax rounding rule"""

    def test_eight_percent_of_round_amount(self):
        """Test 8% of $25.00"""
        assert calculate_tax(2500, 0.08) == 200

    def test_rounds_to_nearest_cent(self):
        """Test 98.72 cents rounds to 99"""
        assert calculate_tax(1234, 0.08) == 99

    def test_rounds_half_up(self):
        """Test an exact half cent rounds up"""
        # 50 * 0.01 = 0.5
        assert calculate_tax(50, 0.01) == 1
        # 150 * 0.01 = 1.5
        assert calculate_tax(150, 0.01) == 2

    def test_uses_configured_rate_by_default(self):
        """Test the default rate comes from settings"""
        assert calculate_tax(10000) == 800

    def test_rate_from_environment(self):
        """Test TAX_RATE overrides the default"""
        reset_config()
        with patch.dict(os.environ, {"TAX_RATE": "0.06"}):
            assert calculate_tax(10000) == 600

    def test_zero_subtotal(self):
        """Test zero in, zero out"""
        assert calculate_tax(0, 0.08) == 0

    @pytest.mark.parametrize("subtotal", [-1, 12.5, None])
    def test_rejects_invalid_subtotal(self, subtotal):
        """Test negative or fractional subtotals are contract violations"""
        with pytest.raises(ValidationError):
            calculate_tax(subtotal, 0.08)

    @pytest.mark.parametrize("rate", [-0.01, float("inf"), float("nan")])
    def test_rejects_invalid_rate(self, rate):
        """Test nonsensical tax rates are refused"""
        with pytest.raises(ValidationError):
            calculate_tax(1000, rate)


class TestDeliveryFee:
    """Test delivery fee selection"""

    def test_delivery_orders_pay_fixed_fee(self):
        """Test $4.00 delivery fee"""
        assert calculate_delivery_fee(True) == 400

    def test_pickup_orders_pay_nothing(self):
        """Test pickup is free"""
        assert calculate_delivery_fee(False) == 0

    def test_explicit_fee_override(self):
        """Test explicit fee argument"""
        assert calculate_delivery_fee(True, 250) == 250

    @pytest.mark.parametrize("fee", [-500, -1, 2.5, "400", True])
    def test_invalid_fee_override_rejected(self, fee):
        """Test negative or non-integer fees are refused"""
        with pytest.raises(ValidationError) as exc_info:
            calculate_delivery_fee(True, fee)
        assert exc_info.value.field == "fee_cents"

    def test_pickup_ignores_fee_override(self):
        """Test pickup stays free whatever fee is passed"""
        assert calculate_delivery_fee(False, 250) == 0


class TestOrderTotals:
    """Test full order total computation"""

    def test_totals_with_delivery(self, checkout_cart):
        """Test $25.00 + $2.00 tax + $4.00 delivery = $31.00"""
        totals = summarize_cart(checkout_cart, is_delivery=True, tax_rate=0.08)
        assert totals == OrderTotals(
            subtotal_cents=2500, tax_cents=200, delivery_fee_cents=400, total_cents=3100
        )

    def test_totals_for_pickup(self, checkout_cart):
        """Test $25.00 + $2.00 tax = $27.00"""
        totals = summarize_cart(checkout_cart, is_delivery=False, tax_rate=0.08)
        assert totals.total_cents == 2700
        assert totals.delivery_fee_cents == 0

    def test_totals_are_integers(self):
        """Test every component stays in whole cents"""
        totals = calculate_order_totals(599, 0.08, True)
        assert totals.to_dict() == {
            "subtotal_cents": 599,
            "tax_cents": 48,
            "delivery_fee_cents": 400,
            "total_cents": 1047,
        }
        assert all(isinstance(value, int) for value in totals.to_dict().values())

    def test_zero_subtotal(self):
        """Test an empty order totals zero for pickup"""
        assert calculate_order_totals(0, 0.08, False).total_cents == 0


class TestPaymentRequest:
    """Test the payment gateway handoff"""

    def test_builds_request_from_cart(self, checkout_cart):
        """Test amount and description"""
        request = build_payment_request(checkout_cart, is_delivery=True)
        assert request.amount_cents == 3100
        assert request.description == "Order (2 items)"
        assert request.currency == "USD"

    def test_single_line_description(self):
        """Test singular wording"""
        cart = Cart((CartLine(item_id=1, unit_price_cents=100, quantity=3),))
        assert describe_order(cart) == "Order (1 item)"

    def test_empty_cart_cannot_be_paid(self):
        """Test empty cart is refused"""
        with pytest.raises(CartEmptyError) as exc_info:
            build_payment_request(Cart.empty(), is_delivery=False)
        assert exc_info.value.error_code == "BUSINESS_ERROR"
