"""
Test configuration and fixtures for the DormDash core
"""

import os
from datetime import datetime
from unittest.mock import patch

import pytest

from dormdash.config import reset_config
from dormdash.domain.entities import Address, Cart, CartLine, Dasher, Listing
from dormdash.domain.value_objects import Category, Condition, DasherStatus, VehicleType


# Mock environment variables for testing
@pytest.fixture(autouse=True)
def mock_env():
    """Isolate every test from the caller's environment and cached settings"""
    test_env = {
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'DEBUG',
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


@pytest.fixture
def textbook():
    """Listing sold by seller1"""
    return Listing(id=1, title="Textbook", price_cents=5000, seller_id="seller1")


@pytest.fixture
def calculator():
    """Second listing from seller1"""
    return Listing(id=2, title="Calculator", price_cents=3000, seller_id="seller1")


@pytest.fixture
def notebook():
    """Listing sold by seller2"""
    return Listing(id=3, title="Notebook", price_cents=1000, seller_id="seller2")


@pytest.fixture
def checkout_cart():
    """1000 x 2 + 500 x 1 = 2500 cents"""
    return Cart((
        CartLine(item_id=1, unit_price_cents=1000, quantity=2, seller_id="seller1"),
        CartLine(item_id=2, unit_price_cents=500, quantity=1, seller_id="seller1"),
    ))


@pytest.fixture
def calculus_listing():
    return Listing(
        id=1,
        title="Calculus Textbook",
        description="Stewart 8th edition",
        price_cents=5000,
        category=Category.TEXTBOOKS,
        condition=Condition.GOOD,
        tags={"math", "stem"},
        created_at=datetime(2024, 1, 1),
        image_urls=("url1",),
        seller_id="user1",
    )


@pytest.fixture
def browse_listings():
    """Three listings with distinct dates, prices and conditions"""
    return [
        Listing(id=1, title="Old Item", price_cents=5000, condition=Condition.FAIR,
                created_at=datetime(2024, 1, 1)),
        Listing(id=2, title="New Item", price_cents=3000, condition=Condition.NEW,
                created_at=datetime(2024, 1, 15)),
        Listing(id=3, title="Mid Item", price_cents=7000, condition=Condition.GOOD,
                created_at=datetime(2024, 1, 10)),
    ]


@pytest.fixture
def saved_addresses():
    return [
        Address(id=1, building_name="Gutmann", is_default=False),
        Address(id=2, building_name="Hill", is_default=True),
        Address(id=3, building_name="Rodin", is_default=False),
    ]


@pytest.fixture
def available_dasher():
    return Dasher(
        id="1",
        user_id="user1",
        vehicle_type=VehicleType.BIKE,
        is_active=True,
        current_status=DasherStatus.AVAILABLE,
        total_deliveries=10,
        average_rating=4.5,
    )
