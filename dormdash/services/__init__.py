"""
Services package - the pure logic modules consumed by the UI layer
"""

from . import (
    address_service,
    cart_service,
    catalog_service,
    checkout_service,
    dasher_service,
    identity_service,
)

__all__ = [
    "address_service",
    "cart_service",
    "catalog_service",
    "checkout_service",
    "dasher_service",
    "identity_service",
]
