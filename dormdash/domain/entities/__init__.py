"""
Domain entities package
"""

from .address_entity import Address
from .cart_entity import Cart, CartLine, OrderTotals, PaymentRequest
from .dasher_entity import Dasher, DeliveryAssignment
from .listing_entity import Listing

__all__ = [
    "Address",
    "Cart",
    "CartLine",
    "OrderTotals",
    "PaymentRequest",
    "Dasher",
    "DeliveryAssignment",
    "Listing",
]
