"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .delivery_enums import DasherStatus, DeliveryStatus, VehicleType
from .listing_enums import Category, Condition, SortOption
from .money import Money

__all__ = [
    "Money",
    "Category",
    "Condition",
    "SortOption",
    "VehicleType",
    "DasherStatus",
    "DeliveryStatus",
]
