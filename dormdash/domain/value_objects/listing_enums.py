"""
Listing classification value objects
"""

from enum import Enum


class Category(str, Enum):
    """Marketplace category"""

    TEXTBOOKS = "textbooks"
    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    CLOTHING = "clothing"
    SPORTS = "sports"
    KITCHEN = "kitchen"
    DECOR = "decor"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_LABELS = {
    Category.TEXTBOOKS: "Textbooks",
    Category.ELECTRONICS: "Electronics",
    Category.FURNITURE: "Furniture",
    Category.CLOTHING: "Clothing",
    Category.SPORTS: "Sports & Outdoors",
    Category.KITCHEN: "Kitchen",
    Category.DECOR: "Home Decor",
    Category.OTHER: "Other",
}

_CATEGORY_ICONS = {
    Category.TEXTBOOKS: "book",
    Category.ELECTRONICS: "laptop",
    Category.FURNITURE: "bed",
    Category.CLOTHING: "tshirt-crew",
    Category.SPORTS: "basketball",
    Category.KITCHEN: "pot-steam",
    Category.DECOR: "lamp",
    Category.OTHER: "package-variant",
}


class Condition(str, Enum):
    """Item condition, totally ordered by rank (higher is better)"""

    NEW = "new"
    LIKE_NEW = "like_new"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def rank(self) -> int:
        return _CONDITION_RANKS[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_CONDITION_RANKS = {
    Condition.NEW: 5,
    Condition.LIKE_NEW: 4,
    Condition.GOOD: 3,
    Condition.FAIR: 2,
    Condition.POOR: 1,
}


class SortOption(str, Enum):
    """Listing sort keys"""

    NEWEST = "newest"
    PRICE_LOW = "price_low"
    PRICE_HIGH = "price_high"
    CONDITION = "condition"
