"""
Catalog service - listing search, filtering, sorting and draft validation
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from dormdash.domain.entities.listing_entity import Listing
from dormdash.domain.value_objects.listing_enums import Category, Condition, SortOption
from dormdash.infrastructure.utilities.constants import ListingLimits
from dormdash.infrastructure.utilities.exceptions import ValidationError

logger = logging.getLogger(__name__)


def matches_search(listing: Listing, query: str) -> bool:
    """Case-insensitive substring match on title, description and tags"""
    needle = (query or "").strip().lower()
    if not needle:
        return True

    if needle in listing.title.lower():
        return True
    if listing.description and needle in listing.description.lower():
        return True
    return any(needle in tag.lower() for tag in listing.tags or ())


def matches_category(listing: Listing, category: Optional[Category]) -> bool:
    if category is None:
        return True
    return listing.category == category


def matches_price_range(
    listing: Listing, min_price_cents: Optional[int], max_price_cents: Optional[int]
) -> bool:
    """Inclusive bounds; either bound may be omitted"""
    if min_price_cents is not None and listing.price_cents < min_price_cents:
        return False
    if max_price_cents is not None and listing.price_cents > max_price_cents:
        return False
    return True


def matches_condition(listing: Listing, min_condition: Optional[Condition]) -> bool:
    """At least as good as ``min_condition``"""
    if min_condition is None:
        return True
    try:
        threshold = Condition(min_condition)
    except ValueError as e:
        raise ValidationError(str(e), "min_condition") from e
    return listing.condition.rank >= threshold.rank


_SORT_KEYS = {
    SortOption.NEWEST: (lambda listing: listing.created_at, True),
    SortOption.PRICE_LOW: (lambda listing: listing.price_cents, False),
    SortOption.PRICE_HIGH: (lambda listing: listing.price_cents, True),
    SortOption.CONDITION: (lambda listing: listing.condition.rank, True),
}


def sort_listings(listings: Iterable[Listing], sort_key: Union[SortOption, str, None]) -> List[Listing]:
    """
    Return a new, stably sorted list.

    An unrecognised sort key returns a copy in input order.
    """
    result = list(listings)
    try:
        option = SortOption(sort_key)
    except ValueError:
        logger.debug("Unknown sort key %r, keeping input order", sort_key)
        return result

    key, descending = _SORT_KEYS[option]
    # list.sort stays stable with reverse=True
    result.sort(key=key, reverse=descending)
    return result


@dataclass(frozen=True)
class ListingFilters:
    """Browse screen selections, owned by the caller"""

    query: str = ""
    category: Optional[Category] = None
    min_price_cents: Optional[int] = None
    max_price_cents: Optional[int] = None
    min_condition: Optional[Condition] = None
    sort: Optional[SortOption] = None

    def matches(self, listing: Listing) -> bool:
        return (
            matches_search(listing, self.query)
            and matches_category(listing, self.category)
            and matches_price_range(listing, self.min_price_cents, self.max_price_cents)
            and matches_condition(listing, self.min_condition)
        )


def filter_listings(listings: Iterable[Listing], filters: ListingFilters) -> List[Listing]:
    """Apply every filter, then the requested sort"""
    matched = [listing for listing in listings if filters.matches(listing)]
    if filters.sort is None:
        return matched
    return sort_listings(matched, filters.sort)


# ---------------------------------------------------------------------------
# Listing draft validation
# ---------------------------------------------------------------------------

def is_valid_title(title: str) -> bool:
    length = len(title.strip())
    return ListingLimits.MIN_TITLE_LENGTH <= length <= ListingLimits.MAX_TITLE_LENGTH


def is_valid_description(description: str) -> bool:
    return len(description.strip()) <= ListingLimits.MAX_DESCRIPTION_LENGTH


def is_valid_price_cents(price_cents) -> bool:
    if isinstance(price_cents, bool) or not isinstance(price_cents, int):
        return False
    return 0 <= price_cents <= ListingLimits.MAX_PRICE_CENTS


def has_required_images(image_urls: Sequence[str]) -> bool:
    return ListingLimits.MIN_IMAGES <= len(image_urls) <= ListingLimits.MAX_IMAGES


def validate_listing_draft(
    title: str, description: str, price_cents, image_urls: Sequence[str]
) -> List[str]:
    """Collect every problem with a listing form"""
    errors = []

    if not is_valid_title(title):
        errors.append(
            f"Title must be between {ListingLimits.MIN_TITLE_LENGTH} and "
            f"{ListingLimits.MAX_TITLE_LENGTH} characters"
        )
    if not is_valid_description(description or ""):
        errors.append(
            f"Description cannot exceed {ListingLimits.MAX_DESCRIPTION_LENGTH} characters"
        )
    if not is_valid_price_cents(price_cents):
        errors.append("Price must be between $0 and $10,000")
    if not has_required_images(image_urls):
        errors.append(
            f"Add between {ListingLimits.MIN_IMAGES} and {ListingLimits.MAX_IMAGES} photos"
        )

    return errors
