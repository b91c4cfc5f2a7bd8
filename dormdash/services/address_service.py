"""
Address service
"""

import re
from typing import Optional, Sequence

from dormdash.domain.entities.address_entity import Address
from dormdash.infrastructure.utilities.constants import AddressDefaults

ZIP_CODE_PATTERN = re.compile(r"[0-9]{5}(-[0-9]{4})?")


def get_address_display_text(address: Address) -> str:
    """
    One-line label for an address.

    Building (with room when known) wins over street address, which wins
    over the user's label.
    """
    if address.building_name:
        if address.room_number:
            return f"{address.building_name}, {address.room_number}"
        return address.building_name
    if address.street_address:
        return address.street_address
    if address.label:
        return address.label
    return AddressDefaults.FALLBACK_DISPLAY_TEXT


def is_valid_address(address: Address) -> bool:
    """A label or city alone cannot be delivered to"""
    return bool(address.building_name or address.street_address)


def is_valid_zip_code(zip_code: str) -> bool:
    return ZIP_CODE_PATTERN.fullmatch(zip_code) is not None


def select_default_address(addresses: Sequence[Address]) -> Optional[Address]:
    """The address marked default, else the first one, else None"""
    for address in addresses:
        if address.is_default:
            return address
    return addresses[0] if addresses else None
