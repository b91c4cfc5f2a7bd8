"""
Address Entity
"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Saved delivery or pickup address. Empty strings count as missing."""

    id: Optional[int] = None
    label: Optional[str] = None
    building_name: Optional[str] = None
    room_number: Optional[str] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    is_default: bool = False

    @classmethod
    def from_record(cls, record: dict) -> "Address":
        """Build an address from a backend row, ignoring unknown columns"""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in record.items() if key in known}
        values["is_default"] = bool(values.get("is_default"))
        return cls(**values)
