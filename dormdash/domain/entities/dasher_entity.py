"""
Dasher Entity - delivery workers and their assignments
"""

from dataclasses import dataclass
from typing import Optional

from dormdash.domain.value_objects.delivery_enums import (
    DasherStatus,
    DeliveryStatus,
    VehicleType,
)
from dormdash.infrastructure.utilities.exceptions import ValidationError


@dataclass(frozen=True)
class Dasher:
    """Dasher domain entity"""

    id: str
    vehicle_type: VehicleType
    is_active: bool = True
    current_status: DasherStatus = DasherStatus.OFFLINE
    total_deliveries: int = 0
    average_rating: float = 0.0
    user_id: Optional[str] = None

    def __post_init__(self):
        """Validate the dasher after initialization"""
        try:
            object.__setattr__(self, "vehicle_type", VehicleType(self.vehicle_type))
            object.__setattr__(self, "current_status", DasherStatus(self.current_status))
        except ValueError as e:
            raise ValidationError(str(e), "vehicle_type/current_status") from e

        if self.total_deliveries < 0:
            raise ValidationError("Total deliveries cannot be negative", "total_deliveries")


@dataclass(frozen=True)
class DeliveryAssignment:
    """A single delivery task"""

    id: int
    status: DeliveryStatus = DeliveryStatus.PENDING
    order_id: Optional[int] = None
    dasher_id: Optional[str] = None
    pickup_location: Optional[str] = None
    delivery_location: Optional[str] = None

    def __post_init__(self):
        try:
            object.__setattr__(self, "status", DeliveryStatus(self.status))
        except ValueError as e:
            raise ValidationError(str(e), "status") from e
