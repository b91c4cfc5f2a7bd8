"""
Delivery value objects
"""

from enum import Enum


class VehicleType(str, Enum):
    """How a dasher travels"""

    WALK = "walk"
    BIKE = "bike"
    SCOOTER = "scooter"
    CAR = "car"

    @property
    def speed_mph(self) -> int:
        """Average speed used for ETA estimates"""
        return _VEHICLE_SPEEDS_MPH[self]

    @property
    def label(self) -> str:
        return _VEHICLE_LABELS[self]

    @property
    def icon(self) -> str:
        return _VEHICLE_ICONS[self]


_VEHICLE_SPEEDS_MPH = {
    VehicleType.WALK: 3,
    VehicleType.BIKE: 10,
    VehicleType.SCOOTER: 15,
    VehicleType.CAR: 25,
}

_VEHICLE_LABELS = {
    VehicleType.WALK: "Walking",
    VehicleType.BIKE: "Bike",
    VehicleType.SCOOTER: "Scooter",
    VehicleType.CAR: "Car",
}

_VEHICLE_ICONS = {
    VehicleType.WALK: "walk",
    VehicleType.BIKE: "bike",
    VehicleType.SCOOTER: "electric-scooter",
    VehicleType.CAR: "car",
}


class DasherStatus(str, Enum):
    """Dasher availability"""

    AVAILABLE = "available"
    BUSY = "busy"
    OFFLINE = "offline"


class DeliveryStatus(str, Enum):
    """Delivery assignment progress"""

    PENDING = "pending"
    ACCEPTED = "accepted"
    PICKED_UP = "picked_up"
    DELIVERED = "delivered"
