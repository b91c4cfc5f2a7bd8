"""
Dasher service for delivery eligibility, status flow, ETAs and ratings.
"""

import dataclasses
import logging
import math
from typing import Dict, Optional

from dormdash.domain.entities.dasher_entity import Dasher, DeliveryAssignment
from dormdash.domain.value_objects.delivery_enums import (
    DasherStatus,
    DeliveryStatus,
    VehicleType,
)
from dormdash.infrastructure.utilities.exceptions import (
    BusinessLogicError,
    InvalidDeliveryStatusError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DELIVERY_FLOW: Dict[DeliveryStatus, Optional[DeliveryStatus]] = {
    DeliveryStatus.PENDING: DeliveryStatus.ACCEPTED,
    DeliveryStatus.ACCEPTED: DeliveryStatus.PICKED_UP,
    DeliveryStatus.PICKED_UP: DeliveryStatus.DELIVERED,
    DeliveryStatus.DELIVERED: None,
}


def can_accept_delivery(dasher: Dasher) -> bool:
    return dasher.is_active and dasher.current_status == DasherStatus.AVAILABLE


def next_status(current) -> Optional[DeliveryStatus]:
    """Next step in the delivery flow, or None once delivered"""
    try:
        status = DeliveryStatus(current)
    except ValueError:
        logger.warning("Unknown delivery status %r", current)
        raise InvalidDeliveryStatusError(current) from None
    return DELIVERY_FLOW[status]


def advance_assignment(assignment: DeliveryAssignment) -> DeliveryAssignment:
    """Move an assignment one step along the flow"""
    following = next_status(assignment.status)
    if following is None:
        raise BusinessLogicError(
            f"Delivery assignment {assignment.id} is already delivered",
            "This delivery has already been completed.",
        )
    logger.info(
        "Delivery assignment %s: %s -> %s",
        assignment.id,
        assignment.status.value,
        following.value,
    )
    return dataclasses.replace(assignment, status=following)


def estimated_minutes(vehicle, distance_miles: float) -> int:
    """Travel time rounded up to the next whole minute"""
    if isinstance(distance_miles, bool) or not isinstance(distance_miles, (int, float)):
        raise ValidationError(f"Distance must be a number, got {distance_miles!r}", "distance_miles")
    if not math.isfinite(distance_miles) or distance_miles < 0:
        raise ValidationError(
            f"Distance must be finite and non-negative, got {distance_miles!r}", "distance_miles"
        )
    try:
        speed = VehicleType(vehicle).speed_mph
    except ValueError as e:
        raise ValidationError(str(e), "vehicle_type") from e

    return math.ceil(distance_miles / speed * 60)


def next_average_rating(current_average: float, total_deliveries: int, new_rating: float) -> float:
    """
    Running average after one more rating.

    The caller still owns incrementing ``total_deliveries``.
    """
    if total_deliveries == 0:
        return new_rating
    return (current_average * total_deliveries + new_rating) / (total_deliveries + 1)


def record_rating(dasher: Dasher, rating: float) -> Dasher:
    """Dasher with the rating folded in and one more completed delivery"""
    return dataclasses.replace(
        dasher,
        average_rating=next_average_rating(
            dasher.average_rating, dasher.total_deliveries, rating
        ),
        total_deliveries=dasher.total_deliveries + 1,
    )


def format_delivery_count(count: int) -> str:
    if count == 0:
        return "No deliveries yet"
    if count == 1:
        return "1 delivery"
    return f"{count} deliveries"


def format_rating(rating: float, total_deliveries: int) -> str:
    if total_deliveries == 0:
        return "No ratings yet"
    return f"{rating:.1f} ★"
