"""
Custom exceptions for the DormDash core

The core never displays errors itself; ``user_message`` is what the calling
UI layer is expected to show.
"""

from .constants import ErrorCodes


class DormDashError(Exception):
    """Base exception for the DormDash core"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR


class ValidationError(DormDashError):
    """Input validation errors"""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message, message, ErrorCodes.VALIDATION_ERROR  # Validation errors are user-friendly
        )
        self.field = field


class BusinessLogicError(DormDashError):
    """Business rule violations"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, ErrorCodes.BUSINESS_ERROR)


class InvalidQuantityError(ValidationError):
    """Quantity is not a positive whole number"""

    def __init__(self, quantity):
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}", "quantity")
        self.quantity = quantity


class InvalidPriceError(ValidationError):
    """Price is negative or not a whole number of cents"""

    def __init__(self, price_cents):
        super().__init__(
            f"Price must be a non-negative integer number of cents, got {price_cents!r}",
            "price_cents",
        )
        self.price_cents = price_cents


class CartEmptyError(BusinessLogicError):
    """Cart is empty when operation requires items"""

    def __init__(self):
        super().__init__(
            "Cart is empty", "Your cart is empty. Please add some items first."
        )


class InvalidDeliveryStatusError(BusinessLogicError):
    """Delivery status is not part of the delivery flow"""

    def __init__(self, status):
        super().__init__(
            f"Unknown delivery status: {status!r}",
            "This delivery is in an unexpected state.",
        )
        self.status = status
