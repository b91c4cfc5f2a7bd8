"""
Application constants for the DormDash core

Centralizes the magic numbers and fixed strings shared by the services.
"""

from typing import Final


# Checkout arithmetic
class CheckoutSettings:
    """Default checkout amounts, all in cents"""

    DEFAULT_TAX_RATE: Final[float] = 0.08
    FIXED_DELIVERY_FEE_CENTS: Final[int] = 400  # $4.00
    DEFAULT_CURRENCY: Final[str] = "USD"


# Listing form limits
class ListingLimits:
    """Bounds enforced on listing drafts"""

    MIN_TITLE_LENGTH: Final[int] = 3
    MAX_TITLE_LENGTH: Final[int] = 100
    MAX_DESCRIPTION_LENGTH: Final[int] = 1000
    MAX_PRICE_CENTS: Final[int] = 1_000_000  # $10,000
    MIN_IMAGES: Final[int] = 1
    MAX_IMAGES: Final[int] = 10


# Account validation
class PasswordRules:
    """Password strength requirements"""

    MIN_LENGTH: Final[int] = 8


class NameRules:
    """Name requirements"""

    MIN_LENGTH: Final[int] = 2


class PhoneFormat:
    """US phone display format"""

    MAX_DIGITS: Final[int] = 10


class InstitutionDomains:
    """Email suffixes accepted as institutional accounts"""

    DEFAULT_SUFFIXES: Final[tuple[str, ...]] = (
        "@upenn.edu",
        "@wharton.upenn.edu",
        "@seas.upenn.edu",
        "@sas.upenn.edu",
        "@nursing.upenn.edu",
        "@gse.upenn.edu",
        "@design.upenn.edu",
        "@sp2.upenn.edu",
        "@law.upenn.edu",
        "@pennmedicine.upenn.edu",
    )


class AddressDefaults:
    """Address display fallbacks"""

    FALLBACK_DISPLAY_TEXT: Final[str] = "Address"


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    LOG_DIR: Final[str] = "logs"
    JSON_LOG_FILE: Final[str] = "dormdash.json.log"
    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT: Final[int] = 5
    CONSOLE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class ErrorCodes:
    """Error codes attached to DormDashError subclasses"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    BUSINESS_ERROR: Final[str] = "BUSINESS_ERROR"
