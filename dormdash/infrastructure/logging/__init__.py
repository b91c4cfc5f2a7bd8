"""
Logging Infrastructure
"""

from .logging_config import (
    LoggingConfig,
    LoggingConfigOptions,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "LoggingConfig",
    "LoggingConfigOptions",
    "get_structured_logger",
    "setup_logging",
]
