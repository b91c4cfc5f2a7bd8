"""
Logging configuration for the DormDash core

The core itself only emits records through module-level stdlib loggers.
Applications embedding it call ``setup_logging`` once at startup to get
console output and, optionally, a rotating JSON log.
"""

import logging
import logging.handlers
import os
import sys
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import structlog
from pythonjsonlogger import jsonlogger

from dormdash.config import get_config
from dormdash.infrastructure.utilities.constants import LoggingSettings


@dataclass
class LoggingConfigOptions:
    """Dataclass for logging configuration options"""
    log_level: str = "INFO"
    log_dir: str = LoggingSettings.LOG_DIR
    enable_console: bool = True
    enable_json: bool = False
    max_file_size: int = LoggingSettings.MAX_LOG_FILE_SIZE
    backup_count: int = LoggingSettings.BACKUP_COUNT

    @classmethod
    def from_settings(cls) -> "LoggingConfigOptions":
        """Build options from the application settings"""
        config = get_config()
        return cls(
            log_level=config.log_level,
            enable_json=config.environment == "production",
        )


class DormDashJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp, level and process context"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["thread_name"] = threading.current_thread().name
        log_record["process_id"] = os.getpid()


class LoggingConfig:
    """Root logger and structlog configuration"""

    def __init__(self, options: LoggingConfigOptions):
        self.options = options

    def __repr__(self):
        return f"LoggingConfig(options={self.options})"

    @property
    def level(self) -> int:
        """Numeric level for the configured level name"""
        level = logging.getLevelName(self.options.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.options.log_level}")
        return level

    def _configure_structlog(self):
        """Configure structlog for structured logging"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def setup_logging(self) -> logging.Logger:
        """Install handlers on the root logger and return it"""
        level = self.level
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear existing handlers
        root_logger.handlers.clear()

        if self.options.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(
                logging.Formatter(
                    LoggingSettings.CONSOLE_FORMAT,
                    datefmt=LoggingSettings.DATE_FORMAT,
                )
            )
            root_logger.addHandler(console_handler)

        if self.options.enable_json:
            log_dir = Path(self.options.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = logging.handlers.RotatingFileHandler(
                log_dir / LoggingSettings.JSON_LOG_FILE,
                maxBytes=self.options.max_file_size,
                backupCount=self.options.backup_count,
                encoding="utf-8",
            )
            json_handler.setLevel(level)
            json_handler.setFormatter(DormDashJsonFormatter())
            root_logger.addHandler(json_handler)

        self._configure_structlog()

        logging.getLogger(__name__).info(
            "Logging configured - Level: %s, Console: %s, JSON: %s",
            self.options.log_level,
            self.options.enable_console,
            self.options.enable_json,
        )
        return root_logger


def setup_logging(options: LoggingConfigOptions | None = None) -> logging.Logger:
    """Setup logging using the LoggingConfig class"""
    config = LoggingConfig(options or LoggingConfigOptions.from_settings())
    return config.setup_logging()


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
