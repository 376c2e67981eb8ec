"""
Logging Utility for the Recurrence Service.

Provides structured logging with appropriate levels and formats.
"""

import logging
import sys
from datetime import datetime, timezone
import json


class StructuredLogger:
    """Structured logger for the HTTP adapter."""

    def __init__(self, name: str, level: int = logging.INFO):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Prevent adding handlers multiple times
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        """Set up logging handlers."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)

        # Records already carry timestamp, level and service
        console_handler.setFormatter(logging.Formatter('%(message)s'))

        self.logger.addHandler(console_handler)
        # Emitted once here, not again through the root handler
        self.logger.propagate = False

    def _build_record(self, level: int, message: str, **kwargs) -> dict:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "service": self.logger.name
        }
        log_data.update(kwargs)
        return log_data

    def _log_structured(self, level: int, message: str, **kwargs):
        """
        Log a structured message.

        Args:
            level: Logging level
            message: Log message
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(level):
            self.logger.log(level, json.dumps(self._build_record(level, message, **kwargs), default=str))

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._log_structured(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._log_structured(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._log_structured(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message."""
        self._log_structured(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with traceback."""
        if self.logger.isEnabledFor(logging.ERROR):
            log_data = self._build_record(logging.ERROR, message, exception=True, **kwargs)
            self.logger.exception(json.dumps(log_data, default=str))


recurrence_logger = StructuredLogger("recurrence-engine")
