"""
Application logging for Rendermark.
Tracks document fetches, rendering and configuration problems.
"""

import logging
import os
from datetime import datetime

from rendermark.config import settings


class AppLogger:
    """Application logger for tracking system events"""

    _instance = None
    _logger = None

    def __new__(cls):
        """Singleton pattern to ensure one logger instance"""
        if cls._instance is None:
            cls._instance = super(AppLogger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self):
        """Set up the application logger"""
        self._logger = logging.getLogger("rendermark")

        # Unknown level names are rejected by settings.validate_config()
        level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)
        self._logger.setLevel(level)

        # Prevent duplicate handlers if reinitialized
        if self._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if not settings.LOG_TO_FILE:
            return

        log_filename = os.path.join(
            settings.LOG_DIRECTORY, f"app_{datetime.now().strftime('%Y%m%d')}.log"
        )
        try:
            os.makedirs(settings.LOG_DIRECTORY, exist_ok=True)
            file_handler = logging.FileHandler(log_filename)
        except OSError as e:
            # Permissions or bad path: stay console-only
            self._logger.warning(f"File logging disabled: {e}")
            return

        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    def info(self, message: str, **kwargs):
        """Log info message with optional context"""
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context"""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context"""
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context"""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def _log_with_context(self, level: int, message: str, **kwargs):
        """Log message with additional context fields"""
        if kwargs:
            context_str = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            full_message = f"{message} | {context_str}"
        else:
            full_message = message

        self._logger.log(level, full_message)  # type: ignore

    def app_started(self):
        """Log application startup"""
        self.info(
            "Application started",
            version=settings.APP_VERSION,
            environment=settings.DEPLOYMENT_ENV,
            document=settings.DOCUMENT_URL,
        )

    def document_fetched(self, url: str, size: int):
        """Log a successful document fetch"""
        self.info("Document fetched", url=url, chars=size)

    def document_fetch_failed(self, url: str, reason: str):
        """Log a failed document fetch"""
        self.error("Document fetch failed", url=url, reason=reason)

    def document_rendered(self, lines: int, fragments: int):
        """Log conversion stats"""
        self.debug("Document rendered", lines=lines, fragments=fragments)

    def config_validation_failed(self, error: str):
        """Log configuration validation failure"""
        self.error(f"Configuration validation failed: {error}")


# Global logger instance
logger = AppLogger()
