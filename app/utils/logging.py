"""Logging configuration and utilities."""
import logging
import sys
from typing import Optional
from ..core.config import settings

class LoggerSetup:
    """Centralized logging configuration."""

    @staticmethod
    def setup_logging(
        level: Optional[str] = None,
        format_string: Optional[str] = None
    ) -> None:
        """Setup application logging."""
        log_level = level or settings.log_level
        log_format = format_string or settings.log_format

        # Configure root logger
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=log_format,
            handlers=[
                logging.StreamHandler(sys.stdout)
            ]
        )

        # Set specific logger levels
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)
        logging.getLogger("aiohttp").setLevel(logging.WARNING)  # Reduce aiohttp verbosity

class CorrelatedLogger:
    """Logger with correlation ID support for request tracking."""

    def __init__(self, name: str, request_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.request_id = request_id

    def _format_message(self, message: str) -> str:
        """Format message with request ID if available."""
        if self.request_id:
            return f"[{self.request_id}] {message}"
        return message

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with correlation ID."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with correlation ID."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with correlation ID."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with correlation ID."""
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception message with correlation ID."""
        self.logger.exception(self._format_message(message), **kwargs)

class MetricsLogger:
    """Logger for transcription batch metrics."""

    def __init__(self):
        self.logger = logging.getLogger("metrics")

    def log_batch_metrics(
        self,
        request_id: Optional[str],
        requested: int,
        successful: int,
        failed: int,
        total_cost: float,
        status: str,
        status_code: Optional[int] = None
    ) -> None:
        """Log one transcription batch outcome."""
        log_msg = (
            f"BATCH_METRICS request_id={request_id} "
            f"requested={requested} successful={successful} failed={failed} "
            f"total_cost={total_cost} status={status}"
        )

        if status_code is not None:
            log_msg += f" status_code={status_code}"

        self.logger.info(log_msg)
