"""
Unified structured logging for xray-naming.

Every log line is a single JSON object so naming decisions can be
correlated with the segments they produced.

Usage:
    from shared.logging import get_logger

    logger = get_logger(__name__, "naming")
    logger.info("Segment name override applied", extra={
        "env_var": "AWS_XRAY_TRACING_NAME",
        "effective_name": "checkout",
    })
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for naming and request logs.

    Produces logs in format:
    {
        "timestamp": "2026-01-30T14:23:45.123Z",
        "level": "INFO",
        "service": "naming",
        "logger": "xray_naming.strategy",
        "message": "Segment name override applied",
        ...optional fields...
    }
    """

    # Fields that are allowed in log output
    ALLOWED_EXTRA_FIELDS = frozenset([
        "segment_name",
        "env_var",
        "property_key",
        "original_name",
        "effective_name",
        "recognized_hosts",
        "strategy",
        "error_code",
        "http_method",
        "http_path",
        "http_status",
        "latency_ms",
        "extra",
    ])

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in self.ALLOWED_EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, separators=(",", ":"), ensure_ascii=False, default=str)


class StructuredLogger(logging.Logger):
    """Logger subclass with helpers for naming events."""

    def log_request(
        self,
        segment_name: str,
        http_method: str,
        http_path: str,
        http_status: int,
        latency_ms: float,
        **extra: Any,
    ) -> None:
        """Log a completed request with the segment name it was given."""
        self.info(
            "Request completed",
            extra={
                "segment_name": segment_name,
                "http_method": http_method,
                "http_path": http_path,
                "http_status": http_status,
                "latency_ms": round(latency_ms, 2),
                "extra": extra if extra else None,
            },
        )


def _create_logger(name: str, service: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Internal factory for creating structured loggers.

    Args:
        name: Logger name (usually __name__)
        service: Service identifier (naming, api)
        level: Logging level

    Returns:
        Configured StructuredLogger instance
    """
    # Register our custom logger class
    logging.setLoggerClass(StructuredLogger)

    logger = logging.getLogger(name)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter(service))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    # Reset to default class for other loggers
    logging.setLoggerClass(logging.Logger)

    return logger  # type: ignore


def get_logger(name: str, service: str) -> StructuredLogger:
    """
    Create a structured logger for any service.

    Args:
        name: Logger name (usually __name__)
        service: Service identifier (naming, api)

    Returns:
        Configured StructuredLogger instance
    """
    return _create_logger(name, service)


def configure_root_logger(service: str, level: Optional[str] = "INFO") -> None:
    """
    Configure the root logger with structured formatting.

    Call this once at application startup.

    Args:
        service: Service identifier
        level: Log level string (DEBUG, INFO, WARN, ERROR)
    """
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(service))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    # Suppress noisy libraries
    for lib in ["httpx", "httpcore", "asyncio", "uvicorn.access"]:
        logging.getLogger(lib).setLevel(logging.WARNING)
