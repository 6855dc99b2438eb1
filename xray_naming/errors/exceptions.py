"""
Exception definitions.
Owns: Application-specific exception classes.
"""

from typing import Any


class AppException(Exception):
    error_code: str = "INTERNAL_ERROR"
    status_code: int = 500
    retryable: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "retryable": self.retryable,
            **self.details,
        }


class SegmentNameMissingException(AppException):
    error_code = "SEGMENT_NAME_MISSING"
    status_code = 500
    retryable = False


class InvalidConfigurationException(AppException):
    error_code = "INVALID_CONFIGURATION"
    status_code = 500
    retryable = False
