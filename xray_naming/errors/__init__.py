from .exceptions import (
    AppException,
    InvalidConfigurationException,
    SegmentNameMissingException,
)
from .handlers import register_exception_handlers

__all__ = [
    "AppException",
    "InvalidConfigurationException",
    "SegmentNameMissingException",
    "register_exception_handlers",
]
