from .logging import LoggingMiddleware
from .naming import SegmentNamingMiddleware

__all__ = ["LoggingMiddleware", "SegmentNamingMiddleware"]
