"""
Logging middleware.
Owns: Structured request/response logging.
"""

import time
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import get_logger

logger = get_logger(__name__, "api")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        logger.log_request(
            segment_name=getattr(request.state, "segment_name", None),
            http_method=request.method,
            http_path=request.url.path,
            http_status=response.status_code,
            latency_ms=(time.perf_counter() - start_time) * 1000,
        )

        return response
