"""
Segment naming middleware.
Owns: Naming each incoming request for the tracing layer.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from xray_naming.request import StarletteRequestMetadata
from xray_naming.strategy import SegmentNamingStrategy


class SegmentNamingMiddleware(BaseHTTPMiddleware):
    HEADER_NAME = "X-Segment-Name"

    def __init__(self, app: ASGIApp, strategy: SegmentNamingStrategy):
        super().__init__(app)
        self.strategy = strategy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        segment_name = self.strategy.name_for_request(StarletteRequestMetadata(request))
        request.state.segment_name = segment_name

        response = await call_next(request)
        response.headers[self.HEADER_NAME] = segment_name

        return response
