"""
Request metadata accessors.
Owns: Reading header values from whatever request object the caller holds.

The naming core only ever asks for one header, so the accessor surface is
a single method.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from starlette.requests import HTTPConnection

HOST_HEADER = "Host"


@runtime_checkable
class RequestMetadata(Protocol):
    def get_header(self, name: str) -> Optional[str]:
        ...


class HeaderMapping:
    """Read-only header accessor over a plain mapping. Lookups ignore case."""

    def __init__(self, headers: Optional[Mapping[str, str]] = None):
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}

    def get_header(self, name: str) -> Optional[str]:
        return self._headers.get(name.lower())

    def __repr__(self) -> str:
        return f"HeaderMapping({self._headers!r})"


class StarletteRequestMetadata:
    """Header accessor over a Starlette/FastAPI request or websocket."""

    def __init__(self, request: HTTPConnection):
        self._request = request

    def get_header(self, name: str) -> Optional[str]:
        # Starlette headers are already case-insensitive
        return self._request.headers.get(name)


def as_request_metadata(request: Any) -> RequestMetadata:
    """
    Coerce a request-like object into a RequestMetadata.

    Accepts an existing accessor, a Starlette connection, any object with a
    ``headers`` mapping, a plain mapping of headers, or None.
    """
    if request is None:
        return HeaderMapping()
    if isinstance(request, RequestMetadata):
        return request
    if isinstance(request, HTTPConnection):
        return StarletteRequestMetadata(request)
    if isinstance(request, Mapping):
        return HeaderMapping(request)

    headers = getattr(request, "headers", None)
    if isinstance(headers, Mapping):
        return HeaderMapping(headers)

    raise TypeError(f"Cannot read headers from {type(request).__name__}")
