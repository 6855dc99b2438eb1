"""Segment naming for distributed tracing."""

from xray_naming.config import (
    NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY,
    NAME_OVERRIDE_SYSTEM_PROPERTY_KEY,
    ConfigSources,
    resolve_override,
)
from xray_naming.request import HeaderMapping, RequestMetadata, as_request_metadata
from xray_naming.search_pattern import wildcard_match
from xray_naming.strategy import (
    DynamicSegmentNamingStrategy,
    FixedSegmentNamingStrategy,
    SegmentNamingStrategy,
    build_strategy,
)

__version__ = "0.1.0"

__all__ = [
    "NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY",
    "NAME_OVERRIDE_SYSTEM_PROPERTY_KEY",
    "ConfigSources",
    "DynamicSegmentNamingStrategy",
    "FixedSegmentNamingStrategy",
    "HeaderMapping",
    "RequestMetadata",
    "SegmentNamingStrategy",
    "as_request_metadata",
    "build_strategy",
    "resolve_override",
    "wildcard_match",
]
