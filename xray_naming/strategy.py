"""
Segment naming strategies.
Owns: Deciding the segment name for an incoming request.

Two strategies share one interface:
- FixedSegmentNamingStrategy: always the configured name
- DynamicSegmentNamingStrategy: the Host header when recognized, else a fallback

The dynamic fallback can be replaced process-wide by AWS_XRAY_TRACING_NAME
or the com.amazonaws.xray.strategy.tracingName property. That override is
resolved once, when the strategy is built, and never per request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from xray_naming.config import (
    NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY,
    NAME_OVERRIDE_SYSTEM_PROPERTY_KEY,
    STRATEGY_DYNAMIC,
    STRATEGY_FIXED,
    ConfigSources,
    Settings,
    non_blank,
    resolve_override,
)
from xray_naming.errors import InvalidConfigurationException, SegmentNameMissingException
from xray_naming.request import HOST_HEADER, as_request_metadata
from xray_naming.search_pattern import GLOB, wildcard_match

logger = logging.getLogger(__name__)


class SegmentNamingStrategy(ABC):
    """Derives a segment name from request metadata."""

    @abstractmethod
    def name_for_request(self, request: Any) -> str:
        """
        Return the segment name for an incoming request.

        Args:
            request: A RequestMetadata, Starlette request, or header mapping

        Returns:
            The segment name
        """

    @staticmethod
    def fixed(name: str) -> "FixedSegmentNamingStrategy":
        return FixedSegmentNamingStrategy(name)

    @staticmethod
    def dynamic(
        fallback_name: str,
        recognized_hosts: Optional[str] = GLOB,
        sources: Optional[ConfigSources] = None,
        log: Optional[logging.Logger] = None,
    ) -> "DynamicSegmentNamingStrategy":
        """
        Build a dynamic strategy, resolving the override from config sources.

        Args:
            fallback_name: Name used when the Host header is missing or unrecognized
            recognized_hosts: Glob the Host header must match; None matches everything
            sources: Override sources; defaults to the live process environment
            log: Logger for the override event
        """
        if sources is None:
            sources = ConfigSources.from_process()
        return DynamicSegmentNamingStrategy(
            fallback_name,
            recognized_hosts,
            override_name=resolve_override(sources),
            log=log,
        )


class FixedSegmentNamingStrategy(SegmentNamingStrategy):
    """Names every segment the same."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def name_for_request(self, request: Any = None) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"FixedSegmentNamingStrategy(name={self._name!r})"


class DynamicSegmentNamingStrategy(SegmentNamingStrategy):
    """
    Names segments after the request's Host header.

    The Host value is used verbatim when present and matching
    recognized_hosts (case-insensitively). Otherwise the fallback name is
    returned. A non-blank override_name replaces fallback_name for the
    lifetime of the instance.
    """

    def __init__(
        self,
        fallback_name: str,
        recognized_hosts: Optional[str] = GLOB,
        override_name: Optional[str] = None,
        log: Optional[logging.Logger] = None,
    ):
        effective_name = fallback_name
        override_name = non_blank(override_name)
        if override_name is not None:
            effective_name = override_name
            (log or logger).info(
                f"Environment variable {NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY} or property "
                f"{NAME_OVERRIDE_SYSTEM_PROPERTY_KEY} set. Overriding DynamicSegmentNamingStrategy "
                f"fallback name. Segments will be named {effective_name} when the host header "
                f"is unavailable or does not match the recognized hosts pattern.",
                extra={
                    "env_var": NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY,
                    "property_key": NAME_OVERRIDE_SYSTEM_PROPERTY_KEY,
                    "original_name": fallback_name,
                    "effective_name": effective_name,
                },
            )

        self._fallback_name = effective_name
        self._recognized_hosts = recognized_hosts

    @property
    def fallback_name(self) -> str:
        return self._fallback_name

    @property
    def recognized_hosts(self) -> Optional[str]:
        return self._recognized_hosts

    def name_for_request(self, request: Any) -> str:
        host = as_request_metadata(request).get_header(HOST_HEADER)
        if host is not None and wildcard_match(self._recognized_hosts, host):
            return host
        return self._fallback_name

    def __repr__(self) -> str:
        return (
            f"DynamicSegmentNamingStrategy(fallback_name={self._fallback_name!r}, "
            f"recognized_hosts={self._recognized_hosts!r})"
        )


def build_strategy(
    settings: Settings,
    sources: Optional[ConfigSources] = None,
    log: Optional[logging.Logger] = None,
) -> SegmentNamingStrategy:
    """
    Build the strategy described by settings.

    Call once at startup; the returned instance is safe to share.

    Raises:
        InvalidConfigurationException: Unknown naming_strategy
        SegmentNameMissingException: Resulting segment name is empty
    """
    kind = settings.naming_strategy.strip().lower()

    if kind == STRATEGY_FIXED:
        strategy: SegmentNamingStrategy = SegmentNamingStrategy.fixed(settings.segment_name)
        segment_name: Optional[str] = settings.segment_name
    elif kind == STRATEGY_DYNAMIC:
        if sources is None:
            sources = ConfigSources.from_settings(settings)
        # Blank pattern from the environment means "recognize every host"
        recognized_hosts = settings.recognized_hosts or None
        dynamic = SegmentNamingStrategy.dynamic(
            settings.segment_name,
            recognized_hosts,
            sources=sources,
            log=log,
        )
        strategy, segment_name = dynamic, dynamic.fallback_name
    else:
        raise InvalidConfigurationException(
            f"Unknown naming strategy: {settings.naming_strategy}",
            details={"allowed": [STRATEGY_FIXED, STRATEGY_DYNAMIC]},
        )

    if non_blank(segment_name) is None:
        raise SegmentNameMissingException(
            "Segment name must not be empty",
            details={"naming_strategy": kind},
        )

    (log or logger).info(
        "Segment naming strategy configured",
        extra={"strategy": repr(strategy)},
    )
    return strategy
