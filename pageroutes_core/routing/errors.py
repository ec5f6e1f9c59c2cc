"""Routing errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Hierarchy:
    RouteError
    ├── ConfigurationError       raised while registering routes
    │   ├── PatternError
    │   ├── MissingRouteNameError
    │   ├── DuplicateRouteNameError
    │   └── InvalidPageError
    └── RenderError              raised while building URLs
        ├── MissingParameterError
        ├── InvalidParameterError
        └── PageResolutionError

A path that matches no route is not an error; lookups return None.
"""

from __future__ import annotations

from typing import Optional


class RouteError(Exception):
    """Base class for route table errors."""
    pass


class ConfigurationError(RouteError):
    """Invalid route table configuration."""
    pass


class PatternError(ConfigurationError):
    """Pattern string could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f'Invalid pattern "{pattern}": {reason}')


class MissingRouteNameError(ConfigurationError):
    """Route registered without a name."""

    def __init__(self, pattern: Optional[str] = None):
        self.pattern = pattern
        super().__init__(f'Missing name to render for route "{pattern}"')


class DuplicateRouteNameError(ConfigurationError):
    """Route name already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Route "{name}" already exists')


class InvalidPageError(ConfigurationError):
    """Page is neither a string nor a callable."""

    def __init__(self, page: object):
        self.page = page
        super().__init__(
            f"Page must be a string or a function, got {type(page).__name__}"
        )


class RenderError(RouteError):
    """URL could not be built from the given parameters."""
    pass


class MissingParameterError(RenderError):
    """Required path parameter missing at render time."""

    def __init__(self, key: str, pattern: str):
        self.key = key
        self.pattern = pattern
        super().__init__(f'Expected "{key}" to be defined for pattern "{pattern}"')


class InvalidParameterError(RenderError):
    """Parameter value does not fit its path token."""

    def __init__(self, key: str, value: object, reason: str):
        self.key = key
        self.value = value
        super().__init__(f'Invalid value for "{key}": {value!r} ({reason})')


class PageResolutionError(RenderError):
    """Page function returned something other than a page identifier."""
    pass


__all__ = [
    "RouteError",
    "ConfigurationError",
    "PatternError",
    "MissingRouteNameError",
    "DuplicateRouteNameError",
    "InvalidPageError",
    "RenderError",
    "MissingParameterError",
    "InvalidParameterError",
    "PageResolutionError",
]
