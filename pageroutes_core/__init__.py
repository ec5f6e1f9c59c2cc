"""PageRoutes - Named route table for page-based web apps.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

PageRoutes maps named URL patterns to pages and provides:
- Path matching with named parameters
- href/as URL synthesis from a route name and params
- First-match-wins route ordering
- Link, navigation and request dispatch adapters

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              PageRoutes                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                         Resolution Flow                                │  │
│  │  URL ──▶ RouteTable ──▶ Route ──▶ PathPattern ──▶ params ──▶ page     │  │
│  │  name + params ──▶ Route ──▶ { href, as }                             │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │    Routing      │  │     Utils       │  │        Adapters             │ │
│  │                 │  │                 │  │                             │ │
│  │ - PathPattern   │  │ - Querystring   │  │ - Link                      │ │
│  │ - Route         │  │ - URL parsing   │  │ - RouteNavigator            │ │
│  │ - RouteTable    │  │ - Config        │  │ - RequestDispatcher         │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
    from pageroutes_core import RouteTable

    routes = RouteTable()
    routes.add("about")
    routes.add("user", "/user/:id", "profile")

    routes.match("/user/5").params          # {"id": "5"}
    routes.resolve("user", {"id": 5}).urls  # href="/profile?id=5", as_="/user/5"
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Routing
from pageroutes_core.routing.pattern import PathPattern, Key, compile_pattern
from pageroutes_core.routing.route import Route, Urls, PageContext
from pageroutes_core.routing.table import RouteTable, MatchResult, ResolveResult
from pageroutes_core.routing.errors import (
    RouteError,
    ConfigurationError,
    PatternError,
    MissingRouteNameError,
    DuplicateRouteNameError,
    InvalidPageError,
    RenderError,
    MissingParameterError,
    InvalidParameterError,
    PageResolutionError,
)

# Adapters
from pageroutes_core.adapters.link import Link, link_props
from pageroutes_core.adapters.navigation import RouteNavigator
from pageroutes_core.adapters.dispatch import RequestDispatcher, DispatchContext

# Utils
from pageroutes_core.utils.querystring import to_querystring
from pageroutes_core.utils.config import (
    Config,
    load_config,
    configure_logging,
    build_route_table,
)

__all__ = [
    # Version
    "__version__",
    # Routing
    "PathPattern",
    "Key",
    "compile_pattern",
    "Route",
    "Urls",
    "PageContext",
    "RouteTable",
    "MatchResult",
    "ResolveResult",
    # Errors
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
    # Adapters
    "Link",
    "link_props",
    "RouteNavigator",
    "RequestDispatcher",
    "DispatchContext",
    # Utils
    "to_querystring",
    "Config",
    "load_config",
    "configure_logging",
    "build_route_table",
]
