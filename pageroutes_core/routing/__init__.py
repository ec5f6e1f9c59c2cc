"""Routing module - Route patterns, routes and the route table."""

from pageroutes_core.routing.pattern import PathPattern, Key, compile_pattern
from pageroutes_core.routing.route import Route, Urls, PageContext
from pageroutes_core.routing.table import RouteTable, MatchResult, ResolveResult

__all__ = [
    "PathPattern",
    "Key",
    "compile_pattern",
    "Route",
    "Urls",
    "PageContext",
    "RouteTable",
    "MatchResult",
    "ResolveResult",
]
