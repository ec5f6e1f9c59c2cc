"""Adapters - Link, navigation and request dispatch on top of a route table."""

from pageroutes_core.adapters.link import Link, link_props
from pageroutes_core.adapters.navigation import RouteNavigator
from pageroutes_core.adapters.dispatch import DispatchContext, RequestDispatcher

__all__ = [
    "Link",
    "link_props",
    "RouteNavigator",
    "DispatchContext",
    "RequestDispatcher",
]
