"""Navigation adapter - Route-aware push/replace/prefetch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from pageroutes_core.routing.table import RouteTable

logger = logging.getLogger(__name__)


class RouteNavigator:
    """Wraps a client router with route-name navigation.

    The wrapped router must expose push, replace and prefetch, each taking
    (href, as, options). It is never modified.

    Usage:
        navigator = RouteNavigator(routes, router)
        navigator.push_route("blog", {"slug": "hello"}, {"shallow": True})
        # router.push("/blog?slug=hello", "/blog/hello", {"shallow": True})
    """

    def __init__(self, table: RouteTable, router: Any):
        self.table = table
        self.router = router
        self.push_route = self._wrap("push")
        self.replace_route = self._wrap("replace")
        self.prefetch_route = self._wrap("prefetch")

    def _wrap(self, method: str) -> Callable[..., Any]:
        """Build a route-resolving version of a router method."""
        target = getattr(self.router, method)

        def navigate(
            route: str,
            params: Optional[Mapping[str, Any]] = None,
            options: Any = None,
        ) -> Any:
            result = self.table.resolve(route, params)
            urls = result.urls
            logger.debug(f"{method} {urls.as_} (href={urls.href})")
            return target(urls.href, urls.as_, options if result.by_name else params)

        navigate.__name__ = f"{method}_route"
        return navigate


__all__ = [
    "RouteNavigator",
]
