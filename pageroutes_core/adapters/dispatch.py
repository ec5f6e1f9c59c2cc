"""Request dispatcher - Serve matched routes, fall through otherwise.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pageroutes_core.routing.route import Route
from pageroutes_core.routing.table import RouteTable

logger = logging.getLogger(__name__)


@dataclass
class DispatchContext:
    """Everything a custom handler needs for a matched request."""

    req: Any
    res: Any
    route: Route
    query: Dict[str, Any]


class RequestDispatcher:
    """Request handler for a page server.

    The app must provide:
    - render(req, res, page, query) for matched routes
    - get_request_handler() returning the default (req, res, parsed_url)
      handler for everything else

    Usage:
        handler = RequestDispatcher(routes, app)
        handler(req, res)  # req.url is the raw request URL
    """

    def __init__(
        self,
        table: RouteTable,
        app: Any,
        custom_handler: Optional[Callable[[DispatchContext], Any]] = None,
    ):
        self.table = table
        self.app = app
        self.custom_handler = custom_handler
        self._default_handler = app.get_request_handler()

    def __call__(self, req: Any, res: Any) -> Any:
        """Dispatch one request."""
        result = self.table.match(req.url)
        route = result.route

        if route is None:
            logger.debug(f"No route for {result.parsed_url.pathname}, using default handler")
            return self._default_handler(req, res, result.parsed_url)

        logger.info(f"{result.parsed_url.pathname} -> route {route.name}")

        if self.custom_handler:
            return self.custom_handler(
                DispatchContext(req=req, res=res, route=route, query=result.query)
            )

        page = route.get_page(result.params)
        return self.app.render(req, res, page, result.query)


__all__ = [
    "DispatchContext",
    "RequestDispatcher",
]
