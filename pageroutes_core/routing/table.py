"""Route Table - Ordered, named route registry.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pageroutes_core.routing.errors import DuplicateRouteNameError
from pageroutes_core.routing.route import Route, Urls
from pageroutes_core.utils.helpers import ParsedUrl, parse_url

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Result of matching a URL against the table.

    query is the explicit URL query overlaid with the path params; path
    params win on key collision.
    """

    parsed_url: ParsedUrl
    route: Optional[Route] = None
    params: Optional[Dict[str, str]] = None
    query: Dict[str, Any] = field(default_factory=dict)

    @property
    def matched(self) -> bool:
        return self.route is not None


@dataclass
class ResolveResult:
    """Route and URLs for a route name or a literal URL."""

    route: Optional[Route]
    urls: Urls
    by_name: bool = False


class RouteTable:
    """Route Table.

    Features:
    - Named routes (names are unique)
    - Path parameters (/users/:id)
    - First-match-wins matching in registration order
    - href/as URL synthesis

    Usage:
        routes = RouteTable()
        routes.add("about").add("blog", "/blog/:slug", "blog/show")
        routes.add({"name": "user", "pattern": "/user/:id", "page": "user"})

        result = routes.match("/blog/hello?ref=home")
        if result.route:
            page = result.route.get_page(result.params)
    """

    def __init__(self):
        self._routes: List[Route] = []

    def add(
        self,
        name: Union[str, Mapping[str, Any], None] = None,
        pattern: Optional[str] = None,
        page: Any = None,
        data: Any = None,
    ) -> "RouteTable":
        """Add a route.

        Args:
            name: Route name, or a mapping of route options. A string
                starting with "/" is taken as the pattern and the remaining
                arguments shift left (pattern -> page, page -> data).
            pattern: URL pattern
            page: Page name, page pattern or page function
            data: Route metadata

        Raises:
            DuplicateRouteNameError: name is already registered
        """
        if isinstance(name, Mapping):
            options = dict(name)
        elif isinstance(name, str) and name.startswith("/"):
            options = {"name": None, "pattern": name, "page": pattern, "data": page}
        else:
            options = {"name": name, "pattern": pattern, "page": page, "data": data}

        if not options.get("name") and options.get("pattern"):
            options["name"] = options["pattern"]

        route_name = options.get("name")
        if self.find_by_name(route_name):
            logger.error(f"Duplicate route name: {route_name}")
            raise DuplicateRouteNameError(route_name)

        route = Route(
            name=route_name,
            pattern=options.get("pattern"),
            page=options.get("page"),
            data=options.get("data"),
        )
        self._routes.append(route)
        logger.debug(f"Added route {route.name} -> {route.pattern}")

        return self

    def find_by_name(self, name: Optional[str]) -> Optional[Route]:
        """Find a route by exact name."""
        if not name:
            return None
        for route in self._routes:
            if route.name == name:
                return route
        return None

    def match(self, url: str) -> MatchResult:
        """Match a URL to the first route whose pattern fits its path.

        Returns:
            MatchResult; route and params are None when nothing matched
        """
        parsed_url = parse_url(url)

        for route in self._routes:
            params = route.match(parsed_url.pathname)
            if params is not None:
                return MatchResult(
                    parsed_url=parsed_url,
                    route=route,
                    params=params,
                    query={**parsed_url.query, **params},
                )

        return MatchResult(parsed_url=parsed_url, query=dict(parsed_url.query))

    def resolve(
        self,
        name_or_url: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ResolveResult:
        """Resolve a route name or a literal URL to href/as URLs.

        A name builds both URLs from params. A URL keeps itself as the
        public URL and derives href from the matched route, or passes
        through unchanged when no route matches.
        """
        route = self.find_by_name(name_or_url)
        if route:
            return ResolveResult(route=route, urls=route.get_urls(params), by_name=True)

        result = self.match(name_or_url)
        href = result.route.get_href(result.query) if result.route else name_or_url
        return ResolveResult(route=result.route, urls=Urls(href=href, as_=name_or_url))

    @property
    def routes(self) -> Tuple[Route, ...]:
        """Registered routes in match order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(tuple(self._routes))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_by_name(name) is not None


__all__ = [
    "RouteTable",
    "MatchResult",
    "ResolveResult",
]
