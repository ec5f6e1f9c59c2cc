"""Route - A named pattern mapped to a page.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from pageroutes_core.routing.errors import (
    InvalidPageError,
    MissingRouteNameError,
    PageResolutionError,
)
from pageroutes_core.routing.pattern import PathPattern
from pageroutes_core.utils.helpers import clean_page
from pageroutes_core.utils.querystring import decode_component, to_querystring

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageContext:
    """Arguments handed to a page function."""

    params: Dict[str, Any]
    name: str
    data: Any = None


@dataclass(frozen=True)
class Urls:
    """The two URL forms of a route.

    href loads the page implementation, as_ is what the address bar shows.
    """

    href: str
    as_: str

    def to_dict(self) -> Dict[str, str]:
        return {"href": self.href, "as": self.as_}


class PageResolver(ABC):
    """Resolves the page identifier for a set of parameters."""

    @abstractmethod
    def resolve(self, context: PageContext) -> str:
        pass


class StaticPage(PageResolver):
    """Fixed page name, cleaned once ("users/index" -> "/users")."""

    def __init__(self, page: str):
        self.page = clean_page(page)

    def resolve(self, context: PageContext) -> str:
        return self.page

    def __repr__(self) -> str:
        return f"StaticPage({self.page!r})"


class PatternPage(PageResolver):
    """Page given as its own path pattern, rendered with the params."""

    def __init__(self, page: str):
        self.pattern = PathPattern(page)

    def resolve(self, context: PageContext) -> str:
        return self.pattern.to_path(context.params)

    def __repr__(self) -> str:
        return f"PatternPage({self.pattern.pattern!r})"


class CallablePage(PageResolver):
    """Page computed by a user function taking a PageContext."""

    def __init__(self, func: Callable[[PageContext], str]):
        self.func = func

    def resolve(self, context: PageContext) -> str:
        page = self.func(context)
        if not isinstance(page, str):
            raise PageResolutionError(
                f'Page function for route "{context.name}" returned '
                f"{type(page).__name__}, expected str"
            )
        return page

    def __repr__(self) -> str:
        return f"CallablePage({self.func!r})"


def create_page_resolver(page: Any) -> PageResolver:
    """Pick the resolver for a page definition."""
    if isinstance(page, str):
        if page.startswith("/"):
            return PatternPage(page)
        return StaticPage(page)
    if callable(page):
        return CallablePage(page)
    raise InvalidPageError(page)


@dataclass(frozen=True, eq=False)
class Route:
    """Route definition.

    Frozen: the compiled pattern and page resolver always reflect the
    fields they were built from.

    Attributes:
        name: Unique route name
        pattern: Path pattern, defaults to "/<name>"
        page: Page name, page pattern or page function, defaults to name
        data: Opaque metadata, passed through untouched
    """

    name: str
    pattern: Optional[str] = None
    page: Any = None
    data: Any = None

    _path: PathPattern = field(init=False, repr=False)
    _page_resolver: PageResolver = field(init=False, repr=False)

    def __post_init__(self):
        if not self.name:
            logger.error(f"Route without a name for pattern {self.pattern}")
            raise MissingRouteNameError(self.pattern)

        if self.pattern is None:
            object.__setattr__(self, "pattern", f"/{self.name}")
        if self.page is None:
            object.__setattr__(self, "page", self.name)

        object.__setattr__(self, "_path", PathPattern(self.pattern))
        object.__setattr__(self, "_page_resolver", create_page_resolver(self.page))

    @property
    def path_pattern(self) -> PathPattern:
        return self._path

    @property
    def keys(self):
        return self._path.keys

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Match a request path.

        Returns:
            Dict of decoded path parameters if match, None otherwise
        """
        values = self._path.match(path)
        if values is None:
            return None

        params = {}
        try:
            for key, value in zip(self._path.keys, values):
                if value is None:
                    continue
                if isinstance(value, tuple):
                    params[key.name] = "/".join(decode_component(v) for v in value)
                else:
                    params[key.name] = decode_component(value)
        except UnicodeDecodeError:
            logger.debug(f"Undecodable parameter in {path} for route {self.name}")
            return None
        return params

    def get_page(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Resolve the page identifier."""
        context = PageContext(params=dict(params or {}), name=self.name, data=self.data)
        return self._page_resolver.resolve(context)

    def get_href(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the internal page URL carrying every param in the query."""
        params = params or {}
        return f"{self.get_page(params)}?{to_querystring(params)}"

    def get_as(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the public URL; params not used by the path go in the query."""
        params = params or {}
        as_path = self._path.to_path(params) or "/"

        names = set(self._path.names)
        extra = {k: v for k, v in params.items() if k not in names}
        query_string = to_querystring(extra)

        if not query_string:
            return as_path
        return f"{as_path}?{query_string}"

    def get_urls(self, params: Optional[Mapping[str, Any]] = None) -> Urls:
        """Get both URL forms."""
        return Urls(href=self.get_href(params), as_=self.get_as(params))


__all__ = [
    "PageContext",
    "Urls",
    "PageResolver",
    "StaticPage",
    "PatternPage",
    "CallablePage",
    "create_page_resolver",
    "Route",
]
