"""Link adapter - Resolve route props for a navigation element.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from pageroutes_core.routing.table import RouteTable


def link_props(table: RouteTable, props: Mapping[str, Any]) -> Dict[str, Any]:
    """Replace route/to/params props with resolved href and as.

    Props without route or to pass through unchanged (minus params).
    """
    new_props = dict(props)
    route = new_props.pop("route", None)
    to = new_props.pop("to", None)
    params = new_props.pop("params", None)

    name_or_url = route or to
    if name_or_url:
        new_props.update(table.resolve(name_or_url, params).urls.to_dict())

    return new_props


class Link:
    """Navigation element bound to a route table.

    Usage:
        link = Link(routes, render=anchor)
        link(route="blog", params={"slug": "hello"}, children="Hello")
        # anchor(href="/blog?slug=hello", as="/blog/hello", children="Hello")
    """

    def __init__(self, table: RouteTable, render: Callable[..., Any]):
        self.table = table
        self.render = render

    def __call__(self, **props: Any) -> Any:
        return self.render(**link_props(self.table, props))


__all__ = [
    "link_props",
    "Link",
]
