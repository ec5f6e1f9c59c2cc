"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Union
from urllib.parse import parse_qs, urlsplit

QueryValue = Union[str, List[str]]

_INDEX_SUFFIX = re.compile(r"(^|/)index$")
_LEADING_SLASH = re.compile(r"^/?")


@dataclass(frozen=True)
class ParsedUrl:
    """Request URL split into path and explicit query."""

    href: str
    pathname: str
    search: str = ""
    query: Dict[str, QueryValue] = field(default_factory=dict)
    hash: str = ""


def parse_query(query_string: str) -> Dict[str, QueryValue]:
    """Parse a querystring.

    Repeated keys collapse into a list, single keys stay plain strings.
    """
    query: Dict[str, QueryValue] = {}
    for key, values in parse_qs(query_string, keep_blank_values=True).items():
        query[key] = values[0] if len(values) == 1 else values
    return query


def parse_url(url: str) -> ParsedUrl:
    """Parse URL into pathname and query components.

    Request paths ("/a/b?x=1") are split by hand so a leading "//" stays
    part of the path instead of being read as a host.
    """
    if url.startswith("/"):
        rest, _, fragment = url.partition("#")
        path, _, query_string = rest.partition("?")
    else:
        parsed = urlsplit(url)
        path, query_string, fragment = parsed.path, parsed.query, parsed.fragment

    return ParsedUrl(
        href=url,
        pathname=path or "/",
        search=f"?{query_string}" if query_string else "",
        query=parse_query(query_string),
        hash=f"#{fragment}" if fragment else "",
    )


def clean_page(page: str) -> str:
    """Normalize a page identifier.

    "users/index" -> "/users", "about" -> "/about", "index" -> "/".
    """
    page = _INDEX_SUFFIX.sub("", page)
    return _LEADING_SLASH.sub("/", page, count=1)


__all__ = [
    "ParsedUrl",
    "QueryValue",
    "parse_query",
    "parse_url",
    "clean_page",
]
