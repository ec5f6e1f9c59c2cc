"""Querystring synthesis.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote, unquote

# encodeURIComponent leaves these unescaped on top of quote()'s defaults
_COMPONENT_SAFE = "!*'()"


def stringify(value: Any) -> str:
    """Render a scalar the way a browser would put it in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_segments(value: Any) -> str:
    """Join list values with "/", stringify anything else."""
    if isinstance(value, (list, tuple)):
        return "/".join(stringify(item) for item in value)
    return stringify(value)


def encode_component(value: Any) -> str:
    """Percent-encode a single URI component."""
    return quote(stringify(value), safe=_COMPONENT_SAFE)


def decode_component(value: str) -> str:
    """Percent-decode a single URI component.

    Raises:
        UnicodeDecodeError: the escapes are not valid UTF-8 ("%FF")
    """
    return unquote(value, errors="strict")


def to_querystring(params: Mapping[str, Any]) -> str:
    """Build a querystring from a mapping.

    Keys keep the mapping's order. None values are dropped, list values
    are joined with "/" before encoding.

    Example:
        >>> to_querystring({"a": [1, 2], "b": None, "c": "x y"})
        'a=1%2F2&c=x%20y'
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        pairs.append(f"{encode_component(key)}={encode_component(join_segments(value))}")
    return "&".join(pairs)


__all__ = [
    "stringify",
    "join_segments",
    "encode_component",
    "decode_component",
    "to_querystring",
]
