"""Utils module - URL and querystring helpers.

Configuration lives in pageroutes_core.utils.config, which depends on the
routing package and is not imported here.
"""

from pageroutes_core.utils.helpers import (
    ParsedUrl,
    parse_url,
    parse_query,
    clean_page,
)
from pageroutes_core.utils.querystring import (
    to_querystring,
    encode_component,
    decode_component,
)

__all__ = [
    "ParsedUrl",
    "parse_url",
    "parse_query",
    "clean_page",
    "to_querystring",
    "encode_component",
    "decode_component",
]
