"""Querystring and URL helper tests."""

import pytest
from pageroutes_core.utils.helpers import clean_page, parse_url
from pageroutes_core.utils.querystring import (
    decode_component,
    encode_component,
    to_querystring,
)


class TestToQuerystring:
    """Test querystring synthesis."""

    def test_drops_none_joins_lists(self):
        """Test None dropped, lists joined, spaces encoded."""
        assert to_querystring({"a": [1, 2], "b": None, "c": "x y"}) == "a=1%2F2&c=x%20y"

    def test_keeps_key_order(self):
        """Test keys keep mapping order."""
        assert to_querystring({"z": 1, "a": 2, "m": 3}) == "z=1&a=2&m=3"

    def test_encodes_keys(self):
        """Test keys are encoded too."""
        assert to_querystring({"a b": "&"}) == "a%20b=%26"

    def test_booleans_and_empty(self):
        """Test scalar rendering."""
        assert to_querystring({"on": True, "off": False, "e": ""}) == "on=true&off=false&e="

    def test_empty(self):
        """Test empty mapping."""
        assert to_querystring({}) == ""


class TestComponentCodec:
    """Test URI component encoding."""

    @pytest.mark.parametrize("value,expected", [
        ("a-b_c.d~e", "a-b_c.d~e"),
        ("!*'()", "!*'()"),
        ("a/b?c#d", "a%2Fb%3Fc%23d"),
        ("é", "%C3%A9"),
    ])
    def test_encode(self, value, expected):
        """Test encodeURIComponent rules."""
        assert encode_component(value) == expected

    def test_decode(self):
        """Test decoding keeps plus signs."""
        assert decode_component("a%20b+c") == "a b+c"

    def test_decode_rejects_invalid_utf8(self):
        """Test bad escapes raise instead of turning into U+FFFD."""
        with pytest.raises(UnicodeDecodeError):
            decode_component("%FF")


class TestHelpers:
    """Test URL helpers."""

    def test_parse_url(self):
        """Test pathname and query split."""
        parsed = parse_url("/a/b?x=1&y=&x=2#top")
        assert parsed.pathname == "/a/b"
        assert parsed.search == "?x=1&y=&x=2"
        assert parsed.query == {"x": ["1", "2"], "y": ""}
        assert parsed.hash == "#top"

    @pytest.mark.parametrize("page,expected", [
        ("users/index", "/users"),
        ("index", "/"),
        ("about", "/about"),
        ("/about", "/about"),
        ("reindex", "/reindex"),
    ])
    def test_clean_page(self, page, expected):
        """Test page normalization."""
        assert clean_page(page) == expected
