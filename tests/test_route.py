"""Route tests."""

from dataclasses import FrozenInstanceError

import pytest
from pageroutes_core.routing.errors import (
    InvalidPageError,
    MissingParameterError,
    MissingRouteNameError,
    PageResolutionError,
)
from pageroutes_core.routing.route import (
    CallablePage,
    PageContext,
    PatternPage,
    Route,
    StaticPage,
    Urls,
)


class TestRouteConstruction:
    """Test Route defaults and validation."""

    def test_defaults_from_name(self):
        """Test pattern and page default to the name."""
        route = Route(name="about")
        assert route.pattern == "/about"
        assert route.get_page() == "/about"

    def test_missing_name(self):
        """Test routes need a name."""
        with pytest.raises(MissingRouteNameError) as exc:
            Route(name="", pattern="/x")
        assert "/x" in str(exc.value)

    def test_invalid_page_type(self):
        """Test pages must be strings or callables."""
        with pytest.raises(InvalidPageError):
            Route(name="bad", page=42)

    def test_page_resolver_picked_once(self):
        """Test page variants."""
        assert isinstance(Route(name="a", page="users/index")._page_resolver, StaticPage)
        assert isinstance(Route(name="b", page="/blog/:slug")._page_resolver, PatternPage)
        assert isinstance(Route(name="c", page=lambda ctx: "/c")._page_resolver, CallablePage)

    def test_route_is_frozen(self):
        """Test routes cannot be changed after construction."""
        route = Route(name="user", pattern="/u/:id")
        with pytest.raises(FrozenInstanceError):
            route.pattern = "/other"
        assert route.pattern == "/u/:id"
        assert route.match("/u/1") == {"id": "1"}


class TestPageResolution:
    """Test page identifiers."""

    def test_static_page_cleaned(self):
        """Test index stripping and leading slash."""
        assert Route(name="a", page="users/index").get_page() == "/users"
        assert Route(name="b", page="index").get_page() == "/"
        assert Route(name="c", page="/already").get_page() == "/already"

    def test_pattern_page(self):
        """Test page patterns render with params."""
        route = Route(name="post", pattern="/p/:slug", page="/blog/:slug")
        assert route.get_page({"slug": "hi"}) == "/blog/hi"

    def test_callable_page(self):
        """Test page functions receive params, name and data."""
        seen = []

        def page(ctx: PageContext) -> str:
            seen.append(ctx)
            return f"/{ctx.data['kind']}/{ctx.params['id']}"

        route = Route(name="thing", pattern="/t/:id", page=page, data={"kind": "item"})
        assert route.get_page({"id": "9"}) == "/item/9"
        assert seen[0].name == "thing"

    def test_callable_must_return_str(self):
        """Test bad page function result."""
        route = Route(name="x", page=lambda ctx: None)
        with pytest.raises(PageResolutionError):
            route.get_page()


class TestRouteMatch:
    """Test Route.match."""

    def test_decodes_params(self):
        """Test captures are percent-decoded."""
        route = Route(name="tag", pattern="/tag/:name")
        assert route.match("/tag/a%20b") == {"name": "a b"}

    def test_absent_optional_omitted(self):
        """Test absent captures are left out."""
        route = Route(name="users", pattern="/users/:id?")
        assert route.match("/users") == {}

    def test_variadic_rejoined(self):
        """Test variadic captures come back joined."""
        route = Route(name="files", pattern="/files/:path+")
        assert route.match("/files/a/b%20c") == {"path": "a/b c"}

    def test_invalid_utf8_is_no_match(self):
        """Test undecodable escapes do not match."""
        route = Route(name="tag", pattern="/tag/:name")
        assert route.match("/tag/%FF") is None

    def test_no_match(self):
        """Test unmatched path."""
        assert Route(name="user", pattern="/user/:id").match("/users/1") is None


class TestUrls:
    """Test href/as synthesis."""

    def test_as_consumes_path_params(self):
        """Test as carries only params not in the path."""
        route = Route(name="user", pattern="/user/:id", page="/user")
        assert route.get_as({"id": 5}) == "/user/5"
        assert route.get_as({"id": 5, "tab": "posts"}) == "/user/5?tab=posts"

    def test_href_carries_all_params(self):
        """Test href carries the full param set."""
        route = Route(name="user", pattern="/user/:id", page="/user")
        assert route.get_href({"id": 5}) == "/user?id=5"

    def test_href_with_pattern_page_keeps_query(self):
        """Test href repeats params already in the page path."""
        route = Route(name="post", pattern="/p/:slug", page="/blog/:slug")
        assert route.get_href({"slug": "hi"}) == "/blog/hi?slug=hi"

    def test_as_falls_back_to_root(self):
        """Test empty render gives root."""
        route = Route(name="home", pattern="/:lang?", page="index")
        assert route.get_as({}) == "/"

    def test_as_missing_required(self):
        """Test render errors propagate."""
        route = Route(name="user", pattern="/user/:id")
        with pytest.raises(MissingParameterError):
            route.get_as({})

    def test_href_always_has_query_separator(self):
        """Test href ends in "?" even without params."""
        assert Route(name="about").get_href() == "/about?"

    def test_get_urls(self):
        """Test both URLs together."""
        route = Route(name="blog", pattern="/blog/:slug", page="blog")
        urls = route.get_urls({"slug": "hello world"})
        assert urls == Urls(href="/blog?slug=hello%20world", as_="/blog/hello%20world")
        assert urls.to_dict() == {
            "href": "/blog?slug=hello%20world",
            "as": "/blog/hello%20world",
        }

    def test_round_trip(self):
        """Test match recovers what get_as rendered."""
        route = Route(name="post", pattern="/posts/:year/:slug")
        params = {"year": "2024", "slug": "ça va?"}
        assert route.match(route.get_as(params)) == params
