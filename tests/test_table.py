"""Tests for routeorder.routing.table — precomputed route table."""

import pytest

from routeorder.config import RoutingConfig
from routeorder.errors import InvalidRouteError
from routeorder.routing.classify import RouteMatch, clear_matcher_cache
from routeorder.routing.table import RouteTable

ROUTES = [
    "/[...rest]",
    "/blog/[slug]",
    "/blog/new",
    "/blog",
    "/docs/[[...path]]",
]


@pytest.fixture(autouse=True)
def _fresh_cache() -> None:
    clear_matcher_cache()


class TestRouteTableOrder:
    def test_canonical_routes(self) -> None:
        table = RouteTable(ROUTES)
        assert table.routes == (
            "/blog",
            "/blog/new",
            "/blog/[slug]",
            "/docs/[[...path]]",
            "/[...rest]",
        )

    def test_len_iter_contains(self) -> None:
        table = RouteTable(ROUTES)
        assert len(table) == 5
        assert list(table) == list(table.routes)
        assert "/blog/[slug]" in table
        assert "/blog" in table
        assert "/missing" not in table

    def test_empty(self) -> None:
        table = RouteTable([])
        assert table.routes == ()
        assert table.resolve("/") is None

    def test_default_config(self) -> None:
        assert RouteTable([]).config == RoutingConfig()


class TestRouteTableResolve:
    def test_static(self) -> None:
        assert RouteTable(ROUTES).resolve("/blog/new") == "/blog/new"

    def test_param(self) -> None:
        assert RouteTable(ROUTES).resolve("/blog/hello") == "/blog/[slug]"

    def test_optional_catch_all_without_tail(self) -> None:
        assert RouteTable(ROUTES).resolve("/docs") == "/docs/[[...path]]"

    def test_catch_all_fallback(self) -> None:
        assert RouteTable(ROUTES).resolve("/blog/hello/world") == "/[...rest]"

    def test_canonical_order_beats_input_order(self) -> None:
        table = RouteTable(["/a/[...slug]", "/a/[id]"])
        assert table.resolve("/a/x") == "/a/[id]"
        assert table.resolve("/a/x/y") == "/a/[...slug]"

    def test_no_match(self) -> None:
        assert RouteTable(["/a"]).resolve("/b") is None


    def test_deeper_route_not_shadowed_by_optional_catch_all(self) -> None:
        table = RouteTable(["/a/[[...slug]]", "/a/[id]/edit"])
        assert table.resolve("/a/x/edit") == "/a/[id]/edit"
        assert table.resolve("/a/x/y") == "/a/[[...slug]]"
        assert table.resolve("/a") == "/a/[[...slug]]"


class TestRouteTableMatch:
    def test_static(self) -> None:
        assert RouteTable(ROUTES).match("/blog") == RouteMatch(route="/blog", params={})

    def test_params(self) -> None:
        result = RouteTable(ROUTES).match("/docs/a/b")
        assert result == RouteMatch(route="/docs/[[...path]]", params={"path": ("a", "b")})

    def test_no_match(self) -> None:
        assert RouteTable(["/a"]).match("/b") is None

    def test_decode_disabled(self) -> None:
        table = RouteTable(["/a/[id]"], RoutingConfig(decode_params=False))
        assert table.match("/a/%41") == RouteMatch(route="/a/[id]", params={"id": "%41"})


class TestRouteTableStrict:
    def test_rejects_malformed(self) -> None:
        with pytest.raises(InvalidRouteError):
            RouteTable(["/a/[id"], RoutingConfig(strict=True))
