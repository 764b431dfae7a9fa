"""Tests for routeorder.routing.validation — strict template checks."""

import pytest

from routeorder.config import RoutingConfig
from routeorder.errors import InvalidRouteError
from routeorder.routing.segment import SegmentKind
from routeorder.routing.validation import parse_routes, validate_route


class TestValidRoutes:
    @pytest.mark.parametrize(
        "route",
        [
            "/",
            "/a/b",
            "/a/[id]",
            "/a/[[id]]",
            "/[org]/[repo]/[...path]",
            "/shop/[[...filters]]",
            "/a/",
            "/a/[...slug]/",
            "/a/[[...slug]]/",
        ],
    )
    def test_accepted(self, route: str) -> None:
        assert validate_route(route).raw == route

    def test_returns_parsed_template(self) -> None:
        template = validate_route("/a/[...slug]")
        assert template.segments[-1].kind is SegmentKind.CATCH_ALL


class TestInvalidRoutes:
    @pytest.mark.parametrize(
        ("route", "reason"),
        [
            ("a/b", "must start with '/'"),
            ("/a/[id", "unbalanced brackets"),
            ("/a/[id]]", "unbalanced brackets"),
            ("/a/[[id]", "unbalanced brackets"),
            ("/a/v[id]", "must wrap the whole segment"),
            ("/a/[]", "empty parameter name"),
            ("/a/[[...]]", "empty parameter name"),
            ("/a/[[[id]]]", "may not start or end with brackets"),
            ("/a/[....id]", "may not start with periods"),
            ("/a/[...slug]/b", "catch-all must be the last segment"),
            ("/a/[[...slug]]/[id]", "catch-all must be the last segment"),
            ("/[id]/b/[id]", "used more than once"),
        ],
    )
    def test_rejected(self, route: str, reason: str) -> None:
        with pytest.raises(InvalidRouteError) as exc_info:
            validate_route(route)
        err = exc_info.value
        assert err.route == route
        assert reason in err.reason
        assert route in str(err)


class TestParseRoutes:
    def test_permissive(self) -> None:
        templates = parse_routes(["/a/[id", "/b"], RoutingConfig())
        assert [t.raw for t in templates] == ["/a/[id", "/b"]

    def test_strict(self) -> None:
        with pytest.raises(InvalidRouteError):
            parse_routes(["/b", "/a/[id"], RoutingConfig(strict=True))
