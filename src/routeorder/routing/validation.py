"""Strict route template validation.

Only used when ``RoutingConfig(strict=True)``. The parser itself accepts
any string; these checks reject templates whose behavior would otherwise
be unspecified.
"""

from collections.abc import Iterable

from routeorder.config import RoutingConfig
from routeorder.errors import InvalidRouteError
from routeorder.routing.segment import RouteTemplate, parse_route


def _check_brackets(raw: str, text: str) -> None:
    depth = 0
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                break
    if depth != 0:
        raise InvalidRouteError(raw, f"unbalanced brackets in segment {text!r}")
    if "[" in text and not (text.startswith("[") and text.endswith("]")):
        raise InvalidRouteError(raw, f"brackets must wrap the whole segment {text!r}")
    if text == "[]":
        raise InvalidRouteError(raw, f"empty parameter name in {text!r}")


def validate_route(route: str | RouteTemplate) -> RouteTemplate:
    """Validate a template, returning its parsed form.

    Raises ``InvalidRouteError`` for unbalanced brackets, empty or
    malformed parameter names, a catch-all that is not the last segment,
    and parameter names reused within one template.
    """
    template = parse_route(route) if isinstance(route, str) else route
    raw = template.raw

    if not raw.startswith("/"):
        raise InvalidRouteError(raw, "route must start with '/'")

    seen: set[str] = set()
    # Trailing empty segments come from a trailing slash
    last = max((i for i, seg in enumerate(template.segments) if seg.value), default=-1)
    for index, segment in enumerate(template.segments):
        _check_brackets(raw, segment.value)
        if segment.name is None:
            continue

        name = segment.name
        if not name:
            raise InvalidRouteError(raw, f"empty parameter name in {segment.value!r}")
        if name.startswith("[") or name.endswith("]"):
            raise InvalidRouteError(raw, f"parameter names may not start or end with brackets ({name!r})")
        if name.startswith("."):
            raise InvalidRouteError(raw, f"parameter names may not start with periods ({name!r})")
        if segment.repeat and index != last:
            raise InvalidRouteError(raw, "catch-all must be the last segment")
        if name in seen:
            raise InvalidRouteError(raw, f"parameter name {name!r} is used more than once")
        seen.add(name)

    return template


def parse_routes(routes: Iterable[str], config: RoutingConfig) -> list[RouteTemplate]:
    """Parse *routes*, validating each one first when ``config.strict``."""
    if config.strict:
        return [validate_route(raw) for raw in routes]
    return [parse_route(raw) for raw in routes]
