"""routeorder — route template compiler and priority sorter.

Resolves browser paths against bracketed route templates and orders
templates so the most specific one is always tried first.

Basic usage::

    from routeorder import canonical_order, resolve_route

    routes = ["/blog/[slug]", "/blog/new", "/docs/[...path]"]

    resolve_route("/blog/new", routes)      # "/blog/new"
    resolve_route("/blog/hello", routes)    # "/blog/[slug]"
    resolve_route("/about", routes)         # None

    canonical_order(routes)
    # ["/blog/new", "/blog/[slug]", "/docs/[...path]"]

Built once at startup::

    from routeorder import RouteTable

    table = RouteTable(routes)
    table.match("/docs/a/b").params         # {"path": ("a", "b")}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidRouteError",
    "RouteCompileError",
    "RouteMatch",
    "RouteOrderError",
    "RouteTable",
    "RoutingConfig",
    "canonical_order",
    "is_dynamic_route",
    "match_route",
    "resolve_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routeorder`` fast while providing a clean top-level API.
    """
    if name in ("canonical_order", "match_route", "resolve_route"):
        from routeorder import resolve as _resolve

        return getattr(_resolve, name)

    if name == "RouteTable":
        from routeorder.routing.table import RouteTable

        return RouteTable

    if name == "RouteMatch":
        from routeorder.routing.classify import RouteMatch

        return RouteMatch

    if name == "RoutingConfig":
        from routeorder.config import RoutingConfig

        return RoutingConfig

    if name == "is_dynamic_route":
        from routeorder.routing.segment import is_dynamic_route

        return is_dynamic_route

    if name in (
        "ConfigurationError",
        "InvalidRouteError",
        "RouteCompileError",
        "RouteOrderError",
    ):
        from routeorder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
