"""routeorder exception hierarchy.

Shared across the segment parser, pattern compiler, classifier and
priority tree so every module raises and catches the same types.

Unmatched paths are not errors: the classifier returns ``None`` for them.
"""


class RouteOrderError(Exception):
    """Base for all routeorder-specific errors."""


class ConfigurationError(RouteOrderError):
    """Raised when routing configuration is invalid."""


class InvalidRouteError(ConfigurationError):
    """A route template is malformed.

    Only raised when strict validation is enabled
    (``RoutingConfig(strict=True)``). The default permissive mode accepts
    any string.
    """

    def __init__(self, route: str, reason: str) -> None:
        self.route = route
        self.reason = reason
        super().__init__(f"Invalid route {route!r}: {reason}")


class RouteCompileError(RouteOrderError):
    """A route template produced an expression that does not compile.

    This is a programming error, not an expected outcome. The call that
    triggered it is aborted.
    """

    def __init__(self, route: str, expression: str) -> None:
        self.route = route
        self.expression = expression
        super().__init__(f"Route {route!r} compiled to an invalid expression {expression!r}")
