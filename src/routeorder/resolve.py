"""Entry points for the surrounding routing code.

``resolve_route`` picks the template that serves a browser path;
``canonical_order`` lists templates in the order they must be tried.
"""

from collections.abc import Iterable

from routeorder.config import RoutingConfig
from routeorder.routing.classify import classify, match_route
from routeorder.routing.tree import sort_routes

__all__ = ["canonical_order", "match_route", "resolve_route"]


def resolve_route(
    candidate_path: str,
    known_routes: Iterable[str],
    config: RoutingConfig | None = None,
) -> str | None:
    """Return the template in *known_routes* serving *candidate_path*.

    ``None`` means no template matched; that is an expected outcome.
    """
    return classify(candidate_path, known_routes, config)


def canonical_order(known_routes: Iterable[str], config: RoutingConfig | None = None) -> list[str]:
    """Return *known_routes* in specificity order, most specific first."""
    return sort_routes(known_routes, config)
