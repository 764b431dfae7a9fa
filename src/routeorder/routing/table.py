"""Precomputed route table.

Built once (typically at startup) from a list of templates: holds the
canonical order and every dynamic matcher, then resolves paths without
re-parsing.
"""

from collections.abc import Iterable, Iterator

from routeorder.config import DEFAULT_CONFIG, RoutingConfig
from routeorder.routing.classify import RouteMatch, get_matcher
from routeorder.routing.pattern import Matcher
from routeorder.routing.tree import RouteTree
from routeorder.routing.validation import parse_routes


class RouteTable:
    """An immutable, canonically ordered set of route templates.

    Usage::

        table = RouteTable(["/blog/[slug]", "/blog/new", "/[...rest]"])
        table.routes             # ("/blog/new", "/blog/[slug]", "/[...rest]")
        table.resolve("/blog/hello")   # "/blog/[slug]"
        table.match("/blog/hello").params   # {"slug": "hello"}
    """

    __slots__ = ("_config", "_dynamic", "_routes", "_static")

    def __init__(self, routes: Iterable[str], config: RoutingConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        templates = parse_routes(routes, self._config)

        tree = RouteTree()
        for template in templates:
            tree.insert(template)
        self._routes: tuple[str, ...] = tuple(tree.flatten())

        by_raw = {template.raw: template for template in templates}
        self._static: frozenset[str] = frozenset(
            raw for raw, template in by_raw.items() if not template.is_dynamic
        )
        dynamic: dict[str, Matcher] = {}
        for raw in self._routes:
            template = by_raw[raw]
            if template.is_dynamic and raw not in dynamic:
                dynamic[raw] = get_matcher(template)
        self._dynamic: tuple[Matcher, ...] = tuple(dynamic.values())

    @property
    def routes(self) -> tuple[str, ...]:
        """All templates in canonical order."""
        return self._routes

    @property
    def config(self) -> RoutingConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __contains__(self, route: object) -> bool:
        return route in self._static or any(m.route == route for m in self._dynamic)

    def _find(self, path: str) -> Matcher | str | None:
        if path in self._static:
            return path
        for matcher in self._dynamic:
            if matcher.test(path):
                return matcher
        return None

    def resolve(self, path: str) -> str | None:
        """Return the template serving *path*, or ``None``."""
        found = self._find(path)
        if isinstance(found, Matcher):
            return found.route
        return found

    def match(self, path: str) -> RouteMatch | None:
        """Return the template serving *path* with its parameters, or ``None``."""
        found = self._find(path)
        if found is None:
            return None
        if isinstance(found, str):
            return RouteMatch(route=found, params={})
        params = found.match(path, decode=self._config.decode_params)
        return RouteMatch(route=found.route, params=params or {})
