"""Path classification against a set of route templates.

Static templates win outright; otherwise dynamic templates are tried in
the order given. Compiled matchers are memoized per template string and
shared across calls and threads.
"""

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from routeorder.config import DEFAULT_CONFIG, RoutingConfig
from routeorder.routing.pattern import Matcher, compile_route
from routeorder.routing.segment import RouteTemplate, parse_route
from routeorder.routing.validation import parse_routes

logger = logging.getLogger("routeorder.routing")


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful classification, with extracted parameters.

    ``params`` is stored read-only, so matches are hashable.
    """

    route: str
    params: Mapping[str, str | tuple[str, ...]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.route, frozenset(self.params.items())))


class MatcherCache:
    """Process-local memo of compiled matchers, keyed by template string.

    Entries are immutable once published, so reads need no lock; the
    build-or-fetch step is serialized so each template compiles once.
    The memo is unbounded: entries live until ``clear_matcher_cache()``
    is called.
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Matcher] = {}

    def get(self, template: RouteTemplate) -> Matcher:
        matcher = self._entries.get(template.raw)
        if matcher is not None:
            return matcher
        with self._lock:
            matcher = self._entries.get(template.raw)
            if matcher is None:
                matcher = compile_route(template)
                self._entries[template.raw] = matcher
                logger.debug("Compiled %r -> %s", template.raw, matcher.expression)
            return matcher

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, raw: object) -> bool:
        return raw in self._entries


_cache = MatcherCache()


def get_matcher(route: str | RouteTemplate) -> Matcher:
    """Fetch the shared compiled matcher for *route*, building it if needed."""
    template = parse_route(route) if isinstance(route, str) else route
    return _cache.get(template)


def clear_matcher_cache() -> None:
    """Drop every memoized matcher."""
    _cache.clear()


def classify_templates(path: str, templates: Sequence[RouteTemplate]) -> RouteTemplate | None:
    """Classify *path* against already-parsed templates."""
    for template in templates:
        if not template.is_dynamic and template.raw == path:
            return template

    for template in templates:
        if template.is_dynamic and _cache.get(template).test(path):
            return template

    logger.debug("No route matches %r (%d candidates)", path, len(templates))
    return None


def classify(path: str, routes: Iterable[str], config: RoutingConfig | None = None) -> str | None:
    """Return the template in *routes* that serves *path*, or ``None``.

    1. A static template equal to *path* wins, wherever it appears.
    2. Otherwise the first dynamic template, in input order, whose
       matcher accepts *path*.

    Examples::

        classify("/a/b", ["/a/b", "/a/[id]"])  -> "/a/b"
        classify("/a/c", ["/a/b", "/a/[id]"])  -> "/a/[id]"
        classify("/x", ["/a/b", "/a/[id]"])    -> None
    """
    templates = parse_routes(routes, config or DEFAULT_CONFIG)
    template = classify_templates(path, templates)
    return template.raw if template is not None else None


def match_route(path: str, routes: Iterable[str], config: RoutingConfig | None = None) -> RouteMatch | None:
    """Classify *path* and extract its parameters.

    Returns ``None`` when no template serves *path*.
    """
    config = config or DEFAULT_CONFIG
    template = classify_templates(path, parse_routes(routes, config))
    if template is None:
        return None
    if not template.is_dynamic:
        return RouteMatch(route=template.raw, params={})
    params = _cache.get(template).match(path, decode=config.decode_params)
    return RouteMatch(route=template.raw, params=params or {})
