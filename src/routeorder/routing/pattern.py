"""Route template compilation.

Turns a parsed template into an anchored regular expression plus a
mapping from parameter name to capture group::

    "/blog/[slug]"          -> ^/blog/([^/]+?)(?:/)?$
    "/docs/[...path]"       -> ^/docs/(.+?)(?:/)?$
    "/shop/[[...filters]]"  -> ^/shop(?:/(.+?))?(?:/)?$
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import unquote

from routeorder.errors import RouteCompileError
from routeorder.routing.segment import RouteTemplate, Segment, SegmentKind, parse_route

_REGEX_SPECIAL = re.compile(r"[|\\{}()\[\]^$+*?.\-]")

# Capture fragment for each dynamic kind. Every fragment carries its own
# leading slash (the optional catch-all makes it part of the optional group).
_FRAGMENTS: dict[SegmentKind, str] = {
    SegmentKind.PARAM: "/([^/]+?)",
    SegmentKind.OPTIONAL_PARAM: "/([^/]+?)",
    SegmentKind.CATCH_ALL: "/(.+?)",
    SegmentKind.OPTIONAL_CATCH_ALL: "(?:/(.+?))?",
}


def escape_literal(text: str) -> str:
    """Backslash-escape regex metacharacters in a literal segment."""
    return _REGEX_SPECIAL.sub(r"\\\g<0>", text)


@dataclass(frozen=True, slots=True)
class ParamGroup:
    """Where a named parameter lands in the compiled expression."""

    pos: int
    repeat: bool
    optional: bool


@dataclass(frozen=True, slots=True)
class Matcher:
    """A compiled route template. Immutable and safe to share."""

    route: str
    regex: re.Pattern[str]
    groups: Mapping[str, ParamGroup]

    @property
    def expression(self) -> str:
        return self.regex.pattern

    def test(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None

    def match(self, path: str, *, decode: bool = True) -> dict[str, str | tuple[str, ...]] | None:
        """Extract parameters from *path*, or ``None`` if it does not match.

        Catch-all values are split into a tuple of segments; an absent
        optional catch-all is left out of the result.
        """
        m = self.regex.fullmatch(path)
        if m is None:
            return None

        params: dict[str, str | tuple[str, ...]] = {}
        for name, group in self.groups.items():
            value = m.group(group.pos)
            if value is None:
                continue
            if group.repeat:
                params[name] = tuple(_decode(part, decode) for part in value.split("/"))
            else:
                params[name] = _decode(value, decode)
        return params


def _decode(value: str, decode: bool) -> str:
    return unquote(value) if decode else value


def _fragment(segment: Segment) -> str:
    if segment.kind is SegmentKind.LITERAL:
        return f"/{escape_literal(segment.value)}"
    return _FRAGMENTS[segment.kind]


def compile_route(route: str | RouteTemplate) -> Matcher:
    """Compile a route template into a :class:`Matcher`.

    Raises ``RouteCompileError`` if the generated expression is invalid.
    Reusing a parameter name within one template leaves only the last
    occurrence addressable by name.
    """
    template = parse_route(route) if isinstance(route, str) else route

    groups: dict[str, ParamGroup] = {}
    fragments: list[str] = []
    pos = 1
    for segment in template.segments:
        if segment.name is not None:
            groups[segment.name] = ParamGroup(
                pos=pos, repeat=segment.repeat, optional=segment.optional
            )
            pos += 1
        fragments.append(_fragment(segment))

    expression = f"^{''.join(fragments)}(?:/)?$"
    try:
        regex = re.compile(expression)
    except re.error as exc:
        raise RouteCompileError(template.raw, expression) from exc

    return Matcher(route=template.raw, regex=regex, groups=MappingProxyType(groups))
