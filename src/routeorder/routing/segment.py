"""Route segments and the bracket-syntax parser.

A route template is a slash-delimited sequence of segments::

    "/blog/[slug]"          -> [Segment("blog"), Segment("[slug]", PARAM, "slug")]
    "/docs/[...path]"       -> [..., Segment("[...path]", CATCH_ALL, "path")]
    "/shop/[[...filters]]"  -> [..., Segment("[[...filters]]", OPTIONAL_CATCH_ALL, "filters")]
"""

import re
from dataclasses import dataclass
from enum import Enum

_DYNAMIC_ROUTE = re.compile(r"/\[[^/]+?\](?=/|$)")
_ELLIPSIS = "..."


class SegmentKind(Enum):
    """The five segment kinds.

    Dynamic kinds are fully determined by the ``(optional, repeat)`` pair.
    """

    LITERAL = "literal"
    PARAM = "param"
    OPTIONAL_PARAM = "optional_param"
    CATCH_ALL = "catch_all"
    OPTIONAL_CATCH_ALL = "optional_catch_all"

    @classmethod
    def from_flags(cls, *, optional: bool, repeat: bool) -> "SegmentKind":
        """Map the two dynamic-segment flags onto a kind."""
        match (optional, repeat):
            case (False, False):
                return cls.PARAM
            case (True, False):
                return cls.OPTIONAL_PARAM
            case (False, True):
                return cls.CATCH_ALL
            case (True, True):
                return cls.OPTIONAL_CATCH_ALL
        raise AssertionError("unreachable")


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route template.

    Literal:  ``blog``           (kind=LITERAL, name=None)
    Param:    ``[slug]``         (kind=PARAM, name="slug")
    Catch-all: ``[...path]``     (kind=CATCH_ALL, name="path")
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str | None = None

    @property
    def is_dynamic(self) -> bool:
        return self.kind is not SegmentKind.LITERAL

    @property
    def optional(self) -> bool:
        return self.kind in (SegmentKind.OPTIONAL_PARAM, SegmentKind.OPTIONAL_CATCH_ALL)

    @property
    def repeat(self) -> bool:
        return self.kind in (SegmentKind.CATCH_ALL, SegmentKind.OPTIONAL_CATCH_ALL)


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A parsed route template. ``raw`` is its identity."""

    raw: str
    segments: tuple[Segment, ...]

    @property
    def is_dynamic(self) -> bool:
        return any(seg.is_dynamic for seg in self.segments)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self.segments if seg.name is not None)


def _is_bracketed(text: str) -> bool:
    # At least one character between the brackets, as in _DYNAMIC_ROUTE
    return len(text) > 2 and text.startswith("[") and text.endswith("]")


def parse_parameter(inner: str) -> tuple[str, bool, bool]:
    """Parse the bracket-stripped inner text of a dynamic segment.

    Returns ``(name, optional, repeat)``::

        "slug"          -> ("slug", False, False)
        "[slug]"        -> ("slug", True, False)
        "...slug"       -> ("slug", False, True)
        "[...slug]"     -> ("slug", True, True)
    """
    optional = _is_bracketed(inner)
    if optional:
        inner = inner[1:-1]
    repeat = inner.startswith(_ELLIPSIS)
    if repeat:
        inner = inner[len(_ELLIPSIS) :]
    return inner, optional, repeat


def parse_segment(text: str) -> Segment:
    """Parse one raw segment. Never raises; malformed brackets are literals."""
    if not _is_bracketed(text):
        return Segment(value=text)
    name, optional, repeat = parse_parameter(text[1:-1])
    return Segment(
        value=text,
        kind=SegmentKind.from_flags(optional=optional, repeat=repeat),
        name=name,
    )


def parse_route(raw: str) -> RouteTemplate:
    """Parse a route template string into segments.

    The leading slash is dropped and the rest split on ``/``, so ``"/"``
    is a single empty literal and a trailing slash leaves an empty
    trailing literal.
    """
    parts = raw[1:].split("/")
    return RouteTemplate(raw=raw, segments=tuple(parse_segment(part) for part in parts))


def is_dynamic_route(raw: str) -> bool:
    """Whether *raw* contains at least one wholly bracketed segment."""
    return _DYNAMIC_ROUTE.search(raw) is not None
