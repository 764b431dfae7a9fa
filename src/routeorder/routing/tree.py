"""Route priority tree — canonical ordering of route templates.

Templates are inserted into a prefix tree keyed by segment. Literal
segments key on their text; every dynamic segment at a given depth shares
one ``DYNAMIC_SLOT`` child regardless of its parameter name. Flattening the
tree depth-first yields the order a resolver must try routes in::

    sort_routes(["/a/[...slug]", "/a/[id]", "/a/b"])
    -> ["/a/b", "/a/[id]", "/a/[...slug]"]
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, TypeAlias

from routeorder.config import DEFAULT_CONFIG, RoutingConfig
from routeorder.routing.segment import RouteTemplate, SegmentKind
from routeorder.routing.validation import parse_routes

logger = logging.getLogger("routeorder.routing")


@dataclass(frozen=True, slots=True)
class LiteralKey:
    """Tree key for a literal segment."""

    text: str


class _DynamicSlot:
    """Tree key shared by every dynamic segment at one depth."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "DYNAMIC_SLOT"


DYNAMIC_SLOT: Final = _DynamicSlot()

SegmentKey: TypeAlias = LiteralKey | _DynamicSlot

# Lower ranks are tried first among templates ending at the same node.
_TERMINAL_RANK: dict[SegmentKind, int] = {
    SegmentKind.LITERAL: 0,
    SegmentKind.OPTIONAL_CATCH_ALL: 1,
    SegmentKind.PARAM: 2,
    SegmentKind.OPTIONAL_PARAM: 2,
    SegmentKind.CATCH_ALL: 3,
}


class _TreeNode:
    """A node in the priority tree. Holds raw associations only."""

    __slots__ = ("children", "terminals")

    def __init__(self) -> None:
        self.children: dict[SegmentKey, _TreeNode] = {}
        # (kind of the final segment, template) for each route ending here
        self.terminals: list[tuple[SegmentKind, str]] = []

    @property
    def has_optional_catch_all(self) -> bool:
        return any(kind is SegmentKind.OPTIONAL_CATCH_ALL for kind, _ in self.terminals)

    def flatten(self) -> list[str]:
        """Emit this subtree's templates in priority order.

        Order at a node: templates ending here, literal children (sorted by
        text), then the dynamic slot, then catch-alls ending here, which
        shadow everything deeper. An optional catch-all ending here shadows
        everything deeper too, so the node's own templates follow its
        children. When only the dynamic slot holds an optional catch-all,
        templates ending here move after the literal children.
        """
        ranked = sorted(self.terminals, key=lambda t: (_TERMINAL_RANK[t[0]], t[1]))
        own = [raw for kind, raw in ranked if kind is not SegmentKind.CATCH_ALL]
        trailing = [raw for kind, raw in ranked if kind is SegmentKind.CATCH_ALL]

        literal_keys = sorted(
            (key for key in self.children if isinstance(key, LiteralKey)),
            key=lambda key: key.text,
        )
        literal_routes: list[str] = []
        for key in literal_keys:
            literal_routes.extend(self.children[key].flatten())

        slot = self.children.get(DYNAMIC_SLOT)
        slot_routes = slot.flatten() if slot is not None else []

        if self.has_optional_catch_all:
            return literal_routes + slot_routes + own + trailing
        if slot is not None and slot.has_optional_catch_all:
            return literal_routes + own + slot_routes + trailing
        return own + literal_routes + slot_routes + trailing


class RouteTree:
    """Prefix tree over route templates.

    Usage::

        tree = RouteTree()
        tree.insert(parse_route("/a/[id]"))
        tree.insert(parse_route("/a/b"))
        tree.flatten()  # ["/a/b", "/a/[id]"]
    """

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root = _TreeNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, template: RouteTemplate) -> None:
        """Insert a template. Empty segments are skipped."""
        node = self._root
        kind = SegmentKind.LITERAL
        for segment in template.segments:
            if not segment.value:
                continue
            key: SegmentKey = DYNAMIC_SLOT if segment.is_dynamic else LiteralKey(segment.value)
            child = node.children.get(key)
            if child is None:
                child = node.children[key] = _TreeNode()
            node = child
            kind = segment.kind
        node.terminals.append((kind, template.raw))
        self._size += 1

    def flatten(self) -> list[str]:
        return self._root.flatten()


def sort_routes(routes: Iterable[str], config: RoutingConfig | None = None) -> list[str]:
    """Return *routes* in canonical priority order.

    The result is a permutation of the input (duplicates kept) and depends
    only on which templates are given, not on their order.
    """
    tree = RouteTree()
    for template in parse_routes(routes, config or DEFAULT_CONFIG):
        tree.insert(template)
    ordered = tree.flatten()
    logger.debug("Ordered %d routes", len(ordered))
    return ordered
