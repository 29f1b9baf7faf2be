"""Dotted-path key resolution over a MessageTree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from msgcatalog.catalog.tree import Leaf, MessageTree, Node, Seq

__all__ = ["is_index_segment", "resolve"]

# Canonical non-negative decimal integers only: "0", "7", "12" (not "01", "-1", "+1")
_INDEX_SEGMENT = re.compile(r"0|[1-9][0-9]*", re.ASCII)


def is_index_segment(segment: str) -> bool:
    """Check whether a path segment can index into a Seq."""
    return _INDEX_SEGMENT.fullmatch(segment) is not None


def resolve(tree: MessageTree, path: str) -> str | None:
    """Resolve a dotted key path to its template string.

    Every intermediate segment must name a Node child, or index a Seq
    with a numeric segment. Any other shape yields None; resolution
    never raises.

    Args:
        tree: Root of a locale catalog
        path: Dotted key path (e.g., "string.tooShort", "items.1")

    Returns:
        Template string, or None if the path does not end at a template

    Example:
        >>> from msgcatalog.catalog.tree import build_tree
        >>> tree = build_tree({"items": ["first", "second"]})
        >>> resolve(tree, "items.1")
        'second'
        >>> resolve(tree, "items.2") is None
        True
    """
    if not path:
        return None

    current: MessageTree | None = tree
    for segment in path.split("."):
        match current:
            case Node(children=children):
                current = children.get(segment)
            case Seq(items=items) if is_index_segment(segment):
                index = int(segment)
                item = items[index] if index < len(items) else None
                current = Leaf(item) if item is not None else None
            case _:
                return None
        if current is None:
            return None

    match current:
        case Leaf(text=text):
            return text
        case _:
            return None
