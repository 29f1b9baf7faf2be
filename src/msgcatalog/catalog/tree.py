"""Immutable message tree: the tagged variant behind every locale catalog.

A catalog document is an arbitrary nested mapping (usually decoded JSON).
build_tree() converts it once, at registration time, into a tree of four
node kinds so the resolver can pattern-match instead of duck-typing:

    Leaf    - a template string
    Node    - a mapping of segment name to subtree (read-only view)
    Seq     - a sequence of template strings, addressed by numeric segment
    Invalid - anything else; always resolves to not found

Building copies the input, so later mutation of the caller's mapping never
reaches registered catalog data.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TypeAlias
from dataclasses import dataclass
from types import MappingProxyType

from msgcatalog.constants import MAX_TREE_DEPTH

__all__ = [
    "Invalid",
    "Leaf",
    "MessageTree",
    "Node",
    "Seq",
    "build_root",
    "build_tree",
    "iter_leaf_paths",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """Template string at the end of a key path."""

    text: str


@dataclass(frozen=True, slots=True)
class Node:
    """Group of named subtrees.

    Attributes:
        children: Read-only mapping of segment name to subtree
    """

    children: Mapping[str, MessageTree]


@dataclass(frozen=True, slots=True)
class Seq:
    """Indexable list of templates.

    Non-string elements keep their position as None so indices stay
    stable; they resolve to not found.
    """

    items: tuple[str | None, ...]


@dataclass(frozen=True, slots=True)
class Invalid:
    """Placeholder for a value that cannot hold templates.

    Attributes:
        type_name: Python type name of the rejected value (diagnostics only)
    """

    type_name: str


MessageTree: TypeAlias = Leaf | Node | Seq | Invalid
"""Any node of a message tree."""


def build_tree(raw: object) -> MessageTree:
    """Convert a raw nested value into an immutable MessageTree.

    Never raises: malformed values (None, numbers, cyclic containers,
    nesting beyond MAX_TREE_DEPTH) become Invalid nodes.

    Args:
        raw: Decoded catalog value (mapping, list, string, or anything else)

    Returns:
        Root of the built tree

    Example:
        >>> tree = build_tree({"string": {"required": "is required"}})
        >>> tree.children["string"].children["required"]
        Leaf(text='is required')
    """
    return _build(raw, 0, set())


def build_root(document: Mapping[object, object]) -> Node:
    """Build the root Node of a locale catalog.

    Same conversion as build_tree(), typed for the mapping-at-the-root case.

    Args:
        document: Catalog document (mapping of group name to group)

    Returns:
        Root Node
    """
    active = {id(document)}
    children = {str(key): _build(value, 1, active) for key, value in document.items()}
    return Node(MappingProxyType(children))


def _build(raw: object, depth: int, active: set[int]) -> MessageTree:
    # bool/int/float/None fall through to Invalid via the final case
    match raw:
        case str():
            return Leaf(raw)
        case Mapping() | list() | tuple() if depth >= MAX_TREE_DEPTH or id(raw) in active:
            return Invalid(type(raw).__name__)
        case Mapping():
            active.add(id(raw))
            try:
                children = {
                    str(key): _build(value, depth + 1, active) for key, value in raw.items()
                }
            finally:
                active.discard(id(raw))
            return Node(MappingProxyType(children))
        case list() | tuple():
            return Seq(tuple(item if isinstance(item, str) else None for item in raw))
        case _:
            return Invalid(type(raw).__name__)


def iter_leaf_paths(tree: MessageTree, prefix: str = "") -> Iterator[str]:
    """Yield the dotted path of every resolvable template in the tree.

    Sequence elements are yielded as ``prefix.N``. Invalid nodes and
    non-string sequence elements are skipped.

    Args:
        tree: Tree (or subtree) to walk
        prefix: Path of ``tree`` itself; empty for the root

    Yields:
        Dotted key paths in document order
    """
    match tree:
        case Leaf():
            if prefix:
                yield prefix
        case Node(children=children):
            for name, child in children.items():
                yield from iter_leaf_paths(child, f"{prefix}.{name}" if prefix else name)
        case Seq(items=items):
            for index, item in enumerate(items):
                if item is not None:
                    yield f"{prefix}.{index}" if prefix else str(index)
        case Invalid():
            return
