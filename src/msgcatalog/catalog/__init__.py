"""Message tree, key resolution and parameter interpolation.

The stateless half of the engine: everything here is a pure function of
its arguments. LocalizationManager composes these pieces with per-locale
state and the fallback chain.

Python 3.13+. Zero external dependencies.
"""

from .interpolation import extract_placeholders, interpolate, safe_stringify
from .resolver import resolve
from .tree import (
    Invalid,
    Leaf,
    MessageTree,
    Node,
    Seq,
    build_root,
    build_tree,
    iter_leaf_paths,
)

__all__ = [
    "Invalid",
    "Leaf",
    "MessageTree",
    "Node",
    "Seq",
    "build_root",
    "build_tree",
    "extract_placeholders",
    "interpolate",
    "iter_leaf_paths",
    "resolve",
    "safe_stringify",
]
