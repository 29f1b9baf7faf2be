"""Hypothesis strategies for msgcatalog property-based testing.

Usage:
    from tests.strategies import templates, key_paths
    from tests.strategies.catalog import nested_document, json_values
"""

from .catalog import (
    WORD_CHARS,
    json_values,
    key_paths,
    key_segments,
    nested_document,
    placeholder_names,
    plain_text,
    templates,
)

__all__ = [
    "WORD_CHARS",
    "json_values",
    "key_paths",
    "key_segments",
    "nested_document",
    "placeholder_names",
    "plain_text",
    "templates",
]
