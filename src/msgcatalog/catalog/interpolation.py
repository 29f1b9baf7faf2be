"""Brace-placeholder substitution for message templates.

Placeholders are ``{name}`` where name is one or more ASCII word
characters. Substitution is flat: ``{outer.inner}`` is never a
placeholder, and nothing is looked up through nested parameters.

A doubled brace ``{{name}}`` contains exactly one placeholder site (the
inner ``{name}``), so substitution keeps the outer braces as text:
``"Multiple {{param}} braces"`` becomes ``"Multiple {test} braces"``.

Parameter values are rendered by safe_stringify(), which never raises,
including for self-referential containers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Set
from decimal import Decimal

from msgcatalog.constants import (
    CIRCULAR_PLACEHOLDER,
    DEPTH_PLACEHOLDER,
    MAX_STRINGIFY_DEPTH,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "extract_placeholders",
    "interpolate",
    "safe_stringify",
]

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}", re.ASCII)
"""Compiled pattern matching a single ``{name}`` placeholder."""


def interpolate(template: str, params: Mapping[str, object] | None = None) -> str:
    """Substitute ``{name}`` placeholders from a flat parameter mapping.

    Placeholders whose name is missing from ``params`` (or maps to None)
    are left exactly as written. Replacement text is never rescanned.

    Args:
        template: Template string from the catalog
        params: Parameter values keyed by placeholder name

    Returns:
        Interpolated string

    Example:
        >>> interpolate("Value {a} and {b} with {c}", {"a": "1", "c": "3"})
        'Value 1 and {b} with 3'
        >>> interpolate("is too short (minimum: {min} characters)", {"min": 5})
        'is too short (minimum: 5 characters)'
    """
    if not params:
        return template

    def _replace(match: re.Match[str]) -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return safe_stringify(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def extract_placeholders(template: str) -> frozenset[str]:
    """Get the names of all placeholders in a template.

    Args:
        template: Template string

    Returns:
        Frozen set of placeholder names (without braces)
    """
    return frozenset(PLACEHOLDER_PATTERN.findall(template))


def safe_stringify(value: object) -> str:
    """Convert a parameter value to display text without ever raising.

    Rendering rules:
        - str (including StrEnum members): unchanged
        - bool: "true" / "false"
        - int, float, Decimal: str()
        - list, tuple, set: items joined with ", "
        - mapping: "{key: value, ...}"
        - container already being rendered: "[Circular]"
        - anything else: str()
        - "<TypeName>" whenever str() raises (including ints too long to print)

    Args:
        value: Parameter value

    Returns:
        Display string

    Example:
        >>> circular = {"name": "test"}
        >>> circular["self"] = circular
        >>> safe_stringify(circular)
        '{name: test, self: [Circular]}'
    """
    return _stringify(value, 0, set())


def _stringify(value: object, depth: int, active: set[int]) -> str:
    # Check bool BEFORE int (bool is subclass of int in Python)
    match value:
        case str():
            return str.__str__(value)
        case bool():
            return "true" if value else "false"
        case int() | float() | Decimal():
            try:
                return str(value)
            except Exception as e:  # noqa: BLE001 - ints beyond sys.get_int_max_str_digits()
                logger.debug("Number of type %s not stringifiable: %s", type(value).__name__, e)
                return f"<{type(value).__name__}>"
        case Mapping() | list() | tuple() | Set():
            if id(value) in active:
                return CIRCULAR_PLACEHOLDER
            if depth >= MAX_STRINGIFY_DEPTH:
                return DEPTH_PLACEHOLDER
            active.add(id(value))
            try:
                if isinstance(value, Mapping):
                    pairs = (
                        f"{_stringify(k, depth + 1, active)}: {_stringify(v, depth + 1, active)}"
                        for k, v in value.items()
                    )
                    return "{" + ", ".join(pairs) + "}"
                return ", ".join(_stringify(item, depth + 1, active) for item in value)
            finally:
                active.discard(id(value))
        case _:
            try:
                return str(value)
            except Exception as e:  # noqa: BLE001 - user __str__ may raise anything
                logger.debug("Parameter of type %s not stringifiable: %s", type(value).__name__, e)
                return f"<{type(value).__name__}>"
