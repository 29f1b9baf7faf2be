"""Enumerations for msgcatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the
plain strings validators may still pass in.

Python 3.13+.
"""

from enum import StrEnum


class MsgType(StrEnum):
    """How the ``msg`` argument of a formatting call is interpreted.

    StrEnum provides automatic string conversion: str(MsgType.FIELD_NAME) == "fieldName"
    """

    FIELD_NAME = "fieldName"
    """msg is a subject/field name combined with a catalog template."""

    MESSAGE = "message"
    """msg is the final text and is returned verbatim."""


class LoadStatus(StrEnum):
    """Outcome of a single locale load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog fetched and registered."""

    NOT_FOUND = "not_found"
    """Loader cannot source the locale."""

    ERROR = "error"
    """Fetch or decoding failed, or the document was unusable."""


__all__ = [
    "LoadStatus",
    "MsgType",
]
