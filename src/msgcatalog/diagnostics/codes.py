"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages for catalog and
locale-loading failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (unsupported codes, load failures)
        2000-2999: Catalog errors (unusable documents)
    """

    # Locale errors (1000-1999)
    LOCALE_NOT_SUPPORTED = 1001
    LOCALE_LOAD_FAILED = 1002
    LOCALE_CODE_INVALID = 1003

    # Catalog errors (2000-2999)
    CATALOG_INVALID = 2001
    CATALOG_LOCALE_MISMATCH = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale code involved in the failure, if any
        source_path: Human-readable catalog location, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_NOT_SUPPORTED]: Unsupported locale 'xx'
              --> locales/xx.json
              = help: Available locales: de, en, es, fr

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.source_path:
            parts.append(f"  --> {self.source_path}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
