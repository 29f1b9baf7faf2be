"""Error message templates.

Centralized diagnostic factories for consistent, testable error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All catalog and locale error messages are created here so exception
    constructors never build their own strings.
    """

    @staticmethod
    def locale_not_supported(
        locale: str, supported: Iterable[str], source_path: str | None = None
    ) -> Diagnostic:
        """Loader cannot source the requested locale.

        Args:
            locale: Requested locale code
            supported: Locale codes the loader can source
            source_path: Where the loader looked, if known

        Returns:
            Diagnostic for LOCALE_NOT_SUPPORTED
        """
        available = ", ".join(sorted(supported)) or "<none>"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_SUPPORTED,
            message=f"Unsupported locale '{locale}'. Available locales: {available}",
            hint="Register the catalog with register_messages() or add it to the loader",
            locale=locale,
            source_path=source_path,
        )

    @staticmethod
    def locale_load_failed(
        locale: str, reason: str, source_path: str | None = None
    ) -> Diagnostic:
        """Fetching or decoding a locale catalog failed.

        Args:
            locale: Requested locale code
            reason: Underlying failure description
            source_path: Catalog location, if known

        Returns:
            Diagnostic for LOCALE_LOAD_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_LOAD_FAILED,
            message=f"Failed to load locale '{locale}': {reason}",
            locale=locale,
            source_path=source_path,
        )

    @staticmethod
    def locale_code_invalid(locale: object) -> Diagnostic:
        """Locale code is empty, not a string, or padded with whitespace.

        Args:
            locale: The rejected value

        Returns:
            Diagnostic for LOCALE_CODE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CODE_INVALID,
            message=f"Invalid locale code: {locale!r}",
            hint="Locale codes are non-empty strings without surrounding whitespace",
        )

    @staticmethod
    def catalog_invalid(reason: str, source_path: str | None = None) -> Diagnostic:
        """Catalog document is unusable.

        Args:
            reason: What is wrong with the document
            source_path: Catalog location, if known

        Returns:
            Diagnostic for CATALOG_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_INVALID,
            message=f"Invalid localization messages format: {reason}",
            hint="A catalog is a mapping with a string 'locale' field",
            source_path=source_path,
        )

    @staticmethod
    def catalog_locale_mismatch(
        requested: str, declared: str, source_path: str | None = None
    ) -> Diagnostic:
        """Loaded document declares a different locale than requested.

        Args:
            requested: Locale code passed to load_locale()
            declared: Value of the document's 'locale' field
            source_path: Catalog location, if known

        Returns:
            Diagnostic for CATALOG_LOCALE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOCALE_MISMATCH,
            message=f"Catalog for '{requested}' declares locale '{declared}'",
            hint="Fix the 'locale' field of the catalog document",
            locale=requested,
            source_path=source_path,
        )
