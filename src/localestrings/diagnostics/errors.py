"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the closest built-in exception so
callers can catch it generically (ValueError, LookupError, RuntimeError).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocaleStringsError(Exception):
    """Base exception for all localestrings errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleStringsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class NotInitializedError(LocaleStringsError, RuntimeError):
    """Lookup, substitution or pluralization before a table is active.

    Recoverable: initialize the context and retry.
    """


class MalformedSourceError(LocaleStringsError, ValueError):
    """A string-table file exists but is not a flat JSON object of strings.

    The table being merged keeps everything loaded before the bad file.

    Attributes:
        source_path: Path of the offending file (empty for raw text loads)
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str = "") -> None:
        """Initialize MalformedSourceError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Path of the offending file
        """
        super().__init__(message)
        self.source_path = source_path


class LocaleNotLoadedError(LocaleStringsError, LookupError):
    """set_locale() found no installed table for the locale.

    Attributes:
        locale_code: The locale that was requested
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleNotLoadedError."""
        super().__init__(message)
        self.locale_code = locale_code


class InvalidLocaleArgumentError(LocaleStringsError, ValueError):
    """A mandatory locale argument is missing or malformed.

    Raised instead of silently defaulting: a string identifier passed in the
    locale position must never be mistaken for a locale.

    Attributes:
        locale_code: The rejected value
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: object = None) -> None:
        """Initialize InvalidLocaleArgumentError."""
        super().__init__(message)
        self.locale_code = locale_code


class UnrecognizedModeError(LocaleStringsError, ValueError):
    """Pluralization mode outside {cardinal, ordinal}.

    Attributes:
        mode: The rejected mode value
    """

    def __init__(self, message: str | Diagnostic, *, mode: object = None) -> None:
        """Initialize UnrecognizedModeError."""
        super().__init__(message)
        self.mode = mode


class RuleModuleUnavailableError(LocaleStringsError):
    """A plural rule script could not be loaded.

    Never escapes LocaleContext: it is logged and pluralization falls back
    to the system plural service or to the unmodified word.
    """


class CyclicStructureError(LocaleStringsError, ValueError):
    """populate/translate traversal met a container already on its path."""
