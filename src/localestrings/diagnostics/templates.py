"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps error text testable and documents every error case in one place.
    """

    @staticmethod
    def not_initialized() -> Diagnostic:
        """A lookup was attempted before any locale table became active."""
        return Diagnostic(
            code=DiagnosticCode.NOT_INITIALIZED,
            message="i18n init() has not been called before using",
            hint="Call LocaleContext.init(file_ops) or use LocaleContext.create()",
        )

    @staticmethod
    def locale_not_loaded(locale_code: str) -> Diagnostic:
        """set_locale() could not find the locale in the installed cache.

        Args:
            locale_code: The locale that was requested
        """
        msg = f'Locale "{locale_code}" has not been loaded'
        return Diagnostic(code=DiagnosticCode.LOCALE_NOT_LOADED, message=msg)

    @staticmethod
    def malformed_source(source_path: str, reason: str) -> Diagnostic:
        """A string-table file exists but is not a flat JSON object of strings.

        Args:
            source_path: Path of the offending file
            reason: Parser message or structural complaint
        """
        msg = f"Unable to load string table at {source_path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_SOURCE,
            message=msg,
            hint="String tables must be flat JSON objects mapping identifiers to strings",
            source_path=source_path,
        )

    @staticmethod
    def invalid_locale_argument(locale_code: object) -> Diagnostic:
        """A pluralization call received something that is not a locale.

        Args:
            locale_code: The value passed in the locale position
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_ARGUMENT,
            message="Incorrect locale information provided",
            hint=(
                f"Expected a locale such as 'en-US' as the first argument, got {locale_code!r}"
            ),
        )

    @staticmethod
    def unrecognized_mode(mode: object) -> Diagnostic:
        """Pluralization mode outside cardinal/ordinal.

        Args:
            mode: The rejected mode value
        """
        msg = f"Unrecognized plural mode {mode!r}; expected 'cardinal' or 'ordinal'"
        return Diagnostic(code=DiagnosticCode.UNRECOGNIZED_MODE, message=msg)

    @staticmethod
    def rule_module_unavailable(language: str, source_path: str, reason: str) -> Diagnostic:
        """A plural rule script could not be loaded.

        Args:
            language: Language code the script was expected to serve
            source_path: Script location
            reason: Underlying failure
        """
        msg = f"No plural rule module for '{language}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.RULE_MODULE_UNAVAILABLE,
            message=msg,
            source_path=source_path,
            severity="warning",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Object traversal nested deeper than allowed.

        Args:
            max_depth: The configured limit
        """
        msg = f"Maximum traversal depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the structure or raise LocaleStringsConfig.max_depth",
        )

    @staticmethod
    def cyclic_structure(type_name: str) -> Diagnostic:
        """Object traversal reached a container that is already on its path.

        Args:
            type_name: Type of the container seen twice
        """
        msg = f"Cyclic reference detected while traversing {type_name}"
        return Diagnostic(code=DiagnosticCode.CYCLIC_STRUCTURE, message=msg)
