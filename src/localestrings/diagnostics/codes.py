"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
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
    """Unique error codes for diagnostics.

    Organized by category:
        1000-1999: Initialization and state errors
        2000-2999: Loading errors
        3000-3999: Argument errors
        4000-4999: Traversal errors
    """

    # Initialization and state errors (1000-1999)
    NOT_INITIALIZED = 1000
    LOCALE_NOT_LOADED = 1001

    # Loading errors (2000-2999)
    MALFORMED_SOURCE = 2000
    RULE_MODULE_UNAVAILABLE = 2001

    # Argument errors (3000-3999)
    INVALID_LOCALE_ARGUMENT = 3000
    UNRECOGNIZED_MODE = 3001

    # Traversal errors (4000-4999)
    DEPTH_EXCEEDED = 4000
    CYCLIC_STRUCTURE = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: File the error refers to (load errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MALFORMED_SOURCE]: Unable to load string table
              --> i18n/en.json
              = help: String tables must be flat JSON objects of strings

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.source_path:
            lines.append(f"  --> {self.source_path}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
