"""Diagnostic system for localestrings errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CyclicStructureError,
    InvalidLocaleArgumentError,
    LocaleNotLoadedError,
    LocaleStringsError,
    MalformedSourceError,
    NotInitializedError,
    RuleModuleUnavailableError,
    UnrecognizedModeError,
)
from .templates import ErrorTemplate

__all__ = [
    "CyclicStructureError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidLocaleArgumentError",
    "LocaleNotLoadedError",
    "LocaleStringsError",
    "MalformedSourceError",
    "NotInitializedError",
    "RuleModuleUnavailableError",
    "UnrecognizedModeError",
]
