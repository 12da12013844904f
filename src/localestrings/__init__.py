"""localestrings - layered JSON string tables with templates and plurals.

Loads flat JSON string tables in four layers (common, common-REGION,
language, language-REGION), expands ``@token:default`` templates against
the active table, and resolves plural and ordinal word forms through
per-language rule modules backed by Babel's CLDR plural rules.

Public API:
    LocaleContext - Installed tables, active locale, lookups and plurals
    LocaleStringsConfig - Context options
    PathFileOps - File collaborator rooted at a directory
    LoadStats - Per-locale load statistics
    PluralMode - Cardinal / ordinal
    PluralRuleModule, RuleModuleRegistry - Per-language plural rules

Exceptions:
    LocaleStringsError - Base exception class
    NotInitializedError - Lookup before a table is active
    MalformedSourceError - Unparseable string table
    InvalidLocaleArgumentError - Missing or malformed mandatory locale

Submodules:
    localestrings.localization - Tables, loading and the LocaleContext
    localestrings.runtime - Templates, traversal and plural rules
    localestrings.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    CyclicStructureError,
    InvalidLocaleArgumentError,
    LocaleNotLoadedError,
    LocaleStringsError,
    MalformedSourceError,
    NotInitializedError,
    RuleModuleUnavailableError,
    UnrecognizedModeError,
)
from .enums import PluralCategory, PluralMode
from .locale_utils import get_system_locale
from .localization import (
    FileOps,
    LoadStats,
    LocaleContext,
    LocaleStringsConfig,
    PathFileOps,
    StringTable,
)
from .runtime import PluralRuleModule, RuleModuleRegistry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("localestrings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CyclicStructureError",
    "FileOps",
    "InvalidLocaleArgumentError",
    "LoadStats",
    "LocaleContext",
    "LocaleNotLoadedError",
    "LocaleStringsConfig",
    "LocaleStringsError",
    "MalformedSourceError",
    "NotInitializedError",
    "PathFileOps",
    "PluralCategory",
    "PluralMode",
    "PluralRuleModule",
    "RuleModuleRegistry",
    "RuleModuleUnavailableError",
    "StringTable",
    "UnrecognizedModeError",
    "__version__",
    "get_system_locale",
]
