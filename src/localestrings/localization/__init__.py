"""Locale string tables: loading, layering and the LocaleContext.

Provides the full table stack: type aliases, the raw string store, the
file-access collaborator, configuration, and the LocaleContext that merges
and activates per-locale tables.

Submodules:
    types        - PEP 695 type aliases (StringId, LocaleCode, JSONSource)
    string_table - StringTable (raw identifier -> text store)
    loading      - FileOps protocol, PathFileOps, SourceLoadResult, LoadStats
    config       - LocaleStringsConfig
    context      - LocaleContext (layered tables, templates, plurals)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localestrings.enums import LoadStatus, LoadStep
from localestrings.localization.config import LocaleStringsConfig
from localestrings.localization.context import LocaleContext
from localestrings.localization.loading import (
    FileOps,
    LoadStats,
    PathFileOps,
    SourceLoadResult,
)
from localestrings.localization.string_table import StringTable
from localestrings.localization.types import (
    JSONSource,
    LocaleCode,
    StringId,
    SystemLocaleProvider,
)

__all__ = [
    # Main context
    "LocaleContext",
    "LocaleStringsConfig",
    # Raw store
    "StringTable",
    # File collaborator protocol and implementation
    "FileOps",
    "PathFileOps",
    # Load tracking
    "LoadStats",
    "LoadStatus",
    "LoadStep",
    "SourceLoadResult",
    # Type aliases for user code type annotations
    "JSONSource",
    "LocaleCode",
    "StringId",
    "SystemLocaleProvider",
]
