"""Shared constants for localestrings.

This module provides centralized constants used across the localization
and runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for object traversal
- Locations: Default string-table folder and file naming
- Markers: Literal decorations that are part of the external contract

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Locations
    "DEFAULT_STRINGS_PATH",
    "COMMON_SOURCE",
    "STRING_TABLE_SUFFIX",
    "RULE_SCRIPT_PREFIX",
    "RULE_SCRIPT_SUFFIX",
    # Locale defaults
    "DEFAULT_LANGUAGE",
    "DEFAULT_REGION",
    # Markers
    "TOKEN_MARKER",
    "DEFAULT_SEPARATOR",
    "MISSING_PREFIX",
    "MISSING_SUFFIX",
    "NO_PLURALS_TEMPLATE",
    "PLURAL_SUFFIX",
    "RESERVED_PREFIXES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for populate/translate object traversal.
# String-table driven UI templates are rarely deeper than a handful of levels;
# anything beyond 100 is either a cycle or malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# LOCATIONS
# ============================================================================

# Folder (relative to the file collaborator's root) holding string tables.
DEFAULT_STRINGS_PATH: str = "i18n/"

# Name of the language-independent source ("common", "common-US").
COMMON_SOURCE: str = "common"

# Only files with this suffix are merged into a locale table.
STRING_TABLE_SUFFIX: str = ".json"

# Trusted plural rule scripts: pluralRules-<lang>.py
RULE_SCRIPT_PREFIX: str = "pluralRules-"
RULE_SCRIPT_SUFFIX: str = ".py"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LANGUAGE: str = "en"
DEFAULT_REGION: str = "US"

# ============================================================================
# MARKERS
# ============================================================================

# Introduces a reference inside a template string: @token or @token:default
TOKEN_MARKER: str = "@"

# Separates a reference token from its literal default text.
DEFAULT_SEPARATOR: str = ":"

# Bookends for an identifier that has no table entry and no default.
# "%$$>no.such.id<$$%" is grepped for by downstream tooling; do not change.
MISSING_PREFIX: str = "%$$>"
MISSING_SUFFIX: str = "<$$%"

# Returned when no plural category can be determined for a language.
NO_PLURALS_TEMPLATE: str = "%$<NO PLURALS {language}>$%"

# Table suffix used for the "other" plural category (e.g. "item.cow.plural").
PLURAL_SUFFIX: str = "plural"

# Identifier namespaces reserved for the formatting layer. Lookups pass
# through unchanged; the core attaches no meaning to them.
RESERVED_PREFIXES: tuple[str, ...] = ("formatter.",)
