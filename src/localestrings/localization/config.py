"""Configuration for LocaleContext.

Provides a single frozen dataclass that encapsulates every LocaleContext
option, so contexts for different tenants can share or vary settings
without long constructor signatures.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from localestrings.constants import DEFAULT_STRINGS_PATH, MAX_DEPTH

__all__ = ["LocaleStringsConfig"]


@dataclass(frozen=True, slots=True)
class LocaleStringsConfig:
    """Immutable configuration for LocaleContext.

    All fields have sensible defaults; ``LocaleStringsConfig()`` with no
    arguments produces a usable configuration.

    Attributes:
        strings_path: Folder holding string tables, relative to the file
            collaborator's root (default: "i18n/"). ``LocaleContext.init``
            may override it per initialization.
        use_system_plurals: Fall back to Babel's CLDR plural rules when no
            rule module selects a category (default: True).
        trusted_rule_scripts: Load ``pluralRules-<lang>.py`` scripts found in
            the strings folder (default: False). Scripts are executed as
            Python code: enable only for locally supplied, trusted files.
        strict: Raise MalformedSourceError on the first unparseable string
            table (default: True). If False, the failure is logged and
            recorded in LoadStats.errors and loading continues.
        max_depth: Maximum nesting depth for object traversal (default: 100).

    Example:
        >>> config = LocaleStringsConfig(strings_path="locales/", strict=False)
        >>> ctx = LocaleContext(config)
    """

    strings_path: str = DEFAULT_STRINGS_PATH
    use_system_plurals: bool = True
    trusted_rule_scripts: bool = False
    strict: bool = True
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive, or strings_path is empty
                or absolute
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if not self.strings_path:
            msg = "strings_path cannot be empty"
            raise ValueError(msg)
        if PurePath(self.strings_path).is_absolute():
            msg = "strings_path must be relative to the file collaborator root"
            raise ValueError(msg)
