"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating LocaleContext call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "JSONSource",
    "LocaleCode",
    "StringId",
    "SystemLocaleProvider",
]

type StringId = str
"""Identifier of a localized string (e.g., 'item.cow', 'item.cow.plural')."""

type LocaleCode = str
"""BCP-47 style locale code (e.g., 'en', 'en-GB', 'fr-CA')."""

type JSONSource = str
"""Raw string-table JSON text as a Python string."""

type SystemLocaleProvider = Callable[[], LocaleCode]
"""Zero-argument callable returning the host's best-guess 'language-REGION'."""
