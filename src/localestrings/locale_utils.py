"""Locale utilities: parsing, validation and system locale detection.

Centralizes locale format handling used throughout the codebase.
String tables are keyed by BCP-47 style codes ("en-GB"), while Babel
expects POSIX style ("en_GB"); both spellings are accepted on input.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from typing import TYPE_CHECKING

from localestrings.constants import DEFAULT_LANGUAGE, DEFAULT_REGION
from localestrings.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "is_valid_locale_code",
    "language_of",
    "normalize_locale",
    "split_locale",
]

# language[-_]subtag... ; "foo.bar" or "item.cow" must never pass as a locale
_LOCALE_PATTERN = re.compile(r"[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def is_valid_locale_code(locale_code: object) -> bool:
    """Check that a value is shaped like a locale code.

    Only the shape is checked (language of 2-3 letters, optional subtags);
    whether CLDR knows the locale is irrelevant here.

    Example:
        >>> is_valid_locale_code("fr-CA")
        True
        >>> is_valid_locale_code("foo.bar")
        False
    """
    return isinstance(locale_code, str) and _LOCALE_PATTERN.fullmatch(locale_code) is not None


def split_locale(
    locale_code: str,
    default_language: str = "",
    default_region: str = "",
) -> tuple[str, str]:
    """Split a locale into lower-cased language and upper-cased region.

    Missing parts are replaced by the supplied defaults. Subtags beyond
    the region (script, variant) are ignored.

    Args:
        locale_code: "en-GB", "en_GB", "en", "-GB" or ""
        default_language: Used when the language part is empty
        default_region: Used when the region part is empty

    Returns:
        (language, region) tuple

    Example:
        >>> split_locale("EN-gb")
        ('en', 'GB')
        >>> split_locale("fr", default_region="US")
        ('fr', 'US')
    """
    parts = normalize_locale(locale_code).split("_")
    language = parts[0].lower() or default_language.lower()
    region = (parts[1] if len(parts) > 1 else "").upper() or default_region.upper()
    return language, region


def language_of(locale_code: str) -> str:
    """Return the lower-cased language part of a locale code."""
    return split_locale(locale_code)[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in pluralization hot paths.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
        BabelImportError: If Babel is not installed
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the system locale as a ``language-REGION`` pair.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encodings.
    A detected locale without a region gets DEFAULT_REGION.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale code in BCP-47 format (e.g. "de-DE").

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    detected: str | None = None
    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            detected = system_locale
    except (ValueError, AttributeError):
        pass

    if detected is None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            value = os.environ.get(var)
            if value and value not in ("C", "POSIX", "C.UTF-8"):
                detected = value
                break

    if detected is not None:
        # Strip encoding (".UTF-8") and modifier ("@euro")
        code = detected.split(".")[0].split("@")[0]
        if is_valid_locale_code(code):
            language, region = split_locale(code, default_region=DEFAULT_REGION)
            return f"{language}-{region}"

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return f"{DEFAULT_LANGUAGE}-{DEFAULT_REGION}"
