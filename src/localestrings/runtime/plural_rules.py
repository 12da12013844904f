"""CLDR plural rules using Babel: the system pluralization service.

Provides plural category selection for any locale Babel knows, for both
cardinal ("1 cow", "2 cows") and ordinal ("1st", "2nd") counts. Used by the
pluralization dispatcher when no per-language rule module selects a
category.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging

from localestrings.core.babel_compat import require_babel
from localestrings.enums import PluralMode
from localestrings.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]

logger = logging.getLogger(__name__)


def select_plural_category(
    n: int, locale: str, mode: PluralMode = PluralMode.CARDINAL
) -> str | None:
    """Select CLDR plural category for a count using Babel's CLDR data.

    Args:
        n: Count to categorize
        locale: Locale code (e.g., "lv-LV", "en_US", "ar")
        mode: Cardinal or ordinal rules

    Returns:
        "zero", "one", "two", "few", "many" or "other", or None if Babel
        does not know the locale

    Raises:
        BabelImportError: If Babel is not installed

    Examples:
        >>> select_plural_category(1, "en-US")
        'one'
        >>> select_plural_category(5, "ru-RU")
        'many'
        >>> select_plural_category(2, "en", PluralMode.ORDINAL)
        'two'
        >>> select_plural_category(42, "ja-JP")
        'other'
    """
    require_babel("select_plural_category")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR plural rules for '%s': %s", locale, e)
        return None

    if mode == PluralMode.ORDINAL:
        return locale_obj.ordinal_form(n)
    return locale_obj.plural_form(n)
