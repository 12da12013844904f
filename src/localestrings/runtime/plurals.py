"""Pluralization and ordinal dispatch.

Combines three sources to produce the right word form for a count:

1. A per-language rule module (category selector, pluralizer, ordinal maker)
2. The system plural service (Babel CLDR rules) when the module selects nothing
3. Suffixed string-table entries, which always win over computed forms:

    "item.cow"        : "cow"      -> category "one" (no suffix)
    "item.cow.plural" : "cows"     -> category "other"
    "item.cow.few"    : ...        -> categories "zero", "two", "few", "many"

Table entries cover irregular words ("sheep", "oxen"); the rule module
covers regular ones so not every plural has to be listed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Protocol

from localestrings.constants import NO_PLURALS_TEMPLATE, PLURAL_SUFFIX
from localestrings.core.babel_compat import is_babel_available
from localestrings.diagnostics import (
    ErrorTemplate,
    InvalidLocaleArgumentError,
    UnrecognizedModeError,
)
from localestrings.enums import PluralCategory, PluralMode
from localestrings.locale_utils import is_valid_locale_code, language_of
from localestrings.localization.types import LocaleCode, StringId
from localestrings.runtime.plural_rules import select_plural_category
from localestrings.runtime.rule_modules import PluralRuleModule

__all__ = ["PluralDispatcher", "PluralHost"]

logger = logging.getLogger(__name__)


class PluralHost(Protocol):
    """What the dispatcher needs from its owner (a LocaleContext)."""

    def has_locale_string(self, string_id: StringId) -> bool:
        """Whether the active table has the identifier."""
        ...

    def get_locale_string(
        self, string_id: StringId, default: str | None = None, *, warn: bool = True
    ) -> str:
        """Active-table lookup with default / decorated placeholder."""
        ...

    def get_rule_module(self, language: str) -> PluralRuleModule | None:
        """Rule module for a language, loading it if necessary."""
        ...


class PluralDispatcher:
    """Resolves plural and ordinal word forms for a LocaleContext.

    The locale argument is mandatory and validated: passing a string
    identifier where a locale belongs raises InvalidLocaleArgumentError
    instead of quietly pluralizing with the wrong rules.

    Example:
        >>> dispatcher = PluralDispatcher(ctx)
        >>> dispatcher.get_pluralized_string("en-US", "item.cow", 12)
        'cows'
        >>> dispatcher.pluralize("en-US", "item", 3, PluralMode.ORDINAL)
        'third item'
    """

    __slots__ = ("_host", "_use_system_plurals")

    def __init__(self, host: PluralHost, *, use_system_plurals: bool = True) -> None:
        """Initialize dispatcher.

        Args:
            host: Owner supplying table lookups and rule modules
            use_system_plurals: Ask Babel's CLDR rules when no rule module
                selects a category
        """
        self._host = host
        self._use_system_plurals = use_system_plurals

    @staticmethod
    def _coerce_mode(mode: PluralMode | str) -> PluralMode:
        try:
            return PluralMode(mode)
        except ValueError:
            raise UnrecognizedModeError(ErrorTemplate.unrecognized_mode(mode), mode=mode) from None

    @staticmethod
    def _check_arguments(locale: object, subject: object, count: object) -> None:
        """Reject calls whose arguments look shifted or malformed.

        Raises:
            InvalidLocaleArgumentError: If locale is not a locale code, or if
                the word/identifier or count is missing or of the wrong type
            TypeError: If count is not an integer
        """
        if not is_valid_locale_code(locale):
            raise InvalidLocaleArgumentError(
                ErrorTemplate.invalid_locale_argument(locale), locale_code=locale
            )
        if not isinstance(subject, str) or count is None:
            # get_pluralized_string("item.cow", 12): the identifier landed in
            # the locale slot and the count in the identifier slot
            raise InvalidLocaleArgumentError(
                ErrorTemplate.invalid_locale_argument(locale), locale_code=locale
            )
        if isinstance(count, bool) or not isinstance(count, int):
            msg = f"count must be an integer, got {type(count).__name__}"
            raise TypeError(msg)

    def _select(
        self, locale: LocaleCode, count: int, mode: PluralMode
    ) -> tuple[str | None, PluralRuleModule | None]:
        """Category for the count plus the rule module consulted."""
        language = language_of(locale)
        module = self._host.get_rule_module(language)

        category: str | None = None
        if module is not None and module.select_category is not None:
            category = module.select_category(count, mode)
        if not category and self._use_system_plurals and is_babel_available():
            category = select_plural_category(count, locale, mode)
            logger.debug("System plural rules for %s: %d -> %s", locale, count, category)
        return category or None, module

    def select_category(
        self, locale: LocaleCode, count: int, mode: PluralMode | str = PluralMode.CARDINAL
    ) -> str | None:
        """Plural category for a count, or None if no rules are available.

        Raises:
            InvalidLocaleArgumentError: If locale is not a locale code
            UnrecognizedModeError: If mode is not cardinal/ordinal
        """
        self._check_arguments(locale, "", count)
        return self._select(locale, count, self._coerce_mode(mode))[0]

    @staticmethod
    def _make_ordinal(module: PluralRuleModule | None, word: str, count: int) -> str:
        if module is not None and module.make_ordinal is not None:
            ordinal = module.make_ordinal(word, count)
            if ordinal:
                return ordinal
        else:
            logger.debug("No ordinal rules available; returning '%s' unchanged", word)
        return word

    def get_pluralized_string(
        self,
        locale: LocaleCode,
        string_id: StringId,
        count: int | None = None,
        mode: PluralMode | str = PluralMode.CARDINAL,
    ) -> str:
        """Word form of a table identifier for a count.

        Args:
            locale: Locale whose plural rules apply (mandatory, e.g. "en-US")
            string_id: Identifier of the singular form (e.g. "item.cow")
            count: The count (zero and negatives allowed)
            mode: Cardinal (default) or ordinal

        Returns:
            - "" if the singular identifier is not in the active table
            - the singular for category "one" (cardinal)
            - the "<id>.<suffix>" table entry if present
            - the rule module's computed plural otherwise
            - the decorated "<id>.<suffix>" placeholder when nothing applies
            - for ordinal mode, the rule module's ordinal phrase for the singular
            - "%$<NO PLURALS <lang>>$%" if no category could be determined

        Raises:
            InvalidLocaleArgumentError: If locale is missing or malformed
            UnrecognizedModeError: If mode is not cardinal/ordinal
            NotInitializedError: If no locale table is active
        """
        self._check_arguments(locale, string_id, count)
        plural_mode = self._coerce_mode(mode)
        assert count is not None  # Type narrowing: checked by _check_arguments

        category, module = self._select(locale, count, plural_mode)
        if category is None:
            return NO_PLURALS_TEMPLATE.format(language=language_of(locale))

        if not self._host.has_locale_string(string_id):
            return ""
        singular = self._host.get_locale_string(string_id)

        if plural_mode == PluralMode.ORDINAL:
            return self._make_ordinal(module, singular, count)
        if category == PluralCategory.ONE:
            return singular

        suffix = PLURAL_SUFFIX if category == PluralCategory.OTHER else category
        plural_id = f"{string_id}.{suffix}"
        if self._host.has_locale_string(plural_id):
            return self._host.get_locale_string(plural_id)

        if module is not None and module.pluralize is not None:
            plural = module.pluralize(singular, count, category)
            if plural:
                return plural
        return self._host.get_locale_string(plural_id)

    def pluralize(
        self,
        locale: LocaleCode,
        word: str,
        count: int | None = None,
        mode: PluralMode | str = PluralMode.CARDINAL,
    ) -> str:
        """Word form of a literal word for a count, computed by rules only.

        Args:
            locale: Locale whose plural rules apply (mandatory, e.g. "en-US")
            word: Singular word (not an identifier)
            count: The count
            mode: Cardinal (default) or ordinal

        Returns:
            The rule module's plural (cardinal) or ordinal phrase (ordinal);
            the word unchanged when the module lacks the function;
            "%$<NO PLURALS <lang>>$%" if no category could be determined.

        Raises:
            InvalidLocaleArgumentError: If locale is missing or malformed
            UnrecognizedModeError: If mode is not cardinal/ordinal
        """
        self._check_arguments(locale, word, count)
        plural_mode = self._coerce_mode(mode)
        assert count is not None  # Type narrowing: checked by _check_arguments

        category, module = self._select(locale, count, plural_mode)
        if category is None:
            return NO_PLURALS_TEMPLATE.format(language=language_of(locale))

        if plural_mode == PluralMode.ORDINAL:
            return self._make_ordinal(module, word, count)

        if module is None or module.pluralize is None:
            logger.debug("No pluralizer for '%s'; returning '%s' unchanged", locale, word)
            return word
        return module.pluralize(word, count, category) or word
