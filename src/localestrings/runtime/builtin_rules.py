"""Built-in plural rule modules.

Only English ships with the library. It is deliberately simple and serves
as the model for other languages: irregular words ("sheep", "ox") belong
in the string tables as ".plural" entries rather than in code.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localestrings.enums import PluralCategory, PluralMode
from localestrings.runtime.rule_modules import PluralRuleModule, RuleModuleRegistry

__all__ = [
    "ENGLISH_RULES",
    "create_default_registry",
    "english_make_ordinal",
    "english_pluralize",
    "english_select_category",
]

_SPELLED_ORDINALS = (
    "zeroth", "first", "second", "third", "fourth",
    "fifth", "sixth", "seventh", "eighth", "ninth",
    "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth",
    "fifteenth", "sixteenth", "seventeenth", "eighteenth", "nineteenth",
)

_DIGIT_SUFFIXES = ("th", "st", "nd", "rd")

_ES_ENDINGS = ("o", "x", "s")


def english_select_category(count: int, mode: PluralMode = PluralMode.CARDINAL) -> str:
    """One for exactly 1; everything else (0, negatives, 2+) is other."""
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def english_pluralize(word: str, count: int, category: str | None = None) -> str:
    """Append "es" after o/x/s, "s" otherwise; unchanged for a count of 1.

    Example:
        >>> english_pluralize("box", 3)
        'boxes'
        >>> english_pluralize("cow", 1)
        'cow'
    """
    if count == 1:
        return word
    if word.endswith(_ES_ENDINGS):
        return word + "es"
    return word + "s"


def english_make_ordinal(word: str, count: int) -> str:
    """Ordinal phrase: spelled out below 20, digits with a suffix from 20 up.

    Example:
        >>> english_make_ordinal("item", 12)
        'twelfth item'
        >>> english_make_ordinal("item", 21)
        '21st item'
        >>> english_make_ordinal("item", 113)
        '113th item'
    """
    if 0 <= count < len(_SPELLED_ORDINALS):
        return f"{_SPELLED_ORDINALS[count]} {word}"
    magnitude = abs(count)
    if magnitude % 100 in (11, 12, 13):
        suffix = "th"
    else:
        last_digit = magnitude % 10
        suffix = _DIGIT_SUFFIXES[last_digit] if last_digit < len(_DIGIT_SUFFIXES) else "th"
    return f"{count}{suffix} {word}"


ENGLISH_RULES = PluralRuleModule(
    "en",
    select_category=english_select_category,
    pluralize=english_pluralize,
    make_ordinal=english_make_ordinal,
)


def create_default_registry() -> RuleModuleRegistry:
    """Fresh registry holding the built-in modules."""
    registry = RuleModuleRegistry()
    registry.register(ENGLISH_RULES)
    return registry
