"""Enumerations for localestrings type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralMode(StrEnum):
    """Kind of count a pluralization request refers to.

    StrEnum provides automatic string conversion: str(PluralMode.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Quantity: 1 cow, 12 cows"""

    ORDINAL = "ordinal"
    """Position: first cow, twelfth cow"""


class PluralCategory(StrEnum):
    """Grammatical plural category (CLDR naming).

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class LoadStep(StrEnum):
    """One of the four layered sources merged into a locale table.

    Members are declared in merge order; later steps overwrite earlier ones.
    """

    COMMON = "common"
    """common.json - shared by every locale"""

    COMMON_REGION = "common_region"
    """common-<REGION>.json - shared by every language in a region"""

    LANGUAGE = "language"
    """<lang>.json - the language's base strings"""

    LANGUAGE_REGION = "language_region"
    """<lang>-<REGION>.json - regional overrides"""


class LoadStatus(StrEnum):
    """Outcome of loading a single string-table file."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "LoadStatus",
    "LoadStep",
    "PluralCategory",
    "PluralMode",
]
