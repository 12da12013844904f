"""Per-language plural rule modules and their registry.

A rule module supplies up to three optional pure functions for one
language:

    select_category(count, mode) -> category | None
    pluralize(word, count, category=None) -> plural word | None
    make_ordinal(word, count) -> ordinal phrase | None

Modules are registered statically by language code. Optionally, a
LocaleContext configured with ``trusted_rule_scripts=True`` loads
``pluralRules-<lang>.py`` scripts through load_rule_script(); those scripts
are executed as ordinary Python code and must come from a trusted, local
source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import types
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol

from localestrings.diagnostics import ErrorTemplate, RuleModuleUnavailableError
from localestrings.enums import PluralMode

__all__ = [
    "CategorySelector",
    "OrdinalMaker",
    "PluralRuleModule",
    "Pluralizer",
    "RuleModuleRegistry",
    "load_rule_script",
]


class CategorySelector(Protocol):
    """Select the plural category for a count."""

    def __call__(self, count: int, mode: PluralMode, /) -> str | None:
        ...  # pragma: no cover  # Protocol stub - not executable


class Pluralizer(Protocol):
    """Return the plural form of a singular word, or None if unknown."""

    def __call__(self, word: str, count: int, category: str | None = None, /) -> str | None:
        ...  # pragma: no cover  # Protocol stub - not executable


type OrdinalMaker = Callable[[str, int], str | None]
"""Return an ordinal phrase such as "twelfth cow", or None if unknown."""


@dataclass(frozen=True, slots=True)
class PluralRuleModule:
    """Plural rules for one language.

    Every function is optional; the dispatcher falls back to the system
    plural service (category) or to the unmodified word (pluralize,
    make_ordinal) when one is missing.

    Attributes:
        language: Lower-cased language code (e.g. "en")
        select_category: Category selector
        pluralize: Word pluralizer
        make_ordinal: Ordinal phrase builder
    """

    language: str
    select_category: CategorySelector | None = None
    pluralize: Pluralizer | None = None
    make_ordinal: OrdinalMaker | None = None

    def __post_init__(self) -> None:
        """Normalize the language code."""
        if not self.language:
            msg = "language cannot be empty"
            raise ValueError(msg)
        object.__setattr__(self, "language", self.language.lower())


class RuleModuleRegistry:
    """Rule modules keyed by language code.

    Supports dict-like introspection:
        - list_languages(): List all registered language codes
        - __iter__: Iterate over language codes
        - __len__: Count registered modules
        - __contains__: Check if a language has a module (supports 'in' operator)

    Example:
        >>> registry = RuleModuleRegistry()
        >>> registry.register(PluralRuleModule("xx", select_category=lambda n, m: "other"))
        >>> "xx" in registry
        True
        >>> registry.get("XX").language
        'xx'
    """

    __slots__ = ("_modules",)

    def __init__(self) -> None:
        """Initialize empty rule module registry."""
        self._modules: dict[str, PluralRuleModule] = {}

    def register(self, module: PluralRuleModule) -> None:
        """Register (or replace) the module for its language."""
        self._modules[module.language] = module

    def unregister(self, language: str) -> bool:
        """Remove a language's module. Returns True if one was registered."""
        return self._modules.pop(language.lower(), None) is not None

    def get(self, language: str) -> PluralRuleModule | None:
        """Module for a language, or None."""
        return self._modules.get(language.lower())

    def list_languages(self) -> list[str]:
        """Registered language codes in registration order."""
        return list(self._modules)

    def copy(self) -> RuleModuleRegistry:
        """Independent registry with the same modules."""
        clone = RuleModuleRegistry()
        clone._modules = dict(self._modules)
        return clone

    def __contains__(self, language: object) -> bool:
        """Check if a language has a module (supports 'in' operator)."""
        return isinstance(language, str) and language.lower() in self._modules

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered language codes."""
        return iter(self._modules)

    def __len__(self) -> int:
        """Number of registered modules."""
        return len(self._modules)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"RuleModuleRegistry(languages={self.list_languages()})"


def load_rule_script(language: str, source: str, source_path: str) -> PluralRuleModule:
    """Execute a trusted rule script and wrap the functions it defines.

    The script is plain Python defining any of ``select_category``,
    ``pluralize`` and ``make_ordinal`` at module level. It runs with full
    interpreter privileges: only pass files supplied locally by the
    application itself.

    Args:
        language: Language the script serves
        source: Script text
        source_path: Script location (tracebacks and diagnostics)

    Returns:
        PluralRuleModule built from the script's functions

    Raises:
        RuleModuleUnavailableError: If the script fails to compile or run,
            or defines none of the three functions
    """
    module = types.ModuleType(f"localestrings_rules_{language}")
    module.__file__ = source_path
    try:
        code = compile(source, source_path, "exec")
        exec(code, module.__dict__)  # noqa: S102 - trusted rule scripts only
    except Exception as e:  # noqa: BLE001 - any script failure makes the module unavailable
        raise RuleModuleUnavailableError(
            ErrorTemplate.rule_module_unavailable(language, source_path, repr(e))
        ) from e

    functions = {
        name: getattr(module, name, None)
        for name in ("select_category", "pluralize", "make_ordinal")
    }
    if not any(callable(f) for f in functions.values()):
        raise RuleModuleUnavailableError(
            ErrorTemplate.rule_module_unavailable(
                language, source_path, "script defines no rule functions"
            )
        )
    return PluralRuleModule(
        language,
        **{name: f if callable(f) else None for name, f in functions.items()},
    )
