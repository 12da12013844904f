"""Runtime: template expansion, object traversal and plural rules.

Submodules:
    template      - resolve_template (@token:default grammar)
    traversal     - populate_object_strings, translate_object_strings
    plural_rules  - select_plural_category (Babel CLDR rules)
    rule_modules  - PluralRuleModule, RuleModuleRegistry, load_rule_script
    builtin_rules - English rules, create_default_registry
    plurals       - PluralDispatcher

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .builtin_rules import ENGLISH_RULES, create_default_registry
from .plural_rules import select_plural_category
from .plurals import PluralDispatcher
from .rule_modules import PluralRuleModule, RuleModuleRegistry, load_rule_script
from .template import resolve_template
from .traversal import populate_object_strings, translate_object_strings

__all__ = [
    # Templates
    "resolve_template",
    "populate_object_strings",
    "translate_object_strings",
    # Plural rules
    "PluralDispatcher",
    "PluralRuleModule",
    "RuleModuleRegistry",
    "ENGLISH_RULES",
    "create_default_registry",
    "load_rule_script",
    "select_plural_category",
]
