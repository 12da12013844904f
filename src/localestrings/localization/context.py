"""LocaleContext - layered string tables, template expansion and plurals.

A LocaleContext owns everything that used to be process-global state:

- the installed-locale cache (one merged StringTable per locale)
- the per-locale LoadStats
- the active table used by every lookup
- the per-language plural rule modules

Tables are built by merging four sources in a fixed order, later sources
overwriting earlier ones for the same identifier:

    common.json -> common-<REGION>.json -> <lang>.json -> <lang>-<REGION>.json

Each source may also be split across any number of ``*.json`` files in a
same-named directory (``i18n/en/menus.json``, ``i18n/en/errors.json``).

Thread Safety:
    Every cache mutation and every read of the active table happens under a
    single reentrant lock, so a reader never sees a half-swapped table.
    Template expansion, traversal and pluralization hold the lock for the
    whole call and read only the table that was active when it started.
    The four load steps run strictly sequentially inside that lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping, MutableSequence
from pathlib import Path, PurePath
from threading import RLock

from localestrings.constants import (
    COMMON_SOURCE,
    DEFAULT_LANGUAGE,
    DEFAULT_REGION,
    MISSING_PREFIX,
    MISSING_SUFFIX,
    RULE_SCRIPT_PREFIX,
    RULE_SCRIPT_SUFFIX,
    STRING_TABLE_SUFFIX,
)
from localestrings.diagnostics import (
    ErrorTemplate,
    LocaleNotLoadedError,
    MalformedSourceError,
    NotInitializedError,
    RuleModuleUnavailableError,
)
from localestrings.enums import LoadStatus, LoadStep, PluralMode
from localestrings.locale_utils import get_system_locale, is_valid_locale_code, split_locale
from localestrings.localization.config import LocaleStringsConfig
from localestrings.localization.loading import FileOps, LoadStats, SourceLoadResult
from localestrings.localization.string_table import StringTable
from localestrings.localization.types import LocaleCode, StringId, SystemLocaleProvider
from localestrings.runtime.builtin_rules import create_default_registry
from localestrings.runtime.plurals import PluralDispatcher
from localestrings.runtime.rule_modules import (
    PluralRuleModule,
    RuleModuleRegistry,
    load_rule_script,
)
from localestrings.runtime.template import resolve_template
from localestrings.runtime.traversal import populate_object_strings, translate_object_strings

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


def _read_table(file_ops: FileOps, path: str) -> str:
    """Read a string-table file; undecodable bytes make it malformed."""
    try:
        return file_ops.read(path)
    except UnicodeDecodeError as e:
        raise MalformedSourceError(
            ErrorTemplate.malformed_source(path, str(e)), source_path=path
        ) from e


def _lookup(table: StringTable, string_id: StringId, default: str | None, *, warn: bool) -> str:
    """Table value, else default, else the decorated identifier."""
    value = table.get_string(string_id)
    if value is not None:
        return value
    fallback = default
    if fallback is None:
        fallback = f"{MISSING_PREFIX}{string_id}{MISSING_SUFFIX}"
    if warn:
        logger.warning('>> i18n default >> "%s": "%s"', string_id, fallback)
    return fallback


class _TableView:
    """PluralHost over one captured table.

    Every lookup of a pluralization call reads the table that was active
    when the call started, even if set_locale() runs meanwhile.
    """

    __slots__ = ("_ctx", "_table")

    def __init__(self, ctx: LocaleContext, table: StringTable) -> None:
        self._ctx = ctx
        self._table = table

    def has_locale_string(self, string_id: StringId) -> bool:
        return string_id in self._table

    def get_locale_string(
        self, string_id: StringId, default: str | None = None, *, warn: bool = True
    ) -> str:
        return _lookup(self._table, string_id, default, warn=warn)

    def get_rule_module(self, language: str) -> PluralRuleModule | None:
        return self._ctx.get_rule_module(language)


class LocaleContext:
    """Explicit owner of installed string tables and the active locale.

    Construct, then ``init()`` with a file collaborator (or use ``create()``
    for both in one call). Lookups, template expansion and pluralization
    raise NotInitializedError until a table is active.

    Example:
        >>> ctx = LocaleContext.create(PathFileOps("app"))
        >>> ctx.set_locale("en-GB")
        LoadStats(locale='en-GB', common=1, common_region=0, language=1, ...)
        >>> ctx.get_locale_string("test.greeting")
        'hello, bloke'
        >>> ctx.resolve_template("@test.greeting:hi there")
        'hello, bloke'
        >>> ctx.get_pluralized_string("en-GB", "item.cow", 12)
        'Cows'
    """

    __slots__ = (
        "_active_locale",
        "_available",
        "_config",
        "_failed_rule_languages",
        "_file_ops",
        "_installed",
        "_lock",
        "_rule_modules",
        "_stats",
        "_strings_path",
        "_system_locale",
        "_table",
    )

    def __init__(
        self,
        config: LocaleStringsConfig | None = None,
        *,
        rule_registry: RuleModuleRegistry | None = None,
        system_locale: SystemLocaleProvider = get_system_locale,
    ) -> None:
        """Initialize an empty, uninitialized context.

        Args:
            config: Context options (default: ``LocaleStringsConfig()``)
            rule_registry: Plural rule modules to use. The registry is copied,
                so later changes to the argument do not leak in. Defaults to
                the built-in modules (English).
            system_locale: Zero-argument callable returning the host's
                ``language-REGION`` (default: get_system_locale)
        """
        self._config = config if config is not None else LocaleStringsConfig()
        self._system_locale = system_locale
        registry = rule_registry if rule_registry is not None else create_default_registry()
        self._rule_modules = registry.copy()
        self._failed_rule_languages: set[str] = set()

        self._file_ops: FileOps | None = None
        self._strings_path = self._config.strings_path
        self._installed: dict[LocaleCode, StringTable] = {}
        self._stats: dict[LocaleCode, LoadStats] = {}
        self._available: dict[str, list[str]] | None = None
        self._active_locale: LocaleCode | None = None
        self._table: StringTable | None = None

        self._lock = RLock()

    @classmethod
    def create(
        cls,
        file_ops: FileOps,
        config: LocaleStringsConfig | None = None,
        *,
        custom_location: str | None = None,
        rule_registry: RuleModuleRegistry | None = None,
        system_locale: SystemLocaleProvider = get_system_locale,
    ) -> LocaleContext:
        """Construct a context and initialize it with the system locale.

        Raises:
            MalformedSourceError: In strict mode, if a system-locale table is malformed
        """
        ctx = cls(config, rule_registry=rule_registry, system_locale=system_locale)
        ctx.init(file_ops, custom_location)
        return ctx

    # ------------------------------------------------------------------
    # Initialization and table building
    # ------------------------------------------------------------------

    def init(self, file_ops: FileOps, custom_location: str | None = None) -> LoadStats:
        """Install the file collaborator and activate the system locale.

        Previously installed tables and stats are discarded, and rule
        scripts that failed to load are tried again on next use.

        Args:
            file_ops: File-access collaborator
            custom_location: Strings folder relative to ``file_ops.root_path``
                (default: the configured ``strings_path``)

        Returns:
            LoadStats of the system locale

        Raises:
            MalformedSourceError: In strict mode, if a table is malformed
        """
        with self._lock:
            self._file_ops = file_ops
            self._strings_path = custom_location or self._config.strings_path
            self._installed.clear()
            self._stats.clear()
            self._available = None
            self._active_locale = None
            self._table = None
            self._failed_rule_languages.clear()
            logger.debug(
                "Initialized string tables at %s/%s", file_ops.root_path, self._strings_path
            )
            return self.set_locale()

    def _require_file_ops(self) -> FileOps:
        if self._file_ops is None:
            raise NotInitializedError(ErrorTemplate.not_initialized())
        return self._file_ops

    def _strings_root(self, file_ops: FileOps) -> Path:
        return Path(file_ops.root_path) / self._strings_path

    def load_for_locale(self, locale: LocaleCode | None = None) -> LoadStats:
        """Build and cache the merged table for a locale.

        A locale already installed is returned from cache without touching
        storage. Missing language or region parts are taken from the system
        locale; an empty locale means the system locale itself.

        Args:
            locale: Locale identifier such as "en-GB", "fr" or "-CA"

        Returns:
            LoadStats for the locale (the cached instance on repeat calls)

        Raises:
            NotInitializedError: If init() has not been called
            MalformedSourceError: In strict mode, on the first malformed file.
                Nothing is cached, so a later call retries the load.
            OSError: If a file exists but cannot be read
        """
        with self._lock:
            file_ops = self._require_file_ops()
            system = self._system_locale()
            key = locale or system

            cached = self._stats.get(key)
            if cached is not None:
                logger.debug("Locale %s already installed", key)
                return cached

            system_language, system_region = split_locale(
                system, DEFAULT_LANGUAGE, DEFAULT_REGION
            )
            language, region = split_locale(key, system_language, system_region)

            table = StringTable()
            results: list[SourceLoadResult] = []
            counts: dict[LoadStep, int] = {}
            sources = (
                (LoadStep.COMMON, COMMON_SOURCE),
                (LoadStep.COMMON_REGION, f"{COMMON_SOURCE}-{region}"),
                (LoadStep.LANGUAGE, language),
                (LoadStep.LANGUAGE_REGION, f"{language}-{region}"),
            )
            for step, name in sources:
                counts[step] = self._load_source(file_ops, table, step, name, results)

            stats = LoadStats(
                locale=key,
                language=language,
                region=region,
                common_files=counts[LoadStep.COMMON],
                common_region_files=counts[LoadStep.COMMON_REGION],
                language_files=counts[LoadStep.LANGUAGE],
                language_region_files=counts[LoadStep.LANGUAGE_REGION],
                total_strings=table.num_strings(),
                results=tuple(results),
            )
            self._installed[key] = table
            self._stats[key] = stats
            logger.info(
                "Loaded locale %s (%s-%s): files common=%d common-region=%d "
                "language=%d language-region=%d, %d strings",
                key,
                language,
                region,
                stats.common_files,
                stats.common_region_files,
                stats.language_files,
                stats.language_region_files,
                stats.total_strings,
            )
            return stats

    def _load_source(
        self,
        file_ops: FileOps,
        table: StringTable,
        step: LoadStep,
        name: str,
        results: list[SourceLoadResult],
    ) -> int:
        """Merge ``<name>.json`` and ``<name>/**/*.json``; return files merged."""
        merged = 0
        single_path = str(self._strings_root(file_ops) / f"{name}{STRING_TABLE_SUFFIX}")
        if self._merge_file(file_ops, table, step, single_path, results):
            merged += 1

        def visit(path: str) -> None:
            nonlocal merged
            if path.endswith(STRING_TABLE_SUFFIX) and self._merge_file(
                file_ops, table, step, path, results
            ):
                merged += 1

        file_ops.enumerate(str(Path(self._strings_path) / name), visit)
        return merged

    def _merge_file(
        self,
        file_ops: FileOps,
        table: StringTable,
        step: LoadStep,
        path: str,
        results: list[SourceLoadResult],
    ) -> bool:
        """Read and merge one file; False if it is absent or skipped as malformed."""
        try:
            table.load(_read_table(file_ops, path), path)
        except FileNotFoundError:
            logger.debug("No string table at %s", path)
            results.append(SourceLoadResult(step, path, LoadStatus.NOT_FOUND))
            return False
        except MalformedSourceError as e:
            if self._config.strict:
                logger.error("Malformed string table %s: %s", path, e)
                raise
            logger.warning("Skipping malformed string table %s: %s", path, e)
            results.append(SourceLoadResult(step, path, LoadStatus.ERROR, e))
            return False
        results.append(SourceLoadResult(step, path, LoadStatus.SUCCESS))
        return True

    def set_locale(self, locale: LocaleCode | None = None) -> LoadStats:
        """Load a locale if needed and make its table the active one.

        Args:
            locale: Locale identifier (default: the system locale)

        Returns:
            LoadStats for the locale

        Raises:
            NotInitializedError: If init() has not been called
            MalformedSourceError: In strict mode, if a table is malformed
            LocaleNotLoadedError: If the table is unexpectedly absent after loading
        """
        with self._lock:
            key = locale or self._system_locale()
            stats = self.load_for_locale(key)
            table = self._installed.get(key)
            if table is None:
                raise LocaleNotLoadedError(
                    ErrorTemplate.locale_not_loaded(key), locale_code=key
                )
            self._table = table
            self._active_locale = key
            logger.info("Active locale set to %s", key)
            return stats

    # ------------------------------------------------------------------
    # Installed-locale introspection
    # ------------------------------------------------------------------

    @property
    def active_locale(self) -> LocaleCode | None:
        """Locale of the active table, or None before init()."""
        with self._lock:
            return self._active_locale

    @property
    def config(self) -> LocaleStringsConfig:
        """Context configuration."""
        return self._config

    def is_locale_loaded(self, locale: LocaleCode) -> bool:
        """Check if a locale is in the installed cache."""
        with self._lock:
            return locale in self._installed

    def get_installed_locales(self) -> list[LocaleCode]:
        """Installed locales in first-installed order."""
        with self._lock:
            return list(self._installed)

    def get_load_stats(self, locale: LocaleCode) -> LoadStats | None:
        """Cached LoadStats of an installed locale, or None."""
        with self._lock:
            return self._stats.get(locale)

    def clear_installed_locale(self, locale: LocaleCode) -> bool:
        """Evict an installed locale other than the active one.

        Returns:
            True if the locale was evicted, False if it is active or unknown
        """
        with self._lock:
            if locale == self._active_locale:
                logger.warning("Refusing to clear active locale %s", locale)
                return False
            if locale not in self._installed:
                logger.debug("Locale %s is not installed; nothing to clear", locale)
                return False
            del self._installed[locale]
            del self._stats[locale]
            logger.debug("Cleared installed locale %s", locale)
            return True

    def get_available_languages(self) -> list[str]:
        """Languages with at least one string table in the strings folder.

        Raises:
            NotInitializedError: If init() has not been called
        """
        return sorted(lang for lang in self._scan_available() if lang != COMMON_SOURCE)

    def get_available_regions(self, language: str) -> list[str]:
        """Regions with tables for a language, followed by common regions.

        Returns:
            The language's own regions (sorted), then every region that only
            has a ``common-<REGION>`` source (sorted). A language without
            tables still gets the common regions.

        Raises:
            NotInitializedError: If init() has not been called
        """
        language = language.lower()
        available = self._scan_available()
        regions = [] if language == COMMON_SOURCE else available.get(language, [])
        common = available.get(COMMON_SOURCE, [])
        return sorted(regions) + [r for r in sorted(common) if r not in regions]

    def _scan_available(self) -> dict[str, list[str]]:
        """Map each language, and "common", to its regions. Scanned once per init()."""
        with self._lock:
            if self._available is not None:
                return self._available
            file_ops = self._require_file_ops()
            root = PurePath(self._strings_root(file_ops))
            found: dict[str, set[str]] = {}

            def visit(path: str) -> None:
                try:
                    relative = PurePath(path).relative_to(root)
                except ValueError:
                    logger.debug("Ignoring %s outside %s", path, root)
                    return
                if not relative.parts or not path.endswith(STRING_TABLE_SUFFIX):
                    return
                name = relative.parts[0]
                if len(relative.parts) == 1:
                    name = name.removesuffix(STRING_TABLE_SUFFIX)
                language, _, region = name.partition("-")
                if language != COMMON_SOURCE and not is_valid_locale_code(name):
                    return
                regions = found.setdefault(language.lower(), set())
                if region:
                    regions.add(region.upper())

            file_ops.enumerate(self._strings_path, visit)
            self._available = {lang: sorted(regions) for lang, regions in found.items()}
            return self._available

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _require_table(self) -> StringTable:
        if self._table is None:
            raise NotInitializedError(ErrorTemplate.not_initialized())
        return self._table

    def has_locale_string(self, string_id: StringId) -> bool:
        """Check if the active table has an identifier.

        Raises:
            NotInitializedError: If no table is active
        """
        with self._lock:
            return string_id in self._require_table()

    def get_locale_string(
        self, string_id: StringId, default: str | None = None, *, warn: bool = True
    ) -> str:
        """Text for an identifier in the active table.

        Args:
            string_id: Identifier to look up
            default: Returned when the identifier is absent
            warn: Log a warning naming the identifier and the returned value
                when the identifier is absent

        Returns:
            The table value, else ``default``, else ``%$$><id><$$%``

        Raises:
            NotInitializedError: If no table is active
        """
        with self._lock:
            return _lookup(self._require_table(), string_id, default, warn=warn)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    @staticmethod
    def _expander(table: StringTable) -> Callable[[str], str]:
        """Template expansion bound to one table, with silent misses."""

        def lookup(token: str, default: str | None) -> str:
            return _lookup(table, token, default, warn=False)

        def expand(text: str) -> str:
            return resolve_template(text, lookup)

        return expand

    def resolve_template(self, text: str) -> str:
        """Expand ``@token`` and ``@token:default`` references in text.

        Raises:
            NotInitializedError: If no table is active
        """
        with self._lock:
            return self._expander(self._require_table())(text)

    def populate_object_strings(
        self,
        obj: MutableMapping[str, object] | MutableSequence[object],
        shallow: bool = False,
    ) -> None:
        """Expand every string leaf of a mapping or list in place.

        Every leaf is expanded against the table active when the call starts.

        Raises:
            NotInitializedError: If no table is active
            CyclicStructureError: If a container contains itself
            DepthLimitExceededError: If nesting exceeds the configured max_depth
        """
        with self._lock:
            populate_object_strings(
                obj,
                self._expander(self._require_table()),
                shallow=shallow,
                max_depth=self._config.max_depth,
            )

    def translate_object_strings[T](self, obj: T, shallow: bool = False) -> T:
        """Copy of a tree with every string leaf expanded; the input is untouched.

        Every leaf is expanded against the table active when the call starts.

        Raises:
            NotInitializedError: If no table is active
            CyclicStructureError: If a container contains itself
            DepthLimitExceededError: If nesting exceeds the configured max_depth
        """
        with self._lock:
            return translate_object_strings(
                obj,
                self._expander(self._require_table()),
                shallow=shallow,
                max_depth=self._config.max_depth,
            )

    # ------------------------------------------------------------------
    # Plural rules
    # ------------------------------------------------------------------

    def _dispatcher_for(self, table: StringTable) -> PluralDispatcher:
        return PluralDispatcher(
            _TableView(self, table), use_system_plurals=self._config.use_system_plurals
        )

    def register_rule_module(self, module: PluralRuleModule) -> None:
        """Register (or replace) this context's rule module for a language."""
        with self._lock:
            self._rule_modules.register(module)
            self._failed_rule_languages.discard(module.language)

    def get_rule_module(self, language: str) -> PluralRuleModule | None:
        """Rule module for a language.

        Registered modules come first. With ``trusted_rule_scripts`` enabled,
        ``pluralRules-<lang>.py`` in the strings folder is loaded on first
        use and registered. A failed script load is logged once and never
        retried for this context.
        """
        language = language.lower()
        with self._lock:
            module = self._rule_modules.get(language)
            if module is not None:
                return module
            if not self._config.trusted_rule_scripts or self._file_ops is None:
                logger.debug("No rule module registered for '%s'", language)
                return None
            if language in self._failed_rule_languages:
                return None

            path = str(
                self._strings_root(self._file_ops)
                / f"{RULE_SCRIPT_PREFIX}{language}{RULE_SCRIPT_SUFFIX}"
            )
            try:
                module = load_rule_script(language, self._file_ops.read(path), path)
            except FileNotFoundError:
                logger.debug("No rule script for '%s' at %s", language, path)
                self._failed_rule_languages.add(language)
                return None
            except (OSError, RuleModuleUnavailableError) as e:
                logger.warning("Plural rules for '%s' unavailable: %s", language, e)
                self._failed_rule_languages.add(language)
                return None

            self._rule_modules.register(module)
            logger.debug("Loaded rule script for '%s' from %s", language, path)
            return module

    def get_pluralized_string(
        self,
        locale: LocaleCode,
        string_id: StringId,
        count: int | None = None,
        mode: PluralMode | str = PluralMode.CARDINAL,
    ) -> str:
        """Word form of a table identifier for a count.

        See PluralDispatcher.get_pluralized_string.

        Raises:
            NotInitializedError: If no table is active
            InvalidLocaleArgumentError: If locale is missing or malformed
            UnrecognizedModeError: If mode is not cardinal/ordinal
        """
        with self._lock:
            dispatcher = self._dispatcher_for(self._require_table())
            return dispatcher.get_pluralized_string(locale, string_id, count, mode)

    def pluralize(
        self,
        locale: LocaleCode,
        word: str,
        count: int | None = None,
        mode: PluralMode | str = PluralMode.CARDINAL,
    ) -> str:
        """Word form of a literal word for a count.

        See PluralDispatcher.pluralize.

        Raises:
            NotInitializedError: If no table is active
            InvalidLocaleArgumentError: If locale is missing or malformed
            UnrecognizedModeError: If mode is not cardinal/ordinal
        """
        with self._lock:
            dispatcher = self._dispatcher_for(self._require_table())
            return dispatcher.pluralize(locale, word, count, mode)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LocaleContext(active={self._active_locale!r}, "
            f"installed={list(self._installed)})"
        )
