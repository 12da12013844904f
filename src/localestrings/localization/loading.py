"""String-table loading infrastructure for LocaleContext.

Provides the protocol for the file-access collaborator, a filesystem
implementation with path-traversal protection, and the immutable records
describing what one locale load contributed.

Components:
    FileOps - Protocol for reading and enumerating string-table files
    PathFileOps - Disk-based implementation rooted at a fixed directory
    SourceLoadResult - Immutable result of a single failed file load
    LoadStats - Immutable per-locale load statistics

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localestrings.enums import LoadStatus, LoadStep
from localestrings.localization.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "FileOps",
    # Concrete collaborator
    "PathFileOps",
    # Load result types
    "SourceLoadResult",
    "LoadStats",
]


class FileOps(Protocol):
    """Protocol for the file-access collaborator.

    LocaleContext never touches the filesystem itself; everything goes
    through this interface, so tables can come from disk, package data,
    or memory.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom collaborators.

    Example:
        >>> class MemoryFileOps:
        ...     root_path = "/app"
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def read(self, path: str) -> str:
        ...         try:
        ...             return self.files[path]
        ...         except KeyError:
        ...             raise FileNotFoundError(path) from None
        ...     def enumerate(self, rel_dir, visit) -> None:
        ...         prefix = f"{self.root_path}/{rel_dir}/"
        ...         for path in sorted(self.files):
        ...             if path.startswith(prefix):
        ...                 visit(path)
    """

    @property
    def root_path(self) -> str:
        """Root that relative directories and the strings folder resolve against."""
        ...

    def read(self, path: str) -> str:
        """Return the full text of a file.

        Args:
            path: Absolute path, or a path already joined onto root_path

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        ...

    def enumerate(self, rel_dir: str, visit: Callable[[str], None]) -> None:
        """Recursively call ``visit(full_path)`` for every regular file.

        Order is implementation-defined but must be stable across calls
        against unchanged storage. A missing directory is silently ignored.

        Args:
            rel_dir: Directory relative to root_path
            visit: Callback receiving each file's full path
        """
        ...


@dataclass(frozen=True, slots=True)
class PathFileOps:
    """File system collaborator rooted at a fixed directory.

    Implements FileOps for string tables on disk. Directory entries are
    visited in sorted name order so merge order is identical on every
    platform.

    Security:
        Relative directories containing ".." or absolute paths are rejected.
        Reads and enumerations are validated against the resolved root.

    Example:
        >>> file_ops = PathFileOps("app")
        >>> ctx = LocaleContext.create(file_ops)
        # Loads from: app/i18n/common.json, app/i18n/en.json, ...

    Attributes:
        root_dir: Directory that relative paths resolve against (default: cwd)
    """

    root_dir: str = "."
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @property
    def root_path(self) -> str:
        """Resolved root directory as a string."""
        return str(self._resolved_root)

    @staticmethod
    def _validate_rel_dir(rel_dir: str) -> None:
        """Validate a relative directory for path traversal attacks.

        Raises:
            ValueError: If rel_dir is absolute or contains ".."
        """
        if Path(rel_dir).is_absolute():
            msg = f"Absolute paths not allowed in rel_dir: '{rel_dir}'"
            raise ValueError(msg)
        if ".." in Path(rel_dir).parts:
            msg = f"Path traversal sequences not allowed in rel_dir: '{rel_dir}'"
            raise ValueError(msg)

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path is safely within base_dir.

        Both paths are resolved before comparison, so symlinks and ".."
        segments cannot be used to escape the root.
        """
        try:
            full_path.resolve().relative_to(base_dir.resolve())
            return True
        except ValueError:
            return False

    def read(self, path: str) -> str:
        """Read a UTF-8 file under the root.

        Raises:
            ValueError: If the path escapes the root directory
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
        """
        full_path = Path(path)
        if not full_path.is_absolute():
            full_path = self._resolved_root / full_path
        if not self._is_safe_path(self._resolved_root, full_path):
            msg = f"Path traversal detected: '{path}' escapes root directory"
            raise ValueError(msg)
        return full_path.read_text(encoding="utf-8")

    def enumerate(self, rel_dir: str, visit: Callable[[str], None]) -> None:
        """Visit every regular file below root/rel_dir in sorted order."""
        self._validate_rel_dir(rel_dir)
        base_dir = self._resolved_root / rel_dir
        if not base_dir.is_dir():
            return
        self._walk(base_dir, visit)

    def _walk(self, directory: Path, visit: Callable[[str], None]) -> None:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                self._walk(entry, visit)
            elif entry.is_file():
                visit(str(entry))


@dataclass(frozen=True, slots=True)
class SourceLoadResult:
    """Result of loading a single string-table file.

    Attributes:
        step: Which of the four layered sources the file belongs to
        source_path: Path of the file
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
    """

    step: LoadStep
    source_path: str
    status: LoadStatus
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file was merged."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was absent."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the file failed to load."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadStats:
    """Immutable statistics for one locale load.

    Produced once per load_for_locale() call that actually reads storage;
    cache hits return the same instance.

    Attributes:
        locale: Locale identifier the table is cached under
        language: Resolved (lower-cased) language used for file names
        region: Resolved (upper-cased) region used for file names
        common_files: Files merged from common
        common_region_files: Files merged from common-<REGION>
        language_files: Files merged from <lang>
        language_region_files: Files merged from <lang>-<REGION>
        total_strings: Identifiers in the merged table
        results: Every file attempted, in merge order. Directory sources
            contribute only files that exist; a missing ``<name>.json`` is
            recorded as NOT_FOUND.

    Example:
        >>> stats = ctx.load_for_locale("en-GB")
        >>> stats.language_files, stats.total_strings
        (1, 42)
    """

    locale: LocaleCode
    language: str
    region: str
    common_files: int = 0
    common_region_files: int = 0
    language_files: int = 0
    language_region_files: int = 0
    total_strings: int = 0
    results: tuple[SourceLoadResult, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadStats(locale={self.locale!r}, "
            f"common={self.common_files}, "
            f"common_region={self.common_region_files}, "
            f"language={self.language_files}, "
            f"language_region={self.language_region_files}, "
            f"strings={self.total_strings}, "
            f"not_found={self.not_found}, "
            f"errors={len(self.errors)})"
        )

    @property
    def total_files(self) -> int:
        """Files merged across all four steps."""
        return (
            self.common_files
            + self.common_region_files
            + self.language_files
            + self.language_region_files
        )

    @property
    def not_found(self) -> int:
        """Number of single-file sources that did not exist."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> tuple[SourceLoadResult, ...]:
        """Malformed files skipped in non-strict mode."""
        return tuple(r for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any file was skipped as malformed."""
        return any(r.is_error for r in self.results)

    def files_for(self, step: LoadStep) -> int:
        """Files merged for one step."""
        match step:
            case LoadStep.COMMON:
                return self.common_files
            case LoadStep.COMMON_REGION:
                return self.common_region_files
            case LoadStep.LANGUAGE:
                return self.language_files
            case LoadStep.LANGUAGE_REGION:
                return self.language_region_files
            case _:
                msg = f"Unknown load step: {step!r}"
                raise ValueError(msg)
