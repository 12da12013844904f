"""Tests for localization/loading.py - PathFileOps and load records.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from localestrings.enums import LoadStatus, LoadStep
from localestrings.localization.loading import LoadStats, PathFileOps, SourceLoadResult

# ============================================================================
# PathFileOps
# ============================================================================


class TestPathFileOpsRead:
    """Test PathFileOps.read."""

    def test_root_path_is_resolved(self, tmp_path: Path) -> None:
        """root_path is the resolved root directory."""
        file_ops = PathFileOps(str(tmp_path))

        assert file_ops.root_path == str(tmp_path.resolve())

    def test_read_absolute_path(self, tmp_path: Path) -> None:
        """Absolute paths under the root are read as UTF-8."""
        (tmp_path / "a.json").write_text('{"k": "ä"}', encoding="utf-8")
        file_ops = PathFileOps(str(tmp_path))

        assert file_ops.read(str(tmp_path.resolve() / "a.json")) == '{"k": "ä"}'

    def test_read_relative_path(self, tmp_path: Path) -> None:
        """Relative paths resolve against the root."""
        (tmp_path / "i18n").mkdir()
        (tmp_path / "i18n" / "en.json").write_text("{}", encoding="utf-8")

        assert PathFileOps(str(tmp_path)).read("i18n/en.json") == "{}"

    def test_read_missing_raises_file_not_found(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PathFileOps(str(tmp_path)).read("missing.json")

    def test_read_outside_root_rejected(self, tmp_path: Path) -> None:
        """Paths escaping the root raise ValueError."""
        root = tmp_path / "app"
        root.mkdir()
        (tmp_path / "secret.json").write_text("{}", encoding="utf-8")

        with pytest.raises(ValueError, match="Path traversal"):
            PathFileOps(str(root)).read("../secret.json")


class TestPathFileOpsEnumerate:
    """Test PathFileOps.enumerate."""

    def test_recursive_sorted_walk(self, tmp_path: Path) -> None:
        """Files are visited depth-first in sorted name order."""
        base = tmp_path / "i18n" / "en"
        (base / "b").mkdir(parents=True)
        for name in ("d.json", "a.json", "b/c.json"):
            (base / name).write_text("{}", encoding="utf-8")
        visited: list[str] = []

        PathFileOps(str(tmp_path)).enumerate("i18n/en", visited.append)

        root = tmp_path.resolve() / "i18n" / "en"
        assert visited == [str(root / "a.json"), str(root / "b" / "c.json"), str(root / "d.json")]

    def test_stable_across_calls(self, tmp_path: Path) -> None:
        """Repeated walks over unchanged storage yield the same order."""
        base = tmp_path / "data"
        base.mkdir()
        for name in ("z.json", "m.json", "a.json"):
            (base / name).write_text("{}", encoding="utf-8")
        file_ops = PathFileOps(str(tmp_path))
        first: list[str] = []
        second: list[str] = []

        file_ops.enumerate("data", first.append)
        file_ops.enumerate("data", second.append)

        assert first == second

    def test_missing_directory_is_silent(self, tmp_path: Path) -> None:
        """A missing directory visits nothing and does not raise."""
        visited: list[str] = []

        PathFileOps(str(tmp_path)).enumerate("nope", visited.append)

        assert visited == []

    @pytest.mark.parametrize("rel_dir", ["../outside", "i18n/../../x"])
    def test_traversal_rejected(self, tmp_path: Path, rel_dir: str) -> None:
        """Relative directories containing '..' are rejected."""
        with pytest.raises(ValueError, match="traversal"):
            PathFileOps(str(tmp_path)).enumerate(rel_dir, lambda _: None)

    def test_absolute_rejected(self, tmp_path: Path) -> None:
        """Absolute directories are rejected."""
        with pytest.raises(ValueError, match="Absolute"):
            PathFileOps(str(tmp_path)).enumerate(str(tmp_path), lambda _: None)


# ============================================================================
# Load records
# ============================================================================


class TestLoadStats:
    """Test LoadStats derived values."""

    def test_defaults(self) -> None:
        """Counts default to zero with no errors."""
        stats = LoadStats(locale="en-GB", language="en", region="GB")

        assert stats.total_files == 0
        assert stats.total_strings == 0
        assert not stats.has_errors

    def test_total_files_and_files_for(self) -> None:
        """total_files sums the four steps; files_for reads one."""
        stats = LoadStats(
            locale="en-GB",
            language="en",
            region="GB",
            common_files=1,
            common_region_files=0,
            language_files=2,
            language_region_files=3,
        )

        assert stats.total_files == 6
        assert stats.files_for(LoadStep.COMMON) == 1
        assert stats.files_for(LoadStep.COMMON_REGION) == 0
        assert stats.files_for(LoadStep.LANGUAGE) == 2
        assert stats.files_for(LoadStep.LANGUAGE_REGION) == 3

    def test_files_for_unknown_step(self) -> None:
        """An unknown step raises ValueError."""
        stats = LoadStats(locale="en", language="en", region="US")

        with pytest.raises(ValueError, match="Unknown load step"):
            stats.files_for("bogus")  # type: ignore[arg-type]

    def test_has_errors(self) -> None:
        """has_errors reflects recorded failures."""
        failure = SourceLoadResult(
            LoadStep.LANGUAGE, "i18n/en.json", LoadStatus.ERROR, ValueError("bad")
        )
        stats = LoadStats(locale="en", language="en", region="US", results=(failure,))

        assert stats.has_errors
        assert stats.errors == (failure,)
        assert failure.is_error

    def test_repr(self) -> None:
        """repr summarizes counts."""
        stats = LoadStats(locale="en", language="en", region="US", common_files=1)

        assert repr(stats) == (
            "LoadStats(locale='en', common=1, common_region=0, language=0, "
            "language_region=0, strings=0, not_found=0, errors=0)"
        )

    def test_frozen(self) -> None:
        """LoadStats is immutable."""
        stats = LoadStats(locale="en", language="en", region="US")

        with pytest.raises(AttributeError):
            stats.total_strings = 5  # type: ignore[misc]

    def test_results_split_by_status(self) -> None:
        """errors and not_found are derived from the recorded results."""
        merged = SourceLoadResult(LoadStep.COMMON, "i18n/common.json", LoadStatus.SUCCESS)
        absent = SourceLoadResult(LoadStep.LANGUAGE, "i18n/en.json", LoadStatus.NOT_FOUND)
        stats = LoadStats(locale="en", language="en", region="US", results=(merged, absent))

        assert stats.not_found == 1
        assert stats.errors == ()
        assert not stats.has_errors


class TestSourceLoadResult:
    """Test SourceLoadResult."""

    def test_success_is_not_error(self) -> None:
        """Non-error statuses report is_error False."""
        result = SourceLoadResult(LoadStep.COMMON, "i18n/common.json", LoadStatus.SUCCESS)

        assert result.is_success
        assert not result.is_not_found
        assert not result.is_error
        assert result.error is None

    def test_not_found(self) -> None:
        """NOT_FOUND results are neither successes nor errors."""
        result = SourceLoadResult(LoadStep.COMMON, "i18n/common.json", LoadStatus.NOT_FOUND)

        assert result.is_not_found
        assert not result.is_success
        assert not result.is_error
