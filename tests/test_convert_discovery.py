"""Tests for swanky.convert.discovery path discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from swanky.convert.discovery import discover
from swanky.convert.resolver import resolve_module_names
from swanky.models.candidates import CopyCandidateSet


@pytest.fixture
def flat_dir(tmp_path: Path) -> Path:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "c").mkdir()
    (tmp_path / "c" / "nested.txt").write_text("n", encoding="utf-8")
    return tmp_path


class TestDiscover:
    """Tests for discover()."""

    def test_star_returns_files_then_directories(self, flat_dir: Path) -> None:
        """'*' yields both files followed by the subdirectory, with correct flags."""
        entries = discover(flat_dir, ["*"])
        assert [(e.name, e.is_directory) for e in entries] == [
            ("a.txt", False),
            ("b.txt", False),
            ("c", True),
        ]

    def test_empty_glob_list_returns_nothing(self, flat_dir: Path) -> None:
        assert discover(flat_dir, []) == []

    def test_paths_are_absolute(self, flat_dir: Path) -> None:
        for entry in discover(flat_dir, ["*"]):
            assert entry.path.is_absolute()
            assert entry.path.parent == flat_dir.resolve()

    def test_is_not_recursive(self, flat_dir: Path) -> None:
        """Only one directory level is matched."""
        names = [e.name for e in discover(flat_dir, ["*"])]
        assert "nested.txt" not in names

    def test_directory_path_expands_to_children(self, tmp_path: Path) -> None:
        """A plain directory path lists that directory's immediate children."""
        contracts = tmp_path / "contracts"
        (contracts / "flipper").mkdir(parents=True)
        (contracts / "erc20").mkdir()
        (contracts / "README.md").write_text("x", encoding="utf-8")

        entries = discover(tmp_path, ["contracts"])
        assert [e.name for e in entries] == ["README.md", "erc20", "flipper"]

    def test_module_name_is_unset(self, flat_dir: Path) -> None:
        assert all(e.module_name is None for e in discover(flat_dir, ["*"]))

    def test_files_of_all_patterns_come_before_directories(self, tmp_path: Path) -> None:
        (tmp_path / "one").mkdir()
        (tmp_path / "one" / "dir1").mkdir()
        (tmp_path / "one" / "f1.rs").write_text("", encoding="utf-8")
        (tmp_path / "two").mkdir()
        (tmp_path / "two" / "dir2").mkdir()
        (tmp_path / "two" / "f2.rs").write_text("", encoding="utf-8")

        entries = discover(tmp_path, ["one", "two"])
        assert [e.name for e in entries] == ["f1.rs", "f2.rs", "dir1", "dir2"]

    def test_overlapping_patterns_produce_duplicates(self, flat_dir: Path) -> None:
        """Duplicates are kept by discover and removed by CopyCandidateSet.build."""
        entries = discover(flat_dir, ["*.txt", "a.*"])
        assert [e.name for e in entries] == ["a.txt", "b.txt", "a.txt"]

        candidates = CopyCandidateSet.build(contracts=entries)
        assert [e.name for e in candidates.contracts] == ["a.txt", "b.txt"]

    def test_hidden_entries_skipped(self, flat_dir: Path) -> None:
        (flat_dir / ".git").mkdir()
        (flat_dir / ".env").write_text("", encoding="utf-8")
        names = [e.name for e in discover(flat_dir, ["*"])]
        assert ".git" not in names
        assert ".env" not in names

    def test_missing_location_matches_nothing(self, tmp_path: Path) -> None:
        assert discover(tmp_path, ["does-not-exist/*"]) == []

    def test_wildcard_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / "pkg_a" / "src").mkdir(parents=True)
        (tmp_path / "pkg_b" / "src").mkdir(parents=True)
        entries = discover(tmp_path, ["pkg_*/src"])
        assert [e.path.parent.name for e in entries] == ["pkg_a", "pkg_b"]

    @pytest.mark.parametrize("root_name", ["proj[1]", "proj*", "proj?"])
    def test_wildcards_in_root_are_literal(self, tmp_path: Path, root_name: str) -> None:
        """Only patterns are globbed; the root directory name is taken as is."""
        root = tmp_path / root_name
        (root / "tests").mkdir(parents=True)
        (root / "tests" / "a.test.ts").write_text("", encoding="utf-8")

        assert [e.name for e in discover(root, ["tests"])] == ["a.test.ts"]
        assert [e.name for e in discover(root, ["tests/*.ts"])] == ["a.test.ts"]
        assert [e.name for e in discover(root, ["*"])] == ["tests"]

    def test_wildcard_parent_under_bracketed_root(self, tmp_path: Path) -> None:
        root = tmp_path / "proj[1]"
        (root / "pkg_a" / "src").mkdir(parents=True)
        entries = discover(root, ["pkg_*/src"])
        assert [e.path.parent.name for e in entries] == ["pkg_a"]

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_permission_error_propagates(self, tmp_path: Path) -> None:
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o000)
        try:
            with pytest.raises(PermissionError):
                discover(tmp_path, ["locked"])
        finally:
            locked.chmod(0o755)


class TestIdempotence:
    """Discovery plus resolution on an unchanged tree is repeatable."""

    def test_same_result_twice(self, source_project: Path) -> None:
        def run() -> CopyCandidateSet:
            return resolve_module_names(
                CopyCandidateSet.build(
                    contracts=discover(source_project, ["contracts"]),
                    crates=discover(source_project, ["libs"]),
                    tests=discover(source_project, ["tests"]),
                )
            )

        assert run() == run()
