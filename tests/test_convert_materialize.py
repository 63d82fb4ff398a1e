"""Tests for copying confirmed candidates into a new project."""

from __future__ import annotations

from pathlib import Path

from swanky.convert.materialize import copy_workspace_contracts, copy_workspace_files
from swanky.models.candidates import CopyCandidateSet, PathEntry


class TestCopyWorkspaceContracts:
    """Tests for copy_workspace_contracts()."""

    def test_copies_into_group_directories(self, source_project: Path, tmp_path: Path) -> None:
        project = tmp_path / "new"
        candidates = CopyCandidateSet(
            contracts=(PathEntry.from_path(source_project / "contracts" / "flipper"),),
            crates=(PathEntry.from_path(source_project / "libs" / "shared"),),
            tests=(PathEntry.from_path(source_project / "tests" / "flipper.test.ts"),),
        )

        copied = copy_workspace_contracts(candidates, project)

        assert (project / "contracts" / "flipper" / "src" / "lib.rs").read_text() == "// flipper\n"
        assert (project / "crates" / "shared" / "Cargo.toml").is_file()
        assert (project / "tests" / "flipper.test.ts").read_text() == "// test\n"
        assert copied == [
            project / "contracts" / "flipper",
            project / "crates" / "shared",
            project / "tests" / "flipper.test.ts",
        ]

    def test_empty_groups_still_create_directories(self, tmp_path: Path) -> None:
        project = tmp_path / "new"
        assert copy_workspace_contracts(CopyCandidateSet(), project) == []
        for group in ("contracts", "crates", "tests"):
            assert (project / group).is_dir()

    def test_source_left_intact(self, source_project: Path, tmp_path: Path) -> None:
        entry = PathEntry.from_path(source_project / "contracts" / "psp22")
        copy_workspace_contracts(CopyCandidateSet(contracts=(entry,)), tmp_path / "new")
        assert (source_project / "contracts" / "psp22" / "lib.rs").is_file()

    def test_existing_destination_is_overwritten(self, source_project: Path, tmp_path: Path) -> None:
        project = tmp_path / "new"
        stale = project / "contracts" / "psp22" / "lib.rs"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale", encoding="utf-8")

        entry = PathEntry.from_path(source_project / "contracts" / "psp22")
        copy_workspace_contracts(CopyCandidateSet(contracts=(entry,)), project)
        assert stale.read_text() == "// psp22\n"


class TestCopyWorkspaceFiles:
    """Tests for copy_workspace_files()."""

    def test_copies_present_files_only(self, source_project: Path, tmp_path: Path) -> None:
        project = tmp_path / "new"
        project.mkdir()
        copied = copy_workspace_files(source_project, project)
        assert copied == [project / "rust-toolchain.toml"]
        assert not (project / ".rustfmt.toml").exists()
