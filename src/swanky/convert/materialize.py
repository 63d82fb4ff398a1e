"""Copy confirmed candidates into the new project layout."""

from __future__ import annotations

import shutil
from pathlib import Path

from swanky.models.candidates import CopyCandidateSet

# Root-level files carried over from a converted project when present.
WORKSPACE_FILES: tuple[str, ...] = ("rust-toolchain.toml", ".rustfmt.toml")


def copy_entry(source: Path, destination: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        shutil.copy2(source, destination)


def copy_workspace_contracts(candidates: CopyCandidateSet, project_path: Path) -> list[Path]:
    """Copy every candidate to project_path/<group>/<name>.

    Group directories are created even when a group is empty. Existing
    destinations are overwritten; callers start from an empty project.

    Returns:
        Destination paths in copy order.
    """
    copied: list[Path] = []
    for group, entries in candidates.items():
        dest_dir = project_path / group
        dest_dir.mkdir(parents=True, exist_ok=True)
        for entry in entries:
            destination = dest_dir / entry.name
            copy_entry(entry.path, destination)
            copied.append(destination)
    return copied


def copy_workspace_files(source_root: Path, project_path: Path) -> list[Path]:
    """Copy toolchain and formatter settings from the source project root."""
    copied: list[Path] = []
    for file_name in WORKSPACE_FILES:
        source = source_root / file_name
        if source.is_file():
            destination = project_path / file_name
            shutil.copy2(source, destination)
            copied.append(destination)
    return copied
