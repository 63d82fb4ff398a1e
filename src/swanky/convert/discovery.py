"""Path discovery for project conversion.

Expands user-supplied globs relative to the source project root into
PathEntry records, one directory level deep. A glob naming an existing
directory expands to that directory's immediate children.
"""

from __future__ import annotations

import glob
import os
import re
from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from swanky.models.candidates import PathEntry

_MAGIC = re.compile(r"[*?[]")


def _has_magic(pattern: str) -> bool:
    return _MAGIC.search(pattern) is not None


def _search_dirs(root: Path, pattern: str) -> tuple[list[Path], str]:
    """Split pattern into the directories to scan and the name pattern to match.

    Only pattern is checked for wildcards; root is always taken literally.
    """
    target = root / pattern
    if not _has_magic(pattern) and target.is_dir():
        return [target], "*"

    parent_pattern = Path(pattern).parent
    if _has_magic(str(parent_pattern)):
        matches = sorted(glob.glob(str(parent_pattern), root_dir=root))
        parents = [root / p for p in matches if (root / p).is_dir()]
    else:
        parent = root / parent_pattern
        parents = [parent] if parent.is_dir() else []
    return parents, target.name


def _scan(directory: Path, name_pattern: str, want_dirs: bool) -> list[Path]:
    """List entries of one directory matching name_pattern.

    Hidden entries are only matched by patterns that start with a dot.
    os.scandir errors (e.g. permission denied) propagate.
    """
    include_hidden = name_pattern.startswith(".")
    matches: list[Path] = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.name.startswith(".") and not include_hidden:
                continue
            if not fnmatchcase(entry.name, name_pattern):
                continue
            if entry.is_dir() == want_dirs:
                matches.append(Path(entry.path))
    return sorted(matches, key=lambda p: p.name)


def _glob_paths(root: Path, patterns: Sequence[str], want_dirs: bool) -> list[Path]:
    paths: list[Path] = []
    for pattern in patterns:
        directories, name_pattern = _search_dirs(root, pattern)
        for directory in directories:
            paths.extend(_scan(directory, name_pattern, want_dirs))
    return paths


def discover(root: Path, patterns: Sequence[str]) -> list[PathEntry]:
    """Enumerate files, then directories, matching patterns under root.

    Args:
        root: Source project directory that patterns are relative to.
        patterns: Relative (or absolute) glob patterns or directory paths.

    Returns:
        Files for every pattern followed by directories for every pattern,
        each in pattern order. An entry matched by two patterns appears
        twice; CopyCandidateSet.build() removes such duplicates.
    """
    if not patterns:
        return []
    root = Path(root).resolve()
    files = _glob_paths(root, patterns, want_dirs=False)
    directories = _glob_paths(root, patterns, want_dirs=True)
    return [PathEntry.from_path(path) for path in (*files, *directories)]
