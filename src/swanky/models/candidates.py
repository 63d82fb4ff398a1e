"""Copy candidates discovered in a project being converted.

These are plain frozen dataclasses: every conversion stage returns a
new CopyCandidateSet instead of editing the one it was given.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path

# Group name -> destination subdirectory in the new project.
GROUPS: tuple[str, ...] = ("contracts", "crates", "tests")


@dataclass(frozen=True)
class PathEntry:
    """A discovered file or directory eligible for import.

    ``module_name`` stays None until the entry has been through the
    module name resolver.
    """

    name: str
    path: Path
    is_directory: bool
    module_name: str | None = None

    @classmethod
    def from_path(cls, path: Path) -> PathEntry:
        return cls(name=path.name, path=path, is_directory=path.is_dir())

    @property
    def label(self) -> str:
        """Display name, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_directory else self.name

    def with_module_name(self, module_name: str) -> PathEntry:
        return replace(self, module_name=module_name)


def unique_entries(
    entries: Iterable[PathEntry], seen: set[Path] | None = None
) -> tuple[PathEntry, ...]:
    """Drop entries whose path was already seen, keeping first occurrence order."""
    seen = set() if seen is None else seen
    result: list[PathEntry] = []
    for entry in entries:
        if entry.path in seen:
            continue
        seen.add(entry.path)
        result.append(entry)
    return tuple(result)


@dataclass(frozen=True)
class CopyCandidateSet:
    """Candidates grouped by their destination in the new project.

    Each group is unique by path and no path appears in two groups.
    Use build() to get those guarantees from raw discovery output.
    """

    contracts: tuple[PathEntry, ...] = ()
    crates: tuple[PathEntry, ...] = ()
    tests: tuple[PathEntry, ...] = ()

    @classmethod
    def build(
        cls,
        contracts: Iterable[PathEntry] = (),
        crates: Iterable[PathEntry] = (),
        tests: Iterable[PathEntry] = (),
    ) -> CopyCandidateSet:
        """Create a set, de-duplicating by path; earlier groups win overlaps."""
        seen: set[Path] = set()
        return cls(
            contracts=unique_entries(contracts, seen),
            crates=unique_entries(crates, seen),
            tests=unique_entries(tests, seen),
        )

    def group(self, name: str) -> tuple[PathEntry, ...]:
        if name not in GROUPS:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> Iterator[tuple[str, tuple[PathEntry, ...]]]:
        for name in GROUPS:
            yield name, self.group(name)
