"""Module name resolution for copy candidates.

A contract or crate directory's module name comes from the
``package.name`` of the Cargo.toml inside it, falling back to the
directory name. Files always use their own name.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from swanky.errors import ManifestParseError
from swanky.models.candidates import CopyCandidateSet, PathEntry

console = Console(stderr=True)

CARGO_MANIFEST = "Cargo.toml"


def read_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file, raising ManifestParseError when it is malformed."""
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc


def resolve_entry(entry: PathEntry) -> PathEntry:
    """Return a copy of entry with its module name attached."""
    module_name = entry.path.name
    manifest_path = entry.path / CARGO_MANIFEST
    if entry.is_directory and manifest_path.is_file():
        manifest = read_toml(manifest_path)
        package = manifest.get("package")
        package_name = package.get("name") if isinstance(package, dict) else None
        if isinstance(package_name, str) and package_name:
            module_name = package_name
        else:
            console.print(
                f"[yellow]Could not detect the contract name from {escape(str(manifest_path))}. "
                f"Using {escape(f'[{module_name}]')}[/yellow]"
            )
    return entry.with_module_name(module_name)


def resolve_module_names(candidates: CopyCandidateSet) -> CopyCandidateSet:
    """Attach module names to contracts and crates; tests pass through unchanged.

    Raises:
        ManifestParseError: If any candidate's Cargo.toml is malformed.
    """
    return CopyCandidateSet(
        contracts=tuple(resolve_entry(entry) for entry in candidates.contracts),
        crates=tuple(resolve_entry(entry) for entry in candidates.crates),
        tests=candidates.tests,
    )
