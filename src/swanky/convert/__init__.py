"""Swanky project conversion - discovery, naming, review, manifests, and copying."""

from swanky.convert.discovery import discover
from swanky.convert.gate import collect_candidates, confirm_copy_list, detect_tests
from swanky.convert.manifest import (
    build_workspace_manifest,
    deep_merge,
    merge_package_json,
    read_root_cargo_toml,
    write_cargo_toml,
)
from swanky.convert.materialize import copy_workspace_contracts, copy_workspace_files
from swanky.convert.resolver import resolve_module_names

__all__ = [
    "build_workspace_manifest",
    "collect_candidates",
    "confirm_copy_list",
    "copy_workspace_contracts",
    "copy_workspace_files",
    "deep_merge",
    "detect_tests",
    "discover",
    "merge_package_json",
    "read_root_cargo_toml",
    "resolve_module_names",
    "write_cargo_toml",
]
