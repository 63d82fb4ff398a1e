"""Package and workspace manifest merging.

package.json: the converted project's descriptor is deep-merged over
the one generated from templates, external values winning.

Cargo.toml: the source project's root manifest (or an empty one) is
reused with ``workspace.members`` replaced by ``["contracts/*"]``.
Any member outside contracts/ is dropped.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomli_w

from swanky.convert.resolver import CARGO_MANIFEST, read_toml
from swanky.errors import ManifestParseError

PACKAGE_MANIFEST = "package.json"
WORKSPACE_MEMBERS: list[str] = ["contracts/*"]


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base.

    Mappings present on both sides are merged key by key. Any other
    value from override (scalars, lists, null) replaces the base value.
    Neither input is modified.
    """
    merged: dict[str, Any] = {key: _copy_value(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy_value(value)
    return merged


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    return value


def read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ManifestParseError(path, "expected a JSON object at the top level")
    return data


def merge_package_json(existing_path: Path, project_path: Path) -> Path:
    """Merge an external package.json over the project's template one.

    The template file is removed and rewritten in full.

    Returns:
        Path of the rewritten package.json.
    """
    template_path = project_path / PACKAGE_MANIFEST
    merged = deep_merge(read_json(template_path), read_json(existing_path))
    template_path.unlink()
    template_path.write_text(json.dumps(merged, indent=2) + "\n", encoding="utf-8")
    return template_path


def read_root_cargo_toml(project_root: Path) -> dict[str, Any] | None:
    """Read the source project's root Cargo.toml, if it has one.

    A missing ``[workspace]`` table is added.

    Raises:
        ManifestParseError: If the manifest is malformed or its
            ``workspace`` entry is not a table.
    """
    manifest_path = project_root / CARGO_MANIFEST
    if not manifest_path.is_file():
        return None
    manifest = read_toml(manifest_path)
    workspace = manifest.setdefault("workspace", {})
    if not isinstance(workspace, dict):
        raise ManifestParseError(manifest_path, "'workspace' must be a table")
    return manifest


def build_workspace_manifest(existing: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of existing (or an empty manifest) with members set to contracts/*."""
    manifest = _copy_value(existing) if existing is not None else {}
    workspace = manifest.get("workspace")
    manifest["workspace"] = dict(workspace) if isinstance(workspace, Mapping) else {}
    manifest["workspace"]["members"] = list(WORKSPACE_MEMBERS)
    return manifest


def write_cargo_toml(manifest: Mapping[str, Any], project_path: Path) -> Path:
    """Write manifest as project_path/Cargo.toml, replacing any existing file."""
    manifest_path = project_path / CARGO_MANIFEST
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(tomli_w.dumps(dict(manifest)), encoding="utf-8")
    return manifest_path
