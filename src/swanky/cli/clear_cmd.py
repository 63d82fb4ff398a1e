"""swanky clear -- remove build artifacts from the current project."""

from __future__ import annotations

import shutil
from pathlib import Path

from swanky.cli.output import console, fail
from swanky.errors import ConfigError
from swanky.models.config import find_project_root, load_swanky_config
from swanky.status import Spinner


def remove_dir(path: Path) -> bool:
    """Recursively delete path; returns False if it did not exist."""
    if not path.exists():
        return False
    shutil.rmtree(path)
    return True


def clear() -> None:
    """Clears all the artifacts, test artifacts, and the cargo target directory."""
    try:
        project_root = find_project_root()
        config = load_swanky_config(project_root)
    except ConfigError as e:
        raise fail(e)

    spinner = Spinner(console)

    spinner.start("Clearing artifacts directory")
    remove_dir(project_root / "artifacts")
    spinner.succeed("Cleared artifacts directory")

    spinner.start("Clearing cargo target directory")
    remove_dir(project_root / "target")
    spinner.succeed("Cleared cargo target directory")

    spinner.start("Clearing test artifacts")
    for contract_name in config.contracts:
        remove_dir(project_root / "tests" / contract_name / "artifacts")
    spinner.succeed("Cleared test artifacts directories")
