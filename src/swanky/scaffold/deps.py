"""External tool checks and commands run while scaffolding a project."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from swanky.errors import FileError

# (executable, install hint)
REQUIRED_TOOLS: tuple[tuple[str, str], ...] = (
    ("rustc", "https://www.rust-lang.org/tools/install"),
    ("cargo", "https://www.rust-lang.org/tools/install"),
    ("cargo-contract", "cargo install --force --locked cargo-contract"),
)


def check_cli_dependencies() -> list[str]:
    """Verify that the Rust toolchain and cargo-contract are on PATH.

    Returns:
        Paths of the located executables.

    Raises:
        FileError: Listing every missing tool with its install hint.
    """
    found: list[str] = []
    missing: list[str] = []
    for tool, hint in REQUIRED_TOOLS:
        location = shutil.which(tool)
        if location is None:
            missing.append(f"{tool} (install: {hint})")
        else:
            found.append(location)
    if missing:
        raise FileError(f"Missing required tools: {', '.join(missing)}")
    return found


def run_command(cmd: list[str], cwd: Path | None = None) -> str:
    """Run a command and return its stripped stdout.

    Raises:
        subprocess.CalledProcessError: On a non-zero exit.
    """
    result = subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout.strip()


def install_deps(project_path: Path) -> None:
    """Install JavaScript dependencies with yarn, or npm when yarn is missing."""
    manager = "yarn" if shutil.which("yarn") else "npm"
    run_command([manager, "install"], cwd=project_path)


def init_git(project_path: Path) -> None:
    run_command(["git", "init"], cwd=project_path)


def detect_git_user() -> str | None:
    """Return git's configured user.name, or None if unavailable."""
    try:
        name = run_command(["git", "config", "--get", "user.name"])
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return name or None
