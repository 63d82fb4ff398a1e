"""Questions asked while converting an existing project.

Collects the contract, crate, and test locations from the user, then
lets them review the discovered candidates before anything is copied.
All interaction goes through a Prompter.
"""

from __future__ import annotations

from pathlib import Path

from swanky.convert.discovery import discover
from swanky.models.candidates import GROUPS, CopyCandidateSet
from swanky.prompts import Checkbox, CheckboxSection, Choice, Confirm, PathInput, Prompter

TEST_DIR_NAMES: tuple[str, ...] = ("test", "tests", "spec", "specs")

_SECTION_TITLES: dict[str, str] = {
    "contracts": "Contracts",
    "crates": "Crates",
    "tests": "Tests",
}


def get_manual_paths(prompter: Prompter, project_root: Path, directory_type: str) -> list[str]:
    """Ask for one or more directories of the given type inside project_root.

    Contracts and crates may list several directories; tests take one.
    """
    paths: list[str] = []
    while True:
        selected = prompter.ask(
            PathInput(
                name=f"{directory_type}Directory",
                message=f"Please enter a path to your {directory_type} directory:",
                root=project_root,
            )
        )
        paths.append(selected)
        if directory_type == "tests":
            return paths
        has_more = prompter.ask(
            Confirm(
                name=f"more{directory_type.capitalize()}Paths",
                message=f"Do you want to add more paths to {directory_type}?",
                default=False,
            )
        )
        if not has_more:
            return paths


def ask_crates_paths(prompter: Prompter, project_root: Path) -> list[str]:
    """Optionally collect additional crate directories."""
    wants_crates = prompter.ask(
        Confirm(
            name="shouldSpecifyCratesDir",
            message="Do you want to specify an additional crates directory?",
            default=False,
        )
    )
    if not wants_crates:
        return []
    return get_manual_paths(prompter, project_root, "crates")


def detect_tests(prompter: Prompter, project_root: Path) -> Path | None:
    """Find the test directory to import, asking the user to confirm or override.

    Returns:
        Absolute path of the chosen test directory, or None for no tests.
    """
    detected: Path | None = None
    for name in TEST_DIR_NAMES:
        candidate = project_root / name
        if candidate.is_dir():
            detected = candidate
            break

    if detected is not None:
        use_detected = prompter.ask(
            Confirm(
                name="shouldUseDetectedTestDir",
                message=(
                    f"Detected test directory [{detected.name}]. "
                    "Do you want to copy it to your new project?"
                ),
                default=True,
            )
        )
        if use_detected:
            return detected

    wants_manual = prompter.ask(
        Confirm(
            name="shouldInputTestDir",
            message="Do you want to specify a test directory to copy?",
            default=False,
        )
    )
    if wants_manual:
        manual = get_manual_paths(prompter, project_root, "tests")
        return project_root / manual[0]
    return None


def collect_candidates(prompter: Prompter, project_root: Path) -> CopyCandidateSet:
    """Ask for contract, crate, and test locations and discover their contents."""
    contracts_paths = get_manual_paths(prompter, project_root, "contracts")
    crates_paths = ask_crates_paths(prompter, project_root)
    test_dir = detect_tests(prompter, project_root)
    tests = (
        discover(project_root, [test_dir.relative_to(project_root).as_posix()])
        if test_dir is not None
        else []
    )
    return CopyCandidateSet.build(
        contracts=discover(project_root, contracts_paths),
        crates=discover(project_root, crates_paths),
        tests=tests,
    )


def confirm_copy_list(prompter: Prompter, candidates: CopyCandidateSet) -> CopyCandidateSet:
    """Let the user deselect candidates; selected ones keep their group.

    Every group renders a section header, empty or not, and every
    entry starts out checked.
    """
    sections = tuple(
        CheckboxSection(
            title=_SECTION_TITLES[group],
            choices=tuple(
                Choice(label=entry.label, value=(group, entry), checked=True)
                for entry in entries
            ),
        )
        for group, entries in candidates.items()
    )
    selected = prompter.ask(
        Checkbox(
            name="confirmedCopyList",
            message="Please review the list of files and directories to copy:",
            sections=sections,
        )
    )

    grouped: dict[str, list] = {group: [] for group in GROUPS}
    for group, entry in selected:
        grouped[group].append(entry)
    return CopyCandidateSet(
        contracts=tuple(grouped["contracts"]),
        crates=tuple(grouped["crates"]),
        tests=tuple(grouped["tests"]),
    )
