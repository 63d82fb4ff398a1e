"""Shared fixtures: scripted prompter and a silent spinner."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from swanky.prompts import Checkbox, Prompter, Question
from swanky.status import Spinner


class ScriptedPrompter(Prompter):
    """Prompter answering from a dict keyed by question name.

    A list value is consumed one answer per ask. A callable value is
    called with the question. Unscripted checkbox questions accept
    every pre-checked choice; any other unscripted question fails.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[Question] = []

    def ask(self, question: Question) -> Any:
        self.asked.append(question)
        if question.name not in self.answers:
            if isinstance(question, Checkbox):
                return [c.value for c in question.choices if c.checked]
            raise AssertionError(f"Unexpected question: {question.name}")
        answer = self.answers[question.name]
        if isinstance(answer, list) and not isinstance(question, Checkbox):
            return answer.pop(0)
        if callable(answer):
            return answer(question)
        return answer

    def asked_names(self) -> list[str]:
        return [q.name for q in self.asked]


@pytest.fixture
def spinner() -> Spinner:
    """Spinner writing to an in-memory console; read it via spinner.console.file."""
    return Spinner(Console(file=io.StringIO(), force_terminal=False, width=200))


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter


@pytest.fixture
def source_project(tmp_path: Path) -> Path:
    """An existing ink! workspace with two contracts, a crate, and tests."""
    root = tmp_path / "legacy"
    (root / "contracts" / "flipper" / "src").mkdir(parents=True)
    (root / "contracts" / "flipper" / "Cargo.toml").write_text(
        '[package]\nname = "flipper_contract"\nversion = "0.1.0"\n', encoding="utf-8"
    )
    (root / "contracts" / "flipper" / "src" / "lib.rs").write_text("// flipper\n", encoding="utf-8")
    (root / "contracts" / "psp22").mkdir()
    (root / "contracts" / "psp22" / "lib.rs").write_text("// psp22\n", encoding="utf-8")
    (root / "libs" / "shared").mkdir(parents=True)
    (root / "libs" / "shared" / "Cargo.toml").write_text(
        '[package]\nname = "shared_lib"\n', encoding="utf-8"
    )
    (root / "tests").mkdir()
    (root / "tests" / "flipper.test.ts").write_text("// test\n", encoding="utf-8")
    (root / "Cargo.toml").write_text(
        '[workspace]\nmembers = ["contracts/flipper", "libs/shared"]\n\n'
        "[profile.release]\noverflow-checks = false\n",
        encoding="utf-8",
    )
    (root / "package.json").write_text(
        '{"name": "legacy", "dependencies": {"@polkadot/api": "^9.0.0"}}', encoding="utf-8"
    )
    (root / "rust-toolchain.toml").write_text('[toolchain]\nchannel = "stable"\n', encoding="utf-8")
    return root
