"""Tests for question validation and the terminal prompter."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import typer
from rich.console import Console

from swanky.errors import InputError
from swanky.prompts import (
    Checkbox,
    CheckboxSection,
    Choice,
    Confirm,
    PathInput,
    Select,
    TerminalPrompter,
    TextInput,
    parse_toggles,
    validate_relative_dir,
)

EXCLUDED = frozenset({"node_modules", "target"})


def _scripted_prompt(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    remaining = list(answers)

    def fake_prompt(text, default=None, **kwargs):
        return remaining.pop(0)

    monkeypatch.setattr(typer, "prompt", fake_prompt)


@pytest.fixture
def prompter() -> TerminalPrompter:
    return TerminalPrompter(Console(file=io.StringIO(), width=200))


def _printed(prompter: TerminalPrompter) -> str:
    return prompter.console.file.getvalue()


class TestValidateRelativeDir:
    """Tests for validate_relative_dir()."""

    def test_returns_posix_relative_path(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "contracts").mkdir(parents=True)
        assert validate_relative_dir(tmp_path, "src/contracts/", EXCLUDED) == "src/contracts"

    def test_strips_whitespace(self, tmp_path: Path) -> None:
        (tmp_path / "contracts").mkdir()
        assert validate_relative_dir(tmp_path, "  contracts ", EXCLUDED) == "contracts"

    def test_empty_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="empty"):
            validate_relative_dir(tmp_path, "   ", EXCLUDED)

    def test_missing_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="does not exist"):
            validate_relative_dir(tmp_path, "nope", EXCLUDED)

    def test_file_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "lib.rs").write_text("", encoding="utf-8")
        with pytest.raises(InputError):
            validate_relative_dir(tmp_path, "lib.rs", EXCLUDED)

    def test_outside_root_rejected(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        (tmp_path / "sibling").mkdir()
        with pytest.raises(InputError, match="outside"):
            validate_relative_dir(root, "../sibling", EXCLUDED)

    def test_excluded_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
        with pytest.raises(InputError, match="excluded"):
            validate_relative_dir(tmp_path, "node_modules/pkg", EXCLUDED)


class TestParseToggles:
    """Tests for parse_toggles()."""

    def test_commas_and_spaces(self) -> None:
        assert parse_toggles("1, 3 4", 4) == {0, 2, 3}

    def test_empty_answer(self) -> None:
        assert parse_toggles("", 3) == set()

    @pytest.mark.parametrize("answer", ["0", "5", "x", "-1"])
    def test_out_of_range_rejected(self, answer: str) -> None:
        with pytest.raises(InputError):
            parse_toggles(answer, 4)


class TestTerminalPrompter:
    """Tests for TerminalPrompter with typer prompts replaced."""

    def test_confirm(self, prompter: TerminalPrompter, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(typer, "confirm", lambda text, default=False: True)
        assert prompter.ask(Confirm(name="q", message="Sure?")) is True

    def test_text_reprompts_until_valid(
        self, prompter: TerminalPrompter, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _scripted_prompt(monkeypatch, ["", "flipper"])
        question = TextInput(
            name="contractName",
            message="Name?",
            validate=lambda answer: None if answer else "Name cannot be empty",
        )
        assert prompter.ask(question) == "flipper"
        assert "Name cannot be empty" in _printed(prompter)

    def test_select_by_number_or_name(
        self, prompter: TerminalPrompter, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        question = Select(name="t", message="Template?", choices=("blank", "flipper"))
        _scripted_prompt(monkeypatch, ["2"])
        assert prompter.ask(question) == "flipper"
        _scripted_prompt(monkeypatch, ["psp22", "blank"])
        assert prompter.ask(question) == "blank"
        assert "Unknown choice: psp22" in _printed(prompter)

    def test_path_reprompts_on_invalid(
        self, prompter: TerminalPrompter, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        (tmp_path / "contracts").mkdir()
        _scripted_prompt(monkeypatch, ["missing", "contracts"])
        answer = prompter.ask(PathInput(name="contractsDirectory", message="Where?", root=tmp_path))
        assert answer == "contracts"
        assert "does not exist" in _printed(prompter)

    def test_checkbox_toggles_then_accepts(
        self, prompter: TerminalPrompter, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        question = Checkbox(
            name="confirmedCopyList",
            message="Review",
            sections=(
                CheckboxSection("Contracts", (Choice("a/", "a"), Choice("b/", "b"))),
                CheckboxSection("Crates"),
                CheckboxSection("Tests", (Choice("t.ts", "t", checked=False),)),
            ),
        )
        _scripted_prompt(monkeypatch, ["1 3", "9", ""])

        assert prompter.ask(question) == ["b", "t"]
        output = _printed(prompter)
        assert "=====Crates=====" in output
        assert "not a number between 1 and 3" in output

    def test_unknown_question_type(self, prompter: TerminalPrompter) -> None:
        with pytest.raises(TypeError):
            prompter.ask(object())
