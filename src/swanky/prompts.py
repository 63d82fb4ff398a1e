"""Interactive questions and the prompters that answer them.

Commands describe what to ask with the frozen question records below
and hand them to a Prompter. TerminalPrompter renders them with typer
and rich; tests substitute a scripted prompter that returns canned
answers keyed by question name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import typer
from rich.console import Console
from rich.markup import escape

from swanky.consts import EXCLUDED_PATH_PARTS
from swanky.errors import InputError


@dataclass(frozen=True)
class Confirm:
    """Yes/no question."""

    name: str
    message: str
    default: bool = False


@dataclass(frozen=True)
class TextInput:
    """Free text question.

    ``validate`` returns an error message for a rejected answer, or None.
    """

    name: str
    message: str
    default: str | None = None
    validate: Callable[[str], str | None] | None = None


@dataclass(frozen=True)
class Select:
    """Pick exactly one of several string choices."""

    name: str
    message: str
    choices: tuple[str, ...]
    default: str | None = None


@dataclass(frozen=True)
class PathInput:
    """Ask for a directory inside ``root``; the answer is relative to root."""

    name: str
    message: str
    root: Path
    excluded_parts: frozenset[str] = EXCLUDED_PATH_PARTS


@dataclass(frozen=True)
class Choice:
    label: str
    value: Any
    checked: bool = True


@dataclass(frozen=True)
class CheckboxSection:
    """A titled group of choices; rendered even when it has no choices."""

    title: str
    choices: tuple[Choice, ...] = ()


@dataclass(frozen=True)
class Checkbox:
    """Multi-select over sectioned choices; the answer is the list of selected values."""

    name: str
    message: str
    sections: tuple[CheckboxSection, ...]

    @property
    def choices(self) -> list[Choice]:
        return [choice for section in self.sections for choice in section.choices]


Question = Union[Confirm, TextInput, Select, PathInput, Checkbox]


class Prompter(ABC):
    """Answers questions on behalf of a command.

    Subclasses implement ask(); command logic never talks to the
    terminal directly.
    """

    @abstractmethod
    def ask(self, question: Question) -> Any:
        """Return the answer to a single question.

        Answer types: bool for Confirm, str for TextInput, Select and
        PathInput, list of choice values for Checkbox.
        """
        ...


def validate_relative_dir(root: Path, answer: str, excluded_parts: frozenset[str]) -> str:
    """Check that answer names a usable directory under root.

    Returns:
        The answer normalized to a POSIX-style path relative to root.

    Raises:
        InputError: If the path is empty, missing, not a directory,
            outside root, or inside an excluded directory.
    """
    answer = answer.strip()
    if not answer:
        raise InputError("Path cannot be empty")
    root = root.resolve()
    target = (root / answer).resolve()
    if not target.is_dir():
        raise InputError(f"Directory [{answer}] does not exist in {root}")
    try:
        relative = target.relative_to(root)
    except ValueError:
        raise InputError(f"Directory [{answer}] is outside of {root}") from None
    if excluded_parts.intersection(relative.parts):
        raise InputError(f"Directory [{answer}] is inside an excluded directory")
    return relative.as_posix()


def parse_toggles(answer: str, count: int) -> set[int]:
    """Parse '1, 3 4' into zero-based indices, rejecting out-of-range numbers."""
    indices: set[int] = set()
    for token in answer.replace(",", " ").split():
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise InputError(f"'{token}' is not a number between 1 and {count}")
        indices.add(int(token) - 1)
    return indices


class TerminalPrompter(Prompter):
    """Renders questions in the terminal with typer prompts and rich output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: Question) -> Any:
        if isinstance(question, Confirm):
            return typer.confirm(question.message, default=question.default)
        if isinstance(question, TextInput):
            return self._ask_text(question)
        if isinstance(question, Select):
            return self._ask_select(question)
        if isinstance(question, PathInput):
            return self._ask_path(question)
        if isinstance(question, Checkbox):
            return self._ask_checkbox(question)
        raise TypeError(f"Unsupported question type: {type(question).__name__}")

    def _ask_text(self, question: TextInput) -> str:
        while True:
            answer = typer.prompt(question.message, default=question.default)
            error = question.validate(answer) if question.validate else None
            if error is None:
                return answer
            self.console.print(f"[red]{escape(error)}[/red]")

    def _ask_select(self, question: Select) -> str:
        self.console.print(f"[bold]{escape(question.message)}[/bold]")
        for i, choice in enumerate(question.choices, 1):
            self.console.print(f"  {i}. {escape(choice)}")
        default = question.default if question.default in question.choices else None
        while True:
            answer = typer.prompt("Choice", default=default).strip()
            if answer in question.choices:
                return answer
            if answer.isdigit() and 1 <= int(answer) <= len(question.choices):
                return question.choices[int(answer) - 1]
            self.console.print(f"[red]Unknown choice: {escape(answer)}[/red]")

    def _ask_path(self, question: PathInput) -> str:
        while True:
            answer = typer.prompt(question.message)
            try:
                return validate_relative_dir(question.root, answer, question.excluded_parts)
            except InputError as exc:
                self.console.print(f"[red]{escape(str(exc))}[/red]")

    def _ask_checkbox(self, question: Checkbox) -> list[Any]:
        choices = question.choices
        selected = [choice.checked for choice in choices]
        while True:
            self.console.print(f"[bold]{escape(question.message)}[/bold]")
            index = 0
            for section in question.sections:
                self.console.print(f"[cyan]====={escape(section.title)}=====[/cyan]")
                for choice in section.choices:
                    mark = "x" if selected[index] else " "
                    self.console.print(f"  {index + 1:>2}. \\[{mark}] {escape(choice.label)}")
                    index += 1
            answer = typer.prompt(
                "Numbers to toggle (empty to accept)", default="", show_default=False
            )
            if not answer.strip():
                return [c.value for c, keep in zip(choices, selected) if keep]
            try:
                toggles = parse_toggles(answer, len(choices))
            except InputError as exc:
                self.console.print(f"[red]{escape(str(exc))}[/red]")
                continue
            for i in toggles:
                selected[i] = not selected[i]
