"""Status reporting for long-running steps.

Spinner wraps a rich status line: start() shows an animated label,
succeed()/fail() replace it with a permanent check or cross line.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.status import Status


class Spinner:
    """Single-line status reporter used by the task queue and long commands."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self._status: Status | None = None
        self._label = ""

    def start(self, label: str) -> None:
        self.stop()
        self._label = label
        self._status = self.console.status(f"{escape(label)}...")
        self._status.start()

    def update(self, text: str) -> None:
        """Replace the running label, e.g. with download progress."""
        if self._status is not None:
            self._status.update(f"{escape(self._label)}... {escape(text)}")

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, label: str | None = None) -> None:
        self.stop()
        self.console.print(f"[green]✔[/green] {escape(label or self._label)}")

    def fail(self, label: str | None = None) -> None:
        self.stop()
        self.console.print(f"[red]✖[/red] {escape(label or self._label)}")
