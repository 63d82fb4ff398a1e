"""Shared terminal output for swanky commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from swanky.errors import SwankyError

console = Console(stderr=True)


def fail(error: SwankyError, err_console: Console | None = None) -> typer.Exit:
    """Print error (and its cause, if any) and return an Exit to raise.

    Usage: ``raise fail(exc)``.
    """
    out = err_console or console
    out.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    cause = error.__cause__
    if cause is not None:
        out.print(f"  [dim]caused by {type(cause).__name__}: {escape(str(cause))}[/dim]")
    return typer.Exit(code=1)
