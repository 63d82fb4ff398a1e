"""swanky init CLI command for project scaffolding.

Generates a new contract project from a template, or converts an
existing contract codebase with --convert. All questions are asked
before any file is written; the resulting task queue then runs in
order and reports each step.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from swanky.cli.output import console, fail
from swanky.errors import SwankyError
from swanky.prompts import Prompter, TerminalPrompter
from swanky.scaffold.init import plan_init
from swanky.status import Spinner


def get_prompter() -> Prompter:
    return TerminalPrompter()


def init(
    project_name: str = typer.Argument(..., help="Directory name of the new project"),
    swanky_node: bool = typer.Option(
        False, "--swanky-node", help="Download swanky-node without asking"
    ),
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Contract template to generate from"
    ),
    convert: Optional[str] = typer.Option(
        None,
        "--convert",
        "-c",
        help="Converts an existing smart contract project into a swanky project",
    ),
) -> None:
    """Generate a new smart contract environment."""
    project_path = Path(project_name).resolve()
    spinner = Spinner(console)

    try:
        queue, config = plan_init(
            get_prompter(),
            project_name,
            project_path,
            convert=Path(convert) if convert else None,
            template=template,
            swanky_node=swanky_node,
            spinner=spinner,
        )
        asyncio.run(queue.run_all(config))
    except SwankyError as e:
        raise fail(e)

    if queue.errors:
        console.print(
            f"[yellow]{len(queue.errors)} step(s) failed and can be re-run manually.[/yellow]"
        )
    console.print("[green][bold]🎉 😎 Swanky project successfully initialised! 😎 🎉[/bold][/green]")
