"""swanky node -- manage the local development node."""

from __future__ import annotations

import subprocess

import typer

from swanky.cli.output import console, fail
from swanky.errors import ConfigError, FileError, SwankyError, UnknownError
from swanky.models.config import load_swanky_config

node_app = typer.Typer(name="node", help="Manage the local node", no_args_is_help=True)


def build_node_command(local_path: str, tmp: bool) -> list[str]:
    """Persistent mode by default; --dev runs the node without persisting state."""
    return [local_path, "--dev"] if tmp else [local_path]


@node_app.command()
def start(
    tmp: bool = typer.Option(
        False, "--tmp", "-t", help="Run node with non-persistent mode"
    ),
) -> None:
    """Start a local node."""
    try:
        config = load_swanky_config()
        if not config.node.local_path:
            raise ConfigError("No local node configured. Re-run init with --swanky-node.")
        try:
            subprocess.run(build_node_command(config.node.local_path, tmp), check=True)
        except FileNotFoundError as exc:
            raise FileError(f"Node binary not found: {config.node.local_path}") from exc
        except subprocess.CalledProcessError as exc:
            raise UnknownError(f"Node exited with code {exc.returncode}") from exc
    except SwankyError as e:
        raise fail(e)

    console.print("Node started")
