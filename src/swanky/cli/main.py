"""Swanky CLI entry point."""

import typer

from swanky import __version__
from swanky.cli.clear_cmd import clear
from swanky.cli.contract_cmd import contract_app
from swanky.cli.init_cmd import init
from swanky.cli.node_cmd import node_app

app = typer.Typer(
    name="swanky",
    help="Scaffold and manage ink! smart contract workspaces",
    no_args_is_help=True,
)

# Register subcommands
app.command()(init)
app.command()(clear)
app.add_typer(contract_app, name="contract")
app.add_typer(node_app, name="node")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"swanky {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold and manage ink! smart contract workspaces."""
