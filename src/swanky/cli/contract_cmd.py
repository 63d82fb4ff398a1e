"""swanky contract -- commands operating on a single workspace contract."""

from __future__ import annotations

import subprocess

import typer

from swanky.cli.output import console, fail
from swanky.contract import Contract
from swanky.errors import ConfigError, FileError, SwankyError, UnknownError
from swanky.models.config import find_project_root, load_swanky_config
from swanky.scaffold.deps import run_command
from swanky.status import Spinner

contract_app = typer.Typer(name="contract", help="Manage workspace contracts", no_args_is_help=True)


def generate_types(contract: Contract) -> None:
    """Run typechain-polkadot over the contract's artifacts."""
    try:
        run_command(
            [
                "npx",
                "typechain-polkadot",
                "--in",
                str(contract.artifacts_path.relative_to(contract.project_root)),
                "--out",
                str(contract.typed_contracts_path.relative_to(contract.project_root)),
            ],
            cwd=contract.project_root,
        )
    except (subprocess.CalledProcessError, FileNotFoundError) as exc:
        raise UnknownError(f"Type generation for {contract.name} failed") from exc


@contract_app.command()
def typegen(
    contract_name: str = typer.Argument(..., help="Name of the contract"),
) -> None:
    """Generate types from compiled contract metadata."""
    try:
        project_root = find_project_root()
        config = load_swanky_config(project_root)

        record = config.contracts.get(contract_name)
        if record is None:
            raise ConfigError(f"Cannot find a contract named {contract_name} in swanky.config.json")

        contract = Contract.from_record(record, project_root)
        if not contract.path_exists():
            raise FileError(
                f"Path to contract {contract_name} does not exist: {contract.contract_path}"
            )

        missing = contract.missing_artifacts()
        if missing:
            raise FileError(
                f"No artifact file found at path: {', '.join(str(p) for p in missing)}"
            )

        spinner = Spinner(console)
        spinner.start("Generating types")
        try:
            generate_types(contract)
        except UnknownError:
            spinner.fail()
            raise
        spinner.succeed()
    except SwankyError as e:
        raise fail(e)
