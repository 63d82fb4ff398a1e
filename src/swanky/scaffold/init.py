"""Planning for `swanky init`.

Asks every question up front and turns the answers into a TaskQueue.
Nothing touches the destination until the queue runs. The workspace
config is threaded through the planning steps as a value; values that
only exist once earlier tasks have run (the downloaded node path)
reach it through task callbacks.
"""

from __future__ import annotations

import re
from pathlib import Path

from swanky import __version__
from swanky.convert.gate import collect_candidates, confirm_copy_list
from swanky.convert.manifest import (
    PACKAGE_MANIFEST,
    build_workspace_manifest,
    merge_package_json,
    read_root_cargo_toml,
    write_cargo_toml,
)
from swanky.convert.materialize import copy_workspace_contracts, copy_workspace_files
from swanky.convert.resolver import resolve_module_names
from swanky.errors import InputError, UnknownError
from swanky.execution.queue import Task, TaskQueue
from swanky.models.config import SwankyConfig, write_swanky_config
from swanky.prompts import Confirm, Prompter, Select, TextInput
from swanky.scaffold.deps import (
    check_cli_dependencies,
    detect_git_user,
    init_git,
    install_deps,
)
from swanky.scaffold.node import NodeRelease, download_node
from swanky.scaffold.templates import (
    copy_common_template_files,
    copy_contract_template_files,
    get_templates,
    kebab_case,
    pascal_case,
    process_templates,
    snake_case,
)
from swanky.status import Spinner

_CONTRACT_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+$")


def _validate_contract_name(answer: str) -> str | None:
    if not _CONTRACT_NAME.match(answer):
        return "Contract name must start with a letter and contain only letters, digits, '-' or '_'"
    return None


def _validate_author(answer: str) -> str | None:
    return None if answer.strip() else "Name cannot be empty"


def _validate_email(answer: str) -> str | None:
    return None if _EMAIL.match(answer.strip()) else "Please enter a valid email address"


def check_project_path(project_path: Path, display_name: str) -> None:
    """Require project_path to be missing or an empty directory.

    Raises:
        InputError: If it is a file or a non-empty directory.
        UnknownError: If it cannot be inspected.
    """
    try:
        if not project_path.exists():
            return
        if not project_path.is_dir():
            raise InputError(f"{display_name} exists and is not a directory!")
        if any(project_path.iterdir()):
            raise InputError(f"Directory {display_name} is not empty!")
    except OSError as exc:
        raise UnknownError("Unexpected error") from exc


def check_convert_source(source: Path) -> Path:
    """Resolve and validate the directory of the project being converted.

    Raises:
        InputError: If it is missing, not a directory, or empty.
    """
    source = source.expanduser().resolve()
    try:
        entries = list(source.iterdir())
    except OSError as cause:
        raise InputError(f"Error reading target directory [{source}]") from cause
    if not entries:
        raise InputError(f"Target project directory [{source}] is empty!")
    return source


def create_contract_dirs(config: SwankyConfig, project_path: Path) -> None:
    for contract_name in config.contracts:
        (project_path / "artifacts" / contract_name).mkdir(parents=True, exist_ok=True)
        (project_path / "tests" / contract_name).mkdir(parents=True, exist_ok=True)


def plan_generate(
    queue: TaskQueue[SwankyConfig],
    prompter: Prompter,
    project_name: str,
    project_path: Path,
    config: SwankyConfig,
    template: str | None = None,
) -> SwankyConfig:
    """Ask for template and author details and enqueue contract generation."""
    templates = get_templates()
    if template is not None and template not in templates.contract_templates:
        available = ", ".join(templates.contract_templates)
        raise InputError(f"Unknown template '{template}'. Available templates: {available}")
    if template is None:
        template = prompter.ask(
            Select(
                name="contractTemplate",
                message="Which contract template should we use?",
                choices=templates.contract_templates,
                default=templates.contract_templates[0],
            )
        )
    contract_name = prompter.ask(
        TextInput(
            name="contractName",
            message="What should we name your initial contract?",
            default=template,
            validate=_validate_contract_name,
        )
    )
    author_name = prompter.ask(
        TextInput(
            name="authorName",
            message="What is your name?",
            default=detect_git_user(),
            validate=_validate_author,
        )
    )
    author_email = prompter.ask(
        TextInput(name="email", message="What is your email?", validate=_validate_email)
    )

    queue.enqueue(
        Task(operation=check_cli_dependencies, running_message="Checking dependencies")
    )
    queue.enqueue(
        Task(
            operation=copy_contract_template_files,
            args=(templates.contract_templates_path / template, contract_name, project_path),
            running_message="Copying contract template files",
        )
    )
    queue.enqueue(
        Task(
            operation=process_templates,
            args=(
                project_path,
                {
                    "project_name": kebab_case(project_name),
                    "author_name": author_name,
                    "author_email": author_email,
                    "swanky_version": __version__,
                    "contract_name": contract_name,
                    "contract_name_snake": snake_case(contract_name),
                    "contract_name_pascal": pascal_case(contract_name),
                },
            ),
            running_message="Processing templates",
        )
    )
    return config.with_contract(contract_name, snake_case(contract_name))


def plan_convert(
    queue: TaskQueue[SwankyConfig],
    prompter: Prompter,
    source: Path,
    project_name: str,
    project_path: Path,
    config: SwankyConfig,
) -> SwankyConfig:
    """Review an existing project's sources and enqueue copying and manifest merges."""
    source = check_convert_source(source)

    candidates = resolve_module_names(collect_candidates(prompter, source))
    confirmed = confirm_copy_list(prompter, candidates)

    queue.enqueue(
        Task(
            operation=process_templates,
            args=(
                project_path,
                {"project_name": kebab_case(project_name), "swanky_version": __version__},
            ),
            running_message="Processing templates",
        )
    )
    queue.enqueue(
        Task(
            operation=copy_workspace_contracts,
            args=(confirmed, project_path),
            running_message="Copying existing project files",
            success_message="Project files successfully copied",
            fail_message="Failed to copy project files",
            exit_on_error=True,
        )
    )

    for contract in confirmed.contracts:
        config = config.with_contract(contract.name, contract.module_name or contract.name)

    queue.enqueue(
        Task(
            operation=write_cargo_toml,
            args=(build_workspace_manifest(read_root_cargo_toml(source)), project_path),
            running_message="Writing Cargo.toml",
        )
    )
    queue.enqueue(
        Task(
            operation=copy_workspace_files,
            args=(source, project_path),
            running_message="Copying workspace files",
        )
    )

    existing_package_json = source / PACKAGE_MANIFEST
    if existing_package_json.is_file():
        queue.enqueue(
            Task(
                operation=merge_package_json,
                args=(existing_package_json, project_path),
                running_message="Merging package.json",
            )
        )
    return config


def plan_init(
    prompter: Prompter,
    project_name: str,
    project_path: Path,
    *,
    convert: Path | None = None,
    template: str | None = None,
    swanky_node: bool = False,
    spinner: Spinner | None = None,
) -> tuple[TaskQueue[SwankyConfig], SwankyConfig]:
    """Ask all init questions and build the task queue.

    Returns:
        The queue to run and the config to thread through it.
    """
    check_project_path(project_path, project_name)

    queue: TaskQueue[SwankyConfig] = TaskQueue(spinner=spinner or Spinner())
    config = SwankyConfig()
    templates = get_templates()

    queue.enqueue(
        Task(
            operation=copy_common_template_files,
            args=(templates.templates_path, project_path),
            running_message="Copying common template files",
        )
    )

    if convert is not None:
        config = plan_convert(queue, prompter, convert, project_name, project_path, config)
    else:
        config = plan_generate(queue, prompter, project_name, project_path, config, template)

    queue.enqueue(
        Task(
            operation=install_deps,
            args=(project_path,),
            running_message="Installing dependencies",
            exit_on_error=False,
        )
    )
    queue.enqueue(
        Task(operation=init_git, args=(project_path,), running_message="Initializing git")
    )

    use_swanky_node = swanky_node or prompter.ask(
        Confirm(name="useSwankyNode", message="Do you want to download Swanky node?", default=False)
    )
    if use_swanky_node:
        queue.enqueue(
            Task(
                operation=download_node,
                args=(project_path, NodeRelease(), queue.spinner),
                running_message="Downloading Swanky node",
                callback=lambda state, local_path: state.with_node_path(local_path),
            )
        )

    config = config.with_dev_accounts()

    queue.enqueue(
        Task(
            operation=create_contract_dirs,
            args=(project_path,),
            running_message="Creating contract directories",
            pass_state=True,
        )
    )
    queue.enqueue(
        Task(
            operation=write_swanky_config,
            args=(project_path,),
            running_message="Writing config",
            pass_state=True,
        )
    )
    return queue, config
