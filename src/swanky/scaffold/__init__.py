"""Swanky scaffolding - templates, external tools, and node download."""

from swanky.scaffold.deps import check_cli_dependencies, detect_git_user, init_git, install_deps
from swanky.scaffold.node import NodeRelease, download_node
from swanky.scaffold.templates import (
    copy_common_template_files,
    copy_contract_template_files,
    get_templates,
    process_templates,
)

__all__ = [
    "NodeRelease",
    "check_cli_dependencies",
    "copy_common_template_files",
    "copy_contract_template_files",
    "detect_git_user",
    "download_node",
    "get_templates",
    "init_git",
    "install_deps",
    "process_templates",
]
