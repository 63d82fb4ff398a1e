"""Packaged project templates and token rendering.

Templates ship inside the package:

    templates/
        common/              # copied into every new project
        contracts/<name>/
            contract/        # -> contracts/<contract_name>
            test/            # -> tests/<contract_name>

Files ending in ``.j2`` are rendered with Jinja2 by process_templates()
and written without the suffix. A file named ``gitignore`` becomes
``.gitignore`` when copied.
"""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment

TEMPLATE_SUFFIX = ".j2"

_RENAMES: dict[str, str] = {"gitignore": ".gitignore"}

_WORD_BOUNDARY = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


@dataclass(frozen=True)
class TemplatePaths:
    templates_path: Path
    contract_templates_path: Path
    contract_templates: tuple[str, ...]


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def get_templates() -> TemplatePaths:
    templates_dir = _get_templates_dir()
    contracts_dir = templates_dir / "contracts"
    names = tuple(sorted(p.name for p in contracts_dir.iterdir() if p.is_dir()))
    return TemplatePaths(
        templates_path=templates_dir,
        contract_templates_path=contracts_dir,
        contract_templates=names,
    )


def _words(value: str) -> list[str]:
    return [word.lower() for word in _WORD_BOUNDARY.findall(value)]


def kebab_case(value: str) -> str:
    return "-".join(_words(value))


def snake_case(value: str) -> str:
    return "_".join(_words(value))


def pascal_case(value: str) -> str:
    return "".join(word.capitalize() for word in _words(value))


def _copy_tree(source: Path, destination: Path) -> None:
    for path in sorted(source.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(source)
        target = destination / relative.parent / _RENAMES.get(relative.name, relative.name)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)


def copy_common_template_files(templates_path: Path, project_path: Path) -> None:
    """Copy the files every project starts with into project_path."""
    _copy_tree(templates_path / "common", project_path)


def copy_contract_template_files(
    contract_template_path: Path, contract_name: str, project_path: Path
) -> None:
    """Copy a contract template's sources and tests under contract_name."""
    _copy_tree(contract_template_path / "contract", project_path / "contracts" / contract_name)
    test_dir = contract_template_path / "test"
    if test_dir.is_dir():
        _copy_tree(test_dir, project_path / "tests" / contract_name)


def render_template(source: str, tokens: dict[str, str]) -> str:
    """Render template text with the given tokens.

    Unknown tokens render as empty strings.
    """
    env = Environment(autoescape=False, keep_trailing_newline=True)
    return env.from_string(source).render(**tokens)


def process_templates(project_path: Path, tokens: dict[str, str]) -> list[Path]:
    """Render every ``*.j2`` file under project_path in place.

    Returns:
        Paths of the rendered files (suffix removed).
    """
    rendered: list[Path] = []
    for template_file in sorted(project_path.rglob(f"*{TEMPLATE_SUFFIX}")):
        target = template_file.with_name(template_file.name[: -len(TEMPLATE_SUFFIX)])
        content = render_template(template_file.read_text(encoding="utf-8"), tokens)
        target.write_text(content, encoding="utf-8")
        template_file.unlink()
        rendered.append(target)
    return rendered
