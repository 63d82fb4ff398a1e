"""Filesystem view of a contract registered in swanky.config.json."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from swanky.models.config import ContractData

ARTIFACT_SUFFIXES: tuple[str, ...] = (".json", ".contract")


@dataclass(frozen=True)
class Contract:
    name: str
    module_name: str
    project_root: Path

    @classmethod
    def from_record(cls, record: ContractData, project_root: Path) -> Contract:
        return cls(name=record.name, module_name=record.module_name, project_root=project_root)

    @property
    def contract_path(self) -> Path:
        return self.project_root / "contracts" / self.name

    @property
    def artifacts_path(self) -> Path:
        return self.project_root / "artifacts" / self.name

    @property
    def typed_contracts_path(self) -> Path:
        return self.project_root / "typedContracts" / self.name

    def path_exists(self) -> bool:
        return self.contract_path.is_dir()

    def missing_artifacts(self) -> list[Path]:
        """Return expected artifact files that are not on disk."""
        expected = [self.artifacts_path / f"{self.module_name}{suffix}" for suffix in ARTIFACT_SUFFIXES]
        return [path for path in expected if not path.is_file()]
