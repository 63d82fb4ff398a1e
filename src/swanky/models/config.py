"""Project configuration model for swanky.

Captures swanky.config.json: node settings, dev accounts, network
endpoints, and the contracts registered in the workspace. Field names
are snake_case in Python and camelCase on disk.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from swanky.consts import (
    CONFIG_FILE_NAME,
    DEFAULT_ASTAR_NETWORK_URL,
    DEFAULT_NETWORK_URL,
    DEFAULT_SHIBUYA_NETWORK_URL,
    DEFAULT_SHIDEN_NETWORK_URL,
    DEV_ACCOUNTS,
    SWANKY_NODE_POLKADOT_PALLET_VERSIONS,
    SWANKY_NODE_SUPPORTED_INK,
)
from swanky.errors import ConfigError


class NodeInfo(BaseModel):
    """Local node binary and the runtime versions it supports."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    local_path: str = Field(default="", alias="localPath")
    polkadot_pallet_versions: str = Field(
        default=SWANKY_NODE_POLKADOT_PALLET_VERSIONS, alias="polkadotPalletVersions"
    )
    supported_ink: str = Field(default=SWANKY_NODE_SUPPORTED_INK, alias="supportedInk")


class AccountData(BaseModel):
    """A named account usable for deployments and calls."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    alias: str
    mnemonic: str
    is_dev: bool = Field(default=False, alias="isDev")
    address: str


class NetworkInfo(BaseModel):
    model_config = {"extra": "forbid"}

    url: str


class DeploymentData(BaseModel):
    """A single on-chain deployment of a contract."""

    model_config = {"extra": "allow", "populate_by_name": True}

    timestamp: int
    network_url: str = Field(alias="networkUrl")
    deployed_by: str = Field(alias="deployedBy")
    address: str


class ContractData(BaseModel):
    """A contract registered in the workspace."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    name: str
    module_name: str = Field(alias="moduleName")
    deployments: list[DeploymentData] = Field(default_factory=list)


def _default_networks() -> dict[str, NetworkInfo]:
    return {
        "local": NetworkInfo(url=DEFAULT_NETWORK_URL),
        "astar": NetworkInfo(url=DEFAULT_ASTAR_NETWORK_URL),
        "shiden": NetworkInfo(url=DEFAULT_SHIDEN_NETWORK_URL),
        "shibuya": NetworkInfo(url=DEFAULT_SHIBUYA_NETWORK_URL),
    }


class SwankyConfig(BaseModel):
    """Workspace descriptor persisted as swanky.config.json.

    Instances are treated as values: planning stages return updated
    copies via the ``with_*`` helpers instead of mutating one shared
    object.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    node: NodeInfo = Field(default_factory=NodeInfo)
    accounts: list[AccountData] = Field(default_factory=list)
    networks: dict[str, NetworkInfo] = Field(default_factory=_default_networks)
    contracts: dict[str, ContractData] = Field(default_factory=dict)

    def with_contract(self, name: str, module_name: str) -> SwankyConfig:
        """Return a copy with a contract entry added (or replaced) under name."""
        contracts = dict(self.contracts)
        contracts[name] = ContractData(name=name, module_name=module_name)
        return self.model_copy(update={"contracts": contracts})

    def with_node_path(self, local_path: str) -> SwankyConfig:
        """Return a copy pointing node.localPath at a downloaded binary."""
        node = self.node.model_copy(update={"local_path": local_path})
        return self.model_copy(update={"node": node})

    def with_dev_accounts(self) -> SwankyConfig:
        """Return a copy whose account list holds the well-known dev accounts."""
        accounts = [
            AccountData(alias=alias, mnemonic=mnemonic, is_dev=True, address=address)
            for alias, (mnemonic, address) in DEV_ACCOUNTS.items()
        ]
        return self.model_copy(update={"accounts": accounts})

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from start (default: cwd) looking for swanky.config.json.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        The directory containing swanky.config.json, or None if no
        ancestor has one.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / CONFIG_FILE_NAME).is_file():
            return candidate
    return None


def load_swanky_config(project_root: Path | None = None) -> SwankyConfig:
    """Load SwankyConfig from swanky.config.json.

    Args:
        project_root: Directory holding the config. If None, uses
            find_project_root() from the current directory.

    Returns:
        Validated SwankyConfig instance.

    Raises:
        ConfigError: If no config file exists or it is not valid.
    """
    if project_root is None:
        project_root = find_project_root()
    if project_root is None:
        raise ConfigError(
            f"No {CONFIG_FILE_NAME} found. Run this command inside a swanky project."
        )
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.is_file():
        raise ConfigError(f"No {CONFIG_FILE_NAME} found in {project_root}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        return SwankyConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid {CONFIG_FILE_NAME}: {exc}") from exc


def write_swanky_config(config: SwankyConfig, project_root: Path) -> Path:
    """Write config to project_root/swanky.config.json and return the path."""
    config_path = project_root / CONFIG_FILE_NAME
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_json(), encoding="utf-8")
    return config_path
