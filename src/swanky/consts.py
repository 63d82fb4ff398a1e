"""Default endpoints, dev accounts, and the supported swanky-node release."""

from __future__ import annotations

DEFAULT_NETWORK_URL = "ws://127.0.0.1:9944"
DEFAULT_ASTAR_NETWORK_URL = "wss://rpc.astar.network"
DEFAULT_SHIDEN_NETWORK_URL = "wss://rpc.shiden.astar.network"
DEFAULT_SHIBUYA_NETWORK_URL = "wss://rpc.shibuya.astar.network"

CONFIG_FILE_NAME = "swanky.config.json"

# Well-known sr25519 dev accounts (SS58 prefix 42).
DEV_ACCOUNTS: dict[str, tuple[str, str]] = {
    "alice": ("//Alice", "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"),
    "bob": ("//Bob", "5FHneW46xGXgs5mUiveU4sbTyGBzmstUspZC92UhjJM694ty"),
}

SWANKY_NODE_VERSION = "1.6.0"
SWANKY_NODE_POLKADOT_PALLET_VERSIONS = "polkadot-v0.9.39"
SWANKY_NODE_SUPPORTED_INK = "v4.2.0"

_RELEASE_BASE = (
    "https://github.com/AstarNetwork/swanky-node/releases/download/"
    f"v{SWANKY_NODE_VERSION}"
)

# platform.system() -> release archive url
SWANKY_NODE_DOWNLOAD_URLS: dict[str, str] = {
    "Darwin": f"{_RELEASE_BASE}/swanky-node-v{SWANKY_NODE_VERSION}-macOS-universal.tar.gz",
    "Linux": f"{_RELEASE_BASE}/swanky-node-v{SWANKY_NODE_VERSION}-ubuntu-x86_64.tar.gz",
}

# Directories never offered when asking for a path inside a project.
EXCLUDED_PATH_PARTS: frozenset[str] = frozenset({"node_modules", ".git", "target"})
