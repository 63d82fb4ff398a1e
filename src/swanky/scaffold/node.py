"""Download of the swanky-node release binary."""

from __future__ import annotations

import platform
import stat
import tarfile
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from swanky.consts import (
    SWANKY_NODE_DOWNLOAD_URLS,
    SWANKY_NODE_POLKADOT_PALLET_VERSIONS,
    SWANKY_NODE_SUPPORTED_INK,
    SWANKY_NODE_VERSION,
)
from swanky.errors import InputError, UnknownError
from swanky.status import Spinner

NODE_BINARY_NAME = "swanky-node"


@dataclass(frozen=True)
class NodeRelease:
    version: str = SWANKY_NODE_VERSION
    polkadot_pallet_versions: str = SWANKY_NODE_POLKADOT_PALLET_VERSIONS
    supported_ink: str = SWANKY_NODE_SUPPORTED_INK
    download_urls: dict[str, str] = field(default_factory=lambda: dict(SWANKY_NODE_DOWNLOAD_URLS))

    def url_for(self, system: str | None = None) -> str:
        system = system or platform.system()
        try:
            return self.download_urls[system]
        except KeyError:
            raise InputError(f"swanky-node is not available for {system}") from None


def _download(url: str, destination: Path, spinner: Spinner, client: httpx.Client) -> None:
    with client.stream("GET", url, timeout=60, follow_redirects=True) as response:
        if response.status_code != 200:
            raise UnknownError(f"Download failed with {response.status_code}: {url}")
        total_size = int(response.headers.get("content-length", 0))
        downloaded = 0
        with destination.open("wb") as handle:
            for chunk in response.iter_bytes(chunk_size=8192):
                handle.write(chunk)
                downloaded += len(chunk)
                if total_size:
                    spinner.update(f"{downloaded * 100 // total_size}%")


def download_node(
    project_path: Path,
    release: NodeRelease,
    spinner: Spinner,
    client: httpx.Client | None = None,
) -> str:
    """Download and unpack swanky-node into project_path.

    Returns:
        Absolute path of the executable, for node.localPath.
    """
    url = release.url_for()
    archive_path = project_path / url.rsplit("/", 1)[-1]
    own_client = client is None
    client = client or httpx.Client()
    try:
        try:
            _download(url, archive_path, spinner, client)
        finally:
            if own_client:
                client.close()
        with tarfile.open(archive_path, "r:gz") as archive:
            archive.extractall(project_path, filter="data")
    except httpx.HTTPError as exc:
        raise UnknownError(f"Could not download {url}: {exc}") from exc
    except tarfile.TarError as exc:
        raise UnknownError(f"Could not unpack {archive_path.name}") from exc
    finally:
        archive_path.unlink(missing_ok=True)

    binary = project_path / NODE_BINARY_NAME
    if not binary.is_file():
        raise UnknownError(f"{NODE_BINARY_NAME} not found in downloaded archive")
    binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(binary.resolve())
