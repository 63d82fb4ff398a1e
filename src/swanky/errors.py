"""Error types raised by swanky commands.

All errors derive from SwankyError so the CLI layer can turn them into
a one-line message and exit code 1. Underlying causes are kept via
exception chaining (``raise ... from cause``).
"""

from __future__ import annotations

from pathlib import Path


class SwankyError(Exception):
    """Base class for expected, user-facing swanky failures."""


class InputError(SwankyError):
    """Raised when a user-supplied path or value is invalid, empty, or missing."""


class ConfigError(SwankyError):
    """Raised when swanky.config.json is missing, invalid, or lacks a named entry."""


class FileError(SwankyError):
    """Raised when an expected file or build artifact does not exist."""


class UnknownError(SwankyError):
    """Wraps an unexpected underlying exception.

    The original exception is available as ``__cause__`` when raised
    with ``raise UnknownError(...) from exc``.
    """


class ManifestParseError(SwankyError):
    """Raised when a Cargo.toml or package.json cannot be parsed.

    Attributes:
        path: The manifest file that failed to parse.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}: {message}")
