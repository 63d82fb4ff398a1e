"""Swanky data models - re-exports all public model classes."""

from swanky.models.candidates import GROUPS, CopyCandidateSet, PathEntry
from swanky.models.config import (
    AccountData,
    ContractData,
    DeploymentData,
    NetworkInfo,
    NodeInfo,
    SwankyConfig,
)

__all__ = [
    "GROUPS",
    "AccountData",
    "ContractData",
    "CopyCandidateSet",
    "DeploymentData",
    "NetworkInfo",
    "NodeInfo",
    "PathEntry",
    "SwankyConfig",
]
