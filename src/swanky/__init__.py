"""Swanky - scaffolding and lifecycle CLI for ink! smart-contract workspaces."""

__version__ = "0.1.0"
