"""Swanky command-line interface."""
