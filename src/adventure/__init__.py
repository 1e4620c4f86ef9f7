"""Legends of the Rift: a turn-based maze adventure."""

__version__ = "0.1.0"
