"""Pallanguzhi rules engine and game-tree opponent."""

__version__ = "0.1.0"
