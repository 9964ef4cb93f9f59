"""Utility modules for the catalog tools."""

from gamesdb.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
