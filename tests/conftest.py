# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for gamesdb tests."""

import json
import os
from pathlib import Path

import pytest
from loguru import logger

# Keep user environment out of test runs
os.environ.setdefault("GAMESDB_LOG_LEVEL", "WARNING")
os.environ.setdefault("GAMESDB_SCAN_WORKERS", "1")


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks added during a test (CliRunner streams close after invoke)."""
    yield
    logger.remove()


@pytest.fixture
def sample_games_data() -> dict:
    """Sample catalog document with one aliased duplicate."""
    return {
        "games": [
            {"name": "Super Mario Bros.", "sources": ["nes-list"]},
            {"name": "The Legend of Zelda", "sources": ["nes-list"]},
            {"name": "super mario bros", "sources": ["wiki"]},
            {"name": "Metroid", "sources": ["nes-list", "wiki"]},
            {"name": "Super Mario Bros.", "sources": ["famicom-list"]},
        ]
    }


@pytest.fixture
def sample_aliases_text() -> str:
    """Relaxed JSON alias table with a comment and unquoted key."""
    return """{
    // lowercase variant from the wiki dump
    "super mario bros": "Super Mario Bros.",
    Zelda: "The Legend of Zelda",
}
"""


@pytest.fixture
def games_file(tmp_path: Path, sample_games_data: dict) -> Path:
    path = tmp_path / "games.json"
    path.write_text(json.dumps(sample_games_data), encoding="utf-8")
    return path


@pytest.fixture
def aliases_file(tmp_path: Path, sample_aliases_text: str) -> Path:
    path = tmp_path / "aliases.json5"
    path.write_text(sample_aliases_text, encoding="utf-8")
    return path
