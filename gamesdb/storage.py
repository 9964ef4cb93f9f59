"""
Reading and writing catalog files.

- Input catalogs are strict JSON: {"games": [{"name": ..., "sources": [...]}, ...]}
- Alias tables are relaxed JSON (JSON5): comments, unquoted keys and
  trailing commas are accepted
- Output catalogs are written atomically, so a failed run never leaves a
  partial file behind
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import json5
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from gamesdb.errors import InputError, OutputError
from gamesdb.models import Game, GamesDb

_ALIASES = TypeAdapter(dict[str, str])

# Output catalogs are always pretty-printed with 2-space indentation
OUTPUT_INDENT = 2


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


def _read_text(path: Path, what: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {what} {path}: {e}") from e


def load_games_db(path: Path) -> GamesDb:
    """
    Load a catalog file.

    Args:
        path: Path to the strict JSON catalog

    Returns:
        Parsed GamesDb

    Raises:
        InputError: File unreadable, not valid JSON, or wrong shape
    """
    text = _read_text(path, "input file")

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InputError(f"Input file {path} is not valid JSON: {e}") from e

    try:
        db = GamesDb.model_validate(data)
    except ValidationError as e:
        raise InputError(f"Input file {path} is not a games catalog: {e}") from e

    logger.info(f"Loaded {len(db.games)} games from {path}")
    return db


def load_aliases(path: Path | None) -> dict[str, str]:
    """
    Load an alias table mapping raw names to canonical names.

    Args:
        path: Path to the JSON5 alias file, or None for no aliases

    Returns:
        Alias mapping (empty when path is None)

    Raises:
        InputError: File unreadable, not valid JSON5, or not a string mapping
    """
    if path is None:
        return {}

    text = _read_text(path, "alias file")

    try:
        data = json5.loads(text)
    except ValueError as e:
        raise InputError(f"Alias file {path} is not valid JSON5: {e}") from e

    try:
        aliases = _ALIASES.validate_python(data, strict=True)
    except ValidationError as e:
        raise InputError(f"Alias file {path} must map names to names: {e}") from e

    logger.info(f"Loaded {len(aliases)} aliases from {path}")
    return aliases


def _default_file_mode() -> int:
    """Permission bits a plain open() would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write_json(dest_path: Path, data: Any, indent: int | None = OUTPUT_INDENT) -> Path:
    """
    Write JSON data atomically - only replaces target file on success.

    1. Writes to a uniquely named temp file in the same directory
    2. Renames temp to final (atomic on same filesystem)

    Args:
        dest_path: Final destination path
        data: Data to serialize as JSON
        indent: JSON indent (None for compact)

    Returns:
        Path to written file
    """
    dest_path = Path(dest_path)

    # Temp file in same directory (for atomic rename)
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=dest_path.parent,
        prefix=f".{dest_path.name}.",
        suffix=".tmp",
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            json.dump(data, f, ensure_ascii=False, indent=indent)
        except Exception:
            f.close()
            temp_path.unlink()
            raise

    try:
        temp_path.chmod(_default_file_mode())
        temp_path.replace(dest_path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise

    return dest_path


def write_games_db(path: Path, games: list[Game]) -> Path:
    """
    Write a catalog file with 2-space indentation, overwriting any existing file.

    Raises:
        OutputError: The file could not be written
    """
    document = {"games": [game.model_dump(mode="json") for game in games]}

    try:
        written = atomic_write_json(path, document)
    except OSError as e:
        raise OutputError(f"Cannot write output file {path}: {e}") from e

    logger.info(f"Wrote {len(games)} games to {written}")
    return written
