"""
Catalog consolidation run.

Loads a games catalog and optional alias table, merges duplicate records,
optionally scans for near-duplicate names and writes the result. The output
file is only written after every other step has succeeded.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from loguru import logger

from gamesdb.deduplication import deduplicate, find_near_duplicates
from gamesdb.models import NearDuplicate
from gamesdb.storage import load_aliases, load_games_db, write_games_db


@dataclass
class MinifyOptions:
    """Explicit configuration for a run."""
    input_path: Path
    output_path: Path
    aliases_path: Path | None = None
    levenshtein: bool = False
    workers: int = 1
    progress_interval: int = 1000


@dataclass
class MinifyResult:
    """Result of a consolidation run."""
    output_path: Path
    records_read: int = 0
    records_written: int = 0
    records_merged: int = 0
    aliases_loaded: int = 0
    aliases_applied: int = 0
    near_duplicates: list[NearDuplicate] | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def duration_seconds(self) -> float | None:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None


def minify(options: MinifyOptions) -> MinifyResult:
    """
    Run the full consolidation pipeline.

    Args:
        options: Paths and scan settings for the run

    Returns:
        MinifyResult with counters and, if requested, the near-duplicate report

    Raises:
        InputError: Input or alias file could not be loaded
        OutputError: Result file could not be written
    """
    result = MinifyResult(output_path=Path(options.output_path), started_at=datetime.now())

    db = load_games_db(options.input_path)
    aliases = load_aliases(options.aliases_path)
    result.aliases_loaded = len(aliases)

    dedup = deduplicate(db.games, aliases)
    result.records_read = dedup.records_read
    result.records_merged = dedup.records_merged
    result.aliases_applied = dedup.aliases_applied

    if options.levenshtein:
        result.near_duplicates = find_near_duplicates(
            dedup.names,
            workers=options.workers,
            progress_interval=options.progress_interval,
        )

    write_games_db(options.output_path, dedup.games)
    result.records_written = len(dedup.games)
    result.completed_at = datetime.now()

    logger.info(f"Minify complete in {result.duration_seconds:.2f}s")
    return result
