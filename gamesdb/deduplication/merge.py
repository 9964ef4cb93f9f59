"""
Merge-by-name deduplication of catalog records.

Records are canonicalized through the alias table, then every record whose
canonical name was already seen has its sources appended to the first
record with that name. Output keeps first-seen order.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from loguru import logger

from gamesdb.deduplication.canonicalize import canonical_name
from gamesdb.models import Game


@dataclass
class DeduplicationResult:
    """Result of a deduplication pass."""
    games: list[Game] = field(default_factory=list)
    records_read: int = 0
    records_merged: int = 0
    aliases_applied: int = 0

    @property
    def names(self) -> list[str]:
        return [game.name for game in self.games]


def deduplicate(
    games: Iterable[Game],
    aliases: Mapping[str, str] | None = None,
) -> DeduplicationResult:
    """
    Collapse records sharing a canonical name into one record.

    The first record seen for a canonical name becomes its representative;
    later records only contribute their sources, appended in encounter
    order. Input records are not modified.

    Args:
        games: Records in catalog order
        aliases: Optional mapping of raw name to canonical name

    Returns:
        DeduplicationResult with unique records in first-seen order
    """
    aliases = aliases or {}
    result = DeduplicationResult()
    seen: dict[str, Game] = {}

    for game in games:
        result.records_read += 1

        name = canonical_name(game.name, aliases)
        if name != game.name:
            result.aliases_applied += 1
            logger.debug(f"Alias: {game.name!r} -> {name!r}")

        existing = seen.get(name)
        if existing is not None:
            existing.sources.extend(game.sources)
            result.records_merged += 1
            continue

        representative = game.model_copy(deep=True)
        representative.name = name
        seen[name] = representative
        result.games.append(representative)

    logger.info(
        f"Deduplicated {result.records_read} records into {len(result.games)} "
        f"({result.records_merged} merged, {result.aliases_applied} aliased)"
    )
    return result
