"""
Near-duplicate name detection.

For each catalog name, finds the closest *later* name by Levenshtein
distance and reports the pairs that are close enough to be worth a human
look. The search only ever looks forward, and the last two names are never
used as subjects; this window decides which pairs can be reported and is
kept as is.

The scan is advisory. It reads the name list and never changes the catalog.
"""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from loguru import logger
from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from gamesdb.models import NearDuplicate

# Pairs at or above this distance are not reported
MAX_REPORTED_DISTANCE = 5


def closest_name(name: str, candidates: Sequence[str]) -> tuple[str, int]:
    """Return the candidate with the smallest edit distance to ``name``.

    Ties go to the earliest candidate.

    Args:
        name: Name to match
        candidates: Non-empty sequence of names to search

    Returns:
        (closest candidate, distance)
    """
    match, distance, _index = process.extractOne(
        name,
        candidates,
        scorer=Levenshtein.distance,
        processor=None,
    )
    return match, int(distance)


def _scan_subject(names: Sequence[str], index: int) -> tuple[int, str, int]:
    neighbor, distance = closest_name(names[index], names[index + 1:])
    return index, neighbor, distance


def find_near_duplicates(
    names: Sequence[str],
    *,
    workers: int = 1,
    progress_interval: int = 1000,
) -> list[NearDuplicate]:
    """
    Find likely duplicate names missed by aliasing.

    Subjects are names[0] through names[k-3]; each is compared against every
    name after it. Pairs with distance below MAX_REPORTED_DISTANCE are
    returned sorted by distance, ties in subject order.

    Args:
        names: Deduplicated names in catalog order
        workers: Threads to spread subjects over (1 = sequential)
        progress_interval: Log progress every this many subjects

    Returns:
        Sorted list of NearDuplicate entries (empty when fewer than 3 names)
    """
    total = len(names)
    subjects = range(total - 2)
    if not subjects:
        return []

    logger.info(f"Calculating Levenshtein distances for {total} names...")

    # subject -> (neighbor, distance); subjects are unique after dedup
    neighbors: dict[str, tuple[str, int]] = {}

    if workers <= 1:
        for i in subjects:
            _, neighbor, distance = _scan_subject(names, i)
            neighbors[names[i]] = (neighbor, distance)
            if i % progress_interval == 0:
                logger.info(f"Progress: {i}/{total}")
    else:
        found: dict[int, tuple[str, int]] = {}
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_scan_subject, names, i) for i in subjects]
            for done, future in enumerate(as_completed(futures)):
                i, neighbor, distance = future.result()
                found[i] = (neighbor, distance)
                if done % progress_interval == 0:
                    logger.info(f"Progress: {done}/{total}")

        for i in subjects:
            neighbors[names[i]] = found[i]

    entries = [
        NearDuplicate(subject, neighbor, distance)
        for subject, (neighbor, distance) in neighbors.items()
        if distance < MAX_REPORTED_DISTANCE
    ]
    entries.sort(key=lambda entry: entry.distance)

    logger.info(f"Found {len(entries)} near-duplicate pairs")
    return entries


def format_report(entries: Sequence[NearDuplicate]) -> list[str]:
    """Render report entries as "<subject> -> <neighbor> = <distance>" lines."""
    return [str(entry) for entry in entries]
