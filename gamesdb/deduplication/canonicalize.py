"""Alias-based name canonicalization."""

from collections.abc import Mapping


def canonical_name(name: str, aliases: Mapping[str, str]) -> str:
    """Return the canonical form of a game name.

    Looks the name up once in the alias table; names without an alias are
    returned unchanged. Alias targets are not resolved again.

    Args:
        name: Raw game name
        aliases: Mapping of raw name to canonical name

    Returns:
        Canonical name
    """
    return aliases.get(name, name)
