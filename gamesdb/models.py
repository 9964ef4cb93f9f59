"""
Data models for the games catalog.

Game and GamesDb validate the structural shape of catalog files. Keys other
than ``name`` and ``sources`` are kept on the record and written back out.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Game(BaseModel):
    """A single catalog record."""

    model_config = ConfigDict(extra="allow")

    name: str
    sources: list[str] = Field(default_factory=list)


class GamesDb(BaseModel):
    """A catalog document: an ordered list of games."""

    model_config = ConfigDict(extra="allow")

    games: list[Game] = Field(default_factory=list)

    def names(self) -> list[str]:
        """Game names in catalog order."""
        return [game.name for game in self.games]


@dataclass(frozen=True)
class NearDuplicate:
    """A name and its closest later name in the catalog."""
    subject: str
    neighbor: str
    distance: int

    def __str__(self) -> str:
        return f"{self.subject} -> {self.neighbor} = {self.distance}"
