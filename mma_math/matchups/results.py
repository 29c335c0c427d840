"""
Display records for matchup queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from mma_math.fighters.directory import FighterDetail


@dataclass(frozen=True)
class PathStep:
    """
    One win along a path, with names resolved for display.

    Attributes:
        step_number: 1-indexed position in the path
        winner_id: Fighter who won
        winner_name: Display name of the winner
        loser_id: Fighter who lost
        loser_name: Display name of the loser
        occurred_on: Bout date, if known
        method: Finish method, if known
    """

    step_number: int
    winner_id: str
    winner_name: str
    loser_id: str
    loser_name: str
    occurred_on: date | None
    method: str | None

    def describe(self) -> str:
        """One-line summary, e.g. 'A def. B (KO/TKO, 2016-11-12)'."""
        extras = [part for part in (self.method, self._date_text()) if part]
        suffix = f" ({', '.join(extras)})" if extras else ""
        return f"{self.winner_name} def. {self.loser_name}{suffix}"

    def _date_text(self) -> str | None:
        return self.occurred_on.isoformat() if self.occurred_on else None


@dataclass(frozen=True)
class MatchupResult:
    """
    Outcome of a path query between two fighters.

    Attributes:
        start_id: Resolved starting fighter (None if the name was unknown)
        target_id: Resolved target fighter (None if the name was unknown)
        found: Whether a chain of wins exists
        steps: Wins from start to target, empty when not found
        fighters: Display records for start and every loser along the path
    """

    start_id: str | None
    target_id: str | None
    found: bool
    steps: tuple[PathStep, ...] = field(default_factory=tuple)
    fighters: tuple[FighterDetail, ...] = field(default_factory=tuple)

    @property
    def degrees(self) -> int | None:
        """Number of wins in the chain, or None if not found."""
        return len(self.steps) if self.found else None

    @property
    def fighter_ids(self) -> list[str]:
        """Start id followed by each loser id, empty when not found."""
        return [fighter.fighter_id for fighter in self.fighters]

    @classmethod
    def not_found(cls, start_id: str | None, target_id: str | None) -> MatchupResult:
        return cls(start_id=start_id, target_id=target_id, found=False)
