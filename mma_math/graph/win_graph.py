"""
Immutable directed graph of recorded wins.

Each fighter id maps to the ordered wins it holds over other fighters.
Order matters: the path finder explores wins in stored order, so ties
between equally short paths are broken by insertion order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Win:
    """
    A single recorded win, i.e. a directed edge winner -> loser.

    Attributes:
        winner_id: Fighter who won
        loser_id: Fighter who lost
        occurred_on: Date of the bout (display only, may be unknown)
        method: How the bout ended, e.g. "KO/TKO" (display only)
    """

    winner_id: str
    loser_id: str
    occurred_on: date | None = None
    method: str | None = None


class WinGraph:
    """
    Read-only adjacency structure over fighter ids.

    Every id that appears as a winner or a loser is a key. Fighters
    without wins map to an empty tuple, so `exists()` is the only
    reachability precondition. Parallel wins between the same pair are
    kept as separate edges.
    """

    def __init__(self, adjacency: Mapping[str, Iterable[Win]]) -> None:
        wins_by_fighter: dict[str, tuple[Win, ...]] = {
            fighter_id: tuple(wins) for fighter_id, wins in adjacency.items()
        }

        # Losers that never won anything still need a key
        missing = set()
        for wins in list(wins_by_fighter.values()):
            for win in wins:
                if win.loser_id not in wins_by_fighter:
                    wins_by_fighter[win.loser_id] = ()
                    missing.add(win.loser_id)

        if missing:
            logger.debug(f"Added {len(missing):,} fighters with no recorded wins")

        self._wins = wins_by_fighter
        self._edge_count = sum(len(wins) for wins in wins_by_fighter.values())

    @classmethod
    def from_wins(cls, wins: Iterable[Win]) -> WinGraph:
        """Build a graph from a flat list of wins, grouping by winner in input order."""
        adjacency: dict[str, list[Win]] = {}
        for win in wins:
            adjacency.setdefault(win.winner_id, []).append(win)
        return cls(adjacency)

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[str, Iterable[Win]]) -> WinGraph:
        """Build a graph from an already grouped id -> wins mapping."""
        return cls(adjacency)

    # =========================================================================
    # Accessors
    # =========================================================================

    def outgoing_wins(self, fighter_id: str) -> tuple[Win, ...]:
        """Get the wins held by a fighter, or an empty tuple for unknown ids."""
        return self._wins.get(fighter_id, ())

    def exists(self, fighter_id: str) -> bool:
        """Check if the fighter is a key of the graph."""
        return fighter_id in self._wins

    def fighter_ids(self) -> list[str]:
        """All fighter ids, in insertion order."""
        return list(self._wins)

    @property
    def edge_count(self) -> int:
        """Total number of recorded wins."""
        return self._edge_count

    def __contains__(self, fighter_id: object) -> bool:
        return fighter_id in self._wins

    def __len__(self) -> int:
        return len(self._wins)

    def __iter__(self) -> Iterator[str]:
        return iter(self._wins)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fighters={len(self)}, wins={self.edge_count})"
