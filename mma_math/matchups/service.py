"""
Matchup queries by fighter name.

Resolves names through the fighter directory, searches the win graph,
and hydrates the resulting wins into display records.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mma_math.config import GOAT_PATHS_LIMIT
from mma_math.graph.pathfinder import WinPath
from mma_math.matchups.results import MatchupResult, PathStep

if TYPE_CHECKING:
    from mma_math.data.loader import FightData

logger = logging.getLogger(__name__)


class MatchupService:
    """
    Answers "how does fighter A beat fighter B" style questions.

    All queries are total: unknown names or unreachable fighters give a
    not-found MatchupResult (or an empty list), never an exception.
    """

    def __init__(self, fight_data: FightData) -> None:
        self._data = fight_data
        self._pathfinder = fight_data.pathfinder

    @property
    def fight_data(self) -> FightData:
        return self._data

    def fighter_names(self) -> list[str]:
        """Names available for autocomplete."""
        return self._data.directory.fighter_names()

    # =========================================================================
    # Single Path
    # =========================================================================

    def find_path(self, start_name: str, target_name: str) -> MatchupResult:
        """Find the shortest chain of wins between two fighters by name."""
        directory = self._data.directory
        start_id = directory.id_of(start_name)
        target_id = directory.id_of(target_name)

        if start_id is None:
            logger.info(f"Unknown fighter: '{start_name}'")
        if target_id is None:
            logger.info(f"Unknown fighter: '{target_name}'")
        if start_id is None or target_id is None:
            return MatchupResult.not_found(start_id, target_id)

        return self.find_path_by_id(start_id, target_id)

    def find_path_by_id(self, start_id: str, target_id: str) -> MatchupResult:
        """Find the shortest chain of wins between two fighter ids."""
        path = self._pathfinder.shortest_path(start_id, target_id)
        if path is None:
            logger.info(f"No path from {start_id} to {target_id}")
            return MatchupResult.not_found(start_id, target_id)
        return self._hydrate(start_id, target_id, path)

    # =========================================================================
    # GOAT Paths
    # =========================================================================

    def notable_matchups(
        self, fighter_name: str, limit: int = GOAT_PATHS_LIMIT
    ) -> list[MatchupResult]:
        """
        Find paths from a fighter to up to `limit` reachable GOATs.

        Results follow the GOAT table's order; unreachable GOATs are skipped.
        """
        start_id = self._data.directory.id_of(fighter_name)
        if start_id is None:
            logger.info(f"Unknown fighter: '{fighter_name}'")
            return []

        hits = self._pathfinder.shortest_paths_to_set(
            start_id, self._data.notable_ids, limit
        )
        logger.info(f"'{fighter_name}' has paths to {len(hits)} GOATs")
        return [self._hydrate(start_id, target_id, path) for target_id, path in hits]

    def notable_opponent_names(
        self, fighter_name: str, limit: int = GOAT_PATHS_LIMIT
    ) -> list[str]:
        """Names of the GOATs reachable from a fighter."""
        return self._data.directory.names_of(
            result.target_id for result in self.notable_matchups(fighter_name, limit)
        )

    def _hydrate(self, start_id: str, target_id: str, path: WinPath) -> MatchupResult:
        """Resolve names and display details for every fighter on a path."""
        directory = self._data.directory
        steps = tuple(
            PathStep(
                step_number=i,
                winner_id=win.winner_id,
                winner_name=directory.name_of(win.winner_id),
                loser_id=win.loser_id,
                loser_name=directory.name_of(win.loser_id),
                occurred_on=win.occurred_on,
                method=win.method,
            )
            for i, win in enumerate(path, start=1)
        )
        fighter_ids = [start_id] + [win.loser_id for win in path]
        return MatchupResult(
            start_id=start_id,
            target_id=target_id,
            found=True,
            steps=steps,
            fighters=tuple(directory.details_for_path(fighter_ids)),
        )
