"""
Breadth-first search over the win graph.

Finds the shortest chain of wins from one fighter to another, and the
shortest chains from one fighter to each member of a target set.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from mma_math.graph.win_graph import Win, WinGraph

logger = logging.getLogger(__name__)

WinPath = tuple[Win, ...]


class PathFinder:
    """
    Unweighted shortest-path search on a WinGraph.

    Queries never mutate the graph and allocate their own queue and
    visited set, so one finder can be shared by concurrent callers.
    """

    def __init__(self, graph: WinGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> WinGraph:
        return self._graph

    def shortest_path(self, start_id: str, target_id: str) -> WinPath | None:
        """
        Find the shortest chain of wins from start to target.

        Wins are explored in stored order, so among equally short chains
        the result is always the same for the same data.

        Returns:
            Tuple of wins from start to target (empty if start == target),
            or None if either id is unknown or target is unreachable
        """
        if not self._graph.exists(start_id) or not self._graph.exists(target_id):
            return None

        # Ids are marked visited when enqueued, not when expanded
        queue: deque[tuple[str, WinPath]] = deque([(start_id, ())])
        visited = {start_id}

        while queue:
            fighter_id, path = queue.popleft()

            if fighter_id == target_id:
                logger.debug(f"Path {start_id} -> {target_id}: {len(path)} wins")
                return path

            for win in self._graph.outgoing_wins(fighter_id):
                if win.loser_id in visited:
                    continue
                visited.add(win.loser_id)
                queue.append((win.loser_id, path + (win,)))

        logger.debug(f"No path {start_id} -> {target_id}")
        return None

    def shortest_path_ids(self, start_id: str, target_id: str) -> list[str] | None:
        """
        Same search as shortest_path(), returned as fighter ids.

        Returns:
            List of ids starting with start_id and ending with target_id,
            or None if no path exists
        """
        path = self.shortest_path(start_id, target_id)
        if path is None:
            return None
        return [start_id] + [win.loser_id for win in path]

    def shortest_paths_to_set(
        self,
        start_id: str,
        target_ids: Iterable[str],
        max_results: int,
    ) -> list[tuple[str, WinPath]]:
        """
        Find shortest paths from one fighter to members of a target set.

        Targets are tried in iteration order with an independent search
        each. Unreachable targets are skipped. Stops after max_results hits.

        Returns:
            List of (target_id, path) pairs in target iteration order
        """
        results: list[tuple[str, WinPath]] = []
        if max_results <= 0 or not self._graph.exists(start_id):
            return results

        for target_id in target_ids:
            path = self.shortest_path(start_id, target_id)
            if path is not None:
                results.append((target_id, path))
                if len(results) >= max_results:
                    break

        logger.debug(f"Found {len(results)} target paths from {start_id}")
        return results
