"""
Graph module.

Provides the win graph and pathfinding over it:
- WinGraph: Immutable fighter id -> wins adjacency
- PathFinder: BFS shortest chains of wins
"""

from mma_math.graph.pathfinder import PathFinder, WinPath
from mma_math.graph.win_graph import Win, WinGraph

__all__ = [
    "PathFinder",
    "Win",
    "WinGraph",
    "WinPath",
]
