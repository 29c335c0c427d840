"""
Matchups module.

Provides name-based path queries and their display records:
- MatchupService: Resolves names, runs searches, hydrates results
- MatchupResult: Complete outcome of one query
- PathStep: A single win along a path
"""

from mma_math.matchups.results import MatchupResult, PathStep
from mma_math.matchups.service import MatchupService

__all__ = [
    "MatchupResult",
    "MatchupService",
    "PathStep",
]
