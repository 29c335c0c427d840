"""
Fighter directory module.

Provides id <-> name lookups and display enrichment (elo, picture).
"""

from mma_math.fighters.directory import FighterDetail, FighterDirectory

__all__ = ["FighterDetail", "FighterDirectory"]
