"""
Data loading module.

Provides FightData, the context object holding the win graph, fighter
directory and GOAT list, and load_fight_data() to build it from files.

Usage:
    from mma_math.data import load_fight_data

    fight_data = load_fight_data()
    fight_data.directory.id_of("Jon Jones")
"""

from mma_math.data.loader import FightData, build_fight_data, load_fight_data

__all__ = ["FightData", "build_fight_data", "load_fight_data"]
