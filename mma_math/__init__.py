"""
MMA Math.

Finds chains of wins connecting two fighters ("A beat B, who beat C...")
and the shortest chains from a fighter to a fixed set of all-time greats.
"""

__version__ = "0.1.0"
