"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from mma_math.data import FightData, build_fight_data


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def wins_raw() -> dict:
    """
    Small adjacency-form wins graph.

    Holm beat Rousey, Rousey beat Tate (twice), Tate beat Holm.
    Nunes beat Rousey and Tate. Jones has no recorded fights here.
    """
    return {
        "holm": [
            {"Name": "Holly Holm", "Opponent": "Ronda Rousey", "OpponentId": "rousey",
             "Date": "Nov. 14, 2015", "Method": "KO/TKO"},
        ],
        "rousey": [
            {"OpponentId": "tate", "Date": "Mar. 2, 2013", "Method": "SUB"},
            {"OpponentId": "tate", "Date": "Dec. 28, 2013", "Method": "SUB"},
        ],
        "tate": [
            {"OpponentId": "holm", "Date": "Mar. 5, 2016", "Method": "SUB"},
        ],
        "nunes": [
            {"OpponentId": "tate", "Date": "Jul. 9, 2016", "Method": "SUB"},
            {"OpponentId": "rousey", "Date": "Dec. 30, 2016", "Method": "KO/TKO"},
        ],
        "jones": [],
    }


@pytest.fixture
def names_raw() -> dict:
    return {
        "holm": "Holly Holm",
        "rousey": "Ronda Rousey",
        "tate": "Miesha Tate",
        "nunes": "Amanda Nunes",
        "jones": "Jon Jones",
    }


@pytest.fixture
def elo_raw() -> dict:
    """GOAT table; key order is the GOAT order."""
    return {
        "jones": {"Name": "Jon Jones", "Elo": 1850.5},
        "nunes": {"Name": "Amanda Nunes", "Elo": 1790.0},
        "rousey": {"Name": "Ronda Rousey", "Elo": 1700.0},
        "holm": {"Name": "Holly Holm", "Elo": 1650.0},
    }


@pytest.fixture
def pictures_raw() -> list[dict]:
    return [
        {"Name": "Ronda Rousey", "PicURL": "https://example.com/rousey.png"},
        {"Name": "Amanda Nunes", "PicURL": "https://example.com/nunes.png"},
    ]


@pytest.fixture
def fight_data(wins_raw, names_raw, elo_raw, pictures_raw) -> FightData:
    """FightData built from the in-memory sample datasets."""
    return build_fight_data(wins_raw, names_raw, elo_raw, pictures_raw)
