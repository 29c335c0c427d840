"""
Loading of the static fight datasets into one long-lived context object.

Usage:
    from mma_math.data.loader import load_fight_data

    fight_data = load_fight_data()          # reads config.DATA_DIR
    fight_data.graph.outgoing_wins("f1")
    fight_data.directory.name_of("f1")
    fight_data.notable_ids                  # GOATs, in elo table order
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

import msgpack
from dateutil.parser import parse as parse_date

from mma_math.config import (
    DATA_DIR,
    FIGHTER_PICS_FILE,
    ID_NAME_MAP_FILE,
    PEAK_ELO_FILE,
    wins_graph_path,
)
from mma_math.fighters.directory import FighterDirectory
from mma_math.graph.pathfinder import PathFinder
from mma_math.graph.win_graph import Win, WinGraph

logger = logging.getLogger(__name__)

# Accepted spellings for win record fields, first match wins
WINNER_KEYS = ("from", "FighterId")
LOSER_KEYS = ("to", "OpponentId")
DATE_KEYS = ("occurredOn", "Date")
METHOD_KEYS = ("method", "Method")

# Distinct fill-ins for missing date parts, used to detect partial dates
FIRST_DATE_DEFAULT = datetime(1, 1, 1)
SECOND_DATE_DEFAULT = datetime(2, 2, 2)


@dataclass(frozen=True)
class FightData:
    """
    Immutable bundle of everything loaded from the static datasets.

    Built once per process and passed to whatever needs it.

    Attributes:
        graph: Win graph over fighter ids
        directory: Id <-> name lookups with elo and picture enrichment
        notable_ids: GOAT fighter ids in the elo table's key order
    """

    graph: WinGraph
    directory: FighterDirectory
    notable_ids: tuple[str, ...]

    @property
    def pathfinder(self) -> PathFinder:
        return PathFinder(self.graph)

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on loaded data."""
        return {
            "graph_loaded": len(self.graph) > 0,
            "names_loaded": len(self.directory) > 0,
            "notables_loaded": len(self.notable_ids) > 0,
            "all_graph_fighters_named": all(
                self.directory.has_fighter(fighter_id) for fighter_id in self.graph
            ),
            "all_notables_in_graph": all(
                self.graph.exists(fighter_id) for fighter_id in self.notable_ids
            ),
        }

    def stats(self) -> dict:
        """Get statistics about the loaded data."""
        return {
            "fighters_in_graph": len(self.graph),
            "total_wins": self.graph.edge_count,
            "named_fighters": len(self.directory),
            "notable_fighters": len(self.notable_ids),
        }


# =============================================================================
# File Readers
# =============================================================================


def read_data_file(path: Path) -> Any:
    """Read a JSON or msgpack file, chosen by extension."""
    if path.suffix == ".msgpack":
        with open(path, "rb") as f:
            return msgpack.load(f, raw=False, strict_map_key=False)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# Record Parsers
# =============================================================================


def _first(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def parse_fight_date(value: Any) -> date | None:
    """Parse a bout date. Missing, partial or unparseable dates become None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Parse against two different defaults; a partial date picks up the
    # default for its missing parts, so the two results disagree
    try:
        first = parse_date(str(value), default=FIRST_DATE_DEFAULT)
        second = parse_date(str(value), default=SECOND_DATE_DEFAULT)
    except (ValueError, OverflowError):
        logger.debug(f"Unparseable fight date: {value!r}")
        return None

    if first.date() != second.date():
        logger.debug(f"Incomplete fight date: {value!r}")
        return None
    return first.date()


def parse_win(record: Mapping[str, Any], winner_id: str | None = None) -> Win:
    """
    Build a Win from a raw record.

    Args:
        record: Raw win record (edge list or adjacency form)
        winner_id: Winner id when the record sits under an adjacency key

    Raises:
        ValueError: If the record has no winner or loser id
    """
    if not isinstance(record, Mapping):
        raise ValueError(f"Win record must be an object, got {type(record).__name__}")

    winner = winner_id if winner_id is not None else _first(record, WINNER_KEYS)
    loser = _first(record, LOSER_KEYS)
    if winner is None or loser is None:
        raise ValueError(f"Win record missing winner or loser id: {dict(record)!r}")

    method = _first(record, METHOD_KEYS)
    return Win(
        winner_id=str(winner),
        loser_id=str(loser),
        occurred_on=parse_fight_date(_first(record, DATE_KEYS)),
        method=str(method) if method is not None else None,
    )


def parse_wins_graph(raw: Any) -> WinGraph:
    """
    Build a WinGraph from either supported raw shape.

    Accepts the adjacency form {fighter_id: [win, ...]} or the flat
    edge list [{"from", "to", ...}, ...].

    Raises:
        ValueError: If the data is neither shape or a record is malformed
    """
    if isinstance(raw, Mapping):
        adjacency: dict[str, list[Win]] = {}
        for fighter_id, records in raw.items():
            if not isinstance(records, list):
                raise ValueError(f"Wins for fighter {fighter_id!r} must be a list")
            key = str(fighter_id)
            adjacency[key] = [parse_win(record, winner_id=key) for record in records]
        return WinGraph.from_adjacency(adjacency)

    if isinstance(raw, list):
        return WinGraph.from_wins(parse_win(record) for record in raw)

    raise ValueError(f"Wins graph must be an object or a list, got {type(raw).__name__}")


def parse_names(raw: Any) -> dict[str, str]:
    """Parse the id -> display name map. Null names are skipped."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"Id/name map must be an object, got {type(raw).__name__}")
    return {
        str(fighter_id): str(name) for fighter_id, name in raw.items() if name is not None
    }


def parse_ratings(raw: Any) -> dict[str, float]:
    """
    Parse the peak elo table, preserving key order.

    Values may be bare numbers or {"Name": ..., "Elo": ...} records.
    Records without an elo are kept (they still define a GOAT) but get
    no rating, so the directory falls back to its default.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Peak elo table must be an object, got {type(raw).__name__}")

    ratings: dict[str, float] = {}
    unrated: list[str] = []
    for fighter_id, value in raw.items():
        elo = value.get("Elo") if isinstance(value, Mapping) else value
        if isinstance(elo, (int, float)) and not isinstance(elo, bool):
            ratings[str(fighter_id)] = elo
        else:
            unrated.append(str(fighter_id))

    if unrated:
        logger.warning(f"{len(unrated):,} elo records have no numeric elo")
    return ratings


def parse_notable_ids(raw: Any) -> tuple[str, ...]:
    """GOAT ids are the keys of the peak elo table, in file order."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"Peak elo table must be an object, got {type(raw).__name__}")
    return tuple(str(fighter_id) for fighter_id in raw)


def parse_pictures(raw: Any) -> dict[str, str]:
    """Parse pictures as [{"Name", "PicURL"}, ...] or {name_or_id: url}."""
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return {str(key): str(url) for key, url in raw.items() if url}
    if isinstance(raw, list):
        pictures: dict[str, str] = {}
        for record in raw:
            if not isinstance(record, Mapping):
                continue
            name, url = record.get("Name"), record.get("PicURL")
            # Keep the first picture for a repeated name
            if name and url and name not in pictures:
                pictures[str(name)] = str(url)
        return pictures
    raise ValueError(f"Pictures must be an object or a list, got {type(raw).__name__}")


# =============================================================================
# Loader
# =============================================================================


def build_fight_data(
    wins_raw: Any,
    names_raw: Any,
    elo_raw: Any,
    pictures_raw: Any = None,
) -> FightData:
    """Build the FightData context from already decoded datasets."""
    elo_table = elo_raw if elo_raw is not None else {}
    graph = parse_wins_graph(wins_raw)
    directory = FighterDirectory(
        names=parse_names(names_raw),
        ratings=parse_ratings(elo_table),
        pictures=parse_pictures(pictures_raw),
    )
    return FightData(
        graph=graph,
        directory=directory,
        notable_ids=parse_notable_ids(elo_table),
    )


def load_fight_data(data_dir: Path = DATA_DIR) -> FightData:
    """
    Load all datasets from a data directory.

    The pictures file is optional; the rest are required.

    Raises:
        FileNotFoundError: If a required file is missing
        ValueError: If a file has the wrong shape
    """
    data_dir = Path(data_dir)
    logger.info(f"Loading fight data from {data_dir}...")

    graph_path = wins_graph_path(data_dir)
    logger.info(f"Loading wins graph from {graph_path}...")
    wins_raw = read_data_file(graph_path)

    names_path = data_dir / ID_NAME_MAP_FILE
    logger.info(f"Loading id->name map from {names_path}...")
    names_raw = read_data_file(names_path)

    elo_path = data_dir / PEAK_ELO_FILE
    logger.info(f"Loading peak elo records from {elo_path}...")
    elo_raw = read_data_file(elo_path)

    pictures_path = data_dir / FIGHTER_PICS_FILE
    pictures_raw = None
    if pictures_path.exists():
        logger.info(f"Loading fighter pictures from {pictures_path}...")
        pictures_raw = read_data_file(pictures_path)
    else:
        logger.info("No fighter pictures file, using placeholder pictures")

    try:
        fight_data = build_fight_data(wins_raw, names_raw, elo_raw, pictures_raw)
    except ValueError as e:
        raise ValueError(f"Invalid fight data in {data_dir}: {e}") from e

    stats = fight_data.stats()
    logger.info(
        f"Loaded {stats['fighters_in_graph']:,} fighters, {stats['total_wins']:,} wins, "
        f"{stats['notable_fighters']:,} GOATs"
    )

    for check, passed in fight_data.validate().items():
        if not passed:
            logger.warning(f"Fight data check failed: {check}")

    return fight_data
