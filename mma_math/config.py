"""
Configuration constants for the MMA Math project.

All paths, defaults, and tunable parameters are defined here.
Paths can be redirected through environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of mma_math/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains wins graph, id->name map, elo records, pictures)
DATA_DIR = Path(os.environ.get("MMA_MATH_DATA_DIR", PROJECT_ROOT / "data"))

# Data file names, resolved against a data directory at load time
WINS_GRAPH_FILE = "fighter_wins_graph.json"
WINS_GRAPH_MSGPACK_FILE = "fighter_wins_graph.msgpack"
ID_NAME_MAP_FILE = "fighter_id_name_map.json"
PEAK_ELO_FILE = "fighter_peak_elo_records.json"
FIGHTER_PICS_FILE = "fighter_pics.json"

# =============================================================================
# Fighter Directory Defaults
# =============================================================================

# Display name for ids missing from the id->name map
UNKNOWN_FIGHTER_NAME = "NA"

# Elo assumed for fighters without a peak elo record
DEFAULT_ELO = 1000

# Headshot shown when a fighter has no picture
PLACEHOLDER_PIC_URL = (
    "https://dmxg5wxfqgb4u.cloudfront.net/styles/teaser/s3/image/fighter_images/"
    "ComingSoon/comingsoon_headshot_odopod.png"
    "?VersionId=6Lx8ImOpYf0wBYQKs_FGYIkuSIfTN0f0&itok=pYDOjN8k"
)

# =============================================================================
# Search Configuration
# =============================================================================

# Maximum number of GOATs listed for a single fighter
GOAT_PATHS_LIMIT = 20

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# =============================================================================
# Validation Helpers
# =============================================================================


def wins_graph_path(data_dir: Path = DATA_DIR) -> Path:
    """Return the wins graph file, preferring JSON over msgpack."""
    json_path = data_dir / WINS_GRAPH_FILE
    if json_path.exists():
        return json_path
    msgpack_path = data_dir / WINS_GRAPH_MSGPACK_FILE
    if msgpack_path.exists():
        return msgpack_path
    return json_path


def validate_data_files(data_dir: Path = DATA_DIR) -> dict[str, bool]:
    """Check which required data files exist."""
    return {
        "wins_graph": wins_graph_path(data_dir).exists(),
        "id_name_map": (data_dir / ID_NAME_MAP_FILE).exists(),
        "peak_elo": (data_dir / PEAK_ELO_FILE).exists(),
    }


def get_missing_data_files(data_dir: Path = DATA_DIR) -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files(data_dir)
    return [name for name, exists in status.items() if not exists]
