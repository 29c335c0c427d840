#!/usr/bin/env python3
"""
Validate fight data files and the loaded win graph.

Usage:
    python scripts/validate_data.py
    python scripts/validate_data.py --data-dir ./data
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from mma_math.config import (  # noqa: E402 - must be after sys.path modification
    DATA_DIR,
    FIGHTER_PICS_FILE,
    ID_NAME_MAP_FILE,
    PEAK_ELO_FILE,
    wins_graph_path,
)
from mma_math.data import FightData, load_fight_data  # noqa: E402
from mma_math.matchups import MatchupService  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def check_data_files_exist(data_dir: Path) -> bool:
    """Check that all required data files exist."""
    print("\n=== Checking Data Files ===\n")

    files = {
        "wins graph": wins_graph_path(data_dir),
        ID_NAME_MAP_FILE: data_dir / ID_NAME_MAP_FILE,
        PEAK_ELO_FILE: data_dir / PEAK_ELO_FILE,
    }

    all_exist = True
    for name, path in files.items():
        exists = path.exists()
        size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
        status = f"✓ {name}: {size_mb:,.1f} MB" if exists else f"✗ {name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    pics = data_dir / FIGHTER_PICS_FILE
    print(f"✓ {FIGHTER_PICS_FILE}" if pics.exists() else f"⚠ {FIGHTER_PICS_FILE}: not found (optional)")

    return all_exist


def load_and_validate(data_dir: Path) -> FightData | None:
    """Load fight data and run validation checks."""
    print("\n=== Loading Fight Data ===\n")

    start_time = time.time()
    fight_data = load_fight_data(data_dir)
    print(f"\nLoad time: {time.time() - start_time:.2f} seconds")

    print("\n=== Data Statistics ===\n")
    for key, value in fight_data.stats().items():
        print(f"  {key}: {value:,}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in fight_data.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return fight_data if all_valid else None


def test_sample_queries(fight_data: FightData) -> bool:
    """Run a GOAT search from the first GOAT and a path query between two GOATs."""
    print("\n=== Sample Queries ===\n")

    if len(fight_data.notable_ids) < 2:
        print("  ⚠ Fewer than two GOATs, skipping sample queries")
        return True

    directory = fight_data.directory
    service = MatchupService(fight_data)
    first, second = fight_data.notable_ids[:2]

    # A fighter always reaches itself with zero wins
    result = service.find_path_by_id(first, first)
    if not result.found or result.degrees != 0:
        print(f"  ✗ Self path for {directory.name_of(first)} was not empty")
        return False
    print(f"  ✓ Self path for {directory.name_of(first)}")

    for start, target in ((first, second), (second, first)):
        result = service.find_path_by_id(start, target)
        names = f"{directory.name_of(start)} -> {directory.name_of(target)}"
        if result.found:
            print(f"  ✓ {names}: {result.degrees} wins")
        else:
            print(f"  ⚠ {names}: no path")

    goats = service.notable_opponent_names(directory.name_of(first), limit=5)
    print(f"  ✓ GOATs reachable from {directory.name_of(first)}: {', '.join(goats) or 'none'}")

    return True


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate fight data files")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Data directory")
    args = parser.parse_args()

    print("=" * 60)
    print("MMA Math Data Validation")
    print("=" * 60)

    if not check_data_files_exist(args.data_dir):
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        fight_data = load_and_validate(args.data_dir)
    except (OSError, ValueError) as e:
        print(f"\n✗ Error loading data: {e}")
        return 1

    if fight_data is None:
        print("\n✗ Validation checks failed.")
        return 1

    if not test_sample_queries(fight_data):
        print("\n✗ Sample query checks failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
