"""
MMA Math CLI - find the chain of wins that "proves" one fighter beats another.

Usage:
    mma-math --start "Holly Holm" --target "Ronda Rousey"
    mma-math --start "Miesha Tate" --goats
    mma-math --start "Miesha Tate" --goats 5 --data-dir ./data
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env before config reads MMA_MATH_DATA_DIR and LOG_LEVEL
load_dotenv()

from mma_math.config import DATA_DIR, GOAT_PATHS_LIMIT, LOG_LEVEL  # noqa: E402
from mma_math.data import load_fight_data  # noqa: E402
from mma_math.matchups import MatchupResult, MatchupService  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find win paths between MMA fighters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Starting fighter name",
    )
    # Either a single path or a GOAT listing, never both
    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument(
        "--target",
        type=str,
        default=None,
        help="Target fighter name",
    )
    query.add_argument(
        "--goats",
        type=int,
        nargs="?",
        const=GOAT_PATHS_LIMIT,
        default=None,
        metavar="N",
        help=f"List up to N GOATs reachable from --start (default N: {GOAT_PATHS_LIMIT})",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory containing the fight datasets (default: from config)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_result(result: MatchupResult) -> None:
    """Print a found path, one win per line."""
    print(f"\nPath ({result.degrees} wins):")
    for step in result.steps:
        print(f"  {step.step_number}. {step.describe()}")

    print("\nFighters:")
    for fighter in result.fighters:
        print(f"  {fighter.name} (peak elo {fighter.elo:.0f})")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        fight_data = load_fight_data(args.data_dir or DATA_DIR)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    service = MatchupService(fight_data)

    if args.goats is not None:
        results = service.notable_matchups(args.start, limit=args.goats)
        if not results:
            print(f"No GOATs reachable from '{args.start}'")
            return 1

        print(f"\nGOATs reachable from '{args.start}':")
        for result in results:
            target = fight_data.directory.name_of(result.target_id)
            print(f"  {target} ({result.degrees} wins)")
        return 0

    result = service.find_path(args.start, args.target)
    if not result.found:
        print(f"No path from '{args.start}' to '{args.target}'")
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
