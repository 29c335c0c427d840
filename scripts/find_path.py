#!/usr/bin/env python3
"""
Find win paths between fighters without installing the package.

Usage:
    python scripts/find_path.py --start "Holly Holm" --target "Ronda Rousey"
    python scripts/find_path.py --start "Miesha Tate" --goats 5
"""

import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mma_math.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
