"""
Command-line wrapper for bursts.group_input.

Usage:
    python make_group_input.py rows.csv > request.json
"""
from pathlib import Path
import sys

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bursts.group_input import main


if __name__ == "__main__":
    sys.exit(main())
