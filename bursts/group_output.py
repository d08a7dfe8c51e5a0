"""
Build a grouping response from group assignment rows.

Usage:
    make-group-output assignments.csv > response.json

Rows are gathered by their group id (column 15); rows without one are
ignored. Each group is labelled with the class most of its students belong
to.
"""

import argparse
import sys
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .config import CLASSE_COL, STUDENT_COL, GROUP_COL, LOG_LEVEL, LOG_LEVELS, LOG_PATH
from .models import Group, GroupResponse, to_json
from .utils import field, read_rows, setup_logger, to_int

# (classe sid, student sid)
Member = Tuple[int, int]


def collect_groups(rows: Iterable[Sequence[str]]) -> Dict[int, List[Member]]:
    """
    Gather members by group id, in first-seen group order and row order.

    Rows with a missing or empty group id are skipped.
    """
    groups: Dict[int, List[Member]] = {}
    skipped = 0
    for row in rows:
        group_sid = field(row, GROUP_COL)
        if not group_sid:
            skipped += 1
            continue
        member = (to_int(field(row, CLASSE_COL)), to_int(field(row, STUDENT_COL)))
        groups.setdefault(to_int(group_sid), []).append(member)

    if skipped:
        logger.debug(f"Skipped {skipped} rows without a group id")
    return groups


def label_group(members: Sequence[Member]) -> int:
    """Return the majority classe sid; ties go to the smallest sid."""
    counts = Counter(classe_sid for classe_sid, _ in members)
    return min(counts, key=lambda classe_sid: (-counts[classe_sid], classe_sid))


def build_response(rows: Iterable[Sequence[str]]) -> GroupResponse:
    groups = collect_groups(rows)
    response = GroupResponse(groups=[
        Group(
            classe_sid=label_group(members),
            student_sids=[student_sid for _, student_sid in members],
        )
        for members in groups.values()
    ])
    logger.info(f"Built response with {len(response.groups)} groups")
    return response


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert group assignment CSV rows into a grouping response."
    )
    parser.add_argument("files", nargs="*", help="Input CSV files (default: stdin)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL,
        help=f"Console log level (default: {LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    setup_logger(args.log_level, LOG_PATH)

    try:
        response = build_response(read_rows(args.files))
        sys.stdout.write(to_json(response) + "\n")
    except OSError as e:
        logger.error(f"I/O failure: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
