"""Utility helpers."""
import csv
import fileinput
import os
import re
import sys
from typing import Iterator, List, Optional, Sequence

from loguru import logger

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def setup_logger(log_level: str = "WARNING", log_path: Optional[str] = None):
    """
    Configure logging.

    Args:
        log_level: Console log level.
        log_path: Directory for log files; no file sink when empty.

    Returns:
        logger instance
    """
    # Remove default handler
    logger.remove()

    # Console output goes to stderr; stdout is the document channel
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=log_level,
        colorize=True
    )

    if log_path:
        os.makedirs(log_path, exist_ok=True)
        logger.add(
            f"{log_path}/bursts.log",
            rotation="100 MB",      # Rotate at 100MB
            retention="10 days",    # Keep 10 days
            compression="zip",      # Compress old logs
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )

    return logger


def to_int(value: Optional[str]) -> int:
    """
    Coerce text to an integer the lenient way.

    Leading whitespace and sign are accepted, digits are read up to the first
    non-digit and anything after is ignored. Text without a leading integer,
    and missing values, become 0.

    Args:
        value: Raw field text

    Returns:
        Parsed integer
    """
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0


def field(row: Sequence[str], index: int) -> Optional[str]:
    """Return the field at ``index`` or None when the row is too short."""
    return row[index] if index < len(row) else None


def parse_line(line: str) -> List[str]:
    """Parse one line of text as a single CSV record."""
    return next(csv.reader([line]), [])


def read_rows(files: Sequence[str] = ()) -> Iterator[List[str]]:
    """
    Yield CSV rows from the given files, or stdin when none are given.

    Files are read in order as one stream, ``-`` meaning stdin. Blank lines
    are skipped. The underlying files are closed when iteration ends, also
    on errors.

    Args:
        files: Input paths

    Yields:
        Parsed rows
    """
    with fileinput.FileInput(files=files or ("-",), encoding="utf-8") as lines:
        for line in lines:
            row = parse_line(line)
            if not row:
                continue
            yield row
