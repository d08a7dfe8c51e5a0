"""
Build a grouping request from student assessment rows.

Usage:
    make-group-input assessments.csv > request.json
    cat assessments.csv | make-group-input

Each CSV row becomes one student with its grade, last instructional
recommendation, three measure scores and three skill levels.
"""

import argparse
import sys
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from .config import (
    CLASSE_COL,
    STUDENT_COL,
    GRADE_COL,
    INST_REC_COL,
    GRADE_MAP,
    INST_REC_MAP,
    MEASURE_COLUMNS,
    SKILL_COLUMNS,
    LOG_LEVEL,
    LOG_LEVELS,
    LOG_PATH,
)
from .models import GroupRequest, Score, Skill, Student, to_json
from .utils import field, read_rows, setup_logger, to_int


def build_student(row: Sequence[str]) -> Student:
    """
    Map one assessment row to a student record.

    Unknown grade or recommendation codes are kept as None.
    """
    return Student(
        sid=to_int(field(row, STUDENT_COL)),
        classe_sid=to_int(field(row, CLASSE_COL)),
        grade_sid=GRADE_MAP.get(field(row, GRADE_COL)),
        last_support_rec_type_sid=INST_REC_MAP.get(field(row, INST_REC_COL)),
        scores=[
            Score(measure=measure_sid, score=to_int(field(row, col)))
            for measure_sid, col in MEASURE_COLUMNS
        ],
        skills=[
            Skill(
                sid=skill_sid,
                last_level=to_int(field(row, last_col)),
                best_level=to_int(field(row, best_col)),
            )
            for skill_sid, last_col, best_col in SKILL_COLUMNS
        ],
    )


def build_request(rows: Iterable[Sequence[str]]) -> GroupRequest:
    """Build the grouping request from assessment rows, keeping row order."""
    students: List[Student] = []
    for row in rows:
        student = build_student(row)
        if student.grade_sid is None or student.last_support_rec_type_sid is None:
            logger.debug(
                f"Student {student.sid}: unmapped grade {field(row, GRADE_COL)!r} "
                f"or recommendation {field(row, INST_REC_COL)!r}"
            )
        students.append(student)

    logger.info(f"Built request with {len(students)} students")
    return GroupRequest(students=students)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert student assessment CSV rows into a grouping request."
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
        request = build_request(read_rows(args.files))
        sys.stdout.write(to_json(request) + "\n")
    except OSError as e:
        logger.error(f"I/O failure: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
