"""Project configuration management."""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any
from dotenv import load_dotenv

# ============ Paths ============
BASE_DIR = Path(__file__).parent.parent

# Load environment variables (prefer project .env)
load_dotenv(BASE_DIR / ".env")
load_dotenv()

# ============ Logging ============
# stdout carries the JSON document, so console logs default to warnings only
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_PATH = os.getenv("LOG_PATH", "")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# ============ Grouping request parameters ============
MAX_STUDENTS_PER_GROUP = 5
MAX_NB_OF_GROUPS = 3
FORCE_UNDERPERF_STUDENTS_INTO_GROUPS = False

# ============ Measures ============
PSF_MEASURE_SID = 3
NWF_MEASURE_SID = 4
ORF_MEASURE_SID = 5

# ============ Skills ============
PHONOLOGICAL_AWARENESS_SID = 1
LETTER_SOUNDS_SID = 2
WORD_BLENDS_SID = 3
REGULAR_WORDS_SID = 4
IRREGULAR_WORDS_SID = 5
LETTER_COMBINATIONS_SID = 6
ADVANCED_PHONICS_SID = 7
READING_FLUENCY_SID = 8

SKILL_SIDS = MappingProxyType({
    "phonological_awareness": PHONOLOGICAL_AWARENESS_SID,
    "letter_sounds": LETTER_SOUNDS_SID,
    "word_blends": WORD_BLENDS_SID,
    "regular_words": REGULAR_WORDS_SID,
    "irregular_words": IRREGULAR_WORDS_SID,
    "letter_combinations": LETTER_COMBINATIONS_SID,
    "advanced_phonics": ADVANCED_PHONICS_SID,
    "reading_fluency": READING_FLUENCY_SID,
})

# ============ Code tables ============
GRADE_MAP = MappingProxyType({"K": 2, "1": 3, "2": 4, "3": 5})
INST_REC_MAP = MappingProxyType({"r": 1, "y": 2, "g": 3})

# ============ CSV layout (0-indexed columns) ============
CLASSE_COL = 1
STUDENT_COL = 3
GRADE_COL = 4
INST_REC_COL = 5
GROUP_COL = 15

# (measure sid, score column)
MEASURE_COLUMNS = (
    (PSF_MEASURE_SID, 12),
    (NWF_MEASURE_SID, 13),
    (ORF_MEASURE_SID, 14),
)

# (skill sid, last level column, best level column)
SKILL_COLUMNS = (
    (PHONOLOGICAL_AWARENESS_SID, 6, 7),
    (LETTER_SOUNDS_SID, 8, 9),
    (WORD_BLENDS_SID, 10, 11),
)


# ============ Configuration helper ============
class Settings:
    """Configuration helper class."""

    @staticmethod
    def to_dict() -> Dict[str, Any]:
        """Export all configuration values as a dictionary."""
        return {
            # Logging
            "log_level": LOG_LEVEL,
            "log_path": LOG_PATH,
            # Request
            "max_students_per_group": MAX_STUDENTS_PER_GROUP,
            "max_nb_of_groups": MAX_NB_OF_GROUPS,
            "force_underperf_students_into_groups": FORCE_UNDERPERF_STUDENTS_INTO_GROUPS,
            # Tables
            "grade_map": dict(GRADE_MAP),
            "inst_rec_map": dict(INST_REC_MAP),
            "measures": [sid for sid, _ in MEASURE_COLUMNS],
            "skills": dict(SKILL_SIDS),
        }
