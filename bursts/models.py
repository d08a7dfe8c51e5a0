"""Request and response document models."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from .config import (
    MAX_STUDENTS_PER_GROUP,
    MAX_NB_OF_GROUPS,
    FORCE_UNDERPERF_STUDENTS_INTO_GROUPS,
)


class Score(BaseModel):
    """Score on one measure."""

    measure: int
    score: int


class Skill(BaseModel):
    """Last and best achieved level on one skill."""

    model_config = ConfigDict(populate_by_name=True)

    sid: int
    last_level: int = Field(..., alias="lastLevel")
    best_level: int = Field(..., alias="bestLevel")


class Student(BaseModel):
    """One student of the grouping request."""

    model_config = ConfigDict(populate_by_name=True)

    sid: int
    classe_sid: int = Field(..., alias="classeSid")
    grade_sid: Optional[int] = Field(None, alias="gradeSid")
    last_support_rec_type_sid: Optional[int] = Field(None, alias="lastSupportRecTypeSid")
    scores: List[Score]
    skills: List[Skill]


class GroupRequest(BaseModel):
    """Grouping request."""

    model_config = ConfigDict(populate_by_name=True)

    max_students_per_groups: int = Field(MAX_STUDENTS_PER_GROUP, alias="maxStudentsPerGroups")
    max_nb_of_groups: int = Field(MAX_NB_OF_GROUPS, alias="maxNbOfGroups")
    force_underperf_students_into_groups: bool = Field(
        FORCE_UNDERPERF_STUDENTS_INTO_GROUPS, alias="forceUnderperfStudentsIntoGroups"
    )
    students: List[Student] = Field(default_factory=list)


class Group(BaseModel):
    """One formed group, labelled with its majority class."""

    model_config = ConfigDict(populate_by_name=True)

    classe_sid: int = Field(..., alias="classeSid")
    student_sids: List[int] = Field(..., alias="studentSids")


class GroupResponse(BaseModel):
    """Grouping response."""

    groups: List[Group] = Field(default_factory=list)


def to_json(document: BaseModel) -> str:
    """Render a document the way the grouping service expects it."""
    return document.model_dump_json(by_alias=True, indent=2)
