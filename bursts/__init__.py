"""Bursts grouping converters."""
from .config import Settings
from .group_input import build_request, build_student
from .group_output import build_response, collect_groups, label_group
from .models import Group, GroupRequest, GroupResponse, Score, Skill, Student

__version__ = "1.0.0"
__all__ = [
    "Settings",
    "build_request",
    "build_student",
    "build_response",
    "collect_groups",
    "label_group",
    "Group",
    "GroupRequest",
    "GroupResponse",
    "Score",
    "Skill",
    "Student",
]
