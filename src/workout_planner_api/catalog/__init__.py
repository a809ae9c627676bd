"""Static, read-only tables: the exercise catalog and the profession reference set."""
from .exercises import (
    EXERCISE_CATALOG,
    FULL_BODY_GROUPS,
    GROUP_ALIASES,
    WORK_BREAK_EXERCISES,
    resolve_group,
)
from .professions import PROFESSIONS, find_profession

__all__ = [
    "EXERCISE_CATALOG",
    "FULL_BODY_GROUPS",
    "GROUP_ALIASES",
    "WORK_BREAK_EXERCISES",
    "resolve_group",
    "PROFESSIONS",
    "find_profession",
]
