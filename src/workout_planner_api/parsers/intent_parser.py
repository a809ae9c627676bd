"""
Intent Parser

Turns a free-text workout request into requested muscle groups and a fitness
level using case-insensitive keyword matching.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from workout_planner_api.models import FitnessLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MuscleGroupRule:
    """Keyword rule for one requested-group flag."""
    flag: str       # attribute on WorkoutIntent
    group: str      # catalog group or alias key
    label: str      # used in plan titles
    keywords: Tuple[str, ...]


# Order matters: it is the order groups appear in titles and in the plan
MUSCLE_GROUP_RULES: Tuple[MuscleGroupRule, ...] = (
    MuscleGroupRule("is_abs", "abs", "Abs", ("abs", "core", "stomach")),
    MuscleGroupRule("is_lower_body", "lowerbody", "Lower Body", ("lower", "leg", "thigh")),
    MuscleGroupRule("is_upper_body", "upperbody", "Upper Body", ("upper", "arm")),
    MuscleGroupRule("is_back", "back", "Back", ("back", "lats")),
    MuscleGroupRule("is_shoulders", "shoulders", "Shoulders", ("shoulder", "delt")),
    MuscleGroupRule("is_chest", "chest", "Chest", ("chest", "pec")),
    MuscleGroupRule("is_glutes", "glutes", "Glutes", ("glute", "butt", "booty")),
    MuscleGroupRule("is_hamstrings", "hamstrings", "Hamstrings", ("hamstring", "ham")),
)

FULL_BODY_KEYWORDS: Tuple[str, ...] = ("full", "whole")

# Checked in priority order; first hit wins
FITNESS_LEVEL_KEYWORDS: Tuple[Tuple[str, FitnessLevel], ...] = (
    ("advanced", FitnessLevel.ADVANCED),
    ("intermediate", FitnessLevel.INTERMEDIATE),
)


@dataclass(frozen=True)
class WorkoutIntent:
    """Requested-group flags and fitness level parsed from a prompt."""
    is_abs: bool = False
    is_lower_body: bool = False
    is_upper_body: bool = False
    is_back: bool = False
    is_shoulders: bool = False
    is_chest: bool = False
    is_glutes: bool = False
    is_hamstrings: bool = False
    is_full_body: bool = False
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER

    @property
    def requested_groups(self) -> Tuple[MuscleGroupRule, ...]:
        """Rules whose flag is set, excluding the full-body flag."""
        return tuple(rule for rule in MUSCLE_GROUP_RULES if getattr(self, rule.flag))

    @property
    def has_specific_groups(self) -> bool:
        return bool(self.requested_groups)


def classify_fitness_level(text: str) -> FitnessLevel:
    """Resolve the fitness level, defaulting to beginner."""
    lowered = text.lower()
    for keyword, level in FITNESS_LEVEL_KEYWORDS:
        if keyword in lowered:
            return level
    return FitnessLevel.BEGINNER


def classify_intent(text: str) -> WorkoutIntent:
    """
    Parse a free-text request into a WorkoutIntent.

    Matching is plain substring search, so several flags may be set at once
    ("legs and abs" sets both is_lower_body and is_abs).

    Args:
        text: Raw user request

    Returns:
        WorkoutIntent with every matched flag set
    """
    lowered = text.lower()
    flags = {
        rule.flag: any(keyword in lowered for keyword in rule.keywords)
        for rule in MUSCLE_GROUP_RULES
    }
    flags["is_full_body"] = any(keyword in lowered for keyword in FULL_BODY_KEYWORDS)

    intent = WorkoutIntent(fitness_level=classify_fitness_level(text), **flags)
    logger.debug(
        "Classified intent: groups=%s full_body=%s level=%s",
        [rule.group for rule in intent.requested_groups],
        intent.is_full_body,
        intent.fitness_level.value,
    )
    return intent
