"""Randomised exercise selection from the catalog, bounded by fitness level."""
import logging
import math
import random
from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional, Sequence, Tuple

from workout_planner_api.catalog import EXERCISE_CATALOG, GROUP_ALIASES, resolve_group
from workout_planner_api.models import (
    Difficulty,
    ExerciseTemplate,
    FitnessLevel,
    PlanType,
    SelectedExercise,
)


logger = logging.getLogger(__name__)

EXERCISE_COUNT_BY_LEVEL: Mapping[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 4,
    FitnessLevel.INTERMEDIATE: 6,
    FitnessLevel.ADVANCED: 8,
}

# Known quirk: duration is the same for every level
DEFAULT_DURATION_MINUTES = 5


@dataclass(frozen=True)
class VolumePolicy:
    """Sets, reps and duration attached to an exercise."""
    sets: Optional[int]
    reps: Optional[int]
    duration_minutes: Optional[int]


def exercise_count(level: FitnessLevel) -> int:
    """Target number of exercises for a fitness level."""
    return EXERCISE_COUNT_BY_LEVEL.get(level, EXERCISE_COUNT_BY_LEVEL[FitnessLevel.BEGINNER])


def allowed_difficulties(level: FitnessLevel) -> FrozenSet[Difficulty]:
    """Template difficulties a user at `level` may be given."""
    if level == FitnessLevel.ADVANCED:
        return frozenset(Difficulty)
    return frozenset({Difficulty.BEGINNER, Difficulty.INTERMEDIATE})


def volume_for(level: FitnessLevel, plan_type: PlanType = "exercise") -> VolumePolicy:
    """Volume policy for a fitness level.

    Work-break exercises are timed only; everything else gets sets and reps
    (3x10 for beginners, 4x15 otherwise) plus the fixed duration.
    """
    if plan_type == "work":
        return VolumePolicy(sets=None, reps=None, duration_minutes=DEFAULT_DURATION_MINUTES)
    if level == FitnessLevel.BEGINNER:
        return VolumePolicy(sets=3, reps=10, duration_minutes=DEFAULT_DURATION_MINUTES)
    return VolumePolicy(sets=4, reps=15, duration_minutes=DEFAULT_DURATION_MINUTES)


class ExerciseSelector:
    """Draws non-repeating, difficulty-filtered samples from catalog groups."""

    def __init__(
        self,
        catalog: Mapping[str, Tuple[ExerciseTemplate, ...]] = EXERCISE_CATALOG,
        aliases: Mapping[str, Tuple[str, ...]] = GROUP_ALIASES,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.aliases = aliases
        self._rng = rng if rng is not None else random.Random()

    def draw(
        self,
        templates: Sequence[ExerciseTemplate],
        count: int,
        level: FitnessLevel,
    ) -> List[SelectedExercise]:
        """
        Sample up to `count` templates without replacement.

        Args:
            templates: Candidate templates from one catalog group
            count: Maximum number of exercises to return
            level: Fitness level driving the difficulty filter and volume

        Returns:
            Selected exercises; empty if nothing passes the filter
        """
        allowed = allowed_difficulties(level)
        pool = [template for template in templates if template.difficulty in allowed]
        self._rng.shuffle(pool)

        volume = volume_for(level)
        return [
            SelectedExercise.from_template(
                template,
                sets=volume.sets,
                reps=volume.reps,
                duration_minutes=volume.duration_minutes,
            )
            for template in pool[:max(count, 0)]
        ]

    def select_group(self, group: str, count: int, level: FitnessLevel) -> List[SelectedExercise]:
        """
        Select exercises for a requested group, expanding aliases.

        Aliased groups split `count` as ceil(count / n) per sub-group, so the
        total may exceed `count`. Sub-groups that yield nothing are skipped.
        """
        sub_groups = resolve_group(group, self.catalog, self.aliases)
        if not sub_groups:
            logger.warning(f"No catalog group for '{group}'")
            return []

        per_group = math.ceil(count / len(sub_groups)) if len(sub_groups) > 1 else count

        selected: List[SelectedExercise] = []
        for sub_group in sub_groups:
            templates = self.catalog.get(sub_group)
            if not templates:
                continue
            drawn = self.draw(templates, per_group, level)
            logger.debug("Selected %d exercises from %s", len(drawn), sub_group)
            selected.extend(drawn)
        return selected
