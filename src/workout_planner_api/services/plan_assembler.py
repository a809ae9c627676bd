"""Deterministic plan assembly: the fallback terminus of every generation path."""
import logging
from typing import List, Optional, Sequence

from workout_planner_api.catalog import FULL_BODY_GROUPS, WORK_BREAK_EXERCISES
from workout_planner_api.models import (
    ExerciseTemplate,
    FitnessLevel,
    PlanExercise,
    SelectedExercise,
    WorkoutPlan,
)
from workout_planner_api.parsers.intent_parser import WorkoutIntent, classify_intent
from workout_planner_api.services.exercise_selector import (
    ExerciseSelector,
    exercise_count,
    volume_for,
)


logger = logging.getLogger(__name__)

FULL_BODY_TITLE = "Full Body Workout"
WORK_BREAK_TITLE = "Work Break Exercises"

# Only used when a custom catalog cannot fill a full body session
_LAST_RESORT_TEMPLATE = ExerciseTemplate(
    name="Bodyweight Squats",
    description="Stand with feet shoulder-width apart, lower body until thighs are parallel to ground",
    target_areas=("legs",),
    work_friendly=True,
)


def build_title(intent: WorkoutIntent) -> str:
    """'Lower Body & Abs Workout' style title, or the full body title."""
    groups = intent.requested_groups
    if not groups:
        return FULL_BODY_TITLE
    return " & ".join(rule.label for rule in groups) + " Workout"


def build_work_break_plan() -> WorkoutPlan:
    """Fixed at-work session; needs no selection."""
    volume = volume_for(FitnessLevel.BEGINNER, plan_type="work")
    exercises = [
        SelectedExercise.from_template(
            template,
            sets=volume.sets,
            reps=volume.reps,
            duration_minutes=volume.duration_minutes,
        )
        for template in WORK_BREAK_EXERCISES
    ]
    return WorkoutPlan(title=WORK_BREAK_TITLE, type="work", exercises=exercises)


class PlanAssembler:
    """Builds exercise plans from classified intents using the selector."""

    def __init__(self, selector: Optional[ExerciseSelector] = None):
        self.selector = selector or ExerciseSelector()

    def select_exercises(self, intent: WorkoutIntent) -> List[SelectedExercise]:
        """Draw exercises for every requested group, in rule order."""
        count = exercise_count(intent.fitness_level)
        exercises: List[SelectedExercise] = []
        for rule in intent.requested_groups:
            exercises.extend(
                self.selector.select_group(rule.group, count, intent.fitness_level)
            )
        return exercises

    def assemble(
        self,
        intent: WorkoutIntent,
        exercises: Optional[Sequence[PlanExercise]] = None,
    ) -> WorkoutPlan:
        """
        Compose an exercise plan for an intent.

        Args:
            intent: Classified request
            exercises: Pre-selected exercises; drawn from the catalog when omitted

        Returns:
            A non-empty WorkoutPlan. Requests with no recognised group, or whose
            selection came back empty, get the full body composition.
        """
        if exercises is None:
            exercises = self.select_exercises(intent) if intent.has_specific_groups else []

        if not exercises:
            if intent.has_specific_groups:
                logger.warning(
                    "Selection for %s produced no exercises, using full body plan",
                    [rule.group for rule in intent.requested_groups],
                )
            return self.assemble_full_body(intent.fitness_level)

        logger.info("Assembled plan with %d exercises", len(exercises))
        return WorkoutPlan(title=build_title(intent), type="exercise", exercises=list(exercises))

    def assemble_full_body(self, level: FitnessLevel) -> WorkoutPlan:
        """Full body plan over the canonical groups."""
        per_group = max(1, exercise_count(level) // len(FULL_BODY_GROUPS))

        exercises: List[PlanExercise] = []
        for group in FULL_BODY_GROUPS:
            exercises.extend(self.selector.select_group(group, per_group, level))

        if not exercises:
            logger.error("Catalog produced no full body exercises, using last resort exercise")
            volume = volume_for(level)
            exercises.append(
                SelectedExercise.from_template(
                    _LAST_RESORT_TEMPLATE,
                    sets=volume.sets,
                    reps=volume.reps,
                    duration_minutes=volume.duration_minutes,
                )
            )

        logger.info("Assembled full body plan with %d exercises", len(exercises))
        return WorkoutPlan(title=FULL_BODY_TITLE, type="exercise", exercises=exercises)

    def generate(self, prompt: str) -> WorkoutPlan:
        """Classify a prompt and assemble its plan."""
        return self.assemble(classify_intent(prompt))
