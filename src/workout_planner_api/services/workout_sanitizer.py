"""Normalisation of generated workout data before model validation.

Generators return numbers as strings ("10", "8-12"), leave optional fields
out, or emit half-filled exercises. This module turns such a payload into a
dict that `WorkoutPlan` accepts, or rejects it.
"""

import logging
from typing import Any, Dict, List, Optional

from workout_planner_api.models import FitnessLevel, PlanType
from workout_planner_api.services.exercise_selector import volume_for
from workout_planner_api.utils import to_int, upper_from_range

logger = logging.getLogger(__name__)

DEFAULT_TARGET_AREAS = ["general"]


class PlanSchemaError(ValueError):
    """Generated data is missing a required plan field."""


def _coerce_count(value: Any) -> Optional[int]:
    """Positive int from 12, "12", 12.0 or "8-12" (upper bound); else None."""
    number = to_int(value)
    if number is None and isinstance(value, str):
        number = upper_from_range(value)
    if number is None or number <= 0:
        return None
    return number


def _string_list(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, str) and value.strip():
        return [value.strip()]
    if isinstance(value, list):
        cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        if cleaned:
            return cleaned
    return list(default)


def _required_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def sanitize_exercise(
    exercise: Any,
    fitness_level: FitnessLevel,
    plan_type: PlanType,
) -> Optional[Dict[str, Any]]:
    """Normalise one generated exercise, or return None if it lacks a name or description."""
    if not isinstance(exercise, dict):
        return None

    name = _required_text(exercise.get("name"))
    description = _required_text(exercise.get("description"))
    if not name or not description:
        return None

    volume = volume_for(fitness_level, plan_type)
    return {
        "name": name,
        "description": description,
        "sets": _coerce_count(exercise.get("sets")) or volume.sets,
        "reps": _coerce_count(exercise.get("reps")) or volume.reps,
        "duration_minutes": _coerce_count(exercise.get("duration_minutes")) or volume.duration_minutes,
        "target_areas": _string_list(exercise.get("target_areas"), DEFAULT_TARGET_AREAS),
        "is_work_friendly": plan_type == "work",
        "equipment_needed": _string_list(exercise.get("equipment_needed"), []),
    }


def sanitize_plan_data(
    plan_data: Dict[str, Any],
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER,
    plan_type: PlanType = "exercise",
) -> Dict[str, Any]:
    """
    Sanitize generated plan data.

    Fixes:
    1. Strips the title; a missing or blank title is rejected
    2. Requires `exercises` to be a non-empty list
    3. Drops exercises without a name or description
    4. Fills missing sets/reps/duration from the fitness level policy
    5. Pins the plan type to the caller's type, ignoring any generated claim

    Args:
        plan_data: Raw plan dict parsed from generated text
        fitness_level: Level used for volume defaults
        plan_type: The type the caller asked for

    Returns:
        Dict ready for WorkoutPlan validation

    Raises:
        PlanSchemaError: If the plan is unusable
    """
    title = _required_text(plan_data.get("title"))
    if not title:
        raise PlanSchemaError("Generated plan has no title")

    raw_exercises = plan_data.get("exercises")
    if not isinstance(raw_exercises, list) or not raw_exercises:
        raise PlanSchemaError("Generated plan has no exercises")

    exercises = []
    for index, raw in enumerate(raw_exercises):
        sanitized = sanitize_exercise(raw, fitness_level, plan_type)
        if sanitized is None:
            logger.warning("Dropping generated exercise %d: missing name or description", index)
            continue
        exercises.append(sanitized)

    if not exercises:
        raise PlanSchemaError("Generated plan has no valid exercises")

    return {"title": title, "type": plan_type, "exercises": exercises}
