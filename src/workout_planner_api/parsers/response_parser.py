"""
Response Parser

Extracts and validates JSON embedded in generated text. Every public
`reconcile_*` function returns None instead of raising, so callers can switch
to their deterministic fallback.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from workout_planner_api.models import (
    FitnessLevel,
    PlanType,
    ProfessionAnalysis,
    WorkoutPlan,
)
from workout_planner_api.services.workout_sanitizer import PlanSchemaError, sanitize_plan_data

logger = logging.getLogger(__name__)

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?[ \t]*\n?|\n?```", re.IGNORECASE)
BOLD_PATTERN = re.compile(r"\*\*")


class ResponseParseError(ValueError):
    """No usable JSON object could be extracted from generated text."""


def clean_generated_text(content: str) -> str:
    """Remove Markdown code fences and bold markers."""
    cleaned = CODE_FENCE_PATTERN.sub("", content.strip())
    return BOLD_PATTERN.sub("", cleaned)


def extract_json_object(content: str) -> Dict[str, Any]:
    """
    Parse the span from the first '{' to the last '}' of cleaned text.

    Raises:
        ResponseParseError: If there is no such span, it is not valid JSON,
            or it does not decode to an object
    """
    cleaned = clean_generated_text(content)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end <= start:
        raise ResponseParseError("No JSON object found in generated text")

    try:
        data = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in generated text: {e.msg}") from e
    except RecursionError as e:
        raise ResponseParseError("Generated JSON is nested too deeply") from e

    if not isinstance(data, dict):
        raise ResponseParseError("Generated JSON is not an object")
    return data


def reconcile_workout_plan(
    content: str,
    expected_type: PlanType = "exercise",
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER,
) -> Optional[WorkoutPlan]:
    """
    Turn generated text into a validated WorkoutPlan.

    Args:
        content: Raw generated text
        expected_type: Plan type requested by the caller; always wins
        fitness_level: Level used to default missing sets/reps/duration

    Returns:
        WorkoutPlan, or None when the text cannot be used
    """
    try:
        data = extract_json_object(content)
        return WorkoutPlan(**sanitize_plan_data(data, fitness_level, expected_type))
    except ResponseParseError as e:
        logger.warning(f"Could not parse generated workout: {e}")
    except PlanSchemaError as e:
        logger.warning(f"Generated workout rejected: {e}")
    except ValidationError as e:
        logger.warning(f"Generated workout failed validation: {e.error_count()} errors")
    return None


def reconcile_profession_analysis(content: str) -> Optional[ProfessionAnalysis]:
    """Turn generated text into a validated ProfessionAnalysis, or None."""
    try:
        data = extract_json_object(content)
        return ProfessionAnalysis(**data)
    except ResponseParseError as e:
        logger.warning(f"Could not parse profession analysis: {e}")
    except ValidationError as e:
        logger.warning(f"Profession analysis failed validation: {e.error_count()} errors")
    return None
