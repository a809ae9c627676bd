"""Persistence of generated plans and custom profession profiles in Supabase."""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from workout_planner_api.config import settings
from workout_planner_api.models import ProfessionProfile, WorkoutPlan


logger = logging.getLogger(__name__)


class WorkoutStoreUnavailable(RuntimeError):
    """Supabase credentials are not configured."""


def exercise_rows(workout_id: Any, plan: WorkoutPlan) -> List[Dict[str, Any]]:
    """Rows for `workout_exercises`, restricted to the columns that table has."""
    return [
        {
            "workout_id": workout_id,
            "name": exercise.name,
            "description": exercise.description,
            "sets": exercise.sets,
            "reps": exercise.reps,
            "duration_minutes": exercise.duration_minutes,
            "target_areas": list(exercise.target_areas),
            "equipment_needed": list(exercise.equipment_needed),
            "is_work_friendly": exercise.is_work_friendly,
            "completed": False,
        }
        for exercise in plan.exercises
    ]


def profession_row(profile: ProfessionProfile) -> Dict[str, Any]:
    return {
        "name": profile.name,
        "category": profile.category,
        "physical_demands": list(profile.physical_demands),
        "workplace_environment": profile.workplace_environment,
        "common_issues": [issue.model_dump() for issue in profile.common_issues],
        "recommended_exercises": [
            {
                **exercise.model_dump(),
                "target_areas": list(exercise.target_areas),
                "focus_areas": list(exercise.focus_areas),
            }
            for exercise in profile.recommended_exercises
        ],
    }


class WorkoutStore:
    """Thin wrapper over the `workouts`, `workout_exercises` and `professions` tables."""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
                logger.warning("Supabase credentials not configured")
                raise WorkoutStoreUnavailable("Supabase credentials not configured")
            self._client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        return self._client

    def save_workout(self, plan: WorkoutPlan, user_id: str) -> Any:
        """
        Insert a plan and its exercises.

        Args:
            plan: Plan to store
            user_id: Owner of the workout

        Returns:
            The new workout id
        """
        try:
            result = self.client.table("workouts").insert({
                "user_id": user_id,
                "title": plan.title,
                "type": plan.type,
                "completed": False,
            }).execute()
            if not result.data:
                raise RuntimeError("No workout created")
            workout_id = result.data[0]["id"]

            self.client.table("workout_exercises").insert(
                exercise_rows(workout_id, plan)
            ).execute()
        except WorkoutStoreUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to save workout for user {user_id}: {e}")
            raise

        logger.info(f"Saved workout {workout_id} with {len(plan.exercises)} exercises")
        return workout_id

    def save_profession(self, profile: ProfessionProfile) -> None:
        """Insert a custom profession profile."""
        try:
            self.client.table("professions").insert(profession_row(profile)).execute()
        except WorkoutStoreUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to save profession '{profile.name}': {e}")
            raise
