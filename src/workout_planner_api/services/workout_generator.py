"""Workout generation: inference first when enabled, rules engine otherwise."""
import json
import logging
import re
from typing import Any, Dict, Optional

from workout_planner_api.ai import InferenceGatewayClient
from workout_planner_api.config import settings
from workout_planner_api.models import (
    FitnessLevel,
    GeneratedWorkout,
    PlanType,
    WorkoutPlan,
)
from workout_planner_api.parsers.intent_parser import WorkoutIntent, classify_intent
from workout_planner_api.parsers.response_parser import reconcile_workout_plan
from workout_planner_api.services.exercise_selector import volume_for
from workout_planner_api.services.plan_assembler import PlanAssembler, build_work_break_plan


logger = logging.getLogger(__name__)

_DRAFT_SPLIT_PATTERN = re.compile(r"[.,\n]")


class WorkoutGenerator:
    """Produces a WorkoutPlan for a free-text request."""

    WORKOUT_SYSTEM_PROMPT = """You are a {role}.

CRITICAL: Your response must be ONLY this exact JSON structure:
{{
  "title": "string (workout title)",
  "exercises": [
    {{
      "name": "string (exercise name)",
      "description": "string (clear instructions)",
      "target_areas": ["string"],
      "is_work_friendly": {work_friendly},
{volume_fields}
    }}
  ]
}}

Here's an example response:
{example}

Convert this workout plan into the JSON format: {draft}"""

    _WORK_VOLUME_FIELDS = '      "duration_minutes": number (1-5)'
    _EXERCISE_VOLUME_FIELDS = (
        '      "sets": number,\n'
        '      "reps": number,\n'
        '      "equipment_needed": ["string"]'
    )
    _WORK_EXAMPLE = {
        "title": "Quick Office Stretches",
        "exercises": [
            {
                "name": "Desk Shoulder Rolls",
                "description": "Roll shoulders backward and forward 10 times each direction",
                "target_areas": ["shoulders"],
                "is_work_friendly": True,
                "duration_minutes": 2,
            }
        ],
    }
    _EXERCISE_EXAMPLE = {
        "title": "Full Body Workout",
        "exercises": [
            {
                "name": "Bodyweight Squats",
                "description": "Stand with feet shoulder-width apart, lower body until thighs are parallel to ground",
                "target_areas": ["legs"],
                "is_work_friendly": False,
                "sets": 3,
                "reps": 12,
                "equipment_needed": ["none"],
            }
        ],
    }

    def __init__(
        self,
        gateway: Optional[InferenceGatewayClient] = None,
        assembler: Optional[PlanAssembler] = None,
        use_inference: Optional[bool] = None,
    ):
        self.gateway = gateway
        self.assembler = assembler or PlanAssembler()
        self.use_inference = (
            use_inference if use_inference is not None else settings.USE_INFERENCE_FOR_WORKOUTS
        )

    @staticmethod
    def build_draft(prompt: str, plan_type: PlanType = "exercise") -> Dict[str, Any]:
        """
        Split a request into draft exercises for the generator to refine.

        Each '.', ',' or newline separated fragment becomes one exercise;
        'name: description' fragments are split on the first colon.
        """
        volume = volume_for(FitnessLevel.BEGINNER, plan_type)
        exercises = []
        for fragment in _DRAFT_SPLIT_PATTERN.split(prompt):
            fragment = fragment.strip()
            if not fragment:
                continue
            name, _, description = fragment.partition(":")
            exercises.append({
                "name": name.strip() or "Exercise",
                "description": description.strip() or fragment,
                "duration_minutes": volume.duration_minutes if plan_type == "work" else None,
                "sets": volume.sets,
                "reps": volume.reps,
                "target_areas": ["general"],
                "is_work_friendly": plan_type == "work",
            })

        return {
            "title": "Office Workout" if plan_type == "work" else "Exercise Routine",
            "exercises": exercises,
        }

    @classmethod
    def build_system_prompt(cls, draft: Dict[str, Any], plan_type: PlanType = "exercise") -> str:
        """System prompt describing the JSON the generator must return."""
        is_work = plan_type == "work"
        return cls.WORKOUT_SYSTEM_PROMPT.format(
            role="workplace wellness expert" if is_work else "professional fitness trainer",
            work_friendly=json.dumps(is_work),
            volume_fields=cls._WORK_VOLUME_FIELDS if is_work else cls._EXERCISE_VOLUME_FIELDS,
            example=json.dumps(cls._WORK_EXAMPLE if is_work else cls._EXERCISE_EXAMPLE, indent=2),
            draft=json.dumps(draft),
        )

    def build_rules_plan(self, intent: WorkoutIntent, plan_type: PlanType = "exercise") -> WorkoutPlan:
        """Deterministic plan for an intent; never raises."""
        if plan_type == "work":
            return build_work_break_plan()
        return self.assembler.assemble(intent)

    async def generate(
        self,
        prompt: str,
        plan_type: PlanType = "exercise",
        use_inference: Optional[bool] = None,
    ) -> GeneratedWorkout:
        """
        Generate a workout plan for a request.

        Args:
            prompt: Free-text request
            plan_type: "exercise" or "work"
            use_inference: Override for the inference feature flag

        Returns:
            GeneratedWorkout with a non-empty plan

        Raises:
            InferenceError: Terminal gateway failures propagate unchanged;
                unusable generated text does not raise
        """
        intent = classify_intent(prompt)
        wants_inference = self.use_inference if use_inference is None else use_inference

        if not wants_inference or self.gateway is None:
            return GeneratedWorkout(plan=self.build_rules_plan(intent, plan_type), source="rules")

        draft = self.build_draft(prompt, plan_type)
        response = await self.gateway.generate(
            json.dumps(draft),
            self.build_system_prompt(draft, plan_type),
        )

        plan = reconcile_workout_plan(response.content, plan_type, intent.fitness_level)
        if plan is not None:
            return GeneratedWorkout(plan=plan, source="inference", token_usage=response.token_usage)

        logger.warning("Generated workout unusable, falling back to rules engine")
        return GeneratedWorkout(
            plan=self.build_rules_plan(intent, plan_type),
            source="rules",
            token_usage=response.token_usage,
        )
