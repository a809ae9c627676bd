"""Short coaching messages with canned fallbacks."""
import json
import logging
from typing import Optional

from pydantic import BaseModel

from workout_planner_api.ai import InferenceError, InferenceGatewayClient
from workout_planner_api.models import InferenceResponse


logger = logging.getLogger(__name__)

MOTIVATION_PROMPT = "Give a short, motivating workplace wellness tip for today (max 30 words)."
RECOMMENDATION_PROMPT = "Suggest a quick office-friendly exercise (max 30 words)."

FALLBACK_MOTIVATION = "Take a 2-minute stretch break every hour to stay energized!"
FALLBACK_RECOMMENDATION = "Try 10 desk push-ups to strengthen your arms and core."
FALLBACK_PROGRESS = "Keep tracking your progress and staying consistent!"


class UserStats(BaseModel):
    """Progress figures sent for analysis."""
    totalWorkouts: int
    totalMinutes: int
    currentStreak: int
    completionRate: Optional[float] = None


def build_progress_prompt(stats: UserStats) -> str:
    payload = json.dumps(stats.model_dump(exclude_none=True))
    return (
        f"Analyze this fitness progress data and provide insights: {payload}. "
        "Focus on trends and actionable recommendations."
    )


class CoachingService:
    """Wraps the gateway for one-line coaching content. Never raises."""

    def __init__(self, gateway: Optional[InferenceGatewayClient] = None):
        self.gateway = gateway

    async def _ask(self, prompt: str, fallback: str) -> InferenceResponse:
        if self.gateway is None:
            return InferenceResponse(content=fallback, token_usage=0)
        try:
            return await self.gateway.generate(prompt)
        except InferenceError as e:
            logger.warning(f"Coaching request failed, using fallback: {e}")
            return InferenceResponse(content=fallback, token_usage=0)

    async def motivational_message(self) -> InferenceResponse:
        return await self._ask(MOTIVATION_PROMPT, FALLBACK_MOTIVATION)

    async def workout_recommendation(self) -> InferenceResponse:
        return await self._ask(RECOMMENDATION_PROMPT, FALLBACK_RECOMMENDATION)

    async def analyze_progress(self, stats: UserStats) -> InferenceResponse:
        return await self._ask(build_progress_prompt(stats), FALLBACK_PROGRESS)
