"""API routes for workout planning and profession analysis."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from workout_planner_api.ai import (
    AuthMissingError,
    InferenceError,
    InferenceGatewayClient,
    InferenceNetworkError,
    RateLimitedError,
)
from workout_planner_api.auth import StaticCredentialProvider, get_credential_provider
from workout_planner_api.catalog import PROFESSIONS, find_profession
from workout_planner_api.config import settings
from workout_planner_api.models import (
    GeneratedWorkout,
    InferenceResponse,
    PlanType,
    ProfessionAnalysisResult,
    ProfessionProfile,
    WorkoutPlan,
)
from workout_planner_api.services.coaching_service import CoachingService, UserStats
from workout_planner_api.services.plan_assembler import build_work_break_plan
from workout_planner_api.services.profession_analyzer import (
    ProfessionAnalyzer,
    build_profession_feedback,
)
from workout_planner_api.services.workout_generator import WorkoutGenerator
from workout_planner_api.services.workout_store import WorkoutStore, WorkoutStoreUnavailable

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class GenerateWorkoutRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    type: PlanType = "exercise"
    use_inference: Optional[bool] = None
    # When set, the generated plan is stored for this user
    user_id: Optional[str] = None


class AnalyzeProfessionRequest(BaseModel):
    profession: str
    save: bool = False


class ProfessionFeedback(BaseModel):
    profession: str
    feedback: str


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_gateway(
    credential_provider: StaticCredentialProvider = Depends(get_credential_provider),
) -> Optional[InferenceGatewayClient]:
    """Gateway over the caller's credential, or None when no endpoint is configured."""
    if not settings.INFERENCE_FUNCTION_URL:
        return None
    return InferenceGatewayClient(credential_provider)


def get_workout_store() -> WorkoutStore:
    return WorkoutStore()


def _inference_http_exception(error: InferenceError) -> HTTPException:
    """Map a terminal gateway failure onto an HTTP error."""
    if isinstance(error, AuthMissingError):
        return HTTPException(status_code=401, detail=str(error))
    if isinstance(error, RateLimitedError):
        return HTTPException(status_code=429, detail=str(error))
    if isinstance(error, InferenceNetworkError):
        return HTTPException(status_code=503, detail=str(error))
    # InferenceHTTPError, InvalidResponseFormatError
    return HTTPException(status_code=502, detail=str(error))


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    return {
        "status": "ok",
        "environment": settings.ENVIRONMENT,
        "inference_configured": bool(settings.INFERENCE_FUNCTION_URL),
    }


# ---------------------------------------------------------------------------
# Workouts
# ---------------------------------------------------------------------------


@router.post("/workouts/generate", response_model=GeneratedWorkout)
async def generate_workout(
    payload: GenerateWorkoutRequest,
    gateway: Optional[InferenceGatewayClient] = Depends(get_gateway),
    store: WorkoutStore = Depends(get_workout_store),
):
    """Generate a plan for a free-text request; optionally store it."""
    generator = WorkoutGenerator(gateway=gateway)
    try:
        result = await generator.generate(
            payload.prompt,
            plan_type=payload.type,
            use_inference=payload.use_inference,
        )
    except InferenceError as e:
        logger.error(f"Workout generation failed: {e}")
        raise _inference_http_exception(e) from e

    if payload.user_id:
        try:
            result.workout_id = str(store.save_workout(result.plan, payload.user_id))
        except WorkoutStoreUnavailable as e:
            raise HTTPException(status_code=503, detail=str(e)) from e
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Failed to save workout: {e}") from e

    return result


@router.post("/workouts/work-break", response_model=WorkoutPlan)
def work_break_workout():
    return build_work_break_plan()


# ---------------------------------------------------------------------------
# Professions
# ---------------------------------------------------------------------------


@router.get("/professions", response_model=List[ProfessionProfile])
def list_professions():
    return list(PROFESSIONS)


@router.post("/professions/analyze", response_model=ProfessionAnalysisResult)
async def analyze_profession(
    payload: AnalyzeProfessionRequest,
    gateway: Optional[InferenceGatewayClient] = Depends(get_gateway),
    store: WorkoutStore = Depends(get_workout_store),
):
    """Classify a profession; custom profiles can be stored."""
    result = await ProfessionAnalyzer(gateway=gateway).analyze(payload.profession)

    if payload.save and result.source == "inference":
        try:
            store.save_profession(result.profile)
        except WorkoutStoreUnavailable as e:
            raise HTTPException(status_code=503, detail=str(e)) from e
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Failed to save profession: {e}") from e

    return result


@router.get("/professions/{name}/feedback", response_model=ProfessionFeedback)
def profession_feedback(name: str):
    profile = find_profession(name)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Unknown profession: {name}")
    return ProfessionFeedback(profession=profile.name, feedback=build_profession_feedback(profile))


# ---------------------------------------------------------------------------
# Coaching
# ---------------------------------------------------------------------------


@router.get("/coach/tip", response_model=InferenceResponse)
async def coach_tip(gateway: Optional[InferenceGatewayClient] = Depends(get_gateway)):
    return await CoachingService(gateway).motivational_message()


@router.get("/coach/recommendation", response_model=InferenceResponse)
async def coach_recommendation(gateway: Optional[InferenceGatewayClient] = Depends(get_gateway)):
    return await CoachingService(gateway).workout_recommendation()


@router.post("/coach/progress", response_model=InferenceResponse)
async def coach_progress(
    stats: UserStats,
    gateway: Optional[InferenceGatewayClient] = Depends(get_gateway),
):
    return await CoachingService(gateway).analyze_progress(stats)
