"""Data models for workout plans and profession profiles."""
from enum import Enum
from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


PlanType = Literal["work", "exercise"]
WorkplaceEnvironment = Literal["sedentary", "active", "very active"]
Severity = Literal["low", "medium", "high"]


class FitnessLevel(str, Enum):
    """Tier controlling difficulty filtering and volume."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Catalog templates are tagged on the same scale as the user's level
Difficulty = FitnessLevel


class ExerciseTemplate(BaseModel):
    """A catalog entry. Immutable."""
    name: str
    description: str
    target_areas: Tuple[str, ...] = ()
    work_friendly: bool = False
    difficulty: Difficulty = Difficulty.BEGINNER

    class Config:
        frozen = True


class PlanExercise(BaseModel):
    """A single exercise inside a workout plan."""
    name: str
    description: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_minutes: Optional[int] = None
    target_areas: List[str] = Field(default_factory=list)
    is_work_friendly: bool = False
    difficulty: Optional[Difficulty] = None
    equipment_needed: List[str] = Field(default_factory=list)

    class Config:
        extra = "ignore"  # Generators add fields like 'reason' or 'frequency'


class SelectedExercise(PlanExercise):
    """A catalog template with volume attached at selection time."""
    difficulty: Difficulty

    @classmethod
    def from_template(
        cls,
        template: ExerciseTemplate,
        sets: Optional[int],
        reps: Optional[int],
        duration_minutes: Optional[int],
    ) -> "SelectedExercise":
        return cls(
            name=template.name,
            description=template.description,
            sets=sets,
            reps=reps,
            duration_minutes=duration_minutes,
            target_areas=list(template.target_areas),
            is_work_friendly=template.work_friendly,
            difficulty=template.difficulty,
        )


class WorkoutPlan(BaseModel):
    """A complete, non-empty workout plan."""
    title: str
    type: PlanType = "exercise"
    exercises: List[PlanExercise] = Field(..., min_length=1)


class CommonIssue(BaseModel):
    issue: str
    severity: Severity

    class Config:
        frozen = True


class RecommendedExercise(BaseModel):
    name: str
    description: str
    duration: str
    frequency: str
    target_areas: Tuple[str, ...] = ()
    focus_areas: Tuple[str, ...] = ()

    class Config:
        frozen = True


class ProfessionProfile(BaseModel):
    """Workplace risk profile for a profession."""
    name: str
    category: str
    physical_demands: Tuple[str, ...]
    workplace_environment: WorkplaceEnvironment
    common_issues: Tuple[CommonIssue, ...] = ()
    recommended_exercises: Tuple[RecommendedExercise, ...] = ()

    class Config:
        frozen = True


def _non_empty_strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        raise ValueError("expected a list of strings")
    cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    if not cleaned:
        raise ValueError("expected at least one non-empty string")
    return cleaned


def _non_empty_string(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("expected a non-empty string")
    return value.strip()


class ProfessionCharacteristics(BaseModel):
    physical_demands: List[str]
    workplace: List[str]
    movements: List[str]

    @field_validator("physical_demands", "workplace", "movements", mode="before")
    @classmethod
    def check_lists(cls, value: Any) -> List[str]:
        return _non_empty_strings(value)


class ExerciseRecommendations(BaseModel):
    types: List[str]
    frequency: str
    focus_areas: List[str]

    @field_validator("types", "focus_areas", mode="before")
    @classmethod
    def check_lists(cls, value: Any) -> List[str]:
        return _non_empty_strings(value)

    @field_validator("frequency", mode="before")
    @classmethod
    def check_frequency(cls, value: Any) -> str:
        return _non_empty_string(value)


class ProfessionAnalysis(BaseModel):
    """Structured analysis of a profession that is not in the reference set."""
    category: str
    characteristics: ProfessionCharacteristics
    health_risks: List[str]
    exercise_recommendations: ExerciseRecommendations

    class Config:
        extra = "ignore"

    @field_validator("category", mode="before")
    @classmethod
    def check_category(cls, value: Any) -> str:
        return _non_empty_string(value)

    @field_validator("health_risks", mode="before")
    @classmethod
    def check_risks(cls, value: Any) -> List[str]:
        return _non_empty_strings(value)


class ProfessionAnalysisResult(BaseModel):
    """Outcome of analyzing a profession name."""
    source: Literal["reference", "inference", "fallback"]
    profile: ProfessionProfile
    analysis: Optional[ProfessionAnalysis] = None


class InferenceRequest(BaseModel):
    prompt: str
    system_prompt: Optional[str] = None

    def to_payload(self) -> dict:
        """Wire body for the inference function."""
        payload = {"prompt": self.prompt}
        if self.system_prompt is not None:
            payload["systemPrompt"] = self.system_prompt
        return payload


class InferenceResponse(BaseModel):
    content: str
    token_usage: Optional[int] = None


class GeneratedWorkout(BaseModel):
    """A plan together with how it was produced."""
    plan: WorkoutPlan
    source: Literal["inference", "rules"]
    token_usage: Optional[int] = None
    workout_id: Optional[str] = None
