"""Profession analysis: reference set first, inference second, sentinel last."""
import logging
import string
from typing import Optional, Tuple

from workout_planner_api.ai import InferenceError, InferenceGatewayClient
from workout_planner_api.catalog import PROFESSIONS, find_profession
from workout_planner_api.models import (
    CommonIssue,
    ExerciseRecommendations,
    ProfessionAnalysis,
    ProfessionAnalysisResult,
    ProfessionCharacteristics,
    ProfessionProfile,
    RecommendedExercise,
    WorkplaceEnvironment,
)
from workout_planner_api.parsers.response_parser import reconcile_profession_analysis


logger = logging.getLogger(__name__)

PROFESSION_SYSTEM_PROMPT = """You are a professional job analyst. Analyze the given profession and return ONLY a JSON object in this exact format:
{
  "category": "string",
  "characteristics": {
    "physical_demands": ["string"],
    "workplace": ["string"],
    "movements": ["string"]
  },
  "health_risks": ["string"],
  "exercise_recommendations": {
    "types": ["string"],
    "frequency": "string",
    "focus_areas": ["string"]
  }
}

DO NOT include any explanatory text. ONLY return the JSON object."""

RECOMMENDED_EXERCISE_DURATION = "5 minutes"

_HIGH_SEVERITY_MARKERS = ("severe", "high")


class UnknownProfessionError(ValueError):
    """The inference path produced no usable analysis."""


def fallback_analysis() -> ProfessionAnalysis:
    """Sentinel analysis used when nothing better is available."""
    return ProfessionAnalysis(
        category="custom",
        characteristics=ProfessionCharacteristics(
            physical_demands=["unknown"],
            workplace=["unknown"],
            movements=["unknown"],
        ),
        health_risks=["unknown"],
        exercise_recommendations=ExerciseRecommendations(
            types=["general exercise"],
            frequency="regular breaks",
            focus_areas=["general health"],
        ),
    )


def _workplace_environment(workplace: Tuple[str, ...]) -> WorkplaceEnvironment:
    descriptors = " ".join(workplace).lower()
    if "very active" in descriptors:
        return "very active"
    if "active" in descriptors or "moving" in descriptors:
        return "active"
    return "sedentary"


def profile_from_analysis(name: str, analysis: ProfessionAnalysis) -> ProfessionProfile:
    """Convert a structured analysis into the profile shape used by the app."""
    recommendations = analysis.exercise_recommendations
    focus_areas = tuple(recommendations.focus_areas)

    issues = tuple(
        CommonIssue(
            issue=risk,
            severity="high" if any(m in risk.lower() for m in _HIGH_SEVERITY_MARKERS) else "medium",
        )
        for risk in analysis.health_risks
    )
    exercises = tuple(
        RecommendedExercise(
            name=string.capwords(exercise_type),
            description=f"{exercise_type.capitalize()} focused on {', '.join(focus_areas)}",
            duration=RECOMMENDED_EXERCISE_DURATION,
            frequency=recommendations.frequency,
            target_areas=focus_areas,
            focus_areas=focus_areas,
        )
        for exercise_type in recommendations.types
    )

    return ProfessionProfile(
        name=name,
        category=analysis.category,
        physical_demands=tuple(analysis.characteristics.physical_demands),
        workplace_environment=_workplace_environment(tuple(analysis.characteristics.workplace)),
        common_issues=issues,
        recommended_exercises=exercises,
    )


def build_profession_feedback(profile: ProfessionProfile) -> str:
    """Plain-language advice for a profession profile."""
    issues = ", ".join(issue.issue for issue in profile.common_issues)
    exercises = ", ".join(exercise.name for exercise in profile.recommended_exercises)
    return (
        f"As a {profile.name}, you should focus on exercises that address: {issues}. "
        f"Recommended exercises include: {exercises}."
    )


class ProfessionAnalyzer:
    """Classifies a free-text profession into a ProfessionProfile."""

    def __init__(
        self,
        gateway: Optional[InferenceGatewayClient] = None,
        professions: Tuple[ProfessionProfile, ...] = PROFESSIONS,
    ):
        self.gateway = gateway
        self.professions = professions

    def find_reference(self, profession_name: str) -> Optional[ProfessionProfile]:
        return find_profession(profession_name, self.professions)

    async def _analyze_with_inference(self, profession_name: str) -> ProfessionAnalysis:
        if self.gateway is None:
            raise UnknownProfessionError("No inference gateway configured")

        response = await self.gateway.generate(
            f"Analyze this profession: {profession_name}",
            PROFESSION_SYSTEM_PROMPT,
        )
        analysis = reconcile_profession_analysis(response.content)
        if analysis is None:
            raise UnknownProfessionError(f"Unusable analysis for '{profession_name}'")
        return analysis

    async def analyze(self, profession_name: str) -> ProfessionAnalysisResult:
        """
        Analyze a profession. Never raises.

        Args:
            profession_name: Free-text profession

        Returns:
            ProfessionAnalysisResult with source "reference" (no external call),
            "inference" (validated generated analysis) or "fallback" (sentinel)
        """
        reference = self.find_reference(profession_name)
        if reference is not None:
            logger.debug("Profession '%s' matched reference '%s'", profession_name, reference.name)
            return ProfessionAnalysisResult(source="reference", profile=reference)

        display_name = string.capwords(profession_name.strip()) or "Custom"

        if profession_name.strip():
            try:
                analysis = await self._analyze_with_inference(profession_name.strip())
                return ProfessionAnalysisResult(
                    source="inference",
                    profile=profile_from_analysis(display_name, analysis),
                    analysis=analysis,
                )
            except InferenceError as e:
                logger.warning(f"Profession inference failed for '{profession_name}': {e}")
            except UnknownProfessionError as e:
                logger.warning(str(e))

        analysis = fallback_analysis()
        return ProfessionAnalysisResult(
            source="fallback",
            profile=profile_from_analysis(display_name, analysis),
            analysis=analysis,
        )
