"""Tests for deterministic plan assembly."""
import random

from workout_planner_api.catalog import EXERCISE_CATALOG, FULL_BODY_GROUPS
from workout_planner_api.models import Difficulty, ExerciseTemplate, FitnessLevel, PlanExercise
from workout_planner_api.parsers.intent_parser import WorkoutIntent, classify_intent
from workout_planner_api.services.exercise_selector import ExerciseSelector
from workout_planner_api.services.plan_assembler import (
    FULL_BODY_TITLE,
    PlanAssembler,
    build_title,
    build_work_break_plan,
)


def _names_in(group):
    return {template.name for template in EXERCISE_CATALOG[group]}


class TestBuildTitle:
    """Title derivation from requested groups."""

    def test_single_group(self):
        assert build_title(classify_intent("upper body")) == "Upper Body Workout"

    def test_groups_joined_in_rule_order(self):
        assert build_title(classify_intent("legs and abs")) == "Abs & Lower Body Workout"

    def test_no_groups_is_full_body(self):
        assert build_title(WorkoutIntent()) == FULL_BODY_TITLE


class TestScenarios:
    """End-to-end rules engine behaviour."""

    def test_advanced_upper_body(self, assembler):
        """Advanced upper body draws from chest, back and shoulders."""
        plan = assembler.generate("I want an upper body workout, advanced")

        assert plan.title == "Upper Body Workout"
        assert plan.type == "exercise"
        allowed = _names_in("chest") | _names_in("back") | _names_in("shoulders")
        assert all(exercise.name in allowed for exercise in plan.exercises)
        # ceil(8 / 3) per sub-group
        assert len(plan.exercises) == 9

    def test_unmatched_request_falls_back_to_full_body(self, assembler):
        """'stretch please' gets four beginner exercises, one per canonical group."""
        plan = assembler.generate("stretch please")

        assert plan.title == "Full Body Workout"
        assert len(plan.exercises) == 4
        for exercise, group in zip(plan.exercises, FULL_BODY_GROUPS):
            assert exercise.name in _names_in(group)
        assert all(exercise.difficulty != Difficulty.ADVANCED for exercise in plan.exercises)

    def test_full_body_keyword(self, assembler):
        plan = assembler.generate("full body please")
        assert plan.title == "Full Body Workout"
        assert len(plan.exercises) == 4

    def test_advanced_full_body_draws_two_per_group(self, assembler):
        plan = assembler.assemble_full_body(FitnessLevel.ADVANCED)
        assert len(plan.exercises) == 8

    def test_every_plan_is_non_empty(self):
        """Any prompt yields at least one exercise."""
        for seed, prompt in enumerate(["", "abs", "hamstrings advanced", "???", "whole body"]):
            assembler = PlanAssembler(ExerciseSelector(rng=random.Random(seed)))
            assert len(assembler.generate(prompt).exercises) >= 1


class TestAssemble:
    """Assembly edge cases."""

    def test_preselected_exercises_are_used(self, assembler):
        exercise = PlanExercise(name="Plank", description="Hold it")
        plan = assembler.assemble(classify_intent("abs"), [exercise])
        assert plan.title == "Abs Workout"
        assert [e.name for e in plan.exercises] == ["Plank"]

    def test_empty_selection_falls_back_to_full_body(self, assembler):
        plan = assembler.assemble(classify_intent("abs"), [])
        assert plan.title == FULL_BODY_TITLE
        assert len(plan.exercises) == 4

    def test_empty_catalog_uses_last_resort_exercise(self):
        """A catalog that cannot fill anything still produces a plan."""
        hard_only = ExerciseTemplate(name="Muscle Up", description="Hard", difficulty=Difficulty.ADVANCED)
        selector = ExerciseSelector(catalog={"abs": (hard_only,)}, aliases={}, rng=random.Random(0))
        plan = PlanAssembler(selector).generate("abs")

        assert plan.title == FULL_BODY_TITLE
        assert [e.name for e in plan.exercises] == ["Bodyweight Squats"]


class TestWorkBreakPlan:
    """Fixed at-work session."""

    def test_work_break_plan(self):
        plan = build_work_break_plan()

        assert plan.title == "Work Break Exercises"
        assert plan.type == "work"
        assert [e.name for e in plan.exercises] == ["Desk Stretches", "Standing Breaks"]
        assert all(e.duration_minutes == 5 for e in plan.exercises)
        assert all(e.is_work_friendly for e in plan.exercises)
        assert all(e.sets is None and e.reps is None for e in plan.exercises)
