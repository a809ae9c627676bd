"""Static exercise catalog, grouped by body region."""
from types import MappingProxyType
from typing import Mapping, Tuple

from workout_planner_api.models import Difficulty, ExerciseTemplate


def _template(name, description, target_areas, work_friendly, difficulty=Difficulty.BEGINNER):
    return ExerciseTemplate(
        name=name,
        description=description,
        target_areas=tuple(target_areas),
        work_friendly=work_friendly,
        difficulty=difficulty,
    )


_PUSH_UPS = _template(
    "Push-Ups",
    "Start in plank position. Lower chest to ground and push back up.",
    ["chest", "shoulders", "triceps"],
    True,
)
_PIKE_PUSH_UPS = _template(
    "Pike Push-Ups",
    "Push-ups with hips raised, forming an inverted V shape.",
    ["shoulders", "triceps"],
    True,
)
_GLUTE_BRIDGES = _template(
    "Glute Bridges",
    "Lie on back, feet flat, lift hips toward ceiling.",
    ["glutes", "hamstrings"],
    False,
)

EXERCISE_CATALOG: Mapping[str, Tuple[ExerciseTemplate, ...]] = MappingProxyType({
    "lowerBody": (
        _template(
            "Squats",
            "Stand with feet shoulder-width apart. Lower body as if sitting back into a chair.",
            ["quads", "glutes"],
            True,
        ),
        _template(
            "Lunges",
            "Step forward with one leg, lowering until both knees are bent at 90 degrees.",
            ["quads", "hamstrings", "glutes"],
            True,
        ),
        _template(
            "Calf Raises",
            "Stand on edge of step, raise heels up and lower back down.",
            ["calves"],
            True,
        ),
        _GLUTE_BRIDGES,
        _template(
            "Jump Squats",
            "Perform a squat, then explosively jump up. Land softly and repeat.",
            ["quads", "glutes", "calves"],
            False,
            Difficulty.ADVANCED,
        ),
        _template(
            "Wall Sits",
            "Lean against wall, slide down until thighs are parallel to ground.",
            ["quads", "glutes"],
            True,
        ),
        _template(
            "Step-Ups",
            "Using a sturdy platform, step up with one leg, then the other.",
            ["quads", "glutes", "calves"],
            True,
        ),
        _template(
            "Bulgarian Split Squats",
            "Place one foot behind on elevated surface, lower into a lunge.",
            ["quads", "glutes", "balance"],
            False,
        ),
    ),
    "upperBody": (
        _PUSH_UPS,
        _template(
            "Tricep Dips",
            "Using a chair, lower body with arms then push back up.",
            ["triceps", "shoulders"],
            True,
        ),
        _template(
            "Diamond Push-Ups",
            "Push-ups with hands close together forming a diamond shape.",
            ["triceps", "chest"],
            True,
            Difficulty.ADVANCED,
        ),
        _PIKE_PUSH_UPS,
        _template(
            "Wall Push-Ups",
            "Push-ups performed against a wall, great for beginners.",
            ["chest", "shoulders"],
            True,
        ),
        _template(
            "Arm Circles",
            "Make circular motions with arms extended.",
            ["shoulders", "arms"],
            True,
        ),
    ),
    "abs": (
        _template(
            "Crunches",
            "Lie on back, lift shoulders off ground engaging core.",
            ["abs", "core"],
            False,
        ),
        _template(
            "Plank",
            "Hold straight-arm plank position, maintaining straight body.",
            ["core", "abs"],
            True,
        ),
        _template(
            "Russian Twists",
            "Sit with knees bent, rotate torso side to side.",
            ["obliques", "core"],
            False,
        ),
        _template(
            "Mountain Climbers",
            "In plank position, alternate bringing knees to chest.",
            ["core", "cardio"],
            True,
        ),
        _template(
            "Bicycle Crunches",
            "Lie on back, alternate elbow to opposite knee.",
            ["obliques", "core"],
            False,
        ),
        _template(
            "Dead Bug",
            "Lie on back, alternate extending opposite arm and leg.",
            ["core", "stability"],
            False,
        ),
        _template(
            "Bird Dog",
            "On hands and knees, extend opposite arm and leg.",
            ["core", "balance"],
            False,
        ),
        _template(
            "Side Plank",
            "Hold plank position on one side, supporting with forearm.",
            ["obliques", "core"],
            True,
        ),
    ),
    "back": (
        _template(
            "Pull-Ups",
            "Hang from bar, pull body up until chin is over bar.",
            ["back", "lats"],
            False,
        ),
        _template(
            "Inverted Rows",
            "Using a sturdy table or bar at waist height, pull chest to bar while body is straight.",
            ["back", "rhomboids"],
            True,
        ),
        _template(
            "Superman Holds",
            "Lie face down, lift arms and legs off ground, hold position.",
            ["lower back", "core"],
            False,
        ),
        _template(
            "Band Pull-Aparts",
            "Hold resistance band in front, pull apart engaging shoulder blades.",
            ["upper back", "rear deltoids"],
            True,
        ),
        _template(
            "Good Morning",
            "Stand with feet shoulder-width, hinge at hips keeping back straight.",
            ["lower back", "hamstrings"],
            True,
        ),
    ),
    "shoulders": (
        _PIKE_PUSH_UPS,
        _template(
            "Lateral Raises",
            "Raise arms out to sides until parallel with ground.",
            ["lateral deltoids"],
            True,
        ),
        _template(
            "Front Raises",
            "Raise arms straight in front until parallel with ground.",
            ["front deltoids"],
            True,
        ),
        _template(
            "Reverse Flies",
            "Bend forward, raise arms out to sides engaging rear shoulders.",
            ["rear deltoids", "upper back"],
            True,
        ),
    ),
    "chest": (
        _PUSH_UPS,
        _template(
            "Incline Push-Ups",
            "Push-ups with hands elevated on stable surface.",
            ["lower chest", "shoulders"],
            True,
        ),
        _template(
            "Decline Push-Ups",
            "Push-ups with feet elevated on stable surface.",
            ["upper chest", "shoulders"],
            True,
        ),
    ),
    "glutes": (
        _template(
            "Hip Thrusts",
            "Sit with upper back against bench, roll bar over hips, thrust upward.",
            ["glutes", "hamstrings"],
            False,
        ),
        _GLUTE_BRIDGES,
        _template(
            "Fire Hydrants",
            "On hands and knees, lift leg out to side while keeping knee bent.",
            ["glutes", "hip abductors"],
            False,
        ),
        _template(
            "Donkey Kicks",
            "On hands and knees, kick one leg back and up toward ceiling.",
            ["glutes", "lower back"],
            False,
        ),
        _template(
            "Single-Leg Glute Bridge",
            "Perform glute bridge with one leg extended.",
            ["glutes", "core", "balance"],
            False,
        ),
        _template(
            "Frog Pumps",
            "Lie on back, soles of feet together, lift hips.",
            ["glutes", "inner thighs"],
            False,
        ),
    ),
    "hamstrings": (
        _template(
            "Romanian Deadlifts",
            "Stand tall, hinge at hips while keeping back straight.",
            ["hamstrings", "lower back", "glutes"],
            False,
        ),
        _template(
            "Leg Curls",
            "Lie face down, curl legs toward buttocks.",
            ["hamstrings"],
            False,
        ),
    ),
})

# Composite groups drawn from several catalog groups
GROUP_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "upperbody": ("chest", "back", "shoulders"),
    "lowerbody": ("lowerBody", "glutes", "hamstrings"),
})

# Canonical groups for a full body session
FULL_BODY_GROUPS: Tuple[str, ...] = ("chest", "back", "lowerBody", "abs")

# Fixed exercises for the at-work break session
WORK_BREAK_EXERCISES: Tuple[ExerciseTemplate, ...] = (
    _template(
        "Desk Stretches",
        "Simple stretches you can do at your desk",
        ["back", "neck"],
        True,
    ),
    _template(
        "Standing Breaks",
        "Stand up and walk around for a few minutes",
        ["legs", "circulation"],
        True,
    ),
)


def resolve_group(
    group: str,
    catalog: Mapping[str, Tuple[ExerciseTemplate, ...]] = EXERCISE_CATALOG,
    aliases: Mapping[str, Tuple[str, ...]] = GROUP_ALIASES,
) -> Tuple[str, ...]:
    """Expand a requested group into catalog group keys.

    An exact catalog key is used as-is, so the "upperBody" group stays
    drawable. Otherwise aliases are matched case-insensitively, which makes
    the classifier's "upperbody" resolve to chest/back/shoulders. Unknown
    groups resolve to an empty tuple.
    """
    if group in catalog:
        return (group,)
    alias = aliases.get(group.lower())
    if alias:
        return alias
    for key in catalog:
        if key.lower() == group.lower():
            return (key,)
    return ()
