"""Reference set of known professions and their workplace risk profiles."""
from typing import Optional, Tuple

from workout_planner_api.models import CommonIssue, ProfessionProfile, RecommendedExercise


def _issues(*pairs):
    return tuple(CommonIssue(issue=issue, severity=severity) for issue, severity in pairs)


def _exercise(name, description, duration, frequency, target_areas, focus_areas):
    return RecommendedExercise(
        name=name,
        description=description,
        duration=duration,
        frequency=frequency,
        target_areas=tuple(target_areas),
        focus_areas=tuple(focus_areas),
    )


PROFESSIONS: Tuple[ProfessionProfile, ...] = (
    ProfessionProfile(
        name="Office Worker",
        category="Desk Work",
        physical_demands=("sitting", "typing", "screen viewing"),
        workplace_environment="sedentary",
        common_issues=_issues(
            ("lower back pain", "high"),
            ("eye strain", "high"),
            ("carpal tunnel", "medium"),
            ("poor posture", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Desk Stretches",
                "Simple stretches you can do at your desk",
                "5 minutes",
                "every hour",
                ["back", "neck", "shoulders"],
                ["posture", "flexibility"],
            ),
            _exercise(
                "Eye Relief",
                "Eye exercises to reduce strain",
                "2 minutes",
                "every 30 minutes",
                ["eyes"],
                ["eye health"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Doctor",
        category="Healthcare",
        physical_demands=("standing", "walking", "lifting"),
        workplace_environment="active",
        common_issues=_issues(
            ("back strain", "high"),
            ("foot fatigue", "high"),
            ("stress", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Quick Stretches",
                "Simple stretches between patients",
                "5 minutes",
                "every 2 hours",
                ["back", "neck", "shoulders"],
                ["back", "neck", "shoulders"],
            ),
            _exercise(
                "Posture Reset",
                "Alignment exercises for better posture",
                "2 minutes",
                "hourly",
                ["spine", "core"],
                ["posture", "core"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Teacher",
        category="Education",
        physical_demands=("standing", "speaking", "writing"),
        workplace_environment="active",
        common_issues=_issues(
            ("voice strain", "high"),
            ("back pain", "medium"),
            ("foot fatigue", "medium"),
        ),
        recommended_exercises=(
            _exercise(
                "Voice Rest",
                "Vocal rest and hydration breaks",
                "5 minutes",
                "hourly",
                ["throat", "neck"],
                ["voice", "neck"],
            ),
            _exercise(
                "Classroom Stretches",
                "Stretches while supervising students",
                "3 minutes",
                "every 2 hours",
                ["back", "legs"],
                ["back", "legs"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Nurse",
        category="Healthcare",
        physical_demands=("walking", "lifting", "bending"),
        workplace_environment="active",
        common_issues=_issues(
            ("back strain", "high"),
            ("foot pain", "high"),
            ("fatigue", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Quick Recovery",
                "Brief exercises between rounds",
                "3 minutes",
                "every 2 hours",
                ["back", "legs"],
                ["recovery", "strength"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Chef",
        category="Food Service",
        physical_demands=("standing", "lifting", "repetitive motions"),
        workplace_environment="active",
        common_issues=_issues(
            ("foot pain", "high"),
            ("wrist strain", "medium"),
            ("back pain", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Kitchen Stretches",
                "Quick stretches during prep time",
                "3 minutes",
                "every hour",
                ["legs", "back", "wrists"],
                ["flexibility", "relief"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Driver",
        category="Transportation",
        physical_demands=("sitting", "concentration", "repetitive movements"),
        workplace_environment="sedentary",
        common_issues=_issues(
            ("lower back pain", "high"),
            ("neck strain", "medium"),
            ("leg cramps", "medium"),
        ),
        recommended_exercises=(
            _exercise(
                "Driver's Relief",
                "Exercises during breaks",
                "5 minutes",
                "every 2 hours",
                ["back", "neck", "legs"],
                ["mobility", "circulation"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Retail Worker",
        category="Sales",
        physical_demands=("standing", "lifting", "walking"),
        workplace_environment="active",
        common_issues=_issues(
            ("foot fatigue", "high"),
            ("back strain", "medium"),
            ("leg fatigue", "medium"),
        ),
        recommended_exercises=(
            _exercise(
                "Register Relief",
                "Quick exercises during quiet times",
                "2 minutes",
                "every hour",
                ["feet", "legs", "back"],
                ["relief", "circulation"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Construction Worker",
        category="Construction",
        physical_demands=("heavy lifting", "climbing", "bending"),
        workplace_environment="very active",
        common_issues=_issues(
            ("back strain", "high"),
            ("joint stress", "high"),
            ("muscle fatigue", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Site Stretches",
                "Stretches to prevent injury",
                "5 minutes",
                "every 2 hours",
                ["back", "shoulders", "legs"],
                ["flexibility", "strength"],
            ),
        ),
    ),
    ProfessionProfile(
        name="Software Developer",
        category="Technology",
        physical_demands=("sitting", "typing", "screen viewing"),
        workplace_environment="sedentary",
        common_issues=_issues(
            ("eye strain", "high"),
            ("wrist pain", "high"),
            ("poor posture", "high"),
        ),
        recommended_exercises=(
            _exercise(
                "Coding Break",
                "Screen break exercises",
                "5 minutes",
                "every hour",
                ["eyes", "wrists", "back"],
                ["eye health", "ergonomics"],
            ),
        ),
    ),
)


def find_profession(
    search: str,
    professions: Tuple[ProfessionProfile, ...] = PROFESSIONS,
) -> Optional[ProfessionProfile]:
    """Look up a profession by exact name, then by substring.

    Matching is case-insensitive and ignores surrounding whitespace. A blank
    search never matches.
    """
    normalized = search.lower().strip()
    if not normalized:
        return None
    for profession in professions:
        if profession.name.lower() == normalized:
            return profession
    for profession in professions:
        if normalized in profession.name.lower():
            return profession
    return None
