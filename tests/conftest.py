"""
Test fixtures for workout-planner-api.

Provides a deterministic RNG, a stubbed inference gateway and a FastAPI test
client so the suite runs offline.
"""

import random
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_planner_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_planner_api.main import app
from workout_planner_api.api.routes import get_gateway, get_workout_store
from workout_planner_api.models import InferenceResponse
from workout_planner_api.services.exercise_selector import ExerciseSelector
from workout_planner_api.services.plan_assembler import PlanAssembler


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so selections are reproducible."""
    return random.Random(1234)


@pytest.fixture
def selector(rng) -> ExerciseSelector:
    return ExerciseSelector(rng=rng)


@pytest.fixture
def assembler(selector) -> PlanAssembler:
    return PlanAssembler(selector)


# ---------------------------------------------------------------------------
# Inference gateway stub
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_gateway() -> MagicMock:
    """Gateway whose `generate` is an AsyncMock; set return_value/side_effect per test."""
    gateway = MagicMock()
    gateway.generate = AsyncMock(
        return_value=InferenceResponse(content="Stay hydrated and stretch.", token_usage=12)
    )
    return gateway


@pytest.fixture
def mock_store() -> MagicMock:
    store = MagicMock()
    store.save_workout.return_value = "workout-1"
    return store


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def api_client(mock_gateway, mock_store):
    """TestClient with the gateway and store dependencies stubbed out."""
    app.dependency_overrides[get_gateway] = lambda: mock_gateway
    app.dependency_overrides[get_workout_store] = lambda: mock_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client(mock_store):
    """TestClient with no inference gateway configured."""
    app.dependency_overrides[get_gateway] = lambda: None
    app.dependency_overrides[get_workout_store] = lambda: mock_store
    yield TestClient(app)
    app.dependency_overrides.clear()
