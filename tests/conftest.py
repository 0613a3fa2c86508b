"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from fitpath.main import app
from fitpath.plan.models import ActivityLevel, FoodPreference, Sex, UserProfile
from fitpath.plan.service import PlanService, get_plan_service


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def plan_service():
    """Fresh PlanService per test (the app-wide one is never touched)."""
    return PlanService()


@pytest.fixture()
def override_service(plan_service):
    """Override the FastAPI dependency so tests don't share plan state."""
    app.dependency_overrides[get_plan_service] = lambda: plan_service
    yield plan_service
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_service):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_profile(**overrides: Any) -> UserProfile:
    """Helper to build a plan-ready profile (80 -> 72 kg, male, 25, moderate)."""
    defaults: dict[str, Any] = dict(
        current_weight_kg=80.0,
        target_weight_kg=72.0,
        activity_level=ActivityLevel.moderate,
        food_preference=FoodPreference.none,
        sex=Sex.male,
        age_years=25,
    )
    defaults.update(overrides)
    return UserProfile(**defaults)
