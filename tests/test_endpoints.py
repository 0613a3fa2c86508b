"""Endpoint tests: FastAPI app via httpx."""

from __future__ import annotations

import importlib
import logging
from unittest.mock import patch

import pytest

PROFILE = {
    "current_weight_kg": 80.0,
    "target_weight_kg": 72.0,
    "activity_level": "moderate",
    "food_preference": "none",
    "sex": "male",
    "age_years": 25,
}


class TestGenerateEndpoint:
    @pytest.mark.asyncio
    async def test_generate_200(self, client):
        resp = await client.post("/plan/generate", json=PROFILE)
        assert resp.status_code == 200
        body = resp.json()
        assert body["goal_type"] == "lose"
        assert body["calories"] == {"min": 1850, "max": 2400}
        assert body["workout"]["id"] == "strength_20"
        assert body["safety_note"]

    @pytest.mark.asyncio
    async def test_out_of_bounds_422(self, client):
        resp = await client.post(
            "/plan/generate",
            json={**PROFILE, "current_weight_kg": 20.0, "target_weight_kg": 18.0},
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["kind"] == "weight_out_of_bounds"

    @pytest.mark.asyncio
    async def test_incomplete_profile_422(self, client):
        resp = await client.post("/plan/generate", json={"current_weight_kg": 70.0})
        assert resp.status_code == 422
        assert resp.json()["detail"]["kind"] == "profile_incomplete"

    @pytest.mark.asyncio
    async def test_unknown_activity_level_422(self, client):
        resp = await client.post("/plan/generate", json={**PROFILE, "activity_level": "couch"})
        assert resp.status_code == 422


class TestProfileEndpoints:
    @pytest.mark.asyncio
    async def test_today_empty(self, client):
        resp = await client.get("/plan/today")
        assert resp.status_code == 200
        assert resp.json() == {"profile": None, "plan": None, "error": None}

    @pytest.mark.asyncio
    async def test_put_profile_then_today(self, client, override_service):
        resp = await client.put("/plan/profile", json=PROFILE)
        assert resp.status_code == 200
        assert resp.json()["plan"]["goal_type"] == "lose"

        resp = await client.get("/plan/today")
        body = resp.json()
        assert body["profile"]["sex"] == "male"
        assert body["plan"]["tdee"] == 2950
        assert override_service.plan is not None

    @pytest.mark.asyncio
    async def test_put_rejected_profile_reports_error(self, client):
        resp = await client.put("/plan/profile", json={**PROFILE, "target_weight_kg": 350.0})
        assert resp.status_code == 200
        body = resp.json()
        assert body["plan"] is None
        assert body["error"]["kind"] == "weight_out_of_bounds"


class TestCatalogEndpoints:
    @pytest.mark.asyncio
    async def test_list_meals(self, client):
        resp = await client.get("/plan/catalog/meals")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 8
        assert data[0]["id"] == "oats_greek"
        assert "substitutions" not in data[0]

    @pytest.mark.asyncio
    async def test_meal_detail(self, client):
        resp = await client.get("/plan/catalog/meals/salmon_veg")
        assert resp.status_code == 200
        assert resp.json()["approx_calories"] == 720

    @pytest.mark.asyncio
    async def test_meal_not_found(self, client):
        resp = await client.get("/plan/catalog/meals/nope")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_list_workouts(self, client):
        resp = await client.get("/plan/catalog/workouts")
        assert resp.status_code == 200
        assert [w["id"] for w in resp.json()] == ["walk_30", "mobility_12", "strength_20", "interval_16"]

    @pytest.mark.asyncio
    async def test_workout_not_found(self, client):
        resp = await client.get("/plan/catalog/workouts/nope")
        assert resp.status_code == 404


class TestApiKey:
    @pytest.mark.asyncio
    async def test_missing_key_401(self, client):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.get("/plan/today")
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_wrong_key_401(self, client):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.post("/plan/generate", json=PROFILE, headers={"X-API-Key": "nope"})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_profile_update_requires_key(self, client):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.put("/plan/profile", json=PROFILE)
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_header_key(self, client):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.post("/plan/generate", json=PROFILE, headers={"X-API-Key": "secret"})
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_bearer_key(self, client):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.get("/plan/today", headers={"Authorization": "Bearer secret"})
        assert resp.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/plan/catalog/meals", "/plan/catalog/workouts", "/plan/catalog/meals/oats_greek"])
    async def test_catalog_is_public(self, client, path):
        with patch("fitpath.auth.settings.fitpath_api_key", "secret"):
            resp = await client.get(path)
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_schemes_in_openapi(self, client):
        resp = await client.get("/openapi.json")
        schema = resp.json()
        schemes = schema["components"]["securitySchemes"]
        assert schemes["PlanApiKey"] == {"type": "apiKey", "in": "header", "name": "X-API-Key"}
        assert schemes["PlanBearer"]["scheme"] == "bearer"
        assert "security" in schema["paths"]["/plan/today"]["get"]
        assert "security" not in schema["paths"]["/plan/catalog/meals"]["get"]


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_root_lists_plan_routes(self, client):
        resp = await client.get("/")
        assert resp.json()["plan"]["generate"] == "/plan/generate"


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_sets_root_level(self):
        from fitpath.main import app, lifespan

        root = logging.getLogger()
        previous = root.level
        try:
            with patch("fitpath.main.settings.log_level", "debug"):
                async with lifespan(app):
                    assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_import_leaves_root_level_alone(self):
        root = logging.getLogger()
        previous = root.level
        try:
            root.setLevel(logging.WARNING)
            importlib.reload(importlib.import_module("fitpath.main"))
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
