"""Plan HTTP router: generation, current plan, catalogs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Security

from fitpath.auth import require_plan_key
from fitpath.plan import engine
from fitpath.plan.meal_templates import MealTemplate, get_meal_template, list_meal_templates
from fitpath.plan.models import PlanState, TodayPlan, UserProfile
from fitpath.plan.service import PlanService, get_plan_service
from fitpath.plan.workout_templates import WorkoutTemplate, get_workout_template, list_workout_templates

router = APIRouter(prefix="/plan", tags=["plan"])


# ---------------------------------------------------------------------------
# /plan/generate, /plan/profile, /plan/today
# ---------------------------------------------------------------------------


@router.post("/generate", response_model=TodayPlan)
async def generate_plan(
    profile: UserProfile,
    _: str | None = Security(require_plan_key),
) -> TodayPlan:
    """One-off plan for the posted profile; nothing is stored."""
    outcome = engine.generate(profile)
    if outcome.error is not None:
        raise HTTPException(status_code=422, detail=outcome.error.model_dump(mode="json"))
    return outcome.plan


@router.put("/profile", response_model=PlanState)
async def update_profile(
    profile: UserProfile,
    service: PlanService = Depends(get_plan_service),
    _: str | None = Security(require_plan_key),
) -> PlanState:
    service.update_profile(profile)
    return service.state()


@router.get("/today", response_model=PlanState)
async def today_plan(
    service: PlanService = Depends(get_plan_service),
    _: str | None = Security(require_plan_key),
) -> PlanState:
    return service.state()


# ---------------------------------------------------------------------------
# /plan/catalog (public, static content)
# ---------------------------------------------------------------------------


def _template_dict(template: MealTemplate | WorkoutTemplate) -> dict:
    return template.to_suggestion().model_dump(mode="json", exclude={"substitutions"})


@router.get("/catalog/meals")
async def meals_list() -> list[dict]:
    return [_template_dict(t) for t in list_meal_templates()]


@router.get("/catalog/meals/{template_id}")
async def meal_detail(template_id: str) -> dict:
    template = get_meal_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Unknown meal: {template_id}")
    return _template_dict(template)


@router.get("/catalog/workouts")
async def workouts_list() -> list[dict]:
    return [_template_dict(t) for t in list_workout_templates()]


@router.get("/catalog/workouts/{template_id}")
async def workout_detail(template_id: str) -> dict:
    template = get_workout_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Unknown workout: {template_id}")
    return _template_dict(template)
