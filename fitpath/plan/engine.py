"""Plan engine: profile in, TodayPlan (or an explicit failure) out.

Pure function of the profile and the static catalogs. Expected failures
(incomplete profile, out-of-bounds weights, guardrail rejections) come back
as PlanOutcome.failure; nothing raises to the caller.
"""

from __future__ import annotations

import logging

from fitpath.plan import validator
from fitpath.plan.bmr import estimate_bmr, round_half_up
from fitpath.plan.meal_templates import MealTemplate, list_meal_templates
from fitpath.plan.models import (
    ActivityLevel,
    FoodPreference,
    GoalType,
    MacroRanges,
    MealSuggestion,
    MealTag,
    PlanErrorKind,
    PlanOutcome,
    Range,
    Sex,
    TodayPlan,
    UserProfile,
    WorkoutIntensity,
    WorkoutSuggestion,
)
from fitpath.plan.workout_templates import list_workout_templates

logger = logging.getLogger(__name__)

KCAL_PER_KG_FAT = 7700
MIN_WEIGHT_KG = 30.0
MAX_WEIGHT_KG = 300.0

SAFETY_NOTE = "This is not medical advice. If you feel unwell, stop and seek professional help."

# Share of daily calories per meal slot
BREAKFAST_SHARE = 0.30
LUNCH_SHARE = 0.35
DINNER_SHARE = 0.35

MAX_MEAL_SUBSTITUTIONS = 4
MAX_WORKOUT_SUBSTITUTIONS = 2

# AMDR bands as (min %, max %, kcal per gram)
_CARBS_BAND = (0.45, 0.65, 4)
_PROTEIN_BAND = (0.10, 0.35, 4)
_FAT_BAND = (0.20, 0.35, 9)

_PREFERENCE_TAG: dict[FoodPreference, MealTag] = {
    FoodPreference.vegetarian: MealTag.vegetarian,
    FoodPreference.halal: MealTag.halal,
    FoodPreference.no_beef: MealTag.no_beef,
    FoodPreference.no_pork: MealTag.no_pork,
}

_WORKOUT_INTENSITY: dict[ActivityLevel, WorkoutIntensity] = {
    ActivityLevel.sedentary: WorkoutIntensity.low,
    ActivityLevel.light: WorkoutIntensity.low,
    ActivityLevel.moderate: WorkoutIntensity.moderate,
    ActivityLevel.active: WorkoutIntensity.high,
    ActivityLevel.very_active: WorkoutIntensity.high,
}


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------

def determine_goal(current_kg: float, target_kg: float) -> GoalType:
    if target_kg < current_kg:
        return GoalType.lose
    if target_kg > current_kg:
        return GoalType.gain
    return GoalType.maintain


def compute_tdee(bmr: int, activity: ActivityLevel) -> int:
    return round_half_up(bmr * activity.factor)


def calorie_range_for_goal(goal: GoalType, tdee: int) -> Range:
    """Unclamped daily calorie window for a goal.

    LOSE targets 0.5–1.0 kg/week: the larger deficit gives the lower bound.
    """
    if goal == GoalType.lose:
        min_deficit = round_half_up(KCAL_PER_KG_FAT * 0.5 / 7.0)  # ~550
        max_deficit = round_half_up(KCAL_PER_KG_FAT * 1.0 / 7.0)  # ~1100
        return Range(min=tdee - max_deficit, max=tdee - min_deficit)
    if goal == GoalType.gain:
        return Range(min=tdee + 250, max=tdee + 500)
    return Range(min=tdee - 100, max=tdee + 100)


def macro_ranges(calories: Range) -> MacroRanges:
    """Gram ranges: low end from calories.min, high end from calories.max."""

    def grams(band: tuple[float, float, int]) -> Range:
        pct_min, pct_max, kcal_per_g = band
        g_min = max(0, round_half_up(calories.min * pct_min / kcal_per_g))
        g_max = max(0, round_half_up(calories.max * pct_max / kcal_per_g))
        return Range(min=g_min, max=g_max)

    return MacroRanges(
        carbs_g=grams(_CARBS_BAND),
        protein_g=grams(_PROTEIN_BAND),
        fat_g=grams(_FAT_BAND),
    )


def build_explanation(goal: GoalType, activity: ActivityLevel, sex: Sex, has_age: bool) -> str:
    goal_text = {
        GoalType.lose: "a gentle deficit",
        GoalType.gain: "a gentle surplus",
        GoalType.maintain: "maintenance",
    }[goal]
    activity_text = activity.value.replace("_", " ")
    text = (
        f"Based on your activity level ({activity_text}) and today's goal ({goal_text}), "
        "we propose a safe calorie range."
    )
    if sex == Sex.unspecified or not has_age:
        text += " (Estimation is less precise; add sex and age for better accuracy.)"
    return text


# ---------------------------------------------------------------------------
# Meal selection
# ---------------------------------------------------------------------------

def filter_meals(meals: list[MealTemplate], preference: FoodPreference) -> list[MealTemplate]:
    """Keep meals carrying the preference's tag.

    Preferences without a tag (none, high_protein) pass everything through.
    An empty result falls back to the full list.
    """
    tag = _PREFERENCE_TAG.get(preference)
    if tag is None:
        return list(meals)
    matching = [m for m in meals if m.has_tag(tag)]
    if not matching:
        return list(meals)
    return matching


def pick_meal(
    meals: list[MealTemplate],
    day_calories: Range,
    share: float,
    prefer_high_protein: bool,
) -> MealSuggestion:
    """Pick one meal for a slot worth `share` of the day's calories.

    Candidates are meals within the slot's calorie window; if none fit, every
    meal in `meals` is a candidate. Primary is the first candidate in catalog
    order (first high-protein one when preferred). Substitutions are the next
    candidates in catalog order.
    """
    slot = Range(
        min=round_half_up(day_calories.min * share),
        max=round_half_up(day_calories.max * share),
    )
    within = [m for m in meals if slot.contains(m.approx_calories)]
    candidates = within if within else meals

    primary = candidates[0]
    if prefer_high_protein:
        # Stable sort: tagged meals first, catalog order kept within each group
        primary = sorted(candidates, key=lambda m: not m.has_tag(MealTag.high_protein))[0]

    substitutions = [m.to_suggestion() for m in candidates if m.id != primary.id][:MAX_MEAL_SUBSTITUTIONS]
    return primary.to_suggestion(substitutions)


# ---------------------------------------------------------------------------
# Workout selection
# ---------------------------------------------------------------------------

def pick_workout(activity: ActivityLevel) -> WorkoutSuggestion:
    workouts = list_workout_templates()
    intensity = _WORKOUT_INTENSITY[activity]
    primary = next(w for w in workouts if w.intensity == intensity)
    substitutions = [w.to_suggestion() for w in workouts if w.id != primary.id][:MAX_WORKOUT_SUBSTITUTIONS]
    return primary.to_suggestion(substitutions)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _reject(kind: PlanErrorKind, reason: str) -> PlanOutcome:
    logger.info("Plan rejected (%s): %s", kind.value, reason)
    return PlanOutcome.failure(kind, reason)


def generate(profile: UserProfile) -> PlanOutcome:
    """Build today's plan for `profile`, or an explicit failure outcome."""
    if not profile.is_ready_for_plan():
        return _reject(PlanErrorKind.profile_incomplete, "Current and target weight are required")

    current = profile.current_weight_kg
    target = profile.target_weight_kg
    if not (MIN_WEIGHT_KG <= current <= MAX_WEIGHT_KG and MIN_WEIGHT_KG <= target <= MAX_WEIGHT_KG):
        return _reject(
            PlanErrorKind.weight_out_of_bounds,
            f"Weights must be between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g} kg",
        )

    goal = determine_goal(current, target)
    bmr = estimate_bmr(current, profile.sex, profile.age_years)
    tdee = compute_tdee(bmr, profile.activity_level)

    calories = calorie_range_for_goal(goal, tdee).clamp(
        min_allowed=validator.min_intake_by_sex(profile.sex),
        max_allowed=validator.ABSOLUTE_MAX_KCAL,
    )
    calorie_check = validator.validate_calorie_range(calories, profile.sex)
    if not calorie_check.ok:
        return _reject(PlanErrorKind.unsafe_calories, f"Unsafe calories: {calorie_check.reason}")

    macros = macro_ranges(calories)
    macro_check = validator.validate_macros(macros)
    if not macro_check.ok:
        return _reject(PlanErrorKind.unsafe_macros, f"Unsafe macros: {macro_check.reason}")

    meals = filter_meals(list_meal_templates(), profile.food_preference)
    prefer_hp = profile.food_preference == FoodPreference.high_protein

    plan = TodayPlan(
        goal_type=goal,
        bmr=bmr,
        tdee=tdee,
        calories=calories,
        macros=macros,
        explanation=build_explanation(goal, profile.activity_level, profile.sex, profile.age_years is not None),
        breakfast=pick_meal(meals, calories, BREAKFAST_SHARE, prefer_hp),
        lunch=pick_meal(meals, calories, LUNCH_SHARE, prefer_hp),
        dinner=pick_meal(meals, calories, DINNER_SHARE, prefer_hp),
        workout=pick_workout(profile.activity_level),
        safety_note=SAFETY_NOTE,
    )
    logger.debug(
        "Plan generated: goal=%s bmr=%d tdee=%d calories=%d-%d",
        goal.value, bmr, tdee, calories.min, calories.max,
    )
    return PlanOutcome.success(plan)
