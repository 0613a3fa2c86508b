"""TodayPlan contract: Pydantic v2 models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Sex(str, Enum):
    male = "male"
    female = "female"
    unspecified = "unspecified"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"

    @property
    def factor(self) -> float:
        return ACTIVITY_FACTORS[self]


ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.light: 1.375,
    ActivityLevel.moderate: 1.55,
    ActivityLevel.active: 1.725,
    ActivityLevel.very_active: 1.9,
}


class FoodPreference(str, Enum):
    none = "none"
    vegetarian = "vegetarian"
    halal = "halal"
    no_beef = "no_beef"
    no_pork = "no_pork"
    high_protein = "high_protein"


class MealTag(str, Enum):
    balanced = "balanced"
    high_protein = "high_protein"
    vegetarian = "vegetarian"
    halal = "halal"
    no_pork = "no_pork"
    no_beef = "no_beef"
    lower_fat = "lower_fat"


class WorkoutIntensity(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class GoalType(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"


class UserProfile(BaseModel):
    """Body profile a plan is computed from. Never mutated in place."""

    model_config = ConfigDict(frozen=True)

    current_weight_kg: float | None = None
    target_weight_kg: float | None = None
    activity_level: ActivityLevel = ActivityLevel.moderate
    food_preference: FoodPreference = FoodPreference.none
    sex: Sex = Sex.unspecified
    age_years: int | None = Field(default=None, ge=0)

    def is_ready_for_plan(self) -> bool:
        return (
            self.current_weight_kg is not None
            and self.current_weight_kg > 0.0
            and self.target_weight_kg is not None
            and self.target_weight_kg > 0.0
        )


class Range(BaseModel):
    """Inclusive integer interval [min, max]."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    @model_validator(mode="after")
    def check_order(self) -> Range:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    @property
    def width(self) -> int:
        return self.max - self.min

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def clamp(self, min_allowed: int, max_allowed: int) -> Range:
        """Coerce both ends into [min_allowed, max_allowed].

        An interval that would invert collapses to [min_allowed, min_allowed].
        """
        lo = min(max(self.min, min_allowed), max_allowed)
        hi = min(max(self.max, min_allowed), max_allowed)
        if lo > hi:
            return Range(min=min_allowed, max=min_allowed)
        return Range(min=lo, max=hi)


class MacroRanges(BaseModel):
    model_config = ConfigDict(frozen=True)

    carbs_g: Range
    protein_g: Range
    fat_g: Range


class MealSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    approx_calories: int
    tags: list[MealTag] = Field(default_factory=list)
    substitutions: list[MealSuggestion] = Field(default_factory=list)


class WorkoutSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    details: str
    intensity: WorkoutIntensity
    substitutions: list[WorkoutSuggestion] = Field(default_factory=list)


class TodayPlan(BaseModel):
    """Engine output: built fresh per profile, replaced wholesale on change."""

    model_config = ConfigDict(frozen=True)

    goal_type: GoalType
    bmr: int
    tdee: int
    calories: Range
    macros: MacroRanges
    explanation: str
    breakfast: MealSuggestion
    lunch: MealSuggestion
    dinner: MealSuggestion
    workout: WorkoutSuggestion
    safety_note: str


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    reason: str | None = None


class PlanErrorKind(str, Enum):
    profile_incomplete = "profile_incomplete"
    weight_out_of_bounds = "weight_out_of_bounds"
    unsafe_calories = "unsafe_calories"
    unsafe_macros = "unsafe_macros"


class PlanError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: PlanErrorKind
    reason: str


class PlanOutcome(BaseModel):
    """Explicit success/failure result of plan generation.

    Exactly one of `plan` / `error` is set. Callers must check `ok`.
    """

    model_config = ConfigDict(frozen=True)

    plan: TodayPlan | None = None
    error: PlanError | None = None

    @model_validator(mode="after")
    def check_exclusive(self) -> PlanOutcome:
        if (self.plan is None) == (self.error is None):
            raise ValueError("exactly one of plan / error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.plan is not None

    @classmethod
    def success(cls, plan: TodayPlan) -> PlanOutcome:
        return cls(plan=plan)

    @classmethod
    def failure(cls, kind: PlanErrorKind, reason: str) -> PlanOutcome:
        return cls(error=PlanError(kind=kind, reason=reason))


class PlanState(BaseModel):
    """Latest profile + plan held by the plan service (HTTP response shape)."""

    model_config = ConfigDict(frozen=True)

    profile: UserProfile | None = None
    plan: TodayPlan | None = None
    error: PlanError | None = None
