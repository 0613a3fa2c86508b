"""Plan guardrails: reject numerically unsafe ranges, never repair them.

Conservative bounds for a wellness app, not nutritional validation.
"""

from __future__ import annotations

from fitpath.plan.models import MacroRanges, Range, Sex, ValidationResult

ABSOLUTE_MIN_KCAL = 900
ABSOLUTE_MAX_KCAL = 4500
MAX_RANGE_WIDTH_KCAL = 1200

_MIN_INTAKE_BY_SEX: dict[Sex, int] = {
    Sex.male: 1500,
    Sex.female: 1200,
    Sex.unspecified: 1200,
}


def min_intake_by_sex(sex: Sex) -> int:
    return _MIN_INTAKE_BY_SEX[sex]


def validate_calorie_range(calories: Range, sex: Sex) -> ValidationResult:
    """Checks run in order; the first failing check's reason is returned."""
    if calories.max < min_intake_by_sex(sex):
        return ValidationResult(ok=False, reason="Below minimum intake")
    if calories.min < ABSOLUTE_MIN_KCAL:
        return ValidationResult(ok=False, reason="Extremely low")
    if calories.max > ABSOLUTE_MAX_KCAL:
        return ValidationResult(ok=False, reason="Extremely high")
    if calories.width > MAX_RANGE_WIDTH_KCAL:
        return ValidationResult(ok=False, reason="Too wide")
    return ValidationResult(ok=True)


def validate_macros(macros: MacroRanges) -> ValidationResult:
    if min(macros.carbs_g.min, macros.protein_g.min, macros.fat_g.min) < 0:
        return ValidationResult(ok=False, reason="Negative macros")
    return ValidationResult(ok=True)
