"""BMR estimation without height: math only.

- sex + age known: Schofield-style weight-only equations by age band.
- sex or age missing: conservative fallback of ~22 kcal/kg/day.

Rough consumer wellness estimate; not medical advice.
"""

from __future__ import annotations

import math

from fitpath.plan.models import Sex

FALLBACK_KCAL_PER_KG = 22.0
FALLBACK_BOUNDS = (900, 3000)
BAND_BOUNDS = (900, 3500)

# (upper age bound exclusive, slope, intercept); last band has no upper bound.
_MALE_BANDS: tuple[tuple[int | None, float, float], ...] = (
    (10, 22.7, 495.0),
    (18, 17.5, 651.0),
    (30, 15.3, 679.0),
    (60, 11.6, 879.0),
    (None, 13.5, 487.0),
)

_FEMALE_BANDS: tuple[tuple[int | None, float, float], ...] = (
    (10, 22.5, 499.0),
    (18, 12.2, 746.0),
    (30, 14.7, 496.0),
    (60, 8.7, 829.0),
    (None, 10.5, 596.0),
)


def round_half_up(value: float) -> int:
    """Round to nearest int, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp_int(value: int, lo: int, hi: int) -> int:
    return min(max(value, lo), hi)


def _band_kcal(bands: tuple[tuple[int | None, float, float], ...], weight_kg: float, age: int) -> float:
    for upper, slope, intercept in bands:
        if upper is None or age < upper:
            return slope * weight_kg + intercept
    # Unreachable: last band is open-ended
    raise AssertionError("age band table must end with an open band")


def estimate_bmr(weight_kg: float, sex: Sex, age_years: int | None) -> int:
    """Estimated basal metabolic rate in kcal/day.

    Raises ValueError if weight_kg is not positive; callers must check
    weights before calling.
    """
    if not weight_kg > 0:
        raise ValueError(f"weight_kg must be positive, got {weight_kg!r}")

    if sex == Sex.unspecified or age_years is None:
        return clamp_int(round_half_up(FALLBACK_KCAL_PER_KG * weight_kg), *FALLBACK_BOUNDS)

    bands = _MALE_BANDS if sex == Sex.male else _FEMALE_BANDS
    kcal = _band_kcal(bands, weight_kg, age_years)
    return clamp_int(int(kcal), *BAND_BOUNDS)
