"""Static workout catalog: configuration only. Order is the selection order."""

from __future__ import annotations

from dataclasses import dataclass

from fitpath.plan.models import WorkoutIntensity, WorkoutSuggestion


@dataclass(frozen=True, slots=True)
class WorkoutTemplate:
    id: str
    title: str
    details: str
    intensity: WorkoutIntensity

    def to_suggestion(self, substitutions: list[WorkoutSuggestion] | None = None) -> WorkoutSuggestion:
        return WorkoutSuggestion(
            id=self.id,
            title=self.title,
            details=self.details,
            intensity=self.intensity,
            substitutions=substitutions or [],
        )


WORKOUT_TEMPLATES: tuple[WorkoutTemplate, ...] = (
    WorkoutTemplate(
        id="walk_30",
        title="Walk 30 minutes",
        details="Easy pace. Aim for light sweating, able to talk.",
        intensity=WorkoutIntensity.low,
    ),
    WorkoutTemplate(
        id="mobility_12",
        title="Mobility 12 minutes",
        details="Neck/shoulders/hips + gentle stretches. No pain.",
        intensity=WorkoutIntensity.low,
    ),
    WorkoutTemplate(
        id="strength_20",
        title="Strength 20 minutes",
        details="3 rounds: squats, push-ups (or incline), rows (band), plank.",
        intensity=WorkoutIntensity.moderate,
    ),
    WorkoutTemplate(
        id="interval_16",
        title="Intervals 16 minutes",
        details="8 rounds: 40s brisk + 80s easy. Stop if dizzy or painful.",
        intensity=WorkoutIntensity.high,
    ),
)

_BY_ID: dict[str, WorkoutTemplate] = {t.id: t for t in WORKOUT_TEMPLATES}


def list_workout_templates() -> list[WorkoutTemplate]:
    return list(WORKOUT_TEMPLATES)


def get_workout_template(template_id: str) -> WorkoutTemplate | None:
    return _BY_ID.get(template_id)
