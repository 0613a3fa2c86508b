"""Static meal catalog: configuration only.

Order matters: meal selection scans this tuple front to back, so the first
matching entry wins and substitutions follow catalog order.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitpath.plan.models import MealSuggestion, MealTag


@dataclass(frozen=True, slots=True)
class MealTemplate:
    id: str
    title: str
    description: str
    approx_calories: int
    tags: frozenset[MealTag]

    def has_tag(self, tag: MealTag) -> bool:
        return tag in self.tags

    def to_suggestion(self, substitutions: list[MealSuggestion] | None = None) -> MealSuggestion:
        return MealSuggestion(
            id=self.id,
            title=self.title,
            description=self.description,
            approx_calories=self.approx_calories,
            tags=[t for t in MealTag if t in self.tags],
            substitutions=substitutions or [],
        )


MEAL_TEMPLATES: tuple[MealTemplate, ...] = (
    MealTemplate(
        id="oats_greek",
        title="Greek yogurt oats",
        description="Oats + Greek yogurt + berries + nuts (balanced, easy).",
        approx_calories=450,
        tags=frozenset({
            MealTag.balanced, MealTag.high_protein, MealTag.vegetarian, MealTag.no_beef, MealTag.no_pork,
        }),
    ),
    MealTemplate(
        id="eggs_toast",
        title="Eggs & toast",
        description="2 eggs + wholegrain toast + fruit.",
        approx_calories=480,
        tags=frozenset({MealTag.balanced, MealTag.high_protein, MealTag.no_beef, MealTag.no_pork}),
    ),
    MealTemplate(
        id="tofu_bowl",
        title="Tofu rice bowl",
        description="Tofu + rice + mixed veggies (simple vegetarian bowl).",
        approx_calories=650,
        tags=frozenset({
            MealTag.balanced, MealTag.vegetarian, MealTag.no_beef, MealTag.no_pork, MealTag.halal,
        }),
    ),
    MealTemplate(
        id="chicken_salad",
        title="Chicken salad wrap",
        description="Chicken + salad + wrap (high protein).",
        approx_calories=620,
        tags=frozenset({
            MealTag.high_protein, MealTag.no_pork, MealTag.no_beef, MealTag.halal, MealTag.lower_fat,
        }),
    ),
    MealTemplate(
        id="salmon_veg",
        title="Salmon + veggies",
        description="Salmon + veggies + small rice portion.",
        approx_calories=720,
        tags=frozenset({
            MealTag.balanced, MealTag.high_protein, MealTag.no_pork, MealTag.no_beef, MealTag.halal,
        }),
    ),
    MealTemplate(
        id="lentil_soup",
        title="Lentil soup + bread",
        description="Lentil soup + wholegrain bread (warm & filling).",
        approx_calories=560,
        tags=frozenset({
            MealTag.balanced, MealTag.vegetarian, MealTag.no_beef, MealTag.no_pork, MealTag.halal,
            MealTag.lower_fat,
        }),
    ),
    MealTemplate(
        id="beef_bowl",
        title="Beef veggie bowl",
        description="Lean beef + veggies + rice (balanced).",
        approx_calories=750,
        tags=frozenset({MealTag.balanced, MealTag.high_protein, MealTag.no_pork}),
    ),
    MealTemplate(
        id="pork_noodles",
        title="Pork noodles",
        description="Pork noodles + greens (comfort food).",
        approx_calories=780,
        tags=frozenset({MealTag.balanced, MealTag.no_beef}),
    ),
)

_BY_ID: dict[str, MealTemplate] = {t.id: t for t in MEAL_TEMPLATES}


def list_meal_templates() -> list[MealTemplate]:
    return list(MEAL_TEMPLATES)


def get_meal_template(template_id: str) -> MealTemplate | None:
    return _BY_ID.get(template_id)
