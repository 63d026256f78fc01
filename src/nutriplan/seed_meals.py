"""Built-in starter meals shipped with the application."""

from nutriplan.domain.meals import DietTag, Meal, MealId, MealType


def _seed(  # noqa: PLR0913
    seed_id: str,
    name: str,
    meal_type: MealType,
    calories: int,
    protein_g: int,
    diet_tag: DietTag,
) -> Meal:
    return Meal(
        id=MealId.seed(seed_id),
        name=name,
        meal_type=meal_type,
        calories=calories,
        protein_g=protein_g,
        diet_tag=diet_tag.value,
    )


SEED_MEALS: tuple[Meal, ...] = (
    _seed("m1", "Oatmeal with Berries", MealType.BREAKFAST, 350, 12, DietTag.VEGAN),
    _seed("m2", "Yogurt Parfait", MealType.BREAKFAST, 300, 20, DietTag.VEGETARIAN),
    _seed("m3", "Egg Scramble", MealType.BREAKFAST, 280, 26, DietTag.HIGH_PROTEIN),
    _seed("m4", "Grilled Chicken Salad", MealType.LUNCH, 450, 40, DietTag.NON_VEG),
    _seed("m5", "Quinoa Buddha Bowl", MealType.LUNCH, 520, 18, DietTag.VEGAN),
    _seed("m6", "Paneer Tikka Wrap", MealType.LUNCH, 580, 28, DietTag.VEGETARIAN),
    _seed("m7", "Baked Salmon", MealType.DINNER, 600, 42, DietTag.NON_VEG),
    _seed("m8", "Lentil Curry with Rice", MealType.DINNER, 540, 22, DietTag.VEGAN),
    _seed("m9", "Turkey Chili", MealType.DINNER, 480, 38, DietTag.HIGH_PROTEIN),
)
