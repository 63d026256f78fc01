"""Daily nutrition target calculation.

Calories use the Mifflin-St Jeor BMR scaled by an activity multiplier and
shifted by the fitness goal. Inputs are not validated here: nonsensical
metrics produce nonsensical targets and it is up to the caller to reject
them first.
"""

import math

from nutriplan.domain.targets import (
    ActivityLevel,
    BodyMetrics,
    CalorieDistribution,
    FitnessGoal,
    Gender,
    NutritionTargets,
)

# The "other" offset is the midpoint of the male and female constants. This is
# a simplification, not a medical claim.
_BMR_GENDER_OFFSETS = {
    Gender.MALE: 5.0,
    Gender.FEMALE: -161.0,
    Gender.OTHER: -78.0,
}

_GOAL_CALORIE_ADJUSTMENTS = {
    FitnessGoal.WEIGHT_LOSS: -500.0,
    FitnessGoal.MAINTAIN: 0.0,
    FitnessGoal.WEIGHT_GAIN: 400.0,
    FitnessGoal.MUSCLE_GAIN: 400.0,
}

_PROTEIN_G_PER_KG = {
    FitnessGoal.WEIGHT_LOSS: 2.0,
    FitnessGoal.MAINTAIN: 1.2,
    FitnessGoal.WEIGHT_GAIN: 1.8,
    FitnessGoal.MUSCLE_GAIN: 1.8,
}

WATER_L_PER_KG = 0.035

_SLOT_SHARES = {"breakfast": 0.3, "lunch": 0.4, "dinner": 0.3}


def calculate_bmr(
    age: int, gender: Gender, weight_kg: float, height_cm: float
) -> float:
    """Return the basal metabolic rate in kcal."""
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + _BMR_GENDER_OFFSETS[gender]


def calculate_daily_calories(  # noqa: PLR0913
    age: int,
    gender: Gender,
    weight_kg: float,
    height_cm: float,
    activity: ActivityLevel,
    goal: FitnessGoal = FitnessGoal.MAINTAIN,
) -> int:
    """Return the daily calorie target, rounded once at the end."""
    tdee = calculate_bmr(age, gender, weight_kg, height_cm) * activity.multiplier
    return round_half_up(tdee + _GOAL_CALORIE_ADJUSTMENTS[goal])


def calculate_daily_protein(weight_kg: float, goal: FitnessGoal) -> int:
    """Return the daily protein target in grams."""
    return round_half_up(weight_kg * _PROTEIN_G_PER_KG[goal])


def calculate_daily_water(weight_kg: float) -> float:
    """Return the daily water target in liters, to one decimal."""
    return round_half_up(weight_kg * WATER_L_PER_KG * 10) / 10


def compute_targets(  # noqa: PLR0913
    age: int,
    gender: Gender,
    weight_kg: float,
    height_cm: float,
    activity: ActivityLevel,
    goal: FitnessGoal,
) -> NutritionTargets:
    """Compute calorie, protein and water targets together."""
    return NutritionTargets(
        calories=calculate_daily_calories(
            age, gender, weight_kg, height_cm, activity, goal
        ),
        protein_g=calculate_daily_protein(weight_kg, goal),
        water_l=calculate_daily_water(weight_kg),
    )


def targets_for(metrics: BodyMetrics) -> NutritionTargets:
    """Compute targets from a metrics record."""
    return compute_targets(
        age=metrics.age,
        gender=metrics.gender,
        weight_kg=metrics.weight_kg,
        height_cm=metrics.height_cm,
        activity=metrics.activity_level,
        goal=metrics.goal,
    )


def calorie_distribution(total_calories: int) -> CalorieDistribution:
    """Split a calorie target 30/40/30 across breakfast, lunch and dinner.

    Each share is rounded on its own, so the parts may not add up to the
    total exactly.
    """
    return CalorieDistribution(
        **{
            slot: round_half_up(total_calories * share)
            for slot, share in _SLOT_SHARES.items()
        }
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
