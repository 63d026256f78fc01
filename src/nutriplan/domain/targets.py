"""Domain models for body metrics and daily nutrition targets."""

from dataclasses import dataclass
from enum import Enum, StrEnum


class Gender(StrEnum):
    """Gender buckets used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(Enum):
    """Activity level mapped to its TDEE multiplier."""

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    ACTIVE = 1.725
    VERY_ACTIVE = 1.9

    @property
    def multiplier(self) -> float:
        """Return the TDEE multiplier."""
        return float(self.value)


class FitnessGoal(StrEnum):
    """Fitness goal driving calorie and protein adjustments."""

    WEIGHT_LOSS = "Weight Loss"
    MAINTAIN = "Maintain Weight"
    WEIGHT_GAIN = "Weight Gain"
    MUSCLE_GAIN = "Muscle Gain"


@dataclass(frozen=True)
class BodyMetrics:
    """Inputs to the target calculator."""

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    goal: FitnessGoal


@dataclass(frozen=True)
class NutritionTargets:
    """Derived daily targets. Always computed together from body metrics."""

    calories: int
    protein_g: int
    water_l: float


@dataclass(frozen=True)
class CalorieDistribution:
    """Suggested calorie budget per meal slot."""

    breakfast: int
    lunch: int
    dinner: int
