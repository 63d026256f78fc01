"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from nutriplan.domain.meals import DietTag, MealDraft, MealType
from nutriplan.domain.plans import MealSlot
from nutriplan.domain.targets import ActivityLevel, FitnessGoal, Gender
from nutriplan.domain.users import UserRole


class RegisterRequest(BaseModel):
    """New account payload."""

    name: str = ""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ProfileUpdateRequest(BaseModel):
    """Partial body metrics update."""

    age: int | None = Field(default=None, gt=0, lt=130)
    gender: Gender | None = None
    height_cm: float | None = Field(default=None, gt=0)
    weight_kg: float | None = Field(default=None, gt=0)
    activity_level: ActivityLevel | None = None
    goal: FitnessGoal | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields present in the request."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class WeightLogRequest(BaseModel):
    """Weight observation payload."""

    weight_kg: float = Field(gt=0)


class AssignMealRequest(BaseModel):
    """Meal assignment payload. ``meal_id`` uses the ``<source>:<value>`` form."""

    meal_id: str
    slot: MealSlot | None = None


class WaterRequest(BaseModel):
    """Absolute water intake in liters."""

    amount: float


class WaterAdjustRequest(BaseModel):
    """Relative water intake change in liters."""

    delta: float


class MealRequest(BaseModel):
    """Admin meal editor payload."""

    name: str = Field(min_length=1)
    meal_type: MealType = MealType.LUNCH
    calories: int = Field(default=0, ge=0)
    protein_g: int = Field(default=0, ge=0)
    diet_tag: DietTag = DietTag.VEGETARIAN
    image_url: str | None = None

    def to_draft(self) -> MealDraft:
        """Convert to the domain draft."""
        return MealDraft(
            name=self.name,
            meal_type=self.meal_type,
            calories=self.calories,
            protein_g=self.protein_g,
            diet_tag=self.diet_tag.value,
            image_url=self.image_url or None,
        )


class RoleRequest(BaseModel):
    """Role change payload."""

    role: UserRole
