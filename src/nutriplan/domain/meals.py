"""Domain models for the meal catalog."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_MEAL_IMAGE = (
    "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"
    "?auto=format&fit=crop&w=800"
)


class MealType(StrEnum):
    """Meal-time category of a catalog meal."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"


class DietTag(StrEnum):
    """Diet tags offered by the admin meal editor."""

    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    NON_VEG = "Non-Veg"
    HIGH_PROTEIN = "High Protein"


class MealSource(StrEnum):
    """Where a meal lives: the built-in seed list or the persisted catalog."""

    SEED = "seed"
    PERSISTED = "persisted"


@dataclass(frozen=True)
class MealId:
    """Tagged meal identifier."""

    source: MealSource
    value: str

    @classmethod
    def seed(cls, value: str) -> "MealId":
        """Build an identifier for a seed catalog meal."""
        return cls(MealSource.SEED, value)

    @classmethod
    def persisted(cls, value: int) -> "MealId":
        """Build an identifier for a persisted catalog meal."""
        return cls(MealSource.PERSISTED, str(value))

    @classmethod
    def parse(cls, raw: str) -> "MealId":
        """Parse the ``<source>:<value>`` form produced by ``str()``."""
        source_raw, sep, value = raw.partition(":")
        if not sep or not value:
            raise ValueError(f"Malformed meal id: {raw!r}")
        source = MealSource(source_raw)
        if source is MealSource.PERSISTED and not value.isdigit():
            raise ValueError(f"Persisted meal ids are numeric: {raw!r}")
        return cls(source, value)

    @property
    def is_seed(self) -> bool:
        """Return True for seed catalog identifiers."""
        return self.source is MealSource.SEED

    def persisted_key(self) -> int:
        """Return the numeric key of a persisted meal."""
        if self.is_seed:
            raise ValueError(f"Seed meal id has no persisted key: {self.value}")
        return int(self.value)

    def __str__(self) -> str:
        return f"{self.source}:{self.value}"


@dataclass(frozen=True)
class MealDraft:
    """Editable meal fields, without an identifier."""

    name: str
    meal_type: MealType
    calories: int
    protein_g: int
    diet_tag: str
    image_url: str | None = None


@dataclass(frozen=True)
class Meal:
    """Immutable catalog meal. Plans hold copies of these values."""

    id: MealId
    name: str
    meal_type: MealType
    calories: int
    protein_g: int
    diet_tag: str
    image_url: str = DEFAULT_MEAL_IMAGE

    @classmethod
    def from_draft(cls, meal_id: MealId, draft: MealDraft) -> "Meal":
        """Create a meal from draft fields."""
        return cls(
            id=meal_id,
            name=draft.name,
            meal_type=draft.meal_type,
            calories=draft.calories,
            protein_g=draft.protein_g,
            diet_tag=draft.diet_tag,
            image_url=draft.image_url or DEFAULT_MEAL_IMAGE,
        )


@dataclass(frozen=True)
class MealOverlayEntry:
    """Deleted/converted status of a seed meal."""

    seed_id: str
    deleted: bool = False
    converted_meal_id: int | None = None

    @property
    def hides_seed(self) -> bool:
        """Return True when the seed meal must not appear in the catalog."""
        return self.deleted or self.converted_meal_id is not None
