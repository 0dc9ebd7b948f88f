"""
medplanner - Planner Entity Models.

Pydantic models shared by the catalog, the planner core, and the CLI.
They are used for:
- Validating recipe records loaded from the catalog
- Validating planner requests (counts, week start)
- Typed planner responses (meals, shopping list, updated history)
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_CUISINES: frozenset[str] = frozenset({"spanish", "mexican"})
CAPPED_PROTEIN = "beef"

# Recipe id -> last-used timestamp (milliseconds since epoch)
HistorySnapshot = dict[str, int]


class MealType(str, Enum):
    """Meal slot a recipe is tagged for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


# Selection order matters: the beef cap and chosen ids carry forward in this order
MEAL_TYPE_ORDER: tuple[MealType, ...] = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)


# =============================================================================
# Catalog Entities
# =============================================================================


class Ingredient(BaseModel):
    """One ingredient line of a recipe."""

    model_config = ConfigDict(frozen=True)

    item: str
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None


class Recipe(BaseModel):
    """
    A catalog recipe.

    Tagged with meal type, cuisine, and protein. Cuisine and protein tags
    are stored lower-cased so rule checks are simple equality tests.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    meal_type: MealType = Field(alias="mealType")
    cuisine: str
    protein: str
    ingredients: tuple[Ingredient, ...] = ()
    servings: int = Field(default=2, ge=1)
    summary: str = ""
    url: str | None = None

    @field_validator("cuisine", "protein")
    @classmethod
    def _lower_tag(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def is_beef(self) -> bool:
        return self.protein == CAPPED_PROTEIN

    @property
    def has_required_cuisine(self) -> bool:
        return self.cuisine in REQUIRED_CUISINES


# =============================================================================
# Planner Request / Response
# =============================================================================


class PlannerRequest(BaseModel):
    """How many of each meal to plan, and which week to label."""

    model_config = ConfigDict(populate_by_name=True)

    breakfasts: int = Field(default=0, ge=0)
    lunches: int = Field(default=0, ge=0)
    dinners: int = Field(default=0, ge=0)
    week_of: date | None = Field(default=None, alias="weekOf")

    @property
    def total_meals(self) -> int:
        return self.breakfasts + self.lunches + self.dinners

    def count_for(self, meal_type: MealType) -> int:
        return {
            MealType.BREAKFAST: self.breakfasts,
            MealType.LUNCH: self.lunches,
            MealType.DINNER: self.dinners,
        }[meal_type]


class PlannedMeal(BaseModel):
    """A recipe bound to a meal slot and a day label."""

    day_index: int  # Position within this meal type's selection
    meal_type: MealType
    recipe: Recipe
    date_label: str


class ShoppingLineItem(BaseModel):
    """One consolidated line of the shopping list."""

    item: str
    quantity: float | None = None
    unit: str | None = None

    @property
    def display_quantity(self) -> str:
        """Quantity and unit for display; no quantity means "As needed"."""
        if not self.quantity:
            return "As needed"
        qty = f"{self.quantity:g}"
        return f"{qty} {self.unit}" if self.unit else qty


class PlannerResponse(BaseModel):
    """Result of one plan generation."""

    meals: list[PlannedMeal] = Field(default_factory=list)
    shopping_list: list[ShoppingLineItem] = Field(default_factory=list)
    updated_history: HistorySnapshot = Field(default_factory=dict)

    def meals_for(self, meal_type: MealType) -> list[PlannedMeal]:
        return [meal for meal in self.meals if meal.meal_type == meal_type]

    @property
    def recipe_ids(self) -> list[str]:
        return [meal.recipe.id for meal in self.meals]
