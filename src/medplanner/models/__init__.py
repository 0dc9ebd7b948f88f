"""
medplanner - Data Models.

Pydantic models for recipes, planner requests, and planner responses.
"""

from medplanner.models.entities import (
    CAPPED_PROTEIN,
    MEAL_TYPE_ORDER,
    REQUIRED_CUISINES,
    HistorySnapshot,
    Ingredient,
    MealType,
    PlannedMeal,
    PlannerRequest,
    PlannerResponse,
    Recipe,
    ShoppingLineItem,
)

__all__ = [
    "CAPPED_PROTEIN",
    "MEAL_TYPE_ORDER",
    "REQUIRED_CUISINES",
    "HistorySnapshot",
    "Ingredient",
    "MealType",
    "PlannedMeal",
    "PlannerRequest",
    "PlannerResponse",
    "Recipe",
    "ShoppingLineItem",
]
