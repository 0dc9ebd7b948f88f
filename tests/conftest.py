"""
Pytest configuration and fixtures for medplanner tests.
"""

import os
import random

import pytest

# Keep a developer's .env from changing test behaviour
os.environ["MEDPLANNER_ENV"] = "development"
os.environ.pop("MEDPLANNER_RANDOM_SEED", None)

from medplanner.catalog import RecipeCatalog
from medplanner.models import Recipe

FIXED_NOW_MS = 1_704_067_200_000  # 2024-01-01T00:00:00Z


def build_recipe(
    recipe_id: str,
    meal_type: str = "dinner",
    cuisine: str = "greek",
    protein: str = "chicken",
    ingredients: list[dict] | None = None,
) -> Recipe:
    """Build a recipe with sensible defaults for tests."""
    return Recipe(
        id=recipe_id,
        name=recipe_id.replace("-", " ").title(),
        meal_type=meal_type,
        cuisine=cuisine,
        protein=protein,
        ingredients=ingredients or [],
        servings=2,
    )


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def fixed_now():
    return FIXED_NOW_MS


@pytest.fixture
def mixed_catalog():
    """
    Small catalog covering every rule.

    - 3 breakfasts (1 spanish)
    - 3 lunches (1 mexican, 1 beef)
    - 4 dinners (2 beef, 1 spanish)
    """
    return RecipeCatalog([
        build_recipe("b-yogurt", "breakfast", "greek", "dairy"),
        build_recipe("b-oats", "breakfast", "italian", "plant"),
        build_recipe("b-tortilla", "breakfast", "spanish", "eggs"),
        build_recipe("l-salad", "lunch", "greek", "dairy"),
        build_recipe("l-tinga", "lunch", "mexican", "chicken"),
        build_recipe("l-kofta", "lunch", "levantine", "beef"),
        build_recipe("d-stifado", "dinner", "greek", "beef"),
        build_recipe("d-asada", "dinner", "mexican", "beef"),
        build_recipe("d-souvlaki", "dinner", "greek", "chicken"),
        build_recipe("d-ajillo", "dinner", "spanish", "chicken"),
    ])


@pytest.fixture
def make_recipe():
    """Factory fixture for one-off recipes."""
    return build_recipe
