"""
medplanner - Recipe Catalog.

Immutable, queryable collection of recipes. The planner core only reads
from it; the catalog never changes during a plan generation.
"""

import json
import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

import yaml

from medplanner.models.entities import MealType, Recipe

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """
    Ordered, read-only set of recipes keyed by id.

    Raises ValueError if two recipes share an id.
    """

    def __init__(self, recipes: Iterable[Recipe | dict]):
        items = tuple(r if isinstance(r, Recipe) else Recipe.model_validate(r) for r in recipes)

        by_id: dict[str, Recipe] = {}
        for recipe in items:
            if recipe.id in by_id:
                raise ValueError(f"Duplicate recipe id in catalog: {recipe.id}")
            by_id[recipe.id] = recipe

        self._recipes = items
        self._by_id = by_id

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._by_id

    def __repr__(self) -> str:
        return f"RecipeCatalog({len(self)} recipes)"

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    def get(self, recipe_id: str) -> Recipe | None:
        return self._by_id.get(recipe_id)

    def by_meal_type(self, meal_type: MealType | str) -> list[Recipe]:
        meal_type = MealType(meal_type)
        return [r for r in self._recipes if r.meal_type == meal_type]

    def cuisines(self) -> set[str]:
        return {r.cuisine for r in self._recipes}


def load_catalog(path: str | Path) -> RecipeCatalog:
    """
    Load a catalog from a JSON or YAML file.

    The file holds a list of recipe objects, or a mapping with a
    "recipes" key holding that list.

    Args:
        path: .json, .yaml or .yml file

    Returns:
        Validated RecipeCatalog
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Recipe catalog not found at: {p.resolve()}")

    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)

    if isinstance(data, dict):
        data = data.get("recipes", [])
    if not isinstance(data, list):
        raise ValueError(f"Catalog file must contain a list of recipes: {p}")

    catalog = RecipeCatalog(data)
    logger.info(f"Loaded {len(catalog)} recipes from {p}")
    return catalog


@lru_cache
def default_catalog() -> RecipeCatalog:
    """Get the bundled starter catalog (cached)."""
    from medplanner.catalog.recipes_data import RECIPES

    return RecipeCatalog(RECIPES)
