"""Tests for the recipe catalog and its loaders."""

import json

import pytest
import yaml
from pydantic import ValidationError

from medplanner.catalog import RecipeCatalog, default_catalog, load_catalog
from medplanner.models import MEAL_TYPE_ORDER, MealType

RECIPE_DICTS = [
    {
        "id": "b-tortilla",
        "name": "Tortilla Española",
        "mealType": "breakfast",
        "cuisine": "Spanish",
        "protein": "Eggs",
        "ingredients": [{"item": "eggs", "quantity": 6}],
    },
    {
        "id": "d-asada",
        "name": "Carne Asada",
        "meal_type": "dinner",
        "cuisine": "mexican",
        "protein": "beef",
        "servings": 4,
    },
]


class TestRecipeCatalog:
    """Test catalog construction and queries."""

    def test_builds_from_dicts(self):
        catalog = RecipeCatalog(RECIPE_DICTS)

        assert len(catalog) == 2
        assert [r.id for r in catalog] == ["b-tortilla", "d-asada"]
        assert "d-asada" in catalog

    def test_tags_are_lower_cased(self):
        recipe = RecipeCatalog(RECIPE_DICTS).get("b-tortilla")
        assert recipe.cuisine == "spanish"
        assert recipe.protein == "eggs"
        assert recipe.has_required_cuisine is True

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="b-tortilla"):
            RecipeCatalog(RECIPE_DICTS + [RECIPE_DICTS[0]])

    def test_by_meal_type(self):
        catalog = RecipeCatalog(RECIPE_DICTS)
        assert [r.id for r in catalog.by_meal_type("dinner")] == ["d-asada"]
        assert catalog.by_meal_type(MealType.LUNCH) == []

    def test_get_missing(self):
        assert RecipeCatalog(RECIPE_DICTS).get("nope") is None

    def test_invalid_recipe_rejected(self):
        with pytest.raises(ValidationError):
            RecipeCatalog([{"id": "x", "name": "X", "meal_type": "brunch", "cuisine": "a", "protein": "b"}])


class TestLoadCatalog:
    """Test reading catalogs from disk."""

    def test_load_json(self, tmp_path):
        path = tmp_path / "recipes.json"
        path.write_text(json.dumps(RECIPE_DICTS), encoding="utf-8")
        assert len(load_catalog(path)) == 2

    def test_load_yaml_with_recipes_key(self, tmp_path):
        path = tmp_path / "recipes.yaml"
        path.write_text(yaml.safe_dump({"recipes": RECIPE_DICTS}, allow_unicode=True), encoding="utf-8")

        catalog = load_catalog(path)
        assert catalog.get("b-tortilla").name == "Tortilla Española"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")

    def test_non_list_rejected(self, tmp_path):
        path = tmp_path / "recipes.json"
        path.write_text(json.dumps({"recipes": "nope"}))
        with pytest.raises(ValueError):
            load_catalog(path)


class TestDefaultCatalog:
    """The bundled catalog must support a default week."""

    def test_every_meal_type_has_required_cuisine(self):
        catalog = default_catalog()
        for meal_type in MEAL_TYPE_ORDER:
            recipes = catalog.by_meal_type(meal_type)
            assert len(recipes) >= 5
            assert any(r.has_required_cuisine for r in recipes)

    def test_cached(self):
        assert default_catalog() is default_catalog()
