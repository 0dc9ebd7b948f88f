"""
Tests for end-to-end plan generation.

Property tests run many seeds against the bundled catalog so the rules
are checked across different random draws.
"""

import random
from datetime import date

import pytest

from medplanner.catalog import RecipeCatalog, default_catalog
from medplanner.core import (
    InsufficientCandidatesError,
    NoRequiredCuisineError,
    generate_weekly_plan,
)
from medplanner.models import MealType, PlannerRequest

SEEDS = range(40)
WEEK_REQUEST = PlannerRequest(breakfasts=2, lunches=3, dinners=5, week_of=date(2024, 1, 1))
RECENT_HISTORY = {
    "b-shakshuka": 1_703_000_000_000,
    "l-gazpacho": 1_703_000_000_000,
    "d-paella-mixta": 1_703_000_000_000,
    "d-carne-asada": 1_703_500_000_000,
}


class TestScenarios:
    """Fixed catalogs with known outcomes."""

    def test_single_spanish_breakfast(self, make_recipe, rng, fixed_now):
        catalog = RecipeCatalog([make_recipe("b-tortilla", "breakfast", "spanish", "eggs")])

        result = generate_weekly_plan(
            {"breakfasts": 1, "lunches": 0, "dinners": 0},
            {},
            catalog=catalog,
            rng=rng,
            timestamp=fixed_now,
        )

        assert result.recipe_ids == ["b-tortilla"]
        assert result.updated_history == {"b-tortilla": fixed_now}

    def test_two_beef_dinners_fail(self, make_recipe, rng):
        catalog = RecipeCatalog([
            make_recipe("d-stifado", "dinner", "greek", "beef"),
            make_recipe("d-asada", "dinner", "mexican", "beef"),
        ])
        with pytest.raises(InsufficientCandidatesError, match="dinner"):
            generate_weekly_plan(PlannerRequest(dinners=2), {}, catalog=catalog, rng=rng)

    def test_empty_meal_type_fails(self, mixed_catalog, rng):
        catalog = RecipeCatalog([r for r in mixed_catalog if r.meal_type != MealType.LUNCH])
        with pytest.raises(InsufficientCandidatesError) as exc_info:
            generate_weekly_plan(PlannerRequest(breakfasts=1, lunches=1), {}, catalog=catalog, rng=rng)
        assert exc_info.value.meal_type == MealType.LUNCH

    def test_breakfast_beef_blocks_dinner_beef(self, make_recipe, rng):
        catalog = RecipeCatalog([
            make_recipe("b-steak-eggs", "breakfast", "mexican", "beef"),
            make_recipe("d-stifado", "dinner", "greek", "beef"),
        ])
        with pytest.raises(InsufficientCandidatesError, match="dinner"):
            generate_weekly_plan(PlannerRequest(breakfasts=1, dinners=1), {}, catalog=catalog, rng=rng)

    def test_repair_swaps_in_required_cuisine(self, make_recipe, fixed_now):
        catalog = RecipeCatalog([
            make_recipe("b-yogurt", "breakfast", "greek", "dairy"),
            make_recipe("d-souvlaki", "dinner", "greek", "chicken"),
            make_recipe("d-ajillo", "dinner", "spanish", "chicken"),
        ])
        request = PlannerRequest(breakfasts=1, dinners=1)

        for seed in SEEDS:
            result = generate_weekly_plan(
                request, {}, catalog=catalog, rng=random.Random(seed), timestamp=fixed_now
            )
            assert result.recipe_ids == ["b-yogurt", "d-ajillo"]
            # The swapped-out recipe is not stamped into history
            assert set(result.updated_history) == {"b-yogurt", "d-ajillo"}

    def test_no_required_cuisine_anywhere_fails(self, make_recipe, rng):
        catalog = RecipeCatalog([
            make_recipe("b-yogurt", "breakfast", "greek", "dairy"),
            make_recipe("d-souvlaki", "dinner", "greek", "chicken"),
        ])
        with pytest.raises(NoRequiredCuisineError):
            generate_weekly_plan(PlannerRequest(breakfasts=1, dinners=1), {}, catalog=catalog, rng=rng)

    def test_empty_request_fails_cuisine_check(self, mixed_catalog, rng):
        with pytest.raises(NoRequiredCuisineError):
            generate_weekly_plan(PlannerRequest(), {}, catalog=mixed_catalog, rng=rng)


class TestPlanProperties:
    """Rules hold for every seed on the bundled catalog."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_counts_and_uniqueness(self, seed):
        result = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(seed))

        assert len(result.meals) == 10
        assert len(set(result.recipe_ids)) == 10
        assert len(result.meals_for(MealType.BREAKFAST)) == 2
        assert len(result.meals_for(MealType.LUNCH)) == 3
        assert len(result.meals_for(MealType.DINNER)) == 5

    @pytest.mark.parametrize("seed", SEEDS)
    def test_beef_cap(self, seed):
        result = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(seed))
        assert sum(meal.recipe.is_beef for meal in result.meals) <= 1

    @pytest.mark.parametrize("seed", SEEDS)
    def test_required_cuisine_present(self, seed):
        result = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(seed))
        assert any(meal.recipe.has_required_cuisine for meal in result.meals)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_recent_history_excluded(self, seed):
        result = generate_weekly_plan(WEEK_REQUEST, RECENT_HISTORY, rng=random.Random(seed))
        assert not set(result.recipe_ids) & set(RECENT_HISTORY)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_history_superset_with_shared_timestamp(self, seed, fixed_now):
        result = generate_weekly_plan(
            WEEK_REQUEST, RECENT_HISTORY, rng=random.Random(seed), timestamp=fixed_now
        )

        for recipe_id, ts in RECENT_HISTORY.items():
            assert result.updated_history[recipe_id] == ts
        new_entries = {k: v for k, v in result.updated_history.items() if k not in RECENT_HISTORY}
        assert set(new_entries) == set(result.recipe_ids)
        assert set(new_entries.values()) == {fixed_now}

    @pytest.mark.parametrize("seed", SEEDS)
    def test_meals_ordered_by_meal_type(self, seed):
        result = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(seed))

        order = [meal.meal_type for meal in result.meals]
        assert order == [MealType.BREAKFAST] * 2 + [MealType.LUNCH] * 3 + [MealType.DINNER] * 5
        assert all(meal.recipe.meal_type == meal.meal_type for meal in result.meals)


class TestPlanOutput:
    """Test response contents beyond the selection rules."""

    def test_input_history_not_mutated(self, rng):
        history = dict(RECENT_HISTORY)
        generate_weekly_plan(WEEK_REQUEST, history, rng=rng)
        assert history == RECENT_HISTORY

    def test_same_seed_same_plan(self, fixed_now):
        first = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(3), timestamp=fixed_now)
        second = generate_weekly_plan(WEEK_REQUEST, {}, rng=random.Random(3), timestamp=fixed_now)
        assert first == second

    def test_dict_request_with_iso_week(self, rng):
        result = generate_weekly_plan(
            {"breakfasts": 1, "lunches": 1, "dinners": 1, "weekOf": "2024-01-01"},
            {},
            rng=rng,
        )
        assert [m.date_label for m in result.meals] == ["Mon, Jan 1"] * 3

    def test_labels_default_to_monday(self, rng):
        result = generate_weekly_plan(
            PlannerRequest(dinners=2), {}, rng=rng, today=date(2024, 1, 10)
        )
        assert [m.date_label for m in result.meals] == ["Mon, Jan 8", "Tue, Jan 9"]

    def test_shopping_list_covers_plan(self, rng):
        result = generate_weekly_plan(WEEK_REQUEST, {}, rng=rng)

        expected_items = {
            ingredient.item.lower()
            for meal in result.meals
            for ingredient in meal.recipe.ingredients
        }
        items = [line.item.lower() for line in result.shopping_list]
        assert set(items) == expected_items
        assert len(items) == len(expected_items)
        assert [line.item.casefold() for line in result.shopping_list] == sorted(
            line.item.casefold() for line in result.shopping_list
        )

    def test_uses_bundled_catalog_by_default(self, rng):
        result = generate_weekly_plan(PlannerRequest(breakfasts=1, dinners=1), {}, rng=rng)
        catalog = default_catalog()
        assert all(recipe_id in catalog for recipe_id in result.recipe_ids)
