"""
medplanner - Terminal Formatters.

Rich renderables for plans, shopping lists, the catalog, and history.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from rich.table import Table

from medplanner.models.entities import PlannerResponse, Recipe, ShoppingLineItem

EMPTY_MESSAGES: dict[str, str] = {
    "meals": "No meals planned.",
    "shopping": "Your shopping list is empty.",
    "recipes": "No recipes in the catalog.",
    "history": "No recipes used in the last 30 days.",
}


def format_meals_table(plan: PlannerResponse, show_details: bool = True) -> Table:
    """One row per planned meal, with optional recipe details."""
    table = Table(title="Weekly Plan", show_lines=show_details)
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Meal", style="magenta")
    table.add_column("Recipe", style="bold")
    table.add_column("Cuisine")
    table.add_column("Protein")
    if show_details:
        table.add_column("Details")

    for meal in plan.meals:
        recipe = meal.recipe
        row = [
            meal.date_label,
            meal.meal_type.value.title(),
            recipe.name,
            recipe.cuisine.title(),
            recipe.protein,
        ]
        if show_details:
            details = f"{recipe.summary}\nServes {recipe.servings}"
            if recipe.url:
                details += f"\n[link={recipe.url}]View full recipe[/link]"
            row.append(details)
        table.add_row(*row)
    return table


def format_shopping_table(items: Iterable[ShoppingLineItem]) -> Table:
    """Consolidated shopping list with display quantities."""
    table = Table(title="Shopping List")
    table.add_column("Item", style="bold")
    table.add_column("Quantity", justify="right")
    for line in items:
        table.add_row(line.item, line.display_quantity)
    return table


def format_recipes_table(recipes: Iterable[Recipe]) -> Table:
    """Catalog listing, one row per recipe."""
    table = Table(title="Recipe Catalog")
    table.add_column("ID", style="dim")
    table.add_column("Meal", style="magenta")
    table.add_column("Name", style="bold")
    table.add_column("Cuisine")
    table.add_column("Protein")
    for recipe in recipes:
        table.add_row(
            recipe.id,
            recipe.meal_type.value,
            recipe.name,
            recipe.cuisine,
            recipe.protein,
        )
    return table


def format_history_table(history: dict[str, int], names: dict[str, str] | None = None) -> Table:
    """History entries, most recent first."""
    names = names or {}
    table = Table(title="Recently Used Recipes")
    table.add_column("Recipe")
    table.add_column("Last used", style="cyan")
    for recipe_id, ts in sorted(history.items(), key=lambda kv: (-kv[1], kv[0])):
        used = datetime.fromtimestamp(ts / 1000).strftime("%Y-%m-%d %H:%M")
        table.add_row(names.get(recipe_id, recipe_id), used)
    return table
