"""Tests for rich table formatters."""

from datetime import date

from rich.console import Console

from medplanner.core.assembler import assemble_meals
from medplanner.formatters import (
    format_history_table,
    format_meals_table,
    format_recipes_table,
    format_shopping_table,
)
from medplanner.models import PlannerRequest, PlannerResponse, ShoppingLineItem


def _render(renderable) -> str:
    console = Console(record=True, width=160)
    console.print(renderable)
    return console.export_text()


class TestFormatters:
    """Rendered tables contain the expected text."""

    def test_meals_table(self, mixed_catalog):
        request = PlannerRequest(breakfasts=1, week_of=date(2024, 1, 1))
        plan = PlannerResponse(
            meals=assemble_meals(request, [mixed_catalog.get("b-tortilla")], [], [])
        )

        text = _render(format_meals_table(plan, show_details=False))

        assert "Mon, Jan 1" in text
        assert "B Tortilla" in text
        assert "Spanish" in text

    def test_shopping_table_as_needed(self):
        text = _render(format_shopping_table([
            ShoppingLineItem(item="tomato", quantity=3, unit="cup"),
            ShoppingLineItem(item="salt"),
        ]))
        assert "3 cup" in text
        assert "As needed" in text

    def test_recipes_table(self, mixed_catalog):
        text = _render(format_recipes_table(mixed_catalog))
        assert "d-ajillo" in text
        assert "breakfast" in text

    def test_history_table_uses_names(self):
        text = _render(format_history_table({"b-tortilla": 1_705_320_000_000}, {"b-tortilla": "Tortilla"}))
        assert "Tortilla" in text
        assert "2024-01-1" in text
