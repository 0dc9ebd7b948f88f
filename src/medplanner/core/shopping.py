"""
medplanner - Shopping Aggregator.

Merges ingredient lines across the planned recipes into one list.
Units are carried, never converted.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from medplanner.models.entities import Ingredient, Recipe, ShoppingLineItem


def round_quantity(value: float | Decimal) -> float:
    """Round to 2 decimals, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass
class _LineTotal:
    """Running total for one shopping item, rounded only when emitted."""

    item: str
    quantity: Decimal | None = None
    unit: str | None = None
    parts: int = 0

    def add(self, ingredient: Ingredient) -> None:
        """
        Fold one more ingredient into the total.

        - Both have quantities: sum them (exactly, in Decimal)
        - Only one has a quantity: keep it
        - Neither: no quantity ("as needed")

        The first non-empty unit wins. Of several spellings of the item,
        the lexically smallest is kept so the result does not depend on
        recipe order.
        """
        self.item = min(self.item, ingredient.item)
        if ingredient.quantity is not None:
            amount = Decimal(str(ingredient.quantity))
            self.quantity = amount if self.quantity is None else self.quantity + amount
            self.parts += 1
        self.unit = self.unit or ingredient.unit or None

    def to_line(self) -> ShoppingLineItem:
        if self.quantity is None:
            quantity = None
        elif self.parts == 1:
            quantity = float(self.quantity)
        else:
            quantity = round_quantity(self.quantity)
        return ShoppingLineItem(item=self.item, quantity=quantity, unit=self.unit)


def aggregate_shopping(recipes: Iterable[Recipe]) -> list[ShoppingLineItem]:
    """
    Build the shopping list for a set of recipes.

    Ingredients are keyed by lower-cased item name. Quantities are summed in
    full and rounded once per line. The result is sorted by item name,
    case-insensitively, with one line per item.
    """
    totals: dict[str, _LineTotal] = {}

    for recipe in recipes:
        for ingredient in recipe.ingredients:
            key = ingredient.item.lower()
            if key not in totals:
                totals[key] = _LineTotal(item=ingredient.item)
            totals[key].add(ingredient)

    lines = [total.to_line() for total in totals.values()]
    return sorted(lines, key=lambda line: (line.item.casefold(), line.item))
