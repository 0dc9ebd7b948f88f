"""
medplanner - Variety Repairer.

Makes sure a plan includes at least one Spanish or Mexican recipe.

This is a single bounded repair, not a search: entries are tried in plan
order and the first one with a valid same-meal-type substitute is swapped.
Only one substitution is ever made. If no entry has a substitute the whole
plan fails.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass

from medplanner.core.errors import NoRequiredCuisineError
from medplanner.core.selector import shuffled
from medplanner.models.entities import Recipe

logger = logging.getLogger(__name__)


@dataclass
class RepairResult:
    """Plan after the cuisine check."""

    recipes: list[Recipe]
    beef_used: bool
    replaced: tuple[str, str] | None = None  # (old id, new id) when a swap happened


def ensure_required_cuisine(
    catalog: Iterable[Recipe],
    selection: list[Recipe],
    recent_ids: set[str],
    chosen_ids: set[str],
    beef_used: bool,
    rng: random.Random,
) -> RepairResult:
    """
    Swap in one Spanish or Mexican recipe if the selection has none.

    Args:
        catalog: All available recipes
        selection: Combined breakfast + lunch + dinner selection
        recent_ids: Recipe ids used within the history window
        chosen_ids: Ids in the plan; updated in place on substitution
        beef_used: Whether the plan already has a beef recipe
        rng: Random source for the catalog shuffle

    Returns:
        RepairResult; the selection is returned unchanged when it already
        has a required cuisine

    Raises:
        NoRequiredCuisineError: no entry admits a valid substitute
    """
    if any(recipe.has_required_cuisine for recipe in selection):
        return RepairResult(recipes=list(selection), beef_used=beef_used)

    catalog = list(catalog)

    for position, to_replace in enumerate(selection):
        candidate = next(
            (
                recipe
                for recipe in shuffled(catalog, rng)
                if recipe.meal_type == to_replace.meal_type
                and recipe.has_required_cuisine
                and recipe.id not in recent_ids
                and recipe.id not in chosen_ids
                and not (recipe.is_beef and beef_used)
            ),
            None,
        )
        if candidate is None:
            continue

        repaired = list(selection)
        repaired[position] = candidate
        chosen_ids.discard(to_replace.id)
        chosen_ids.add(candidate.id)
        if candidate.is_beef:
            beef_used = True

        logger.debug(f"Replaced {to_replace.id} with {candidate.id} ({candidate.cuisine})")
        return RepairResult(
            recipes=repaired,
            beef_used=beef_used,
            replaced=(to_replace.id, candidate.id),
        )

    raise NoRequiredCuisineError()
