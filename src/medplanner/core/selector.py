"""
medplanner - Slot Selector.

Draws a random, rule-filtered set of recipes for one meal type.

Rules applied while scanning the shuffled candidates:
- Recipes used recently (history) are never candidates
- Recipes already chosen for this plan are skipped
- Beef recipes are skipped once the plan already has one

The chosen-id set and the beef flag are shared across meal types, so callers
must select breakfast, then lunch, then dinner with the same state.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from medplanner.core.errors import InsufficientCandidatesError
from medplanner.models.entities import MealType, Recipe

logger = logging.getLogger(__name__)


@dataclass
class SlotSelection:
    """Recipes picked for one meal type, and the beef flag after picking."""

    selections: list[Recipe] = field(default_factory=list)
    beef_used: bool = False


def shuffled(items: Iterable[Recipe], rng: random.Random) -> list[Recipe]:
    """Return a uniformly shuffled copy; the input is left untouched."""
    copy = list(items)
    rng.shuffle(copy)
    return copy


def select_recipes(
    catalog: Iterable[Recipe],
    meal_type: MealType | str,
    count: int,
    recent_ids: set[str],
    chosen_ids: set[str],
    beef_already_used: bool,
    rng: random.Random,
) -> SlotSelection:
    """
    Pick `count` recipes of one meal type.

    Args:
        catalog: All available recipes
        meal_type: Meal type to fill
        count: Number of recipes required
        recent_ids: Recipe ids used within the history window
        chosen_ids: Ids already in this plan; accepted ids are added in place
        beef_already_used: Whether an earlier meal type already took beef
        rng: Random source for the shuffle

    Returns:
        SlotSelection with exactly `count` recipes

    Raises:
        InsufficientCandidatesError: fewer than `count` recipes pass the rules
    """
    meal_type = MealType(meal_type)
    candidates = shuffled(
        (r for r in catalog if r.meal_type == meal_type and r.id not in recent_ids),
        rng,
    )

    selections: list[Recipe] = []
    beef_used = beef_already_used

    for recipe in candidates:
        if len(selections) >= count:
            break
        if recipe.id in chosen_ids:
            continue
        if recipe.is_beef and beef_used:
            continue

        selections.append(recipe)
        chosen_ids.add(recipe.id)
        if recipe.is_beef:
            beef_used = True

    if len(selections) < count:
        logger.debug(
            f"{meal_type.value}: only {len(selections)}/{count} of "
            f"{len(candidates)} candidates usable"
        )
        raise InsufficientCandidatesError(meal_type)

    logger.debug(f"{meal_type.value}: selected {[r.id for r in selections]}")
    return SlotSelection(selections=selections, beef_used=beef_used)
