"""
medplanner - Weekly Plan Generation.

Pipeline for one request:
1. Select breakfasts, lunches, dinners (beef cap and chosen ids carry forward)
2. Ensure a Spanish or Mexican recipe (one substitution at most)
3. Bind meals to day labels
4. Aggregate the shopping list
5. Stamp every planned recipe into a copy of the history

No I/O happens here. Loading and saving history is the caller's job, and
nothing should be saved when generation raises.
"""

import logging
import random
import time
from datetime import date

from medplanner.catalog import RecipeCatalog, default_catalog
from medplanner.core.assembler import assemble_meals
from medplanner.core.selector import select_recipes
from medplanner.core.shopping import aggregate_shopping
from medplanner.core.variety import ensure_required_cuisine
from medplanner.models.entities import (
    MEAL_TYPE_ORDER,
    HistorySnapshot,
    MealType,
    PlannerRequest,
    PlannerResponse,
    Recipe,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)


def generate_weekly_plan(
    request: PlannerRequest | dict,
    history: HistorySnapshot,
    catalog: RecipeCatalog | None = None,
    rng: random.Random | None = None,
    timestamp: int | None = None,
    today: date | None = None,
) -> PlannerResponse:
    """
    Generate a weekly plan.

    Args:
        request: Meal counts and optional week start
        history: Recent history (recipe id -> last-used ms); not modified
        catalog: Recipe catalog; defaults to the bundled one
        rng: Random source; pass a seeded Random for reproducible plans
        timestamp: Generation time stamped into the history (ms)
        today: Reference date for labels when the request has no week_of

    Returns:
        PlannerResponse with meals, shopping list, and updated history

    Raises:
        InsufficientCandidatesError: a meal type cannot be filled
        NoRequiredCuisineError: no Spanish or Mexican recipe can be added
    """
    if isinstance(request, dict):
        request = PlannerRequest.model_validate(request)
    catalog = catalog if catalog is not None else default_catalog()
    rng = rng or random.Random()

    recent_ids = set(history)
    chosen_ids: set[str] = set()
    beef_used = False

    selected: list[Recipe] = []
    for meal_type in MEAL_TYPE_ORDER:
        result = select_recipes(
            catalog,
            meal_type,
            request.count_for(meal_type),
            recent_ids,
            chosen_ids,
            beef_used,
            rng,
        )
        beef_used = result.beef_used
        selected.extend(result.selections)

    repair = ensure_required_cuisine(catalog, selected, recent_ids, chosen_ids, beef_used, rng)
    if repair.replaced:
        old_id, new_id = repair.replaced
        logger.info(f"Swapped {old_id} for {new_id} to include a Spanish or Mexican recipe")

    plan = repair.recipes

    def of_type(meal_type: MealType) -> list[Recipe]:
        return [recipe for recipe in plan if recipe.meal_type == meal_type]

    meals = assemble_meals(
        request,
        of_type(MealType.BREAKFAST),
        of_type(MealType.LUNCH),
        of_type(MealType.DINNER),
        today=today,
    )

    stamp = timestamp if timestamp is not None else now_ms()
    updated_history: HistorySnapshot = dict(history)
    for recipe in plan:
        updated_history[recipe.id] = stamp

    logger.info(
        f"Generated plan: {request.breakfasts} breakfasts, {request.lunches} lunches, "
        f"{request.dinners} dinners"
    )
    return PlannerResponse(
        meals=meals,
        shopping_list=aggregate_shopping(plan),
        updated_history=updated_history,
    )
