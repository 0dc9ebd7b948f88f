"""
medplanner - Plan Assembler.

Binds each meal type's selection to day labels. Every meal type counts its
own days from 0, so the 2nd lunch and the 2nd dinner share a day label.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from medplanner.models.entities import MealType, PlannedMeal, PlannerRequest, Recipe

MIN_PLAN_DAYS = 5


def start_of_week(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def format_day_label(day: date) -> str:
    """Label like "Mon, Jan 6"."""
    return f"{day:%a, %b} {day.day}"


def build_date_labels(week_of: date | None, total_days: int, today: date | None = None) -> list[str]:
    """
    Consecutive day labels starting at `week_of`.

    Without `week_of` the labels start on the Monday of the current week.
    """
    start = week_of or start_of_week(today or date.today())
    return [format_day_label(start + timedelta(days=i)) for i in range(total_days)]


def plan_length(request: PlannerRequest) -> int:
    return max(request.breakfasts, request.lunches, request.dinners, MIN_PLAN_DAYS)


def assemble_meals(
    request: PlannerRequest,
    breakfasts: Sequence[Recipe],
    lunches: Sequence[Recipe],
    dinners: Sequence[Recipe],
    today: date | None = None,
) -> list[PlannedMeal]:
    """
    Build the ordered meal list: breakfasts, then lunches, then dinners.

    Args:
        request: Planner request (only week_of and the counts are used)
        breakfasts: Breakfast selection in order
        lunches: Lunch selection in order
        dinners: Dinner selection in order
        today: Reference date when the request has no week_of

    Returns:
        PlannedMeal list with per-meal-type day indexes
    """
    labels = build_date_labels(request.week_of, plan_length(request), today)

    meals: list[PlannedMeal] = []
    for meal_type, selection in (
        (MealType.BREAKFAST, breakfasts),
        (MealType.LUNCH, lunches),
        (MealType.DINNER, dinners),
    ):
        for index, recipe in enumerate(selection):
            meals.append(
                PlannedMeal(
                    day_index=index,
                    meal_type=meal_type,
                    recipe=recipe,
                    # Clamp to the last day if a selection outruns the labels
                    date_label=labels[min(index, len(labels) - 1)],
                )
            )
    return meals
