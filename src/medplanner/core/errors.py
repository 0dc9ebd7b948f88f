"""
medplanner - Planner Errors.

Both errors are fatal to the current plan generation. No partial plan is
returned and callers must not persist history when one is raised.
"""

from medplanner.models.entities import MealType


class PlannerError(Exception):
    """Base class for plan generation failures."""


class InsufficientCandidatesError(PlannerError):
    """A meal type could not be filled without repeats or beef overage."""

    def __init__(self, meal_type: MealType | str):
        self.meal_type = MealType(meal_type)
        super().__init__(
            f"Not enough {self.meal_type.value} recipes available without repeats or beef overage."
        )


class NoRequiredCuisineError(PlannerError):
    """No Spanish or Mexican substitute satisfies the history, duplicate, and beef rules."""

    def __init__(self) -> None:
        super().__init__("No Spanish or Mexican recipes available that satisfy the rules.")
