"""
medplanner - Planner Core.

Pure selection and aggregation logic. No I/O, no global state.
"""

from medplanner.core.errors import (
    InsufficientCandidatesError,
    NoRequiredCuisineError,
    PlannerError,
)
from medplanner.core.planner import generate_weekly_plan

__all__ = [
    "InsufficientCandidatesError",
    "NoRequiredCuisineError",
    "PlannerError",
    "generate_weekly_plan",
]
