"""
medplanner - Weekly Mediterranean meal planner.

Picks breakfasts, lunches, and dinners for the week under variety rules:
- No recipe repeats within a 30-day history window
- At most one beef recipe per plan
- At least one Spanish or Mexican recipe

and builds a consolidated shopping list from the selection.
"""

__version__ = "1.0.0"
