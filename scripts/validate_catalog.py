#!/usr/bin/env python3
"""
Recipe Catalog Validation Script.

Checks a catalog against the planner's needs:
- every recipe validates and ids are unique
- every meal type has recipes
- at least one Spanish or Mexican recipe exists for some meal type
- each meal type can fill N slots without a second beef recipe

Usage:
    python scripts/validate_catalog.py                      # Bundled catalog
    python scripts/validate_catalog.py recipes.yaml         # Catalog file
    python scripts/validate_catalog.py --slots 5            # Slots per meal type to check

Exit codes:
    0 - All validations passed
    1 - Validation errors found
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import ValidationError

from medplanner.catalog import RecipeCatalog, default_catalog, load_catalog
from medplanner.models import MEAL_TYPE_ORDER


def validate_catalog(catalog: RecipeCatalog, slots: int) -> tuple[list[str], list[str]]:
    """
    Validate catalog coverage.

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    for meal_type in MEAL_TYPE_ORDER:
        recipes = catalog.by_meal_type(meal_type)
        if not recipes:
            errors.append(f"No {meal_type.value} recipes")
            continue

        # At most one beef recipe can be used per plan
        usable = sum(1 for r in recipes if not r.is_beef) + (1 if any(r.is_beef for r in recipes) else 0)
        if usable < slots:
            warnings.append(
                f"{meal_type.value}: only {usable} recipes usable per plan (need {slots})"
            )

        if not any(r.has_required_cuisine for r in recipes):
            warnings.append(f"{meal_type.value}: no Spanish or Mexican recipes")

    if not any(r.has_required_cuisine for r in catalog):
        errors.append("No Spanish or Mexican recipes in the catalog")

    for recipe in catalog:
        if not recipe.ingredients:
            warnings.append(f"{recipe.id}: no ingredients")

    return errors, warnings


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a recipe catalog")
    parser.add_argument("path", nargs="?", help="Catalog file (JSON or YAML); bundled catalog if omitted")
    parser.add_argument("--slots", type=int, default=5, help="Slots per meal type to check (default: 5)")
    args = parser.parse_args()

    try:
        catalog = load_catalog(args.path) if args.path else default_catalog()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Checking {len(catalog)} recipes ({', '.join(sorted(catalog.cuisines()))})")
    errors, warnings = validate_catalog(catalog, args.slots)

    for warning in warnings:
        print(f"  WARN  {warning}")
    for error in errors:
        print(f"  ERROR {error}")

    if errors:
        print(f"\n{len(errors)} error(s), {len(warnings)} warning(s)")
        return 1

    print(f"\nOK ({len(warnings)} warning(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
