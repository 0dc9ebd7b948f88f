"""
medplanner - CLI Entry Point.

Usage:
    medplanner plan                 Generate this week's plan
    medplanner plan -b 1 -l 2 -d 7  Custom meal counts
    medplanner recipes              List the recipe catalog
    medplanner history              Show recently used recipes
    medplanner reset-history        Forget recently used recipes
    medplanner --help               Show help
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="medplanner",
    help="Mediterranean meal planner: weekly recipes plus a shopping list.",
    add_completion=False,
)
console = Console()


def setup_logging(level: str) -> None:
    """Log to stderr so plan output stays clean."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _get_catalog(path: Optional[Path]):
    """Load the requested catalog, exiting with code 2 if the file is unusable."""
    from medplanner.catalog import default_catalog, load_catalog
    from medplanner.config import settings

    catalog_path = path or settings.catalog_path
    if catalog_path is None:
        return default_catalog()
    try:
        return load_catalog(catalog_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid catalog: {escape(str(e))}[/red]")
        raise typer.Exit(2)


def _get_store():
    from medplanner.config import settings
    from medplanner.history import JsonFileHistoryStore

    return JsonFileHistoryStore(
        settings.history_path,
        retention_days=settings.medplanner_history_retention_days,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Mediterranean meal planner."""
    from medplanner.config import settings

    setup_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def plan(
    breakfasts: Optional[int] = typer.Option(None, "--breakfasts", "-b", min=0, help="Number of breakfasts"),
    lunches: Optional[int] = typer.Option(None, "--lunches", "-l", min=0, help="Number of lunches"),
    dinners: Optional[int] = typer.Option(None, "--dinners", "-d", min=0, help="Number of dinners"),
    week_of: Optional[str] = typer.Option(None, "--week-of", "-w", help="First day of the plan (YYYY-MM-DD)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible plan"),
    details: bool = typer.Option(True, "--details/--no-details", help="Show recipe summaries"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not record the plan in history"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Recipe catalog file (JSON or YAML)"),
) -> None:
    """Generate a weekly meal plan and shopping list."""
    from medplanner.config import settings
    from medplanner.core import PlannerError, generate_weekly_plan
    from medplanner.formatters import EMPTY_MESSAGES, format_meals_table, format_shopping_table
    from medplanner.models import PlannerRequest

    try:
        request = PlannerRequest(
            breakfasts=settings.default_breakfasts if breakfasts is None else breakfasts,
            lunches=settings.default_lunches if lunches is None else lunches,
            dinners=settings.default_dinners if dinners is None else dinners,
            week_of=week_of,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid request: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(2)

    catalog = _get_catalog(catalog_path)
    store = _get_store()
    history = store.load_history()

    if seed is None:
        seed = settings.medplanner_random_seed
    rng = random.Random(seed)

    try:
        result = generate_weekly_plan(request, history, catalog=catalog, rng=rng)
    except PlannerError as e:
        console.print(f"[red]Unable to build plan: {e}[/red]")
        raise typer.Exit(1)

    if result.meals:
        console.print(format_meals_table(result, show_details=details))
    else:
        console.print(f"[dim]{EMPTY_MESSAGES['meals']}[/dim]")

    if result.shopping_list:
        console.print(format_shopping_table(result.shopping_list))
    else:
        console.print(f"[dim]{EMPTY_MESSAGES['shopping']}[/dim]")

    if dry_run:
        console.print("[dim]Dry run: history not updated.[/dim]")
        return

    store.save_history(result.updated_history)
    console.print(f"[dim]Recorded {len(result.meals)} recipes in {store.path}[/dim]")


@app.command()
def recipes(
    meal_type: Optional[str] = typer.Option(None, "--meal-type", "-m", help="breakfast, lunch or dinner"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Recipe catalog file (JSON or YAML)"),
) -> None:
    """List recipes in the catalog."""
    from medplanner.formatters import EMPTY_MESSAGES, format_recipes_table
    from medplanner.models import MealType

    catalog = _get_catalog(catalog_path)

    if meal_type:
        try:
            items = catalog.by_meal_type(MealType(meal_type.lower()))
        except ValueError:
            console.print(f"[red]Invalid meal type: {meal_type}[/red]")
            raise typer.Exit(2)
    else:
        items = list(catalog)

    if not items:
        console.print(f"[dim]{EMPTY_MESSAGES['recipes']}[/dim]")
        return

    console.print(format_recipes_table(items))
    console.print(f"\n[dim]Total: {len(items)} recipes[/dim]")


@app.command()
def history(
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Recipe catalog file (JSON or YAML)"),
) -> None:
    """Show recipes used within the history window."""
    from medplanner.formatters import EMPTY_MESSAGES, format_history_table

    recent = _get_store().load_history()
    if not recent:
        console.print(f"[dim]{EMPTY_MESSAGES['history']}[/dim]")
        return

    names = {r.id: r.name for r in _get_catalog(catalog_path)}
    console.print(format_history_table(recent, names))


@app.command("reset-history")
def reset_history(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Forget all recently used recipes."""
    store = _get_store()
    if not yes and not typer.confirm(f"Clear recipe history in {store.path}?"):
        raise typer.Abort()
    store.clear()
    console.print("History cleared.")


@app.command()
def version() -> None:
    """Show version information."""
    from medplanner import __version__

    console.print(f"medplanner version {__version__}")


if __name__ == "__main__":
    app()
