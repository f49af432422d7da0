#!/usr/bin/env python3
"""Ad hoc query runner for CHEF-TI.

Run a single recipe request directly without starting the API server.

Usage:
    python query.py "tomato, onion and basil"
    python query.py "chicken rice" --meal-type dinner --prep meal-prep --style thai
    python query.py "eggs, spinach" --save    # Keep the recipe in the saved list
    python query.py "eggs, spinach" --debug   # Show the full JSON response
    python query.py --saved                   # List saved recipes by title

Features:
- Direct RecipeService execution via get_recipe()
- Markdown rendering with rich
- Local saved-recipe list (newest first, capped)
- Clean exit status: 0 on success, 1 on validation or upstream failure
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from pydantic import ValidationError as RequestError
from rich.console import Console
from rich.markdown import Markdown

from chefti.exceptions import UpstreamError, ValidationError
from chefti.models.models import RecipeRequest
from chefti.services.recipe_service import create_recipe_service
from chefti.storage.saved_recipes import SavedRecipeStore, recipe_title
from chefti.utils.config import config
from chefti.utils.logger import logger

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query.py",
        description="Generate a recipe using only the ingredients you have.",
    )
    parser.add_argument("ingredients", nargs="?", default="", help='e.g. "tomato, onion and basil"')
    parser.add_argument("--meal-type", default="meal", help="breakfast, lunch, dinner, snack...")
    parser.add_argument("--prep", default="fresh", help="fresh, eat-tomorrow or meal-prep")
    parser.add_argument("--style", default="any", help="cuisine style, e.g. italian")
    parser.add_argument("--save", action="store_true", help="save the generated recipe")
    parser.add_argument("--saved", action="store_true", help="list saved recipes and exit")
    parser.add_argument("--debug", action="store_true", help="print the full JSON response")
    return parser


def show_saved(store: SavedRecipeStore) -> None:
    """Print saved recipes, newest first."""
    saved = store.load()
    if not saved:
        console.print("[yellow]No saved recipes yet[/yellow]")
        return

    for item in saved:
        video = f" [dim]{item.video_url}[/dim]" if item.video_url else ""
        console.print(f"[bold]{recipe_title(item.recipe)}[/bold]{video}")


def run_query(
    ingredients: str,
    meal_type: str = "meal",
    prep: str = "fresh",
    style: str = "any",
    save: bool = False,
    debug: bool = False,
) -> int:
    """Run one recipe request and render the result.

    Returns:
        Process exit status.
    """
    try:
        request = RecipeRequest(ingredients=ingredients, meal_type=meal_type, prep_type=prep, style=style)
    except RequestError as e:
        console.print(f"[red]Invalid request: {e.errors()[0]['msg']}[/red]")
        return 1

    try:
        service = create_recipe_service()
    except ValueError as e:
        console.print(f"[red]Configuration invalid: {e}[/red]")
        return 1

    logger.info(f"Requesting recipe for: {ingredients!r}")

    try:
        response = asyncio.run(service.get_recipe(request))
    except (ValidationError, UpstreamError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    console.print()

    if debug:
        console.print("[bold cyan]Debug Mode: Full Response[/bold cyan]")
        console.print("[dim]" + "=" * 60 + "[/dim]")
        console.print_json(data=response.model_dump(by_alias=True))
        console.print("[dim]" + "=" * 60 + "[/dim]")
        console.print()

    console.print(Markdown(response.recipe))
    if response.video_url:
        console.print(f"\n[bold]Video:[/bold] {response.video_url}")
    else:
        console.print("\n[yellow]No matching video found[/yellow]")

    if save:
        store = SavedRecipeStore(config.SAVED_RECIPES_FILE, config.MAX_SAVED_RECIPES)
        store.save(response.recipe, response.video_url)
        console.print("[green]Recipe saved[/green]")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.saved:
        show_saved(SavedRecipeStore(config.SAVED_RECIPES_FILE, config.MAX_SAVED_RECIPES))
        return 0

    try:
        return run_query(
            args.ingredients,
            meal_type=args.meal_type,
            prep=args.prep,
            style=args.style,
            save=args.save,
            debug=args.debug,
        )
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
