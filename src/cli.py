"""Command line entry point.

Usage:
    python -m src.cli                      # interactive menu
    python -m src.cli import FILE --save   # import ``name;type`` lines into the database
    python -m src.cli init-db --drop       # recreate the tables
"""

import argparse
import logging
import sys

from src.config import get_settings
from src.database import SessionLocal, init_db
from src.menu import Menu
from src.services.exceptions import RecipeBookError
from src.services.ingredient_import import import_ingredients
from src.services.ingredient_repository import IngredientRepository
from src.services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fodmap", description="Personal recipe and ingredient manager")
    sub = p.add_subparsers(dest="command")

    sub.add_parser("menu", help="Run the interactive menu (default)")

    import_p = sub.add_parser("import", help="Import ingredients from a 'name;type' file")
    import_p.add_argument("path", help="File to import")
    import_p.add_argument("--save", action="store_true", help="Insert the ingredients into the database")

    init_p = sub.add_parser("init-db", help="Create the database tables")
    init_p.add_argument("--drop", action="store_true", help="Drop existing tables first")
    return p


def run_import(path: str, save: bool) -> int:
    ingredients = import_ingredients(path)
    if not save:
        for ingredient in ingredients:
            print(f"{ingredient.name};{ingredient.category.value}")
        return 0

    init_db()
    with SessionLocal() as db:
        repo = IngredientRepository(db)
        for ingredient in ingredients:
            repo.insert(ingredient)
    print(f"Imported {len(ingredients)} ingredient(s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "import":
            return run_import(args.path, args.save)
        if args.command == "init-db":
            init_db(drop_existing=args.drop)
            print("Database ready")
            return 0

        init_db()
        Menu(RecipeStore(), session_factory=SessionLocal).run()
        return 0
    except RecipeBookError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
