"""Bulk import of ingredients from semicolon-delimited text.

Each line holds ``name;type`` where type is one of the category names
(``Vegetable``, ``Fruit``, ``Seed``, ``Dairy``, ``Meat``, ``Fish``, ``Other``).
Matching is case-sensitive and unknown types import as ``Other``. Quote
characters are kept as written. Blank lines are skipped; any other malformed
line, including ``;`` with an empty name, fails the whole import.
"""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from src.config import get_settings
from src.domain.ingredient import Ingredient
from src.models.enums import IngredientCategory
from src.services.exceptions import IngredientImportError

logger = logging.getLogger(__name__)

DELIMITER = ";"


def parse_ingredients(lines: Iterable[str]) -> list[Ingredient]:
    """Parse ``name;type`` lines into ingredients without ids."""
    # Quote characters are part of names, not CSV quoting
    reader = csv.reader(lines, delimiter=DELIMITER, quoting=csv.QUOTE_NONE)
    ingredients = []
    for fields in reader:
        if not fields or (len(fields) == 1 and not fields[0].strip()):
            continue
        if len(fields) != 2:
            raise IngredientImportError(
                f"expected 'name{DELIMITER}type', got {len(fields)} field(s)", reader.line_num
            )
        name, type_name = (field.strip() for field in fields)
        if not name:
            raise IngredientImportError("ingredient name is empty", reader.line_num)
        category = IngredientCategory.from_name(type_name)
        if category is IngredientCategory.OTHER and type_name != IngredientCategory.OTHER.value:
            logger.info(f"Unknown type '{type_name}' for '{name}', importing as Other")
        try:
            ingredients.append(Ingredient(name=name, category=category))
        except ValidationError as e:
            raise IngredientImportError(f"invalid ingredient '{name}': {e}", reader.line_num) from e
    return ingredients


def import_ingredients(path: str | Path, encoding: str | None = None) -> list[Ingredient]:
    """Read and parse an ingredient file."""
    encoding = encoding or get_settings().import_encoding
    try:
        with open(path, encoding=encoding, newline="") as f:
            ingredients = parse_ingredients(f)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise IngredientImportError(f"cannot read {path}: {e}") from e
    logger.info(f"Parsed {len(ingredients)} ingredient(s) from {path}")
    return ingredients
