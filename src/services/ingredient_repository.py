"""Persistence of ingredients in the ``indigents`` table."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.database import init_db
from src.domain.ingredient import Ingredient
from src.models.enums import IngredientCategory
from src.models.ingredient import IngredientRow
from src.services.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def row_to_ingredient(row: IngredientRow) -> Ingredient:
    """Convert a stored row; unknown category codes read back as Other."""
    return Ingredient(
        name=row.name,
        category=IngredientCategory.from_code(row.food_type),
        id=row.id,
    )


class IngredientRepository:
    """Maps ingredients to and from rows using an open session."""

    def __init__(self, db: Session):
        self.db = db

    def create_schema(self, drop_existing: bool = False) -> None:
        """Create the tables, optionally dropping existing ones first."""
        try:
            init_db(bind=self.db.get_bind(), drop_existing=drop_existing)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create schema: {e}")
            raise PersistenceError("Could not create database schema") from e

    def insert(self, ingredient: Ingredient) -> Ingredient:
        """Insert an ingredient and return it with its stored id.

        An ingredient without an id gets one from the database.
        """
        row = IngredientRow(name=ingredient.name, food_type=ingredient.category.to_code())
        if ingredient.has_id:
            row.id = ingredient.id
        self.db.add(row)
        self._commit(f"inserting ingredient '{ingredient.name}'")
        self.db.refresh(row)
        logger.info(f"Inserted ingredient '{row.name}' with id {row.id}")
        return row_to_ingredient(row)

    def update(self, ingredient: Ingredient) -> bool:
        """Update name and category of a stored ingredient.

        Returns False when no row has the ingredient's id.
        """
        row = self._get_row(ingredient.id)
        if row is None:
            logger.info(f"No stored ingredient with id {ingredient.id} to update")
            return False
        row.name = ingredient.name
        row.food_type = ingredient.category.to_code()
        self._commit(f"updating ingredient {ingredient.id}")
        return True

    def delete(self, ingredient: Ingredient) -> bool:
        """Delete a stored ingredient. Returns False when it was not stored."""
        row = self._get_row(ingredient.id)
        if row is None:
            logger.info(f"No stored ingredient with id {ingredient.id} to delete")
            return False
        self.db.delete(row)
        self._commit(f"deleting ingredient {ingredient.id}")
        return True

    def get_by_id(self, ingredient_id: int) -> Ingredient | None:
        row = self._get_row(ingredient_id)
        if row is None:
            return None
        return row_to_ingredient(row)

    def get_all(self) -> list[Ingredient]:
        """All stored ingredients ordered by id; an empty table gives an empty list."""
        try:
            rows = self.db.query(IngredientRow).order_by(IngredientRow.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error reading ingredients: {e}")
            raise PersistenceError("Failed reading ingredients") from e
        return [row_to_ingredient(row) for row in rows]

    def _get_row(self, ingredient_id: int) -> IngredientRow | None:
        try:
            return self.db.get(IngredientRow, ingredient_id)
        except SQLAlchemyError as e:
            logger.error(f"Error reading ingredient {ingredient_id}: {e}")
            raise PersistenceError(f"Failed reading ingredient {ingredient_id}") from e

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error {action}: {e}")
            raise PersistenceError(f"Failed {action}") from e
