"""Exceptions raised by recipe book services."""


class RecipeBookError(Exception):
    """Base class for recipe book errors."""


class PersistenceError(RecipeBookError):
    """A database statement failed."""


class IngredientImportError(RecipeBookError):
    """A bulk ingredient import could not be read or parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
