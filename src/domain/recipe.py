"""Recipe aggregate, its ingredient lines and builder."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import MealType

logger = logging.getLogger(__name__)


class RecipeIngredientLine(BaseModel):
    """A recipe's reference to an ingredient, with the amount in grams.

    Lines compare equal by name only, so adding the same ingredient twice
    merges the quantities instead of creating a second line.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., max_length=255)
    quantity: int = Field(default=0, ge=0)
    ingredient_id: int | None = Field(default=None, ge=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecipeIngredientLine):
            return NotImplemented
        return self.name == other.name


class Recipe:
    """A named set of ingredient lines, ordered steps and a meal type.

    Built by ``RecipeBuilder``. After that only lines and steps change, and
    only through the methods below.
    """

    def __init__(
        self,
        name: str,
        *,
        recipe_id: int = 0,
        meal_type: MealType = MealType.BREAKFAST,
        lines: Iterable[RecipeIngredientLine] = (),
        steps: Iterable[str] = (),
    ) -> None:
        self._name = name
        self._id = recipe_id
        self._meal_type = MealType(meal_type)
        self._lines: list[RecipeIngredientLine] = []
        self._steps: list[str] = list(steps)
        for line in lines:
            self.add_line(line)

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> int:
        return self._id

    @property
    def meal_type(self) -> MealType:
        return self._meal_type

    @property
    def lines(self) -> tuple[RecipeIngredientLine, ...]:
        """Copies of the ingredient lines in insertion order."""
        return tuple(line.model_copy() for line in self._lines)

    @property
    def steps(self) -> tuple[str, ...]:
        return tuple(self._steps)

    def add_line(self, line: RecipeIngredientLine) -> None:
        """Add an ingredient line, merging into an existing line of the same name."""
        for existing in self._lines:
            if existing == line:
                existing.quantity += line.quantity
                return
        self._lines.append(line.model_copy())

    def remove_line(self, line: RecipeIngredientLine) -> None:
        """Remove the line with the same name as ``line``, if there is one."""
        for index, existing in enumerate(self._lines):
            if existing == line:
                del self._lines[index]
                return
        logger.info(f"Recipe '{self._name}' has no ingredient '{line.name}' to remove")

    def add_step(self, text: str) -> None:
        self._steps.append(text)

    def remove_step(self, index: int) -> None:
        """Remove the step at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._steps):
            del self._steps[index]
            return
        logger.warning(
            f"Step index {index} out of range for recipe '{self._name}' "
            f"({len(self._steps)} steps)"
        )

    def to_builder(self) -> "RecipeBuilder":
        """Builder preloaded with this recipe's state."""
        return (
            RecipeBuilder(self._name)
            .with_meal_type(self._meal_type)
            .with_lines(self._lines)
            .with_steps(self._steps)
            .with_id(self._id)
        )

    def __repr__(self) -> str:
        return f"<Recipe(id={self._id}, name={self._name}, meal_type={self._meal_type.value})>"


class RecipeBuilder(BaseModel):
    """Immutable recipe configuration.

    Every ``with_*`` call returns a new builder and leaves the receiver
    untouched, so a builder can be shared as a template::

        base = RecipeBuilder("Porridge").with_steps(["Boil oats"])
        lunch = base.with_meal_type(MealType.LUNCH).build()
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., max_length=255)
    meal_type: MealType = MealType.BREAKFAST
    lines: tuple[RecipeIngredientLine, ...] = ()
    steps: tuple[str, ...] = ()
    recipe_id: int = Field(default=0, ge=0)

    def __init__(self, name: str, **data) -> None:
        super().__init__(name=name, **data)

    def with_meal_type(self, meal_type: MealType) -> "RecipeBuilder":
        return self.model_copy(update={"meal_type": MealType(meal_type)})

    def with_lines(self, lines: Iterable[RecipeIngredientLine]) -> "RecipeBuilder":
        return self.model_copy(update={"lines": tuple(line.model_copy() for line in lines)})

    def with_steps(self, steps: Iterable[str]) -> "RecipeBuilder":
        return self.model_copy(update={"steps": tuple(steps)})

    def with_id(self, recipe_id: int) -> "RecipeBuilder":
        if recipe_id < 0:
            raise ValueError(f"Recipe id must not be negative: {recipe_id}")
        return self.model_copy(update={"recipe_id": recipe_id})

    def build(self) -> Recipe:
        """Create an independent Recipe from the accumulated state."""
        return Recipe(
            self.name,
            recipe_id=self.recipe_id,
            meal_type=self.meal_type,
            lines=self.lines,
            steps=self.steps,
        )
