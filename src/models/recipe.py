"""Recipe, RecipeIngredient and RecipeStep table models."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base


class RecipeRow(Base):
    """Stored recipe."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    meal_type = Column(Integer, nullable=False, default=1)

    # Relationships
    ingredients = relationship(
        "RecipeIngredientRow",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredientRow.position",
    )
    steps = relationship(
        "RecipeStepRow",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeStepRow.position",
    )


class RecipeIngredientRow(Base):
    """Ingredient line within a stored recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)  # grams
    ingredient_id = Column(Integer, nullable=True)  # not a foreign key, see RecipeIngredientLine

    # Relationships
    recipe = relationship("RecipeRow", back_populates="ingredients")


class RecipeStepRow(Base):
    """Preparation step within a stored recipe, kept verbatim."""

    __tablename__ = "recipe_steps"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    text = Column(Text, nullable=False, default="")

    # Relationships
    recipe = relationship("RecipeRow", back_populates="steps")
