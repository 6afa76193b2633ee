"""Ingredient table model."""

from sqlalchemy import Column, Integer, String

from src.database import Base


class IngredientRow(Base):
    """Stored ingredient ("indigent") with its integer category code."""

    __tablename__ = "indigents"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    food_type = Column(Integer, nullable=False)
