"""Recipe-related schemas.

This module contains schemas for recipes, their ingredient lines and steps.
"""

from __future__ import annotations

from pydantic import Field

from recipe_catalog.schemas.base import AuditedDocument, StoreDocument
from recipe_catalog.schemas.enums import Unit


class RecipeIngredient(StoreDocument):
    """Link between a recipe and a catalog ingredient."""

    ingredient_id: str = Field(..., description="Key of the ingredient document")
    quantity: float | None = Field(
        default=None,
        description="Numeric amount; absent when unit is free_text",
    )
    unit: Unit = Field(..., description="Unit of measurement")
    quantity_text: str | None = Field(
        default=None,
        description="Amount for free_text units, e.g. 'a pinch'",
    )
    note: str | None = Field(default=None, description="e.g. 'finely chopped'")


class RecipeStep(StoreDocument):
    """Single preparation step."""

    text: str = Field(..., description="Instruction text")
    image_url: str | None = Field(default=None, description="Optional image")
    equipment: list[str] | None = Field(
        default=None,
        description="Equipment suggested for this step",
    )


class Recipe(AuditedDocument):
    """Catalog recipe."""

    slug: str = Field(..., description="Unique kebab-case slug")
    name: str = Field(..., description="Recipe name")
    description: str = Field(default="", description="Recipe description")
    servings: int = Field(default=1, ge=1, description="Number of servings")
    ingredients: list[RecipeIngredient] = Field(
        default_factory=list,
        description="Structured ingredient lines",
    )
    steps: list[RecipeStep] = Field(
        default_factory=list,
        description="Ordered steps",
    )
    tags: list[str] = Field(default_factory=list, description="e.g. 'vegan'")
    categories: list[str] = Field(
        default_factory=list,
        description="e.g. 'dessert'",
    )
    source_url: str | None = Field(default=None, description="Source attribution")
