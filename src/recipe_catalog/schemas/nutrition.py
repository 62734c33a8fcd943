"""Nutritional information schemas.

This module contains the five-field nutrition record shared by ingredient
profiles and recipe totals, and the summary returned by the aggregator.
"""

from __future__ import annotations

from pydantic import Field

from recipe_catalog.schemas.base import ComputedResult, StoreDocument


NUTRIENT_FIELDS: tuple[str, ...] = (
    "calories",
    "protein",
    "carbohydrates",
    "fat",
    "fiber",
)


class NutritionalInfo(StoreDocument):
    """Core nutritional values.

    On an ingredient every value is per 100 grams. In a recipe summary every
    value is an absolute sum. Any subset of fields may be absent.
    """

    calories: float | None = Field(default=None, description="Energy in kcal")
    protein: float | None = Field(default=None, description="Protein in grams")
    carbohydrates: float | None = Field(
        default=None,
        description="Carbohydrates in grams",
    )
    fat: float | None = Field(default=None, description="Fat in grams")
    fiber: float | None = Field(default=None, description="Fiber in grams")

    @property
    def is_empty(self) -> bool:
        """True when no nutrient field is present."""
        return all(getattr(self, name) is None for name in NUTRIENT_FIELDS)

    def present_fields(self) -> dict[str, float]:
        """Return the nutrient fields that carry a value."""
        return {
            name: value
            for name in NUTRIENT_FIELDS
            if (value := getattr(self, name)) is not None
        }

    def divided_by(self, divisor: float) -> NutritionalInfo:
        """Return a new record with every present field divided by ``divisor``.

        Absent fields stay absent. The receiver is left untouched.

        Args:
            divisor: Value to divide by, e.g. the number of servings.

        Returns:
            A new NutritionalInfo.
        """
        return NutritionalInfo(
            **{name: value / divisor for name, value in self.present_fields().items()}
        )


class NutritionSummary(ComputedResult):
    """Nutrition totals for a recipe plus how many lines contributed."""

    totals: NutritionalInfo = Field(..., description="Unrounded absolute sums")
    compatible_count: int = Field(
        ...,
        ge=1,
        description="Lines that resolved to grams and had nutrition data",
    )
    total_count: int = Field(..., ge=1, description="All ingredient lines")

    @property
    def is_partial(self) -> bool:
        """True when some ingredient lines did not contribute."""
        return self.compatible_count < self.total_count

    def per_serving(self, servings: int) -> NutritionalInfo:
        """Derive per-serving values without touching ``totals``.

        Args:
            servings: Number of servings the recipe yields (>= 1).

        Returns:
            A new NutritionalInfo with each total divided by ``servings``.
        """
        return self.totals.divided_by(servings)
