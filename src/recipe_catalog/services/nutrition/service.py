"""Nutrition service for computing recipe nutrition totals.

Provides:
- Per-line unit resolution to grams
- Scaling of per-100g ingredient profiles
- Field-wise accumulation with a compatible/total line count
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_catalog.observability.logging import get_logger
from recipe_catalog.schemas.enums import Unit
from recipe_catalog.schemas.nutrition import NutritionalInfo, NutritionSummary
from recipe_catalog.services.nutrition.constants import PROFILE_REFERENCE_GRAMS
from recipe_catalog.services.nutrition.converter import UnitConverter


if TYPE_CHECKING:
    from collections.abc import Mapping

    from recipe_catalog.schemas.ingredient import Ingredient
    from recipe_catalog.schemas.recipe import Recipe, RecipeIngredient

logger = get_logger(__name__)


class NutritionService:
    """Service for computing recipe nutrition.

    Orchestrates:
    1. Ingredient lookup in a caller-supplied key -> Ingredient mapping
    2. Unit conversion to grams
    3. Nutrient scaling based on the resolved grams
    4. Accumulation into a NutritionSummary

    The service holds no state between calls. Lines that cannot contribute
    (no quantity, unknown ingredient, no nutrition record, unresolvable unit)
    are skipped and only counted in ``total_count``.
    """

    def __init__(self, converter: UnitConverter | None = None) -> None:
        """Initialize the service.

        Args:
            converter: Optional UnitConverter instance.
        """
        self._converter = converter or UnitConverter()

    def calculate_recipe_nutrition(
        self,
        recipe: Recipe,
        ingredients_by_key: Mapping[str, Ingredient],
    ) -> NutritionSummary | None:
        """Calculate nutrition totals for a recipe.

        Args:
            recipe: Recipe whose ingredient lines are aggregated.
            ingredients_by_key: Ingredient catalog keyed by ingredient ID.

        Returns:
            Summary with unrounded totals and line counts, or None when no
            line contributed.
        """
        totals: dict[str, float] = {}
        compatible_count = 0

        for line in recipe.ingredients:
            resolved = self._resolve_line(recipe, line, ingredients_by_key)
            if resolved is None:
                continue

            nutrition, grams = resolved
            self._accumulate(totals, nutrition, grams / PROFILE_REFERENCE_GRAMS)
            compatible_count += 1

        if compatible_count == 0:
            logger.debug("No compatible ingredients", recipe_id=recipe.id)
            return None

        return NutritionSummary(
            totals=NutritionalInfo(**totals),
            compatible_count=compatible_count,
            total_count=len(recipe.ingredients),
        )

    def _resolve_line(
        self,
        recipe: Recipe,
        line: RecipeIngredient,
        ingredients_by_key: Mapping[str, Ingredient],
    ) -> tuple[NutritionalInfo, float] | None:
        """Resolve a recipe line to its nutrition profile and gram amount.

        Returns:
            ``(nutrition, grams)``, or None if the line must be skipped.
        """
        if line.quantity is None or line.unit == Unit.FREE_TEXT:
            self._log_skip(recipe, line, "no_quantity")
            return None

        ingredient = ingredients_by_key.get(line.ingredient_id)
        if ingredient is None:
            self._log_skip(recipe, line, "unknown_ingredient")
            return None

        if ingredient.nutrition is None:
            self._log_skip(recipe, line, "no_nutrition")
            return None

        grams = self._converter.to_grams(line.quantity, line.unit, ingredient)
        if grams is None:
            self._log_skip(recipe, line, "not_convertible")
            return None

        return ingredient.nutrition, grams

    def _accumulate(
        self,
        totals: dict[str, float],
        nutrition: NutritionalInfo,
        multiplier: float,
    ) -> None:
        """Add scaled values for the fields present on ``nutrition``."""
        for name, value in nutrition.present_fields().items():
            totals[name] = totals.get(name, 0.0) + value * multiplier

    def _log_skip(self, recipe: Recipe, line: RecipeIngredient, reason: str) -> None:
        logger.debug(
            "Skipping recipe ingredient",
            recipe_id=recipe.id,
            ingredient_id=line.ingredient_id,
            unit=str(line.unit),
            reason=reason,
        )


_default_service = NutritionService()


def calculate_recipe_nutrition(
    recipe: Recipe,
    ingredients_by_key: Mapping[str, Ingredient],
) -> NutritionSummary | None:
    """Calculate nutrition totals using a shared stateless service."""
    return _default_service.calculate_recipe_nutrition(recipe, ingredients_by_key)
