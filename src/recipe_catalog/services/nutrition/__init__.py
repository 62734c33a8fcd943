"""Nutrition aggregation for recipes.

This package provides:
- NutritionService: Aggregates per-100g ingredient profiles into recipe totals
- UnitConverter: Utility for converting quantities to grams
"""

from recipe_catalog.services.nutrition.converter import UnitConverter
from recipe_catalog.services.nutrition.service import (
    NutritionService,
    calculate_recipe_nutrition,
)


__all__ = [
    "NutritionService",
    "UnitConverter",
    "calculate_recipe_nutrition",
]
