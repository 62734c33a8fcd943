"""Pydantic schemas for catalog documents and computed results.

This module exports all schema classes for the recipe catalog.
"""

# Base classes
from recipe_catalog.schemas.base import (
    AuditedDocument,
    ComputedResult,
    StoreDocument,
)

# Enums
from recipe_catalog.schemas.enums import (
    SuggestionCategory,
    SuggestionPriority,
    SuggestionStatus,
    Unit,
    is_suggestion_category,
    is_suggestion_priority,
    is_suggestion_status,
    is_unit,
)

# Ingredient schemas
from recipe_catalog.schemas.ingredient import Ingredient, UnitConversion

# Nutrition schemas
from recipe_catalog.schemas.nutrition import (
    NUTRIENT_FIELDS,
    NutritionalInfo,
    NutritionSummary,
)

# Recipe schemas
from recipe_catalog.schemas.recipe import Recipe, RecipeIngredient, RecipeStep

# Suggestion schemas
from recipe_catalog.schemas.suggestion import Suggestion


__all__ = [
    "NUTRIENT_FIELDS",
    "AuditedDocument",
    "ComputedResult",
    "Ingredient",
    "NutritionSummary",
    "NutritionalInfo",
    "Recipe",
    "RecipeIngredient",
    "RecipeStep",
    "StoreDocument",
    "Suggestion",
    "SuggestionCategory",
    "SuggestionPriority",
    "SuggestionStatus",
    "Unit",
    "UnitConversion",
    "is_suggestion_category",
    "is_suggestion_priority",
    "is_suggestion_status",
    "is_unit",
]
