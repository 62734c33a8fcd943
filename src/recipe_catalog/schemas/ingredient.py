"""Ingredient-related schemas.

This module contains schemas for catalog ingredients and their unit
conversion rules.
"""

from __future__ import annotations

from pydantic import Field

from recipe_catalog.schemas.base import AuditedDocument, StoreDocument
from recipe_catalog.schemas.enums import Unit
from recipe_catalog.schemas.nutrition import NutritionalInfo


class UnitConversion(StoreDocument):
    """Conversion rule: ``quantity_in_from * factor = quantity_in_to``.

    Example: 1 cup of flour = 120g -> ``{"from": "cup", "to": "g", "factor": 120}``
    """

    from_unit: Unit = Field(..., alias="from", description="Source unit")
    to_unit: Unit = Field(..., alias="to", description="Target unit")
    factor: float = Field(..., description="Multiplier from source to target")


class Ingredient(AuditedDocument):
    """Catalog ingredient with optional nutrition and conversion data."""

    name: str = Field(..., description="Primary name, e.g. 'egg'")
    aliases: list[str] = Field(
        default_factory=list,
        description="Alternate names, spellings, languages",
    )
    categories: list[str] = Field(
        default_factory=list,
        description="Free-text categories, e.g. 'dairy'",
    )
    allergens: list[str] = Field(
        default_factory=list,
        description="Allergen tags, e.g. 'nuts'",
    )
    nutrition: NutritionalInfo | None = Field(
        default=None,
        description="Core nutritional values per 100g",
    )
    metadata: dict[str, str] | None = Field(
        default=None,
        description="Additional nutritional metadata, e.g. sodium",
    )
    supported_units: list[Unit] | None = Field(
        default=None,
        description="Unit types this ingredient is usually measured in",
    )
    unit_conversions: list[UnitConversion] = Field(
        default_factory=list,
        description="Ordered conversion rules; the first match wins",
    )
