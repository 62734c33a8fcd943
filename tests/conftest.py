"""Shared test fixtures and configuration for the recipe catalog tests.

This module provides pytest fixtures that are used across multiple test modules:
catalog documents, recipe builders and a loguru capture sink.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from loguru import logger

from recipe_catalog.core.config import get_settings
from recipe_catalog.observability.logging import clear_context
from recipe_catalog.schemas import (
    Ingredient,
    NutritionalInfo,
    Recipe,
    RecipeIngredient,
    Unit,
    UnitConversion,
)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Clear cached settings and logging context around every test."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Capture loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


######################
# Catalog Documents  #
######################
@pytest.fixture
def flour() -> Ingredient:
    """Flour with calories and protein, plus a cup conversion."""
    return Ingredient(
        id="flour",
        name="flour",
        nutrition=NutritionalInfo(calories=364, protein=10),
        unit_conversions=[
            UnitConversion(from_unit=Unit.CUP, to_unit=Unit.G, factor=120),
        ],
        created_by_group_id="group-a",
    )


@pytest.fixture
def egg() -> Ingredient:
    """Egg with nutrition but no conversion rules."""
    return Ingredient(
        id="egg",
        name="egg",
        nutrition=NutritionalInfo(calories=143, protein=12.6, fat=9.5),
        created_by_group_id="group-b",
    )


@pytest.fixture
def salt() -> Ingredient:
    """Salt without any nutrition record."""
    return Ingredient(id="salt", name="salt", created_by_group_id="group-a")


@pytest.fixture
def ingredients_by_key(
    flour: Ingredient,
    egg: Ingredient,
    salt: Ingredient,
) -> dict[str, Ingredient]:
    """Ingredient catalog keyed by ID."""
    return {ing.id: ing for ing in (flour, egg, salt)}


@pytest.fixture
def make_line() -> Callable[..., RecipeIngredient]:
    """Build a recipe ingredient line."""

    def _make(
        ingredient_id: str,
        quantity: float | None,
        unit: Unit | str,
        **extra: Any,
    ) -> RecipeIngredient:
        return RecipeIngredient(
            ingredient_id=ingredient_id,
            quantity=quantity,
            unit=unit,
            **extra,
        )

    return _make


@pytest.fixture
def make_recipe() -> Callable[..., Recipe]:
    """Build a recipe from ingredient lines."""

    def _make(
        lines: list[RecipeIngredient],
        servings: int = 4,
        recipe_id: str = "recipe-1",
        **extra: Any,
    ) -> Recipe:
        return Recipe(
            id=recipe_id,
            slug=extra.pop("slug", recipe_id),
            name=extra.pop("name", "Test recipe"),
            servings=servings,
            ingredients=lines,
            **extra,
        )

    return _make
