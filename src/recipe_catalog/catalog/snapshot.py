"""Immutable point-in-time view of the catalog collections."""

from __future__ import annotations

from functools import cached_property
from types import MappingProxyType

from pydantic import Field

from recipe_catalog.catalog.exceptions import RecipeNotFoundError
from recipe_catalog.catalog.filters import collect_group_ids, filter_by_group
from recipe_catalog.schemas.base import StoreDocument
from recipe_catalog.schemas.ingredient import Ingredient
from recipe_catalog.schemas.recipe import Recipe
from recipe_catalog.schemas.suggestion import Suggestion


class CatalogSnapshot(StoreDocument):
    """Recipes, ingredients and suggestions as pushed by the store.

    Snapshots are frozen; every push from a live source produces a new one.
    """

    recipes: list[Recipe] = Field(default_factory=list, description="Recipes")
    ingredients: list[Ingredient] = Field(
        default_factory=list,
        description="Ingredient catalog",
    )
    suggestions: list[Suggestion] = Field(
        default_factory=list,
        description="Suggestions",
    )

    @cached_property
    def ingredients_by_key(self) -> MappingProxyType[str, Ingredient]:
        """Read-only ingredient lookup, built once per snapshot."""
        return MappingProxyType({ing.id: ing for ing in self.ingredients})

    def find_recipe(self, slug_or_id: str) -> Recipe:
        """Return the first recipe whose slug or ID matches.

        Raises:
            RecipeNotFoundError: If nothing matches.
        """
        for recipe in self.recipes:
            if slug_or_id in (recipe.slug, recipe.id):
                return recipe
        msg = f"Recipe '{slug_or_id}' not found"
        raise RecipeNotFoundError(msg, identifier=slug_or_id)

    def group_ids(self) -> list[str]:
        """Creator group IDs across recipes and ingredients."""
        return collect_group_ids(self.recipes, self.ingredients)

    def filter_by_group(self, group_id: str | None) -> CatalogSnapshot:
        """Snapshot restricted to recipes and ingredients of one group.

        Suggestions are kept as-is. A falsy ``group_id`` returns ``self``.
        """
        if not group_id:
            return self
        return CatalogSnapshot(
            recipes=filter_by_group(self.recipes, group_id),
            ingredients=filter_by_group(self.ingredients, group_id),
            suggestions=self.suggestions,
        )
