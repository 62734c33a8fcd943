"""Live catalog sources.

This module defines the CatalogSource protocol that the data layer must
implement, plus an in-memory implementation. Using a Protocol keeps the
nutrition and viewer code independent of the real document store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from recipe_catalog.catalog.exceptions import CatalogError
from recipe_catalog.catalog.filters import (
    DocumentT,
    exclude_archived,
    sort_by_recently_updated,
)
from recipe_catalog.catalog.snapshot import CatalogSnapshot
from recipe_catalog.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from recipe_catalog.schemas.ingredient import Ingredient
    from recipe_catalog.schemas.recipe import Recipe
    from recipe_catalog.schemas.suggestion import Suggestion

    SnapshotListener = Callable[[CatalogSnapshot], None]

logger = get_logger(__name__)


@runtime_checkable
class CatalogSource(Protocol):
    """Protocol for live catalog sources.

    A source exposes the current snapshot and pushes a new snapshot to
    subscribers on every change. Each push should trigger an independent
    recomputation downstream.

    Example implementation:
        class FirestoreCatalogSource:
            def snapshot(self) -> CatalogSnapshot:
                ...

            def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
                # Register on_snapshot callbacks, return the unsubscribe hook
                ...
    """

    def snapshot(self) -> CatalogSnapshot:
        """Return the current snapshot.

        Returns:
            Snapshot without archived documents.
        """
        ...

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener for snapshot pushes.

        Args:
            listener: Called with every new snapshot, starting with the current one.

        Returns:
            A callable that removes the listener.
        """
        ...


class InMemoryCatalogSource:
    """Catalog source backed by in-process dictionaries.

    Mirrors the store queries of the viewer:
    - archived documents are never part of a snapshot
    - recipes are ordered by ``updated_at``, newest first

    The snapshot object is reused until the next change, so identity-keyed
    memoization downstream stays effective between pushes.
    """

    def __init__(
        self,
        recipes: Iterable[Recipe] = (),
        ingredients: Iterable[Ingredient] = (),
        suggestions: Iterable[Suggestion] = (),
    ) -> None:
        """Initialize the source.

        Args:
            recipes: Initial recipe documents.
            ingredients: Initial ingredient documents.
            suggestions: Initial suggestion documents.
        """
        self._recipes: dict[str, Recipe] = {r.id: r for r in recipes}
        self._ingredients: dict[str, Ingredient] = {i.id: i for i in ingredients}
        self._suggestions: dict[str, Suggestion] = {s.id: s for s in suggestions}
        self._listeners: list[SnapshotListener] = []
        self._current: CatalogSnapshot | None = None

    @classmethod
    def from_snapshot(cls, snapshot: CatalogSnapshot) -> InMemoryCatalogSource:
        """Create a source seeded with the documents of ``snapshot``."""
        return cls(
            recipes=snapshot.recipes,
            ingredients=snapshot.ingredients,
            suggestions=snapshot.suggestions,
        )

    def snapshot(self) -> CatalogSnapshot:
        """Return the current snapshot, building it on first use after a change."""
        if self._current is None:
            self._current = CatalogSnapshot(
                recipes=sort_by_recently_updated(
                    exclude_archived(self._recipes.values())
                ),
                ingredients=exclude_archived(self._ingredients.values()),
                suggestions=exclude_archived(self._suggestions.values()),
            )
        return self._current

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener and push the current snapshot to it."""
        self._listeners.append(listener)
        self._deliver(listener, self.snapshot())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================================================================
    # Mutations
    # =========================================================================

    def publish_recipe(self, recipe: Recipe) -> None:
        """Insert or replace a recipe and notify listeners."""
        self._recipes[recipe.id] = recipe
        self._changed()

    def publish_ingredient(self, ingredient: Ingredient) -> None:
        """Insert or replace an ingredient and notify listeners."""
        self._ingredients[ingredient.id] = ingredient
        self._changed()

    def publish_suggestion(self, suggestion: Suggestion) -> None:
        """Insert or replace a suggestion and notify listeners."""
        self._suggestions[suggestion.id] = suggestion
        self._changed()

    def archive_recipe(self, recipe_id: str) -> None:
        """Soft-delete a recipe.

        Raises:
            CatalogError: If the recipe is unknown.
        """
        self._recipes[recipe_id] = self._archived(self._recipes, recipe_id, "Recipe")
        self._changed()

    def archive_ingredient(self, ingredient_id: str) -> None:
        """Soft-delete an ingredient.

        Raises:
            CatalogError: If the ingredient is unknown.
        """
        self._ingredients[ingredient_id] = self._archived(
            self._ingredients, ingredient_id, "Ingredient"
        )
        self._changed()

    def _archived(
        self,
        documents: dict[str, DocumentT],
        doc_id: str,
        kind: str,
    ) -> DocumentT:
        document = documents.get(doc_id)
        if document is None:
            msg = f"{kind} '{doc_id}' does not exist"
            raise CatalogError(msg)
        return document.model_copy(update={"is_archived": True})

    # =========================================================================
    # Notification
    # =========================================================================

    def _changed(self) -> None:
        self._current = None
        snapshot = self.snapshot()
        logger.debug(
            "Catalog snapshot updated",
            recipes=len(snapshot.recipes),
            ingredients=len(snapshot.ingredients),
            listeners=len(self._listeners),
        )
        for listener in list(self._listeners):
            self._deliver(listener, snapshot)

    def _deliver(self, listener: SnapshotListener, snapshot: CatalogSnapshot) -> None:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("Catalog listener failed")
