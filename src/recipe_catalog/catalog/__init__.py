"""Catalog layer: snapshots, live sources and collection helpers.

This package provides:
- CatalogSnapshot: Frozen view of recipes, ingredients and suggestions
- CatalogSource: Protocol for live data sources, with an in-memory implementation
- Filters for group ownership and soft deletes
- LastResultMemo: Identity-keyed memo for push-driven recomputation
- load_snapshot: JSON snapshot loader
"""

from recipe_catalog.catalog.exceptions import (
    CatalogError,
    RecipeNotFoundError,
    SnapshotLoadError,
)
from recipe_catalog.catalog.filters import (
    collect_group_ids,
    exclude_archived,
    filter_by_group,
    sort_by_recently_updated,
)
from recipe_catalog.catalog.loader import load_snapshot
from recipe_catalog.catalog.memo import LastResultMemo
from recipe_catalog.catalog.snapshot import CatalogSnapshot
from recipe_catalog.catalog.source import CatalogSource, InMemoryCatalogSource


__all__ = [
    "CatalogError",
    "CatalogSnapshot",
    "CatalogSource",
    "InMemoryCatalogSource",
    "LastResultMemo",
    "RecipeNotFoundError",
    "SnapshotLoadError",
    "collect_group_ids",
    "exclude_archived",
    "filter_by_group",
    "load_snapshot",
    "sort_by_recently_updated",
]
