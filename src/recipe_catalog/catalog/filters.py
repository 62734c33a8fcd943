"""Predicates over already-materialized catalog collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from recipe_catalog.schemas.base import AuditedDocument


if TYPE_CHECKING:
    from collections.abc import Iterable


DocumentT = TypeVar("DocumentT", bound=AuditedDocument)


def filter_by_group(
    items: Iterable[DocumentT],
    group_id: str | None,
) -> list[DocumentT]:
    """Keep documents created by ``group_id``.

    An empty or missing group ID disables the filter.
    """
    if not group_id:
        return list(items)
    return [item for item in items if item.created_by_group_id == group_id]


def exclude_archived(items: Iterable[DocumentT]) -> list[DocumentT]:
    """Drop soft-deleted documents."""
    return [item for item in items if not item.is_archived]


def collect_group_ids(*collections: Iterable[AuditedDocument]) -> list[str]:
    """Sorted, de-duplicated creator group IDs across collections."""
    return sorted(
        {
            item.created_by_group_id
            for items in collections
            for item in items
            if item.created_by_group_id
        }
    )


def sort_by_recently_updated(items: Iterable[DocumentT]) -> list[DocumentT]:
    """Newest ``updated_at`` first; documents without one go last."""
    return sorted(
        items,
        key=lambda item: item.updated_at.timestamp() if item.updated_at else 0.0,
        reverse=True,
    )
