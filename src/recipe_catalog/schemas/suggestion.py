"""Suggestion schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from recipe_catalog.schemas.base import AuditedDocument
from recipe_catalog.schemas.enums import (
    SuggestionCategory,
    SuggestionPriority,
    SuggestionStatus,
)


class Suggestion(AuditedDocument):
    """Improvement suggestion submitted by a group."""

    title: str = Field(..., description="Brief title")
    description: str = Field(default="", description="Detailed description")
    category: SuggestionCategory = Field(
        default=SuggestionCategory.OTHER,
        description="Category of suggestion",
    )
    priority: SuggestionPriority = Field(
        default=SuggestionPriority.MEDIUM,
        description="Priority level",
    )
    related_recipe_id: str | None = Field(
        default=None,
        description="Related recipe ID",
    )
    status: SuggestionStatus = Field(
        default=SuggestionStatus.SUBMITTED,
        description="Current status",
    )
    votes: int = Field(default=0, ge=0, description="Vote count")
    voted_by_groups: list[str] = Field(
        default_factory=list,
        description="Groups that have voted",
    )
    submitted_at: datetime | None = Field(default=None, description="Submission time")
    submitted_by_group_id: str | None = Field(
        default=None,
        description="Group that submitted the suggestion",
    )
