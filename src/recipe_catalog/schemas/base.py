"""Base schema configuration for all Pydantic models.

This module provides centralized base classes with consistent configuration.
Catalog documents and computed results inherit from the appropriate class.

Usage:
    - StoreDocument: For records read from the document store
    - AuditedDocument: For top-level store documents with provenance fields
    - ComputedResult: For values computed by this package
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        # Store documents use camelCase keys
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        # Validation settings
        validate_default=True,
        # Snapshots are shared between callers and never mutated
        frozen=True,
        # Always serialize to camelCase
        serialize_by_alias=True,
    )


class StoreDocument(_BaseSchema):
    """Base class for records received from the document store.

    Configured to ignore extra fields - documents may carry properties
    written by other clients, and that must not break parsing.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class AuditedDocument(StoreDocument):
    """Top-level store document with provenance and soft-delete fields."""

    id: str = Field(..., description="Document ID")
    variant_of: str | None = Field(
        default=None,
        description="ID of the original document if this is a variant",
    )
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")
    created_by_group_id: str | None = Field(
        default=None,
        description="Group that created the document",
    )
    updated_by_group_id: str | None = Field(
        default=None,
        description="Group that last updated the document",
    )
    is_archived: bool = Field(default=False, description="Soft delete flag")


class ComputedResult(_BaseSchema):
    """Base class for values computed by this package.

    Configured to forbid extra fields - results only carry
    properties that are explicitly defined in the schema.
    """

    model_config = ConfigDict(
        extra="forbid",
    )
