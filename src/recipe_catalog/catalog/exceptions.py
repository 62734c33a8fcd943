"""Exceptions for the catalog layer.

Custom exceptions for snapshot loading and document lookup errors.
Nutrition aggregation itself never raises; see NutritionService.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base exception for catalog errors."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
        """
        self.message = message
        super().__init__(message)


class SnapshotLoadError(CatalogError):
    """Raised when a catalog snapshot cannot be read or validated.

    This can occur when:
    - The file does not exist or cannot be read
    - The content is not valid JSON
    - The documents do not match the catalog schemas
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            path: Optional path of the snapshot that failed to load.
        """
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class RecipeNotFoundError(CatalogError):
    """Raised when no recipe matches a slug or ID."""

    def __init__(self, message: str, identifier: str) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            identifier: Slug or ID that was looked up.
        """
        self.identifier = identifier
        super().__init__(message)
