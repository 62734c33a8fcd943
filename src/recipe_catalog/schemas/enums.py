"""Enumeration types for catalog schemas.

This module contains all enum definitions used across the catalog documents,
plus guards for checking raw strings against them.
"""

from __future__ import annotations

from enum import StrEnum


class Unit(StrEnum):
    """Units of measurement for recipe ingredients."""

    # Metric weight
    G = "g"
    KG = "kg"
    # Metric volume
    ML = "ml"
    L = "l"
    # Imperial/US weight
    OZ = "oz"
    LB = "lb"
    # Imperial/US volume
    TSP = "tsp"
    TBSP = "tbsp"
    FL_OZ = "fl oz"
    CUP = "cup"
    PINT = "pint"
    QUART = "quart"
    GALLON = "gallon"
    # Count
    PIECE = "piece"
    # Quantity is expressed in quantity_text instead
    FREE_TEXT = "free_text"


class SuggestionCategory(StrEnum):
    """Kinds of suggestions submitted by groups."""

    FEATURE = "feature"
    BUG = "bug"
    IMPROVEMENT = "improvement"
    OTHER = "other"


class SuggestionPriority(StrEnum):
    """Suggestion priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SuggestionStatus(StrEnum):
    """Suggestion review workflow states."""

    SUBMITTED = "submitted"
    UNDER_REVIEW = "under-review"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IMPLEMENTED = "implemented"


def _is_member(enum_cls: type[StrEnum], value: str) -> bool:
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def is_unit(value: str) -> bool:
    """Check whether a raw string is a known unit."""
    return _is_member(Unit, value)


def is_suggestion_category(value: str) -> bool:
    """Check whether a raw string is a known suggestion category."""
    return _is_member(SuggestionCategory, value)


def is_suggestion_priority(value: str) -> bool:
    """Check whether a raw string is a known suggestion priority."""
    return _is_member(SuggestionPriority, value)


def is_suggestion_status(value: str) -> bool:
    """Check whether a raw string is a known suggestion status."""
    return _is_member(SuggestionStatus, value)
