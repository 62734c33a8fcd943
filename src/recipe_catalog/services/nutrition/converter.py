"""Unit conversion utilities for nutrition calculations.

Uses a fixed table for weight units and the ingredient's own conversion
rules for everything else (volume, count).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_catalog.schemas.enums import Unit
from recipe_catalog.services.nutrition.constants import (
    COUNT_UNITS,
    VOLUME_UNITS,
    WEIGHT_TO_GRAMS,
    WEIGHT_UNITS,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_catalog.schemas.ingredient import Ingredient, UnitConversion


class UnitConverter:
    """Converts ingredient quantities to grams.

    Conversion Strategy (first match wins):
        1. Weight units (G, KG, OZ, LB): fixed factor table, ingredient ignored
        2. Ingredient rule ``unit -> g``: quantity * factor
        3. Ingredient rule ``unit -> <weight unit>``: quantity * factor, then
           the weight table (one hop only; ``piece -> cup -> g`` is not resolved)
        4. Otherwise: not convertible, reported as ``None``

    Rules are scanned in declaration order and factors are applied as given.

    Example:
        converter = UnitConverter()
        grams = converter.to_grams(3, Unit.PIECE, egg)
        # egg.unit_conversions == [{"from": "piece", "to": "kg", "factor": 0.05}]
        # Returns 150.0
    """

    def to_grams(
        self,
        quantity: float,
        unit: Unit,
        ingredient: Ingredient,
    ) -> float | None:
        """Convert a quantity to grams.

        Args:
            quantity: Numeric amount.
            unit: Unit the amount is expressed in.
            ingredient: Ingredient whose conversion rules apply.

        Returns:
            Amount in grams, or None if the unit cannot be resolved.
        """
        if unit == Unit.FREE_TEXT:
            return None

        if unit in WEIGHT_UNITS:
            return self._convert_weight_to_grams(quantity, unit)

        rules = ingredient.unit_conversions

        direct = self._find_direct_rule(unit, rules)
        if direct is not None:
            return quantity * direct.factor

        chained = self._find_chained_rule(unit, rules)
        if chained is not None:
            intermediate = quantity * chained.factor
            return self._convert_weight_to_grams(intermediate, chained.to_unit)

        return None

    def _convert_weight_to_grams(self, amount: float, unit: Unit) -> float:
        """Convert a weight measurement to grams using the fixed table."""
        return amount * WEIGHT_TO_GRAMS[unit]

    def _find_direct_rule(
        self,
        unit: Unit,
        rules: Sequence[UnitConversion],
    ) -> UnitConversion | None:
        """Find the first rule converting ``unit`` straight to grams."""
        for rule in rules:
            if rule.from_unit == unit and rule.to_unit == Unit.G:
                return rule
        return None

    def _find_chained_rule(
        self,
        unit: Unit,
        rules: Sequence[UnitConversion],
    ) -> UnitConversion | None:
        """Find the first rule converting ``unit`` to any weight unit."""
        for rule in rules:
            if rule.from_unit == unit and rule.to_unit in WEIGHT_UNITS:
                return rule
        return None

    def is_weight_unit(self, unit: Unit) -> bool:
        """Check if a unit is a weight unit.

        Args:
            unit: Unit to check.

        Returns:
            True if the unit is a weight unit.
        """
        return unit in WEIGHT_UNITS

    def is_volume_unit(self, unit: Unit) -> bool:
        """Check if a unit is a volume unit.

        Args:
            unit: Unit to check.

        Returns:
            True if the unit is a volume unit.
        """
        return unit in VOLUME_UNITS

    def is_count_unit(self, unit: Unit) -> bool:
        """Check if a unit is a count-based unit.

        Args:
            unit: Unit to check.

        Returns:
            True if the unit is a count-based unit.
        """
        return unit in COUNT_UNITS
