"""Constants for nutrition calculations.

Contains:
- Canonical weight factors used without consulting ingredient data
- Unit type sets for classification (weight, volume, count)
- The reference mass that nutrition profiles are expressed in
"""

from __future__ import annotations

from typing import Final

from recipe_catalog.schemas.enums import Unit


# =============================================================================
# Weight Conversions
# =============================================================================
# Weight units are ingredient-independent; everything else needs a rule on
# the ingredient because a cup of flour and a cup of water differ in mass.

WEIGHT_TO_GRAMS: Final[dict[Unit, float]] = {
    Unit.G: 1.0,
    Unit.KG: 1000.0,
    Unit.OZ: 28.3495,
    Unit.LB: 453.592,
}


# =============================================================================
# Unit Type Classification
# =============================================================================

WEIGHT_UNITS: Final[frozenset[Unit]] = frozenset(WEIGHT_TO_GRAMS)

VOLUME_UNITS: Final[frozenset[Unit]] = frozenset(
    {
        Unit.ML,
        Unit.L,
        Unit.TSP,
        Unit.TBSP,
        Unit.FL_OZ,
        Unit.CUP,
        Unit.PINT,
        Unit.QUART,
        Unit.GALLON,
    }
)

COUNT_UNITS: Final[frozenset[Unit]] = frozenset({Unit.PIECE})

# FREE_TEXT belongs to none of the sets above and is never convertible


# =============================================================================
# Nutrition Profiles
# =============================================================================

# Ingredient nutrition values are defined per this many grams
PROFILE_REFERENCE_GRAMS: Final[float] = 100.0
