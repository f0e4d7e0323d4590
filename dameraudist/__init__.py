"""
Weighted Damerau-Levenshtein Distance
=====================================

The minimum cost of turning one sequence into another using insertion,
deletion, substitution and adjacent transposition, each with its own
integer cost.

    distance("teh", "the")                          → 1
    distance("ab", "ba", replace_cost=2)            → 1   (one swap)
    DamerauLevenshtein(2, 1, 1, 2).compute("KotlinCook", "Cook")  → 12

Properties:
  • d(x, x) = 0 under every valid cost model
  • Symmetric whenever delete_cost == insert_cost
  • Never above len(x)*delete_cost + len(y)*insert_cost
  • O(n·m) time and space

Logging goes through loguru and is disabled for this package by
default.  Turn it on with ``logger.enable("dameraudist")``.
"""

from loguru import logger

from dameraudist.core import (
    # Configuration
    CostModel,
    InvalidConfiguration,
    # Distance
    DamerauLevenshtein,
    distance,
    normalized_distance,
)
from dameraudist.formats import as_units, units_to_string

logger.disable("dameraudist")

__version__ = "0.1.0"
__all__ = [
    "CostModel", "InvalidConfiguration",
    "DamerauLevenshtein", "distance", "normalized_distance",
    "as_units", "units_to_string",
]
