"""
dameraudist.core — Weighted Damerau-Levenshtein Distance
=========================================================

§1  THE PROBLEM
───────────────

Levenshtein distance allows three edits: insert, delete, substitute.
Typing errors are dominated by a fourth one, the swapped pair
("teh" for "the"), which Levenshtein prices as two substitutions.
Damerau added the adjacent transposition as a single edit.

This module computes the Damerau-Levenshtein distance with four
independent non-negative integer costs:

    delete_cost    remove one unit from the source
    insert_cost    add one unit from the target
    replace_cost   turn one source unit into one target unit
    swap_cost      exchange two adjacent units

A swap applies when two units of the source appear, in reverse order,
in the target.  Units sitting between the two swapped occurrences are
deleted (source side) or inserted (target side) at their usual cost.
This is the unrestricted variant: "CA" → "ABC" costs 2 (swap + insert),
not 3 as under optimal string alignment.


§2  THE COST RESTRICTION
────────────────────────

    2 * swap_cost  >=  insert_cost + delete_cost

Two swaps involving the same unit are then never cheaper than a
delete followed by an insert.  Under this restriction an optimal edit
sequence touches every unit with at most one swap, and the recurrence
below only has to look at the LAST occurrence of each unit.  Cost
models violating it are rejected at construction.


§3  THE RECURRENCE
──────────────────

T[i][j] = cost of turning source[0..i] into target[0..j] (inclusive):

    T[i][j] = min(
        T[i-1][j]   + delete_cost,                         # delete
        T[i][j-1]   + insert_cost,                         # insert
        T[i-1][j-1] + (0 if s[i] == t[j] else replace),    # match/replace
        T[k-1][l-1] + (i-k-1) * delete_cost                # swap
                    + (j-l-1) * insert_cost
                    + swap_cost,
    )

where k is the last source index < i holding t[j], and l is the last
target index < j holding s[i].  k comes from a map rebuilt row by row;
l is tracked as a running index within the row.

The first row and column are filled with closed forms, since the table
has no sentinel row for the empty prefix.

Time O(n·m), space O(n·m) plus O(distinct source units) for the map.

Author: dameraudist contributors
License: MIT
"""

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from .formats import as_units


# ═══════════════════════════════════════════════════════════════════
#  COST MODEL
# ═══════════════════════════════════════════════════════════════════

class InvalidConfiguration(ValueError):
    """A cost model that cannot produce a correct distance."""


def _check_cost(name: str, value: Any) -> None:
    # bool is a subclass of int, so it would pass isinstance(value, int)
    if type(value) is bool or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class CostModel:
    """
    The four edit costs.

    Examples:
        CostModel(1, 1, 1, 1)          # classic unit costs
        CostModel(1, 1, 2, 1)          # replace = delete + insert
        CostModel(2, 1, 1, 2)          # deleting is expensive

    Raises InvalidConfiguration when a cost is negative or when
    2 * swap_cost < insert_cost + delete_cost.
    """
    delete_cost: int
    insert_cost: int
    replace_cost: int
    swap_cost: int

    def __post_init__(self) -> None:
        for name in ("delete_cost", "insert_cost", "replace_cost", "swap_cost"):
            _check_cost(name, getattr(self, name))

        negative = [
            name for name in ("delete_cost", "insert_cost", "replace_cost", "swap_cost")
            if getattr(self, name) < 0
        ]
        if negative:
            logger.error("Rejected cost model {costs}: negative {fields}",
                         costs=self, fields=negative)
            raise InvalidConfiguration(
                f"Costs must be non-negative: {', '.join(negative)} in {self!r}"
            )

        if 2 * self.swap_cost < self.insert_cost + self.delete_cost:
            logger.error("Rejected cost model {costs}: swap too cheap", costs=self)
            raise InvalidConfiguration(
                f"2 * swap_cost ({2 * self.swap_cost}) must be >= "
                f"insert_cost + delete_cost ({self.insert_cost + self.delete_cost})"
            )

    @classmethod
    def unit(cls) -> "CostModel":
        """All four costs equal to 1."""
        return cls(1, 1, 1, 1)

    def __repr__(self) -> str:
        return (f"CostModel(delete={self.delete_cost}, insert={self.insert_cost}, "
                f"replace={self.replace_cost}, swap={self.swap_cost})")


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE CALCULATOR
# ═══════════════════════════════════════════════════════════════════

class DamerauLevenshtein:
    """
    Damerau-Levenshtein distance under a fixed cost model.

    Build once, call compute() as often as needed.  The calculator
    holds nothing but its CostModel, so one instance can be shared
    across threads.

        >>> DamerauLevenshtein(1, 1, 2, 1).compute("ab", "ba")
        1
    """
    __slots__ = ("_costs",)

    def __init__(self, delete_cost: int, insert_cost: int,
                 replace_cost: int, swap_cost: int):
        self._costs = CostModel(delete_cost, insert_cost, replace_cost, swap_cost)
        logger.debug("Created calculator with {costs}", costs=self._costs)

    @classmethod
    def from_costs(cls, costs: CostModel) -> "DamerauLevenshtein":
        return cls(costs.delete_cost, costs.insert_cost,
                   costs.replace_cost, costs.swap_cost)

    @property
    def costs(self) -> CostModel:
        return self._costs

    def __repr__(self) -> str:
        return f"DamerauLevenshtein({self._costs!r})"

    def compute(self, source: Any, target: Any) -> int:
        """
        Minimum cost of turning `source` into `target`.

        Both arguments are ordered sequences of hashable units: strings,
        bytes, lists of tokens.  Either may be empty.  Never fails for
        such inputs.
        """
        s = as_units(source)
        t = as_units(target)
        n, m = len(s), len(t)

        delete_cost = self._costs.delete_cost
        insert_cost = self._costs.insert_cost
        replace_cost = self._costs.replace_cost
        swap_cost = self._costs.swap_cost

        logger.trace("compute: len(source)={n}, len(target)={m}", n=n, m=m)

        if n == 0:
            return m * insert_cost
        if m == 0:
            return n * delete_cost

        table = [[0] * m for _ in range(n)]

        # Last source index of each unit among the rows completed so far
        last_index: dict[Any, int] = {}

        if s[0] != t[0]:
            table[0][0] = min(replace_cost, delete_cost + insert_cost)
        last_index[s[0]] = 0

        # First column: source[0..i] → target[0]
        for i in range(1, n):
            table[i][0] = min(
                table[i - 1][0] + delete_cost,
                (i + 1) * delete_cost + insert_cost,
                i * delete_cost + (0 if s[i] == t[0] else replace_cost),
            )

        # First row: source[0] → target[0..j]
        for j in range(1, m):
            table[0][j] = min(
                table[0][j - 1] + insert_cost,
                (j + 1) * insert_cost + delete_cost,
                j * insert_cost + (0 if s[0] == t[j] else replace_cost),
            )

        for i in range(1, n):
            # Last target column < j where t[column] == s[i]
            max_match: Optional[int] = 0 if s[i] == t[0] else None
            row = table[i]
            prev_row = table[i - 1]

            for j in range(1, m):
                candidate = last_index.get(t[j])
                j_swap = max_match

                best = min(prev_row[j] + delete_cost, row[j - 1] + insert_cost)

                if s[i] == t[j]:
                    match = prev_row[j - 1]
                    max_match = j
                else:
                    match = prev_row[j - 1] + replace_cost
                if match < best:
                    best = match

                if candidate is not None and j_swap is not None:
                    if candidate == 0 and j_swap == 0:
                        swap = 0
                    else:
                        swap = table[max(0, candidate - 1)][max(0, j_swap - 1)]
                    swap += ((i - candidate - 1) * delete_cost
                             + (j - j_swap - 1) * insert_cost
                             + swap_cost)
                    if swap < best:
                        best = swap

                row[j] = best

            # Only after the whole row: row i must not see its own unit
            last_index[s[i]] = i

        return table[n - 1][m - 1]

    def normalized(self, source: Any, target: Any) -> float:
        """
        Distance scaled into [0, 1].

        0.0 = identical
        1.0 = nothing better than deleting all of `source` and
              inserting all of `target`

        Divides by that delete-all/insert-all bound, which compute()
        never exceeds.
        """
        s = as_units(source)
        t = as_units(target)
        bound = len(s) * self._costs.delete_cost + len(t) * self._costs.insert_cost
        if bound == 0:
            return 0.0
        return self.compute(s, t) / bound


# ═══════════════════════════════════════════════════════════════════
#  ONE-SHOT HELPERS
# ═══════════════════════════════════════════════════════════════════

def distance(source: Any, target: Any, delete_cost: int = 1, insert_cost: int = 1,
             replace_cost: int = 1, swap_cost: int = 1) -> int:
    """
    Damerau-Levenshtein distance in one call.

        distance("teh", "the")                       → 1
        distance("KotlinCook", "Kotlin", delete_cost=2, swap_cost=2)  → 8
    """
    calc = DamerauLevenshtein(delete_cost, insert_cost, replace_cost, swap_cost)
    return calc.compute(source, target)


def normalized_distance(source: Any, target: Any, delete_cost: int = 1,
                        insert_cost: int = 1, replace_cost: int = 1,
                        swap_cost: int = 1) -> float:
    """Normalized distance in one call.  See DamerauLevenshtein.normalized."""
    calc = DamerauLevenshtein(delete_cost, insert_cost, replace_cost, swap_cost)
    return calc.normalized(source, target)
