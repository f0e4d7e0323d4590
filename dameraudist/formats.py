"""
dameraudist.formats — Turn caller input into sequences of atomic units.

Supported conversions:
    • str                  → tuple of single characters
    • bytes / bytearray    → tuple of byte values (ints)
    • list / tuple / other ordered sequence → tuple of its items
    • tuple of characters  → str  (inverse of the str case)

No normalization or segmentation happens here: each code point, byte
or list item is one unit.  Decoding and grapheme handling are the
caller's business.
"""

from collections.abc import Hashable, Sequence
from typing import Any


# ═══════════════════════════════════════════════════════════════════
#  CALLER INPUT → ATOMIC UNITS
# ═══════════════════════════════════════════════════════════════════

def as_units(value: Any) -> tuple[Hashable, ...]:
    """
    Convert an input sequence to a tuple of atomic units.

    Mapping:
        "abc"          → ('a', 'b', 'c')
        b"ab"          → (97, 98)
        ["ab", "cd"]   → ('ab', 'cd')      (tokens stay whole)

    Unordered collections and None are rejected with TypeError,
    since "adjacent" means nothing for them.
    """
    if value is None:
        raise TypeError("Expected an ordered sequence, got None")
    if isinstance(value, str):
        return tuple(value)
    if isinstance(value, (bytes, bytearray)):
        return tuple(value)
    if isinstance(value, tuple):
        return value
    if isinstance(value, Sequence):
        return tuple(value)
    raise TypeError(f"Expected an ordered sequence, got {type(value).__name__}")


def units_to_string(units: Sequence[Any]) -> str:
    """
    Join a sequence of single characters back into a string.

    Inverse of as_units on strings.  Non-character units become "?".
    """
    return "".join(
        unit if isinstance(unit, str) and len(unit) == 1 else "?"
        for unit in units
    )
