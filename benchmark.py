"""
Benchmark: dameraudist on typo-shaped and random inputs.

This benchmark shows:
    1. How often the transposition edit lowers the distance compared
       with plain Levenshtein on realistic typos
    2. How cost models change the ranking of candidate corrections
    3. O(n·m) scaling of compute()

The point is NOT raw speed — the point is:
    a swapped pair costs one edit, and you decide what an edit costs.
"""

import random
import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dameraudist.core import DamerauLevenshtein, distance, normalized_distance


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

TYPOS = [
    ("the", "teh"),
    ("receive", "recieve"),
    ("separate", "seperate"),
    ("definitely", "definately"),
    ("weird", "wierd"),
    ("friend", "freind"),
    ("because", "becuase"),
    ("which", "whihc"),
    ("KotlinCook", "CotlinKook"),
]

DICTIONARY = ["form", "from", "farm", "foam", "forum", "fro", "firm"]


def levenshtein(s, t):
    """Plain Levenshtein, no transpositions, unit costs."""
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
        prev, curr = curr, prev

    return prev[n]


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_typos():
    """Damerau-Levenshtein vs Levenshtein on common misspellings."""
    print("=" * 70)
    print("  §1  TYPOS: Damerau-Levenshtein vs Levenshtein")
    print("=" * 70)
    print()

    lower = 0
    for word, typo in TYPOS:
        dl = distance(word, typo)
        lev = levenshtein(word, typo)
        mark = "↓" if dl < lev else "="
        if dl < lev:
            lower += 1
        print(f"  {mark} {word!r:>14} vs {typo!r:<14}  DL={dl}  Lev={lev}")

    print()
    print(f"  RESULT: transpositions lowered the distance on {lower}/{len(TYPOS)} typos.")
    print()


def benchmark_cost_models():
    """Rank dictionary candidates for a typo under different cost models."""
    print("=" * 70)
    print("  §2  COST MODELS: ranking corrections for 'fomr'")
    print("=" * 70)
    print()

    models = {
        "unit (1,1,1,1)": DamerauLevenshtein(1, 1, 1, 1),
        "replace=2 (1,1,2,1)": DamerauLevenshtein(1, 1, 2, 1),
        "cheap insert (3,1,2,2)": DamerauLevenshtein(3, 1, 2, 2),
    }
    for label, calc in models.items():
        ranked = sorted(DICTIONARY, key=lambda w: (calc.compute("fomr", w), w))
        scores = ", ".join(f"{w}={calc.compute('fomr', w)}" for w in ranked[:4])
        print(f"  {label:<24} {scores}")
    print()


def benchmark_scaling():
    """compute() time as input length grows."""
    print("=" * 70)
    print("  §3  SCALING")
    print("=" * 70)
    print()

    random.seed(0)
    calc = DamerauLevenshtein(1, 1, 1, 1)
    for n in [10, 50, 100, 250, 500, 1000]:
        a = "".join(random.choice("abcdefgh") for _ in range(n))
        b = "".join(random.choice("abcdefgh") for _ in range(n))

        t0 = time.perf_counter()
        d = calc.compute(a, b)
        dt = time.perf_counter() - t0

        nd = normalized_distance(a, b)
        print(f"  Length {n:>5}: d={d:>5}  normalized={nd:.3f}  time={dt*1000:>9.2f}ms")

    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          DAMERAU-LEVENSHTEIN DISTANCE — BENCHMARK SUITE             ║")
    print("║          dameraudist v0.1.0                                         ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_typos()
    benchmark_cost_models()
    benchmark_scaling()


if __name__ == "__main__":
    main()
