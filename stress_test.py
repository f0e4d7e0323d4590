"""
Stress tests / adversarial evaluation of dameraudist.

This script attempts to BREAK the claimed properties:
  1. Agreement with the textbook unit-cost Damerau-Levenshtein
  2. Identity (d(x, x) = 0) under every cost model
  3. Symmetry when delete_cost == insert_cost
  4. The delete-all/insert-all upper bound
  5. Triangle inequality at unit costs
  6. Repeated-unit inputs that exercise the last-occurrence map
"""

import sys, os, random, time, itertools
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dameraudist.core import DamerauLevenshtein, InvalidConfiguration, distance


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def textbook_damerau_levenshtein(a, b):
    """
    Lowrance-Wagner with unit costs, using a sentinel row/column and a
    last-row map.  Independent of the library's closed-form boundaries.
    """
    inf = len(a) + len(b)
    last_row = {}
    d = [[0] * (len(b) + 2) for _ in range(len(a) + 2)]
    d[0][0] = inf
    for i in range(len(a) + 1):
        d[i + 1][0] = inf
        d[i + 1][1] = i
    for j in range(len(b) + 1):
        d[0][j + 1] = inf
        d[1][j + 1] = j

    for i in range(1, len(a) + 1):
        last_col = 0
        for j in range(1, len(b) + 1):
            k = last_row.get(b[j - 1], 0)
            l = last_col
            if a[i - 1] == b[j - 1]:
                cost = 0
                last_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[a[i - 1]] = i
    return d[len(a) + 1][len(b) + 1]


# ═══════════════════════════════════════════════════════════════
#  §1  TEXTBOOK AGREEMENT — exhaustive small cases
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  TEXTBOOK AGREEMENT — exhaustive check")
print("=" * 70)

# All strings of length ≤ 4 over alphabet {a, b, c}
alphabet = "abc"
all_strings = [""]
for length in range(1, 5):
    for combo in itertools.product(alphabet, repeat=length):
        all_strings.append("".join(combo))

random.seed(42)
sample_pairs = random.sample(
    [(s1, s2) for s1 in all_strings for s2 in all_strings],
    min(3000, len(all_strings)**2)
)

unit = DamerauLevenshtein(1, 1, 1, 1)
mismatches = 0
for s1, s2 in sample_pairs:
    expected = textbook_damerau_levenshtein(s1, s2)
    got = unit.compute(s1, s2)
    if got != expected:
        mismatches += 1
        if mismatches <= 5:
            print(f"    MISMATCH: d(\"{s1}\", \"{s2}\") = {got}, textbook = {expected}")

test("Textbook agreement (3000 random pairs, len≤4)",
     mismatches == 0,
     f"{mismatches} mismatches")


# ═══════════════════════════════════════════════════════════════
#  §2  PROPERTIES UNDER RANDOM COST MODELS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  PROPERTIES — random cost models")
print("=" * 70)

def random_cost_model():
    """Draw costs until the swap restriction holds."""
    while True:
        costs = [random.randint(0, 5) for _ in range(4)]
        try:
            return DamerauLevenshtein(*costs)
        except InvalidConfiguration:
            continue

def random_word(max_len=7):
    return "".join(random.choice("abcd") for _ in range(random.randint(0, max_len)))

random.seed(123)
models = [random_cost_model() for _ in range(20)]
words = [random_word() for _ in range(40)]

identity_failures = 0
bound_failures = 0
for calc in models:
    costs = calc.costs
    for w in words:
        if calc.compute(w, w) != 0:
            identity_failures += 1
    for a in words:
        for b in words:
            d = calc.compute(a, b)
            if d > len(a) * costs.delete_cost + len(b) * costs.insert_cost:
                bound_failures += 1

test(f"Identity ({len(models)} models × {len(words)} words)",
     identity_failures == 0, f"{identity_failures} failures")
test("Delete-all/insert-all upper bound",
     bound_failures == 0, f"{bound_failures} failures")

sym_checks = 0
sym_violations = 0
for calc in models:
    if calc.costs.delete_cost != calc.costs.insert_cost:
        continue
    for a in words:
        for b in words:
            sym_checks += 1
            if calc.compute(a, b) != calc.compute(b, a):
                sym_violations += 1

test(f"Symmetry with delete == insert ({sym_checks} pairs)",
     sym_violations == 0, f"{sym_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §3  TRIANGLE INEQUALITY — unit costs
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  TRIANGLE INEQUALITY — unit costs")
print("=" * 70)

subset = words[:25]
tri_checks = 0
tri_violations = 0
for x in subset:
    for y in subset:
        for z in subset:
            tri_checks += 1
            if unit.compute(x, z) > unit.compute(x, y) + unit.compute(y, z):
                tri_violations += 1
                if tri_violations <= 3:
                    print(f"    VIOLATION: {x!r} {y!r} {z!r}")

test(f"Triangle inequality ({tri_checks} triples)",
     tri_violations == 0, f"{tri_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §4  REPEATED UNITS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  REPEATED UNITS")
print("=" * 70)

test("abab → baba = 2", distance("abab", "baba") == 2)
test("aab → aba = 1", distance("aab", "aba") == 1)
test("aaaa → aaaa = 0", distance("aaaa", "aaaa") == 0)
test("CA → ABC = 2 (not the OSA 3)", distance("CA", "ABC") == 2)
test("abcabc → abcacb = 1", distance("abcabc", "abcacb") == 1)


# ═══════════════════════════════════════════════════════════════
#  §5  SCALING
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  SCALING")
print("=" * 70)

random.seed(7)
for n in [50, 100, 200, 400]:
    a = "".join(random.choice("acgt") for _ in range(n))
    b = "".join(random.choice("acgt") for _ in range(n))
    t0 = time.perf_counter()
    d = unit.compute(a, b)
    dt = time.perf_counter() - t0
    print(f"  n={n:>4}: {dt*1000:.3f}ms  d={d}")


# ═══════════════════════════════════════════════════════════════
#  SUMMARY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  STRESS TEST SUMMARY")
print("=" * 70)
print("  If you see FAIL above, there's a bug.")
print("  If everything is PASS, the implementation is correct")
print("  for the tested cases (not a proof, but high confidence).")
