"""should_check() benchmark.

A comparison run calls should_check() once per submission pair, so a cohort of
n submissions costs n*(n-1)/2 calls. Measures p99 latency of single calls and
the wall time of a full enumeration:

  1. Allow-list hit / miss
  2. Deny-list hit / miss
  3. Full candidate_pairs() pass over 1,000 submissions (499,500 calls)

Usage (from project root, with .venv activated):
    python benchmarks/bench_should_check.py
"""

from __future__ import annotations

import time
from typing import Any

from pairgate.filters import ListFilter, ListPolicy
from pairgate.lists import parse_pair_lines
from pairgate.models import Submission
from pairgate.pairing import candidate_pairs, count_pairs

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

COHORT = [Submission(f"student{i:04d}") for i in range(1_000)]

# 100 groups of 5 collaborators → 1,000 listed pairs
LIST_LINES = [
    ";".join(s.name for s in COHORT[start:start + 5])
    for start in range(0, 500, 5)
]
LISTED = parse_pair_lines(LIST_LINES)

ALLOW = ListFilter(LISTED, ListPolicy.ALLOW)
DENY = ListFilter(LISTED, ListPolicy.DENY)

HIT = (COHORT[3], COHORT[1])
MISS = (COHORT[3], COHORT[900])

# Single-call p99 budget (ms)
CALL_BUDGET_MS = 0.05


# ---------------------------------------------------------------------------
# Benchmark runner
# ---------------------------------------------------------------------------


def measure_p99(fn: Any, *args: Any, n: int = 10_000) -> tuple[float, float, float]:
    """Run fn(*args) n times and return (p50, p99, max) in milliseconds."""
    latencies: list[float] = []
    for _ in range(n):
        start = time.perf_counter()
        fn(*args)
        elapsed = (time.perf_counter() - start) * 1_000
        latencies.append(elapsed)
    latencies.sort()
    p50 = latencies[int(0.50 * n)]
    p99 = latencies[int(0.99 * n)]
    return p50, p99, latencies[-1]


def run_benchmarks() -> bool:
    """Run all benchmarks. Returns True if all pass."""
    WARMUP = 1_000

    print("=" * 70)
    print("pairgate should_check() Benchmark")
    print(f"Listed pairs: {len(LISTED)} | Cohort: {len(COHORT)} submissions")
    print("=" * 70)

    scenarios = [
        ("Allow-list hit", ALLOW, HIT),
        ("Allow-list miss", ALLOW, MISS),
        ("Deny-list hit", DENY, HIT),
        ("Deny-list miss", DENY, MISS),
    ]

    all_pass = True
    for name, pair_filter, (a, b) in scenarios:
        for _ in range(WARMUP):
            pair_filter.should_check(a, b)

        p50, p99, worst = measure_p99(pair_filter.should_check, a, b)
        passed = p99 <= CALL_BUDGET_MS
        status = "✓ PASS" if passed else "✗ FAIL"
        if not passed:
            all_pass = False
        print(f"  [{status}] {name}")
        print(f"          p50={p50 * 1000:.2f}µs  p99={p99 * 1000:.2f}µs  worst={worst * 1000:.2f}µs")

    start = time.perf_counter()
    selected = sum(1 for _ in candidate_pairs(COHORT, DENY))
    elapsed = time.perf_counter() - start
    print(f"  [INFO] Full deny-list pass: {count_pairs(len(COHORT))} pairs, "
          f"{selected} selected, {elapsed:.2f}s")

    print("=" * 70)
    if all_pass:
        print(f"RESULT: ALL BENCHMARKS PASSED — p99 < {CALL_BUDGET_MS * 1000:.0f}µs ✓")
    else:
        print(f"RESULT: SOME BENCHMARKS FAILED — p99 exceeded {CALL_BUDGET_MS * 1000:.0f}µs ✗")
    print("=" * 70)

    return all_pass


if __name__ == "__main__":
    import sys

    passed = run_benchmarks()
    sys.exit(0 if passed else 1)
