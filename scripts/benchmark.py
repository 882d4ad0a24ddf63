#!/usr/bin/env python3
"""Benchmark script for boolfilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

CLAUSES = ("dangling", "not-dangling", "=true", "=false", "!=true", "!=false")


def benchmark_import_time() -> float:
    """Measure import time of boolfilter package."""
    start = time.perf_counter()
    import boolfilter  # noqa: F401

    return time.perf_counter() - start


def benchmark_parse() -> float:
    """Measure parsing of every clause form."""
    from boolfilter.domain.model.bool_filter import BoolFilter

    start = time.perf_counter()
    for _ in range(10000):
        flt = BoolFilter()
        for clause in CLAUSES:
            flt.parse(clause)
        flt.enable()
    return time.perf_counter() - start


def benchmark_evaluate() -> float:
    """Measure filter() and match_if_key_missing() on an enabled filter."""
    from boolfilter.domain.model.bool_filter import BoolFilter

    flt = BoolFilter.from_clauses("not-dangling")
    flt.enable()

    start = time.perf_counter()
    for _ in range(10000):
        flt.filter(True)
        flt.filter(False)
        flt.match_if_key_missing()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run boolfilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Parse (10k filters)", "unit": "seconds", "value": benchmark_parse()},
        {"name": "Evaluate (10k iterations)", "unit": "seconds", "value": benchmark_evaluate()},
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
