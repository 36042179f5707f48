"""Draw integers from an entropy source and report how uniform they are.

Usage:
    uv run python scripts/uniformity_report.py [--source fast] [--min -5] [--max 5]
        [--draws 100000] [--seed 42]
"""

from __future__ import annotations

import argparse
import time
from collections import Counter

from rangerand import RandomContext, Settings, SourceKind
from rangerand.numeric import IntegerType


def chi_squared(counts: Counter[int], values: range, draws: int) -> float:
    """Pearson chi-squared statistic of *counts* against a uniform null."""
    expected = draws / len(values)
    return sum((counts.get(v, 0) - expected) ** 2 / expected for v in values)


def draw_counts(
    context: RandomContext,
    kind: SourceKind,
    minimum: int,
    maximum: int,
    draws: int,
    int_type: IntegerType = IntegerType.INT32,
) -> Counter[int]:
    """Count *draws* inclusive-inclusive samples from *kind*."""
    values = context.random_integers(
        draws, minimum, maximum, int_type=int_type, source=kind
    )
    return Counter(values)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Integer uniformity report")
    parser.add_argument(
        "--source",
        choices=[kind.value for kind in SourceKind],
        default=SourceKind.FAST.value,
        help="Entropy source to draw from",
    )
    parser.add_argument("--min", type=int, default=-5, help="Inclusive minimum")
    parser.add_argument("--max", type=int, default=5, help="Inclusive maximum")
    parser.add_argument("--draws", type=int, default=100_000, help="Number of draws")
    parser.add_argument(
        "--type",
        choices=[t.value for t in IntegerType],
        default=IntegerType.INT32.value,
        help="Integer type of the bounds",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for seedable sources")
    args = parser.parse_args(argv)

    kind = SourceKind(args.source)
    context = RandomContext(
        settings=Settings(fast_seed=args.seed, subtractive_seed=args.seed)
    )
    values = range(args.min, args.max + 1)
    if args.seed is not None and not context.source(kind).seedable:
        print(f"Note: {kind.value} source is not seedable; --seed ignored")

    print(f"Drawing {args.draws:,} values in [{args.min}, {args.max}] from {kind.value}...")
    t0 = time.perf_counter()
    counts = draw_counts(
        context, kind, args.min, args.max, args.draws, IntegerType(args.type)
    )
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.2f}s")
    print()

    expected = args.draws / len(values)
    if len(values) <= 64:
        for v in values:
            observed = counts.get(v, 0)
            print(f"{v:>12}  {observed:>10,}  ({observed - expected:+.1f})")
        print()
    print(f"Distinct values seen: {len(counts):,} of {len(values):,}")
    print(f"Chi-squared: {chi_squared(counts, values, args.draws):.2f} "
          f"(df={len(values) - 1})")


if __name__ == "__main__":
    main()
