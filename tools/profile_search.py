# tools/profile_search.py
"""
Small profiling harness for BKTree.search.
Usage:
  python tools/profile_search.py --words words.txt --tolerance 2 --iters 300
  python tools/profile_search.py --synthetic 20000 --length 8 --tolerance 1

Prints mean/median/stdev latency, the share of distance computations the tree
needed compared to a linear scan, and checks both return the same matches.
"""
import argparse
import random
import statistics
import string
import sys
import time
from statistics import median

from fuzzy_matcher.core.bktree import BKTree
from fuzzy_matcher.core.distance import levenshtein, levenshtein_with_cutoff
from fuzzy_matcher.loader import iter_words


class CountingDistance:
    """Wraps levenshtein and counts calls."""
    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return levenshtein(a, b)


def synthetic_words(n, length, seed=7):
    rng = random.Random(seed)
    alphabet = string.ascii_lowercase[:8]  # small alphabet -> many near neighbours
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(max(1, length - 2), length + 2))) for _ in range(n)]


def linear_scan(words, q, tolerance):
    return [w for w in words if levenshtein_with_cutoff(q, w, tolerance) <= tolerance]


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": round(statistics.mean(times_sorted), 3),
        "median_ms": round(median(times_sorted), 3),
        "stdev_ms": round(statistics.pstdev(times_sorted), 3),
        "p90_ms": round(times_sorted[int(0.9 * len(times_sorted)) - 1], 3),
        "max_ms": round(max(times_sorted), 3),
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=str, default=None, help="word list, one per line")
    parser.add_argument("--synthetic", type=int, default=10000, help="random words when --words is not given")
    parser.add_argument("--length", type=int, default=7, help="typical synthetic word length")
    parser.add_argument("--tolerance", type=int, default=1)
    parser.add_argument("--iters", type=int, default=200, help="measured searches")
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args(argv)
    if args.iters < 1:
        parser.error("--iters must be >= 1")
    if args.tolerance < 0:
        parser.error("--tolerance must be >= 0")

    if args.words:
        words = [w for w in iter_words(args.words) if w]
    else:
        words = synthetic_words(args.synthetic, args.length, args.seed)

    if not words:
        print("No words to index, nothing to profile.")
        return 1

    dist = CountingDistance()
    tree = BKTree(distance=dist)
    t0 = time.perf_counter()
    tree.insert_many(words)
    print(f"Built tree: {len(tree)} words, depth {tree.depth()}, {time.perf_counter() - t0:.2f}s")

    distinct = list(dict.fromkeys(words))
    rng = random.Random(args.seed)
    queries = [rng.choice(distinct) for _ in range(args.iters)]

    times = []
    dist.calls = 0
    mismatches = 0
    for q in queries:
        t0 = time.perf_counter()
        found = tree.search(q, args.tolerance)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
        if set(found) != set(linear_scan(distinct, q, args.tolerance)):
            mismatches += 1

    per_query = dist.calls / max(1, len(queries))
    print("Profiling summary (ms):", summarize(times))
    print(f"Distance calls per query: {per_query:.1f} of {len(distinct)} "
          f"({100.0 * per_query / max(1, len(distinct)):.1f}% of a linear scan)")
    print(f"Result mismatches vs linear scan: {mismatches}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
