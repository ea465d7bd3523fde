#!/usr/bin/env python3
import time
import logging
import argparse
import resource
import numpy as np
import pandas as pd

from minmax_heap import (make_mm_heap, push_mm_heap, pop_mm_heap,
                         pop_mm_heap_max)
from order_statistics_tree import (OrderStatisticsTree, make_order_statistics_tree,
                                   quantile_ranks)

def fmt_kb(kb: int) -> str:
    return f"{kb:,} KB"

def make_random_values(n: int, rng) -> list:
    """n random integers drawn from [0, 4n), as a plain list of Python ints."""
    return rng.integers(0, 4 * max(n, 1), size=n).tolist()


def benchmark(n: int, quantiles, num_ops: int, rng):
    values = make_random_values(n, rng)
    ranks = quantile_ranks(n, quantiles) if n else []

    # measure heap build
    h = list(values)
    mem0 = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    t0_wall = time.perf_counter()
    t0_cpu = time.process_time()
    make_mm_heap(h)
    build_wall = time.perf_counter() - t0_wall
    build_cpu  = time.process_time() - t0_cpu
    mem1 = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss

    # measure order-statistics build
    t = list(values)
    t0_wall = time.perf_counter()
    make_order_statistics_tree(t, ranks)
    ost_wall = time.perf_counter() - t0_wall

    results = {
        "n":              n,
        "ranks":          len(ranks),
        "heap_build_wall_s": build_wall,
        "heap_build_cpu_s":  build_cpu,
        "heap_build_rss":    fmt_kb(mem1 - mem0),
        "ost_build_wall_s":  ost_wall,
    }

    num_ops = min(num_ops, n)
    if num_ops == 0:
        return results

    def measure(op, sizes):
        times = []
        for last in sizes:
            start = time.perf_counter()
            op(last)
            times.append(time.perf_counter() - start)
        return sum(times) / len(times)

    # pops shrink the heap from the end, pushes grow it back
    shrinking = range(n, n - num_ops, -1)
    growing   = range(n - num_ops + 1, n + 1)
    results["pop_min_s"] = measure(lambda last: pop_mm_heap(h, 0, last), shrinking)
    results["push_s"]    = measure(lambda last: push_mm_heap(h, 0, last), growing)
    results["pop_max_s"] = measure(lambda last: pop_mm_heap_max(h, 0, last), shrinking)

    if ranks:
        tree = OrderStatisticsTree(list(values) + [0] * num_ops, ranks, size=n)
        pushes = make_random_values(num_ops, rng)
        results["ost_push_s"] = measure(tree.push, pushes)
        positions = [int(p) for p in rng.integers(0, n, size=num_ops)]
        results["ost_remove_s"] = measure(tree.remove, positions)
        logging.debug("n=%d: %s", n, [tree[i] for i in range(len(ranks))])
    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark min-max heaps and order-statistics trees")
    parser.add_argument(
        "--sizes", "-n", type=int, nargs="+", required=True,
        help="Number of elements in the random input"
    )
    parser.add_argument(
        "--quantiles", "-k", type=float, nargs="*", default=[0.25, 0.5, 0.75],
        help="Fractions in [0, 1] whose order statistics the tree tracks"
    )
    parser.add_argument(
        "--queries", "-q", type=int, default=5000,
        help="Number of timed push/pop operations per structure"
    )
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")

    args = parser.parse_args()
    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(args.verbosity.upper())

    all_results = []
    rng = np.random.default_rng(args.seed)
    for n in args.sizes:
        logging.info("benchmarking n=%d", n)
        all_results.append(benchmark(n, args.quantiles, args.queries, rng))

    df = pd.DataFrame(all_results)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()


# chmod +x benchmark.py
