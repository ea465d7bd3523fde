#!/usr/bin/env python3
import argparse
import logging
import time
import resource
import numpy as np
import pandas as pd

from order_statistics_tree import OrderStatisticsTree, quantile_ranks

def load_values(path: str) -> np.ndarray:
    """
    Read one number per line from a text file into a flat float array.
    Blank lines and '#' comments are skipped.
    """
    return np.atleast_1d(np.loadtxt(path, dtype=float, comments='#')).ravel()

def quantile_table(values: np.ndarray, quantiles) -> pd.DataFrame:
    n = len(values)
    ranks = quantile_ranks(n, quantiles)

    mem0 = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    t0w  = time.perf_counter()
    t0c  = time.process_time()
    tree = OrderStatisticsTree(values.copy(), ranks)
    build_wall = time.perf_counter() - t0w
    build_cpu  = time.process_time()  - t0c
    mem1       = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    logging.info("built tree over %d values in %.6fs wall, %.6fs cpu, %d KB",
                 n, build_wall, build_cpu, mem1 - mem0)

    # numpy's introselect as the reference answer
    reference = np.partition(values, ranks) if ranks else values
    rows = []
    for i, k in enumerate(ranks):
        lo, hi = tree.segment(i)
        rows.append({
            "rank":      k,
            "fraction":  k / n,
            "value":     tree[i],
            "reference": reference[k],
            "segment":   hi - lo,
        })
    df = pd.DataFrame(rows)
    if len(df) and not np.array_equal(df["value"].to_numpy(), df["reference"].to_numpy()):
        raise ValueError("order statistics disagree with numpy.partition")
    return df

def main():
    parser = argparse.ArgumentParser(description="Order statistics of a file of numbers")
    parser.add_argument("values_file", help="Path to a text file of numbers")
    parser.add_argument("--quantiles", "-k", type=float, nargs="+",
                        default=[0.01, 0.25, 0.5, 0.75, 0.99],
                        help="Fractions in [0, 1] to report")
    parser.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")
    args = parser.parse_args()

    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(args.verbosity.upper())

    values = load_values(args.values_file)
    df = quantile_table(values, args.quantiles)
    print(df.to_string(index=False))

if __name__ == "__main__":
    main()
