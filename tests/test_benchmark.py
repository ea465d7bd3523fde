import unittest
import tempfile
import numpy as np
import numpy.testing as npt
import os, sys

sys.path.insert(
    0,
    os.path.abspath(
        os.path.join(os.path.dirname(__file__), os.pardir)
    )
)

from benchmark import benchmark
from benchmark_quantiles import load_values, quantile_table


class BenchmarkTests(unittest.TestCase):
    def test_benchmark_row(self):
        rng = np.random.default_rng(0)
        row = benchmark(50, [0.25, 0.5], 20, rng)
        self.assertEqual(row["n"], 50)
        self.assertEqual(row["ranks"], 2)
        for key in ("pop_min_s", "push_s", "pop_max_s", "ost_push_s", "ost_remove_s"):
            self.assertGreaterEqual(row[key], 0.0)

    def test_benchmark_empty(self):
        row = benchmark(0, [0.5], 20, np.random.default_rng(0))
        self.assertEqual(row["ranks"], 0)
        self.assertNotIn("push_s", row)

    def test_quantile_table(self):
        values = np.array([17, 16, 31, 30, 10, 13, 12, 15, 50, 45, 38, 39, 27, 34, 30, 28,
                           5,  25, 37, 8,  15, 65, 80, 18, 32, 14, 20, 59, 45, 36, 57],
                          dtype=float)
        df = quantile_table(values, [0.25, 0.5, 0.75])
        npt.assert_equal(df["rank"].to_numpy(), [7, 15, 23])
        npt.assert_equal(df["value"].to_numpy(), [15.0, 30.0, 39.0])
        npt.assert_equal(df["segment"].to_numpy(), [7, 7, 7])

    def test_load_values(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "values.txt")
            with open(path, "w") as f:
                f.write("# sample\n3\n1\n2\n\n4.5\n")
            npt.assert_equal(load_values(path), [3.0, 1.0, 2.0, 4.5])

if __name__ == '__main__':
    unittest.main()
