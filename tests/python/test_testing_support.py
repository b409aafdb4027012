import unittest
import sys
from pathlib import Path

import numpy as np

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PYTHON_DIR = _REPO_ROOT / "python"
path_str = str(_PYTHON_DIR)
if path_str not in sys.path:
    sys.path.insert(0, path_str)

import cachematrix
from cachematrix import testing


class TestRandomFixtures(unittest.TestCase):
    def test_shape_and_positive_entries(self):
        m = testing.make_random_cache_matrix(6, rng=np.random.default_rng(0))
        self.assertIsInstance(m, cachematrix.CacheMatrix)
        self.assertEqual(m.shape, (6, 6))
        self.assertTrue(np.all(m.value() >= 0.0))
        self.assertEqual(m.times_computed(), 0)

    def test_seeded_fixtures_are_reproducible(self):
        a = testing.make_random_cache_matrix(4, rng=np.random.default_rng(7))
        b = testing.make_random_cache_matrix(4, rng=np.random.default_rng(7))
        np.testing.assert_array_equal(a.value(), b.value())

    def test_rate_controls_scale(self):
        rng = np.random.default_rng(1)
        m = testing.make_random_cache_matrix(60, rate=0.1, rng=rng)
        self.assertGreater(float(np.mean(m.value())), 5.0)

    def test_rejects_bad_arguments(self):
        with self.assertRaises(ValueError):
            testing.make_random_cache_matrix(-1)
        with self.assertRaises(ValueError):
            testing.make_random_cache_matrix(3, rate=0.0)


class TestSelfTest(unittest.TestCase):
    def test_check_passes_for_fresh_fixture(self):
        m = testing.make_random_cache_matrix(8, rng=np.random.default_rng(3))
        testing.check_cache_matrix(m, 8)
        self.assertEqual(m.times_computed(), 1)

    def test_check_rejects_already_computed_cache(self):
        m = testing.make_random_cache_matrix(5, rng=np.random.default_rng(3))
        m.inverse()
        with self.assertRaises(testing.SelfTestFailure):
            testing.check_cache_matrix(m, 5)

    def test_check_rejects_wrong_solver(self):
        m = cachematrix.CacheMatrix(np.eye(3) * 2.0, solver=lambda matrix: np.eye(3))
        with self.assertRaisesRegex(testing.SelfTestFailure, "not calculated correctly"):
            testing.check_cache_matrix(m, 3)

    def test_check_rejects_cache_that_recomputes(self):
        class Forgetful(cachematrix.CacheMatrix):
            def inverse(self, **options):
                result = super().inverse(**options)
                self._has_inverse = False
                return result

        m = Forgetful(np.eye(3) * 2.0)
        with self.assertRaises(testing.SelfTestFailure):
            testing.check_cache_matrix(m, 3)

    def test_run_self_test_small_sweep(self):
        checked = testing.run_self_test(range(5, 9), rounds=2, rng=np.random.default_rng(11))
        self.assertEqual(checked, 4 * 3)

    def test_self_test_failure_is_assertion_error(self):
        self.assertTrue(issubclass(testing.SelfTestFailure, AssertionError))


if __name__ == "__main__":
    unittest.main()
