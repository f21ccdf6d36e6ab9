import unittest

import numpy as np

from fourier_series_plotter.analysis.signal import sample_signal, signal_value
from fourier_series_plotter.analysis.validation import (
    NON_POSITIVE_INTERVAL,
    UNRESOLVED_SAMPLING,
    SAMPLE_COUNT_TOO_LARGE,
    SAMPLE_COUNT_TOO_SMALL,
    ValidationError,
)
from fourier_series_plotter.models.signal import Interval


class TestSignalValue(unittest.TestCase):
    def test_branch_values_period_four(self):
        iv = Interval(0.0, 4.0)
        # x < T/2 -> 2
        self.assertEqual(signal_value(0.0, iv), 2.0)
        self.assertEqual(signal_value(1.9, iv), 2.0)
        # T/2 <= x < 3T/4 -> 4*(T - 2x)/T
        self.assertAlmostEqual(signal_value(2.0, iv), 0.0, places=12)
        self.assertAlmostEqual(signal_value(2.5, iv), -1.0, places=12)
        # x >= 3T/4 -> 8*(x - T)/T
        self.assertAlmostEqual(signal_value(3.0, iv), -2.0, places=12)
        self.assertAlmostEqual(signal_value(3.5, iv), -1.0, places=12)

    def test_absolute_abscissa_not_shifted_by_start(self):
        # T = 4 but x = 10 is past 3T/4, so the last branch applies: 8*(10-4)/4 = 12
        iv = Interval(10.0, 14.0)
        self.assertAlmostEqual(signal_value(10.0, iv), 12.0, places=12)

    def test_period_comes_from_the_given_interval(self):
        self.assertEqual(signal_value(1.0, Interval(0.0, 4.0)), 2.0)
        self.assertAlmostEqual(signal_value(1.0, Interval(0.0, 1.0)), 0.0, places=12)

    def test_array_input_matches_scalar(self):
        iv = Interval(0.0, 4.0)
        x = np.array([0.0, 1.0, 2.5, 3.5])
        y = signal_value(x, iv)
        self.assertIsInstance(y, np.ndarray)
        expected = np.array([signal_value(float(v), iv) for v in x])
        self.assertTrue(np.allclose(y, expected, atol=1e-12, rtol=0.0))


class TestSampleSignal(unittest.TestCase):
    def test_count_spacing_and_span(self):
        iv = Interval(0.5, 3.0)
        N = 7
        s = sample_signal(iv, N)
        h = (3.0 - 0.5) / N

        self.assertEqual(s.n_samples, N)
        self.assertEqual(s.x.shape, (N,))
        self.assertEqual(s.y.shape, (N,))
        self.assertTrue(np.all(np.diff(s.x) > 0))
        self.assertTrue(np.allclose(s.x, 0.5 + np.arange(N) * h, atol=1e-12, rtol=0.0))
        self.assertAlmostEqual(s.x[0], 0.5)
        self.assertAlmostEqual(s.x[-1], 0.5 + (N - 1) * h)
        self.assertLess(s.x[-1], 3.0)
        self.assertAlmostEqual(s.step, h)

    def test_values_follow_signal_definition(self):
        iv = Interval(0.0, 2.0 * np.pi)
        s = sample_signal(iv, 4)
        self.assertTrue(np.allclose(s.x, [0.0, np.pi / 2, np.pi, 3 * np.pi / 2], atol=1e-12, rtol=0.0))
        self.assertTrue(np.allclose(s.y, [2.0, 2.0, 0.0, -2.0], atol=1e-12, rtol=0.0))

    def test_single_sample(self):
        s = sample_signal(Interval(1.0, 2.0), 1)
        self.assertEqual(s.n_samples, 1)
        self.assertEqual(float(s.x[0]), 1.0)

    def test_rejects_abscissas_below_float_resolution(self):
        # step 4/1000 is far below the spacing of doubles near 1e16
        with self.assertRaises(ValidationError) as cm:
            sample_signal(Interval(1e16, 1e16 + 4.0), 1000)
        self.assertEqual(cm.exception.field, "interval")
        self.assertEqual(cm.exception.reason, UNRESOLVED_SAMPLING)

    def test_upper_bound_is_accepted(self):
        s = sample_signal(Interval(0.0, 1.0), 1000)
        self.assertEqual(s.n_samples, 1000)

    def test_rejects_out_of_range_counts(self):
        iv = Interval(0.0, 1.0)
        with self.assertRaises(ValidationError) as cm:
            sample_signal(iv, 0)
        self.assertEqual(cm.exception.reason, SAMPLE_COUNT_TOO_SMALL)

        with self.assertRaises(ValidationError) as cm:
            sample_signal(iv, 1001)
        self.assertEqual(cm.exception.reason, SAMPLE_COUNT_TOO_LARGE)

    def test_rejects_empty_or_reversed_interval(self):
        for a, b in [(1.0, 1.0), (2.0, 1.0)]:
            with self.assertRaises(ValidationError) as cm:
                sample_signal(Interval(a, b), 10)
            self.assertEqual(cm.exception.reason, NON_POSITIVE_INTERVAL)


if __name__ == "__main__":
    unittest.main()
