from __future__ import annotations

import random
import unittest

from chartnav.config import NavigationConfig
from chartnav.errors import ChartConfigError
from chartnav.scales import BandAxisScale, LinearAxisScale
from chartnav.zoom import zoom, zoom_2d, zoom_window


def _scale(extent: tuple[float, float] = (0.0, 100.0)) -> LinearAxisScale:
    return LinearAxisScale(extent, (0, 300), min_window_fraction=0.125)


class ZoomWindowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = NavigationConfig()

    def test_zoom_in_shrinks_about_the_centre(self) -> None:
        lo, hi = zoom_window((0.0, 100.0), (20.0, 80.0), "in", config=self.config)
        self.assertAlmostEqual(lo, 30.0, places=9)
        self.assertAlmostEqual(hi, 70.0, places=9)

    def test_zoom_out_reverses_one_zoom_in_step(self) -> None:
        lo, hi = zoom_window((0.0, 100.0), (30.0, 70.0), "out", config=self.config)
        self.assertAlmostEqual(lo, 20.0, places=9)
        self.assertAlmostEqual(hi, 80.0, places=9)

    def test_zoom_out_clamps_each_bound_to_extent(self) -> None:
        lo, hi = zoom_window((0.0, 100.0), (0.0, 40.0), "out", config=self.config)
        self.assertEqual(lo, 0.0)
        self.assertAlmostEqual(hi, 50.0, places=9)

    def test_zoom_in_respects_minimum_span(self) -> None:
        lo, hi = zoom_window((0.0, 100.0), (40.0, 55.0), "in", config=self.config)
        self.assertAlmostEqual(hi - lo, 12.5, places=9)
        self.assertAlmostEqual((lo + hi) / 2.0, 47.5, places=9)

    def test_unknown_direction_is_a_programming_error(self) -> None:
        with self.assertRaises(ValueError):
            zoom_window((0.0, 1.0), (0.0, 1.0), "sideways", config=self.config)  # type: ignore[arg-type]

    def test_config_validates_constants(self) -> None:
        with self.assertRaises(ChartConfigError):
            NavigationConfig(zoom_step=1.0)
        with self.assertRaises(ChartConfigError):
            NavigationConfig(min_window_fraction=0.0)


class ZoomScaleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = NavigationConfig()

    def test_round_trip_restores_unclamped_window(self) -> None:
        scale = _scale()
        scale.set_window((20.0, 80.0))
        zoom(scale, "in", config=self.config)
        self.assertAlmostEqual(scale.window[0], 30.0, places=9)
        self.assertAlmostEqual(scale.window[1], 70.0, places=9)
        zoom(scale, "out", config=self.config)
        self.assertAlmostEqual(scale.window[0], 20.0, places=9)
        self.assertAlmostEqual(scale.window[1], 80.0, places=9)

    def test_repeated_zoom_in_converges_to_minimum_span(self) -> None:
        scale = _scale()
        for _ in range(40):
            zoom(scale, "in", config=self.config)
            self.assertGreaterEqual(scale.window[1] - scale.window[0], 12.5 - 1e-9)
        self.assertAlmostEqual(scale.window[1] - scale.window[0], 12.5, places=9)

    def test_zoom_out_at_full_extent_is_a_no_op(self) -> None:
        scale = _scale()
        self.assertFalse(zoom(scale, "out", config=self.config))
        self.assertEqual(scale.window, (0.0, 100.0))

    def test_band_scales_are_not_zoomed(self) -> None:
        scale = BandAxisScale(["a", "b"], (0, 100))
        self.assertFalse(zoom(scale, "in", config=self.config))
        self.assertEqual(scale.window, ("a", "b"))

    def test_zoom_2d_moves_both_axes_independently(self) -> None:
        x = _scale((0.0, 100.0))
        y = _scale((0.0, 10.0))
        self.assertTrue(zoom_2d(x, y, "in", config=self.config))
        self.assertAlmostEqual(x.window[1] - x.window[0], 100.0 * 2.0 / 3.0, places=9)
        self.assertAlmostEqual(y.window[1] - y.window[0], 10.0 * 2.0 / 3.0, places=9)
        self.assertAlmostEqual(sum(x.window) / 2.0, 50.0, places=9)
        self.assertAlmostEqual(sum(y.window) / 2.0, 5.0, places=9)

    def test_random_zoom_sequences_keep_window_inside_extent(self) -> None:
        rng = random.Random(7)
        scale = _scale((-3.0, 17.0))
        for _ in range(500):
            if rng.random() < 0.3:
                lo = rng.uniform(-3.0, 17.0)
                scale.set_window((lo, lo + rng.uniform(0.0, 20.0)))
            zoom(scale, rng.choice(("in", "out")), config=self.config)
            lo, hi = scale.window
            self.assertLessEqual(-3.0, lo)
            self.assertLess(lo, hi)
            self.assertLessEqual(hi, 17.0)
            self.assertGreaterEqual(hi - lo, 2.5 - 1e-9)


if __name__ == "__main__":
    unittest.main()
