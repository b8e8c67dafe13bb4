from __future__ import annotations

import random
import unittest

from chartnav.config import NavigationConfig
from chartnav.errors import ChartConfigError
from chartnav.interaction import IDLE, Dragging
from chartnav.layout import Box, ChartLayout
from chartnav.navigator import ChartNavigator
from chartnav.scales import BandAxisScale, LinearAxisScale, ScaleView


LAYOUT = ChartLayout(
    width=400,
    height=400,
    margin=Box(top=0, right=0, bottom=50, left=50),
    padding=Box(top=20, right=20, bottom=0, left=20),
    scroll_size=15,
)


class _Recorder:
    def __init__(self) -> None:
        self.frames: list[tuple[ScaleView, ScaleView]] = []

    def __call__(self, x_view: ScaleView, y_view: ScaleView) -> None:
        self.frames.append((x_view, y_view))


def _navigator() -> tuple[ChartNavigator, _Recorder]:
    recorder = _Recorder()
    x = LinearAxisScale((0.0, 100.0), LAYOUT.x_pixel_range, min_window_fraction=0.125)
    y = LinearAxisScale((0.0, 100.0), LAYOUT.y_pixel_range, inverted=True, min_window_fraction=0.125)
    return ChartNavigator(x, y, LAYOUT, recorder), recorder


class ChartNavigatorTests(unittest.TestCase):
    def test_construction_does_not_draw(self) -> None:
        navigator, recorder = _navigator()
        self.assertEqual(recorder.frames, [])
        navigator.redraw_now()
        self.assertEqual(len(recorder.frames), 1)
        self.assertEqual(recorder.frames[0][0].window, (0.0, 100.0))

    def test_zoom_clicks_redraw_once_each(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        self.assertEqual(len(recorder.frames), 1)
        x_view, y_view = recorder.frames[-1]
        self.assertAlmostEqual(x_view.window[1] - x_view.window[0], 200.0 / 3.0)
        self.assertAlmostEqual(y_view.window[1] - y_view.window[0], 200.0 / 3.0)
        navigator.on_zoom_out_click()
        self.assertEqual(len(recorder.frames), 2)
        self.assertAlmostEqual(navigator.x_view.window[0], 0.0)
        self.assertAlmostEqual(navigator.x_view.window[1], 100.0)

    def test_press_outside_tracks_does_not_redraw(self) -> None:
        navigator, recorder = _navigator()
        self.assertFalse(navigator.on_pointer_down(200, 200))
        self.assertFalse(navigator.on_pointer_move(210, 210))
        self.assertFalse(navigator.on_pointer_up(210, 210))
        self.assertEqual(recorder.frames, [])

    def test_drag_sequence_redraws_on_every_step(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        navigator.on_zoom_in_click()
        recorder.frames.clear()
        start = navigator.x_view.window
        self.assertTrue(navigator.on_pointer_down(225, 392))
        self.assertTrue(navigator.is_dragging)
        self.assertTrue(navigator.on_pointer_move(240, 392))
        self.assertTrue(navigator.on_pointer_move(256, 392))
        self.assertTrue(navigator.on_pointer_up(256, 392))
        self.assertEqual(len(recorder.frames), 4)
        self.assertIs(navigator.state, IDLE)
        end = navigator.x_view.window
        self.assertAlmostEqual(end[0] - start[0], 10.0)
        self.assertAlmostEqual(end[1] - start[1], 10.0)

    def test_views_handed_to_renderer_are_snapshots(self) -> None:
        navigator, recorder = _navigator()
        navigator.redraw_now()
        first = recorder.frames[0][0]
        navigator.on_zoom_in_click()
        self.assertEqual(first.window, (0.0, 100.0))
        self.assertNotEqual(recorder.frames[1][0].window, first.window)

    def test_cancel_restores_idle_without_moving_window(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        before = navigator.x_view.window
        navigator.on_pointer_down(225, 392)
        self.assertTrue(navigator.on_pointer_cancel())
        self.assertFalse(navigator.is_dragging)
        self.assertEqual(navigator.x_view.window, before)
        self.assertFalse(navigator.on_pointer_cancel())

    def test_reset_view_returns_to_full_extent(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        navigator.on_pointer_down(225, 392)
        navigator.reset_view()
        self.assertIs(navigator.state, IDLE)
        self.assertEqual(navigator.x_view.window, (0.0, 100.0))
        self.assertEqual(navigator.y_view.window, (0.0, 100.0))
        self.assertEqual(recorder.frames[-1][0].window, (0.0, 100.0))

    def test_press_off_tracks_during_drag_redraws_once(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        navigator.on_pointer_down(225, 392)
        recorder.frames.clear()
        self.assertTrue(navigator.on_pointer_down(200, 200))
        self.assertFalse(navigator.is_dragging)
        self.assertEqual(len(recorder.frames), 1)

    def test_scale_fraction_must_match_config(self) -> None:
        x = LinearAxisScale((0.0, 100.0), LAYOUT.x_pixel_range)
        y = LinearAxisScale((0.0, 100.0), LAYOUT.y_pixel_range, inverted=True)
        with self.assertRaises(ChartConfigError):
            ChartNavigator(x, y, LAYOUT, _Recorder(), config=NavigationConfig(min_window_fraction=0.5))

    def test_custom_minimum_span_holds_for_zoom_and_resize(self) -> None:
        config = NavigationConfig(min_window_fraction=0.5)
        x = LinearAxisScale((0.0, 100.0), LAYOUT.x_pixel_range, min_window_fraction=0.5)
        y = LinearAxisScale((0.0, 100.0), LAYOUT.y_pixel_range, inverted=True, min_window_fraction=0.5)
        navigator = ChartNavigator(x, y, LAYOUT, _Recorder(), config=config)
        for _ in range(10):
            navigator.on_zoom_in_click()
        self.assertAlmostEqual(navigator.x_view.window[0], 25.0)
        self.assertAlmostEqual(navigator.x_view.window[1], 75.0)
        # Thumb spans x 147.5..302.5; 300 is inside the right end cap.
        navigator.on_pointer_down(300, 392)
        self.assertEqual(navigator.state.mode, "resize_max")  # type: ignore[union-attr]
        navigator.on_pointer_move(0, 392)
        navigator.on_pointer_up(0, 392)
        lo, hi = navigator.x_view.window
        self.assertGreaterEqual(hi - lo, 50.0 - 1e-9)

    def test_categorical_x_axis_only_zooms_y(self) -> None:
        recorder = _Recorder()
        x = BandAxisScale(["a", "b", "c"], LAYOUT.x_pixel_range)
        y = LinearAxisScale((0.0, 30.0), LAYOUT.y_pixel_range, inverted=True)
        navigator = ChartNavigator(x, y, LAYOUT, recorder)
        navigator.on_zoom_in_click()
        self.assertEqual(navigator.x_view.window, ("a", "b", "c"))
        self.assertAlmostEqual(navigator.y_view.window[0], 5.0)
        self.assertAlmostEqual(navigator.y_view.window[1], 25.0)
        self.assertEqual(len(recorder.frames), 1)


class DispatchTests(unittest.TestCase):
    def test_pointer_events_route_to_handlers(self) -> None:
        navigator, recorder = _navigator()
        navigator.on_zoom_in_click()
        self.assertTrue(navigator.dispatch("pointer_down", {"x": 225, "y": 392}))
        self.assertEqual(navigator.state, Dragging(axis="x", mode="pan", anchor_px=225.0))
        self.assertTrue(navigator.dispatch("pointer_move", {"x": 256, "y": 392}))
        self.assertTrue(navigator.dispatch("pointer_up", {"x": 256, "y": 392}))
        self.assertIs(navigator.state, IDLE)

    def test_press_on_zoom_buttons_zooms(self) -> None:
        navigator, recorder = _navigator()
        self.assertTrue(navigator.dispatch("pointer_down", {"x": 10, "y": 385}))
        self.assertAlmostEqual(navigator.x_view.window[1] - navigator.x_view.window[0], 200.0 / 3.0)
        self.assertTrue(navigator.dispatch("pointer_down", {"x": 45, "y": 385}))
        self.assertAlmostEqual(navigator.x_view.window[0], 0.0)
        self.assertAlmostEqual(navigator.x_view.window[1], 100.0)
        self.assertFalse(navigator.is_dragging)

    def test_zoom_events_without_position(self) -> None:
        navigator, recorder = _navigator()
        self.assertTrue(navigator.dispatch("zoom_in"))
        self.assertTrue(navigator.dispatch("zoom_out"))
        self.assertEqual(len(recorder.frames), 2)

    def test_malformed_or_unknown_events_are_ignored(self) -> None:
        navigator, recorder = _navigator()
        with self.assertLogs("chartnav.navigator", level="DEBUG"):
            self.assertFalse(navigator.dispatch("wheel", {"x": 1, "y": 2}))
        self.assertFalse(navigator.dispatch("pointer_down", None))
        self.assertFalse(navigator.dispatch("pointer_down", {"x": "left", "y": 2}))
        self.assertFalse(navigator.dispatch("pointer_move", {"x": float("nan"), "y": 2}))
        self.assertFalse(navigator.dispatch("pointer_up", {"y": 2}))
        self.assertEqual(recorder.frames, [])

    def test_cancel_event(self) -> None:
        navigator, recorder = _navigator()
        navigator.dispatch("pointer_down", {"x": 225, "y": 392})
        self.assertTrue(navigator.dispatch("pointer_cancel"))
        self.assertIs(navigator.state, IDLE)

    def test_random_event_streams_keep_windows_valid(self) -> None:
        navigator, _ = _navigator()
        rng = random.Random(11)
        kinds = ("pointer_down", "pointer_move", "pointer_move", "pointer_up", "pointer_cancel", "zoom_in", "zoom_out")
        for _ in range(2000):
            kind = rng.choice(kinds)
            payload = {"x": rng.uniform(-100.0, 500.0), "y": rng.uniform(-100.0, 500.0)}
            if kind == "pointer_down" and rng.random() < 0.7:
                if rng.random() < 0.5:
                    payload = {"x": rng.uniform(70.0, 380.0), "y": 392.0}
                else:
                    payload = {"x": 7.0, "y": rng.uniform(20.0, 350.0)}
            navigator.dispatch(kind, payload)
            for view in (navigator.x_view, navigator.y_view):
                lo, hi = view.window
                self.assertLessEqual(0.0, lo)
                self.assertLess(lo, hi)
                self.assertLessEqual(hi, 100.0)
                self.assertGreaterEqual(hi - lo, 12.5 - 1e-9)


if __name__ == "__main__":
    unittest.main()
