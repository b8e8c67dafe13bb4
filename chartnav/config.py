from __future__ import annotations

from dataclasses import dataclass

from chartnav.errors import ChartConfigError


DEFAULT_ZOOM_STEP = 1.0 / 3.0
DEFAULT_MIN_WINDOW_FRACTION = 1.0 / 8.0


@dataclass(frozen=True)
class NavigationConfig:
    """Zoom and clamp constants shared by every axis of one chart.

    `zoom_step` is the fraction of the current span removed by one zoom-in
    step; zoom-out divides the span by `1 - zoom_step`, so one step in followed
    by one step out returns to the starting window when nothing clamps.
    """

    zoom_step: float = DEFAULT_ZOOM_STEP
    min_window_fraction: float = DEFAULT_MIN_WINDOW_FRACTION

    def __post_init__(self) -> None:
        if not (0.0 < self.zoom_step < 1.0):
            raise ChartConfigError("zoom_step must be in (0, 1)")
        if not (0.0 < self.min_window_fraction <= 1.0):
            raise ChartConfigError("min_window_fraction must be in (0, 1]")

    @property
    def zoom_in_ratio(self) -> float:
        return 1.0 - self.zoom_step
