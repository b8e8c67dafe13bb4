from __future__ import annotations

from collections.abc import Hashable

import numpy as np

from chartnav.charts.base import Chart
from chartnav.data.prepare import aggregate_other, count_categories
from chartnav.data.provider import DatasetProvider, column_keys, column_name
from chartnav.errors import DatasetError
from chartnav.layout import Box, ChartLayout
from chartnav.raster import fill_rect
from chartnav.scales import AxisScale, BandAxisScale, LinearAxisScale, LinearScaleView, ScaleView


BAR_CHART_LAYOUT = ChartLayout(
    width=1000,
    height=400,
    margin=Box(top=0, right=0, bottom=120, left=50),
    padding=Box(top=20, right=20, bottom=0, left=20),
)
Y_HEADROOM = 1.05


class BarChart(Chart):
    """Category counts of the dataset's first column, one bar per category."""

    default_layout = BAR_CHART_LAYOUT

    def __init__(self, provider: DatasetProvider, dataset_id: str, *, other_fraction: float = 0.0, **kwargs) -> None:
        self._other_fraction = float(other_fraction)
        self.bars: list[tuple[Hashable, int]] = []
        super().__init__(provider, dataset_id, **kwargs)

    @property
    def other_fraction(self) -> float:
        return self._other_fraction

    def set_other_fraction(self, fraction: float) -> None:
        """Re-aggregate the bars; the navigation state starts over on the new extents."""
        self._other_fraction = float(fraction)
        self.navigator = self._build_navigator()
        self.navigator.redraw_now()

    def _build_scales(self) -> tuple[AxisScale, AxisScale]:
        names = self.provider.column_names(self.dataset_id)
        if len(names) < 2:
            raise DatasetError(f"bar chart needs two columns, `{self.dataset_id}` has {len(names)}")
        self.x_label = column_name(self.provider, self.dataset_id, 0)
        self.y_label = column_name(self.provider, self.dataset_id, 1)
        keys = column_keys(self.provider, self.dataset_id, 0)
        if not keys:
            raise DatasetError(f"dataset `{self.dataset_id}` is empty")
        self.bars = aggregate_other(count_categories(keys), self._other_fraction)
        top = Y_HEADROOM * max(count for _, count in self.bars)
        x_scale = BandAxisScale([key for key, _ in self.bars], self.layout.x_pixel_range)
        y_scale = LinearAxisScale(
            (0.0, top),
            self.layout.y_pixel_range,
            inverted=True,
            min_window_fraction=self.config.min_window_fraction,
        )
        return x_scale, y_scale

    def _draw_marks(self, canvas: np.ndarray, x_view: ScaleView, y_view: ScaleView) -> None:
        assert isinstance(y_view, LinearScaleView)
        bandwidth = getattr(x_view, "bandwidth", 0.0)
        base = y_view.to_pixel(0.0)
        for key, count in self.bars:
            left = x_view.to_pixel(key)
            if left is None:
                continue
            top = y_view.to_pixel(count)
            fill_rect(canvas, left, top, bandwidth, max(0.0, base - top), self.style.mark_color)
