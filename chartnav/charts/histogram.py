from __future__ import annotations

import numpy as np

from chartnav.charts.base import Chart
from chartnav.data.prepare import HistogramBin, histogram_bins
from chartnav.data.provider import column_name, column_values
from chartnav.errors import DatasetError
from chartnav.layout import Box, ChartLayout
from chartnav.raster import fill_rect
from chartnav.scales import AxisScale, LinearAxisScale, LinearScaleView, ScaleView, compute_extent


HISTOGRAM_LAYOUT = ChartLayout(
    width=400,
    height=400,
    margin=Box(top=0, right=0, bottom=50, left=50),
    padding=Box(top=20, right=20, bottom=0, left=20),
    scroll_size=15,
)
VALUE_COLUMN = 2
BIN_TARGET = 10


class Histogram(Chart):
    """Frequency of the dataset's third column over fixed bins.

    Bins are computed once from the full extent; zooming only changes which
    part of them is visible.
    """

    default_layout = HISTOGRAM_LAYOUT

    bins: list[HistogramBin]

    def _build_scales(self) -> tuple[AxisScale, AxisScale]:
        names = self.provider.column_names(self.dataset_id)
        if len(names) <= VALUE_COLUMN:
            raise DatasetError(f"histogram needs column {VALUE_COLUMN}, `{self.dataset_id}` has {len(names)} columns")
        self.x_label = column_name(self.provider, self.dataset_id, VALUE_COLUMN)
        self.y_label = "Frequency"
        values = column_values(self.provider, self.dataset_id, VALUE_COLUMN)
        x_extent = compute_extent(values)
        self.bins = histogram_bins(values, x_extent[0], x_extent[1], BIN_TARGET)
        y_top = max(bin_.count for bin_ in self.bins)
        x_scale = LinearAxisScale(
            x_extent,
            self.layout.x_pixel_range,
            min_window_fraction=self.config.min_window_fraction,
        )
        y_scale = LinearAxisScale(
            (0.0, float(y_top)),
            self.layout.y_pixel_range,
            inverted=True,
            min_window_fraction=self.config.min_window_fraction,
        )
        return x_scale, y_scale

    def _draw_marks(self, canvas: np.ndarray, x_view: ScaleView, y_view: ScaleView) -> None:
        assert isinstance(x_view, LinearScaleView) and isinstance(y_view, LinearScaleView)
        base = y_view.to_pixel(0.0)
        for bin_ in self.bins:
            if bin_.count == 0 or bin_.x1 == bin_.x0:
                continue
            left = x_view.to_pixel(bin_.x0)
            width = x_view.to_pixel(bin_.x1) - left - 1.0
            top = y_view.to_pixel(bin_.count)
            fill_rect(canvas, left + 1.0, top, width, max(0.0, base - top), self.style.mark_color)
