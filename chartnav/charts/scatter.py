from __future__ import annotations

import numpy as np

from chartnav.charts.base import Chart
from chartnav.data.provider import column_keys, column_name, column_values
from chartnav.errors import DatasetError
from chartnav.layout import Box, ChartLayout
from chartnav.raster import draw_symbol, symbol_for_index
from chartnav.raster.draw_markers import SymbolName
from chartnav.scales import AxisScale, LinearAxisScale, LinearScaleView, ScaleView, compute_extent


SCATTER_LAYOUT = ChartLayout(
    width=400,
    height=400,
    margin=Box(top=10, right=10, bottom=50, left=50),
    padding=Box(top=20, right=20, bottom=20, left=20),
)
# Symbols reach roughly this far past their centre.
SYMBOL_REACH_PX = 10


class ScatterPlot(Chart):
    """Column 1 against column 2, one outlined symbol per column-0 category."""

    default_layout = SCATTER_LAYOUT

    categories: tuple[str, ...]
    xs: np.ndarray
    ys: np.ndarray
    symbols: dict[str, SymbolName]

    def _build_scales(self) -> tuple[AxisScale, AxisScale]:
        names = self.provider.column_names(self.dataset_id)
        if len(names) < 3:
            raise DatasetError(f"scatter plot needs three columns, `{self.dataset_id}` has {len(names)}")
        self.x_label = column_name(self.provider, self.dataset_id, 1)
        self.y_label = column_name(self.provider, self.dataset_id, 2)
        self.categories = column_keys(self.provider, self.dataset_id, 0)
        self.xs = column_values(self.provider, self.dataset_id, 1)
        self.ys = column_values(self.provider, self.dataset_id, 2)
        self.symbols = {}
        for key in self.categories:
            if key not in self.symbols:
                self.symbols[key] = symbol_for_index(len(self.symbols))
        x_scale = LinearAxisScale(
            compute_extent(self.xs),
            self.layout.x_pixel_range,
            min_window_fraction=self.config.min_window_fraction,
        )
        y_scale = LinearAxisScale(
            compute_extent(self.ys),
            self.layout.y_pixel_range,
            inverted=True,
            min_window_fraction=self.config.min_window_fraction,
        )
        return x_scale, y_scale

    def _draw_marks(self, canvas: np.ndarray, x_view: ScaleView, y_view: ScaleView) -> None:
        assert isinstance(x_view, LinearScaleView) and isinstance(y_view, LinearScaleView)
        px = x_view.to_pixels(self.xs)
        py = y_view.to_pixels(self.ys)
        h, w = canvas.shape[:2]
        visible = (
            np.isfinite(px)
            & np.isfinite(py)
            & (px > -SYMBOL_REACH_PX)
            & (px < w + SYMBOL_REACH_PX)
            & (py > -SYMBOL_REACH_PX)
            & (py < h + SYMBOL_REACH_PX)
        )
        for i in np.flatnonzero(visible).tolist():
            draw_symbol(canvas, float(px[i]), float(py[i]), self.symbols[self.categories[i]], self.style.symbol_color)
