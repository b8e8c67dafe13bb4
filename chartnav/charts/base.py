from __future__ import annotations

from typing import Callable, ClassVar

import numpy as np

from chartnav.charts.chrome import ChartStyle, draw_chrome
from chartnav.config import NavigationConfig
from chartnav.data.provider import DatasetProvider
from chartnav.layout import ChartLayout
from chartnav.navigator import ChartNavigator
from chartnav.raster import new_canvas
from chartnav.scales import AxisScale, ScaleView


FrameCallback = Callable[[np.ndarray], None]


class Chart:
    """Raster chart bound to one dataset and driven by a `ChartNavigator`.

    Subclasses build the X/Y scales from the dataset and paint their marks;
    axes, scrollbars and zoom buttons are shared chrome.
    """

    default_layout: ClassVar[ChartLayout]

    def __init__(
        self,
        provider: DatasetProvider,
        dataset_id: str,
        *,
        layout: ChartLayout | None = None,
        config: NavigationConfig | None = None,
        style: ChartStyle | None = None,
        on_frame: FrameCallback | None = None,
    ) -> None:
        self.provider = provider
        self.dataset_id = dataset_id
        self.layout = layout if layout is not None else self.default_layout
        self.config = config if config is not None else NavigationConfig()
        self.style = style if style is not None else ChartStyle()
        self.x_label = ""
        self.y_label = ""
        self.redraw_count = 0
        self._on_frame = on_frame
        self._last_frame: np.ndarray | None = None
        self.navigator = self._build_navigator()

    @property
    def last_frame(self) -> np.ndarray | None:
        return self._last_frame

    def render(self) -> np.ndarray:
        self.navigator.redraw_now()
        assert self._last_frame is not None
        return self._last_frame

    def _build_navigator(self) -> ChartNavigator:
        x_scale, y_scale = self._build_scales()
        return ChartNavigator(x_scale, y_scale, self.layout, self._draw, config=self.config)

    def _build_scales(self) -> tuple[AxisScale, AxisScale]:
        raise NotImplementedError

    def _draw_marks(self, canvas: np.ndarray, x_view: ScaleView, y_view: ScaleView) -> None:
        raise NotImplementedError

    def _draw(self, x_view: ScaleView, y_view: ScaleView) -> None:
        canvas = new_canvas(self.layout.width, self.layout.height, color=self.style.background)
        self._draw_marks(canvas, x_view, y_view)
        draw_chrome(canvas, self.layout, x_view, y_view, x_label=self.x_label, y_label=self.y_label, style=self.style)
        self._last_frame = canvas
        self.redraw_count += 1
        if self._on_frame is not None:
            self._on_frame(canvas)
