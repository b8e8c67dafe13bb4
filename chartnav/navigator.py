from __future__ import annotations

import logging
from typing import Callable

from chartnav.config import NavigationConfig
from chartnav.errors import ChartConfigError
from chartnav.events import parse_chart_event
from chartnav.interaction import DragState, ScrollbarInteraction
from chartnav.layout import ChartLayout
from chartnav.scales import AxisScale, LinearAxisScale, ScaleView
from chartnav.zoom import ZoomDirection, zoom_2d


LOGGER = logging.getLogger(__name__)

RedrawCallback = Callable[[ScaleView, ScaleView], None]


class ChartNavigator:
    """Per-chart navigation facade.

    Owns the X/Y scales and the scrollbar gesture state. Zoom clicks and
    pointer events mutate the scales; the renderer only ever sees immutable
    snapshots through the redraw callback.
    """

    def __init__(
        self,
        x_scale: AxisScale,
        y_scale: AxisScale,
        layout: ChartLayout,
        redraw: RedrawCallback,
        *,
        config: NavigationConfig | None = None,
    ) -> None:
        self._x_scale = x_scale
        self._y_scale = y_scale
        self._layout = layout
        self._redraw = redraw
        self._config = config if config is not None else NavigationConfig()
        for axis, scale in (("x", x_scale), ("y", y_scale)):
            if isinstance(scale, LinearAxisScale) and scale.min_window_fraction != self._config.min_window_fraction:
                raise ChartConfigError(
                    f"{axis} scale min_window_fraction {scale.min_window_fraction} does not match "
                    f"config min_window_fraction {self._config.min_window_fraction}"
                )
        self._interaction = ScrollbarInteraction(layout, x_scale, y_scale)

    @property
    def layout(self) -> ChartLayout:
        return self._layout

    @property
    def config(self) -> NavigationConfig:
        return self._config

    @property
    def x_view(self) -> ScaleView:
        return self._x_scale.view()

    @property
    def y_view(self) -> ScaleView:
        return self._y_scale.view()

    @property
    def state(self) -> DragState:
        return self._interaction.state

    @property
    def is_dragging(self) -> bool:
        return self._interaction.is_dragging

    def redraw_now(self) -> None:
        self._redraw(self._x_scale.view(), self._y_scale.view())

    def on_zoom_in_click(self) -> None:
        self._zoom("in")

    def on_zoom_out_click(self) -> None:
        self._zoom("out")

    def on_pointer_down(self, x: float, y: float) -> bool:
        return self._redraw_if(self._interaction.pointer_down(x, y))

    def on_pointer_move(self, x: float, y: float) -> bool:
        return self._redraw_if(self._interaction.pointer_move(x, y))

    def on_pointer_up(self, x: float, y: float) -> bool:
        return self._redraw_if(self._interaction.pointer_up(x, y))

    def on_pointer_cancel(self) -> bool:
        return self._redraw_if(self._interaction.cancel())

    def reset_view(self) -> None:
        self._interaction.cancel()
        self._x_scale.reset()
        self._y_scale.reset()
        self.redraw_now()

    def dispatch(self, event_type: str, payload: object = None) -> bool:
        """Route one host event; returns True when a redraw happened."""
        event = parse_chart_event(event_type, payload)
        if event is None:
            LOGGER.debug("ignored host event %r", event_type)
            return False
        if event.event_type == "zoom_in":
            self.on_zoom_in_click()
            return True
        if event.event_type == "zoom_out":
            self.on_zoom_out_click()
            return True
        if event.event_type == "pointer_cancel":
            return self.on_pointer_cancel()
        assert event.x is not None and event.y is not None
        if event.event_type == "pointer_down":
            button = self._layout.zoom_button_at(event.x, event.y)
            if button is not None and not self.is_dragging:
                self._zoom("in" if button == "zoom_in" else "out")
                return True
            return self.on_pointer_down(event.x, event.y)
        if event.event_type == "pointer_move":
            return self.on_pointer_move(event.x, event.y)
        return self.on_pointer_up(event.x, event.y)

    def _zoom(self, direction: ZoomDirection) -> None:
        zoom_2d(self._x_scale, self._y_scale, direction, config=self._config)
        self.redraw_now()

    def _redraw_if(self, changed: bool) -> bool:
        if changed:
            self.redraw_now()
        return changed
