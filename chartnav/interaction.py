from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal

from chartnav.layout import Axis, ChartLayout, ScrollTrack
from chartnav.scales import AxisScale, LinearAxisScale


LOGGER = logging.getLogger(__name__)

DragMode = Literal["pan", "resize_min", "resize_max"]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    axis: Axis
    mode: DragMode
    anchor_px: float


DragState = Idle | Dragging

IDLE = Idle()


def classify_grab(track: ScrollTrack, thumb: tuple[float, float], along_px: float, end_cap_px: float) -> DragMode:
    """Pick the gesture for a press at `along_px` on a track whose thumb spans `thumb`.

    Presses near the thumb edge that carries the window minimum resize the
    lower bound (left edge on horizontal tracks, bottom edge on vertical ones).
    """
    first, last = thumb
    if along_px < first + end_cap_px:
        return "resize_max" if track.vertical else "resize_min"
    if along_px > last - end_cap_px:
        return "resize_min" if track.vertical else "resize_max"
    return "pan"


def drag_window(
    extent: tuple[float, float],
    window: tuple[float, float],
    mode: DragMode,
    delta: float,
    *,
    min_span: float,
) -> tuple[float, float]:
    e0, e1 = extent
    lo, hi = window
    if mode == "pan":
        delta = min(max(delta, e0 - lo), e1 - hi)
        return (lo + delta, hi + delta)
    if mode == "resize_min":
        return (min(max(lo + delta, e0), hi - min_span), hi)
    if mode == "resize_max":
        return (lo, max(min(hi + delta, e1), lo + min_span))
    raise ValueError(f"unsupported drag mode: {mode!r}")


class ScrollbarInteraction:
    """Idle/Dragging state machine over the X and Y scrollbar tracks.

    Every handler returns True when it changed something worth repainting: a
    transition, or a drag step while a gesture is active.
    """

    def __init__(self, layout: ChartLayout, x_scale: AxisScale, y_scale: AxisScale) -> None:
        self._layout = layout
        self._scales: dict[Axis, AxisScale] = {"x": x_scale, "y": y_scale}
        self._state: DragState = IDLE

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    def pointer_down(self, x: float, y: float) -> bool:
        was_dragging = self.is_dragging
        if was_dragging:
            # A down without a preceding up means the host lost the release.
            self._state = IDLE
            LOGGER.debug("drag dropped by a new press")
        for axis in ("x", "y"):
            track = self._layout.track(axis)
            if not track.contains(x, y):
                continue
            scale = self._scales[axis]
            if not isinstance(scale, LinearAxisScale):
                LOGGER.debug("press on %s track ignored: axis is categorical", axis)
                return was_dragging
            along = track.along(x, y)
            thumb = track.thumb_span(scale.extent, scale.window)
            mode = classify_grab(track, thumb, along, self._layout.end_cap_px)
            self._state = Dragging(axis=axis, mode=mode, anchor_px=along)
            LOGGER.debug("drag start axis=%s mode=%s anchor=%.1f", axis, mode, along)
            return True
        return was_dragging

    def pointer_move(self, x: float, y: float) -> bool:
        state = self._state
        if not isinstance(state, Dragging):
            return False
        along = self._layout.track(state.axis).along(x, y)
        self._apply(state, along)
        self._state = Dragging(axis=state.axis, mode=state.mode, anchor_px=along)
        return True

    def pointer_up(self, x: float, y: float) -> bool:
        state = self._state
        if not isinstance(state, Dragging):
            return False
        along = self._layout.track(state.axis).along(x, y)
        if along != state.anchor_px:
            self._apply(state, along)
        self._state = IDLE
        LOGGER.debug("drag end axis=%s mode=%s", state.axis, state.mode)
        return True

    def cancel(self) -> bool:
        if not self.is_dragging:
            return False
        self._state = IDLE
        LOGGER.debug("drag cancelled")
        return True

    def _apply(self, state: Dragging, along: float) -> None:
        scale = self._scales[state.axis]
        assert isinstance(scale, LinearAxisScale)
        track = self._layout.track(state.axis)
        delta = track.value_delta(scale.extent, state.anchor_px, along)
        if delta == 0.0:
            return
        target = drag_window(scale.extent, scale.window, state.mode, delta, min_span=scale.min_span)
        scale.set_window(target)
