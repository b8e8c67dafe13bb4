from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from chartnav.errors import ChartConfigError


Axis = Literal["x", "y"]
ZoomButton = Literal["zoom_in", "zoom_out"]

DEFAULT_SCROLL_SIZE = 15
DEFAULT_END_CAP_RATIO = 0.8
DEFAULT_BUTTON_SIZE = 30


@dataclass(frozen=True)
class Box:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ChartConfigError("box edges must be >= 0")


@dataclass(frozen=True)
class PixelRect:
    x: int
    y: int
    width: int
    height: int

    def contains(self, px: float, py: float) -> bool:
        return (self.x <= px <= self.x + self.width) and (self.y <= py <= self.y + self.height)


@dataclass(frozen=True)
class ScrollTrack:
    """Scrollbar strip for one axis.

    `length` runs along the axis (left-to-right for X, top-to-bottom for Y) and
    `thickness` across it. Vertical tracks put the extent maximum at the top.
    """

    axis: Axis
    x: int
    y: int
    length: int
    thickness: int

    @property
    def vertical(self) -> bool:
        return self.axis == "y"

    @property
    def start(self) -> int:
        return self.y if self.vertical else self.x

    @property
    def end(self) -> int:
        return self.start + self.length

    def rect(self) -> PixelRect:
        if self.vertical:
            return PixelRect(x=self.x, y=self.y, width=self.thickness, height=self.length)
        return PixelRect(x=self.x, y=self.y, width=self.length, height=self.thickness)

    def contains(self, px: float, py: float) -> bool:
        return self.rect().contains(px, py)

    def along(self, px: float, py: float) -> float:
        return float(py) if self.vertical else float(px)

    def thumb_span(self, extent: tuple[float, float], window: tuple[float, float]) -> tuple[float, float]:
        """Screen-space (first, last) pixels of the thumb, first < last."""
        e0, e1 = extent
        span = e1 - e0
        lo_frac = (window[0] - e0) / span
        hi_frac = (window[1] - e0) / span
        if self.vertical:
            return (self.start + self.length * (1.0 - hi_frac), self.start + self.length * (1.0 - lo_frac))
        return (self.start + self.length * lo_frac, self.start + self.length * hi_frac)

    def value_delta(self, extent: tuple[float, float], from_px: float, to_px: float) -> float:
        # Screen-up is positive on vertical tracks.
        delta_px = (from_px - to_px) if self.vertical else (to_px - from_px)
        return (extent[1] - extent[0]) * delta_px / float(self.length)


@dataclass(frozen=True)
class ChartLayout:
    width: int
    height: int
    margin: Box = field(default_factory=Box)
    padding: Box = field(default_factory=Box)
    scroll_size: int = DEFAULT_SCROLL_SIZE
    end_cap_ratio: float = DEFAULT_END_CAP_RATIO
    button_size: int = DEFAULT_BUTTON_SIZE

    def __post_init__(self) -> None:
        if self.width <= 1 or self.height <= 1:
            raise ChartConfigError("chart width/height must be > 1")
        if self.scroll_size <= 0:
            raise ChartConfigError("scroll_size must be > 0")
        if self.end_cap_ratio < 0:
            raise ChartConfigError("end_cap_ratio must be >= 0")
        if self.button_size <= 0:
            raise ChartConfigError("button_size must be > 0")
        x0, x1 = self.x_pixel_range
        y0, y1 = self.y_pixel_range
        if x0 >= x1:
            raise ChartConfigError(f"x pixel range is empty: ({x0}, {x1})")
        if y0 >= y1:
            raise ChartConfigError(f"y pixel range is empty: ({y0}, {y1})")
        if self.x_track.length <= 0 or self.y_track.length <= 0:
            raise ChartConfigError("scrollbar tracks must have a positive length")

    @property
    def x_pixel_range(self) -> tuple[int, int]:
        return (
            self.margin.left + self.padding.left,
            self.width - self.margin.right - self.padding.right,
        )

    @property
    def y_pixel_range(self) -> tuple[int, int]:
        return (
            self.margin.top + self.padding.top,
            self.height - self.margin.bottom - self.padding.bottom,
        )

    @property
    def end_cap_px(self) -> float:
        return self.end_cap_ratio * self.scroll_size

    @property
    def x_track(self) -> ScrollTrack:
        x = self.margin.left + self.padding.left
        return ScrollTrack(
            axis="x",
            x=x,
            y=self.height - self.scroll_size,
            length=self.width - self.padding.right - x,
            thickness=self.scroll_size,
        )

    @property
    def y_track(self) -> ScrollTrack:
        y = self.padding.top
        return ScrollTrack(
            axis="y",
            x=0,
            y=y,
            length=self.height - self.margin.bottom - self.padding.bottom - y,
            thickness=self.scroll_size,
        )

    def track(self, axis: Axis) -> ScrollTrack:
        return self.x_track if axis == "x" else self.y_track

    def zoom_button_rect(self, button: ZoomButton) -> PixelRect:
        size = self.button_size
        x = 1 if button == "zoom_in" else 1 + size
        return PixelRect(x=x, y=self.height - size, width=size, height=size)

    def zoom_button_at(self, px: float, py: float) -> ZoomButton | None:
        for button in ("zoom_in", "zoom_out"):
            if self.zoom_button_rect(button).contains(px, py):
                return button
        return None
