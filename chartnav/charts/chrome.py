from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from chartnav.errors import ChartConfigError
from chartnav.layout import ChartLayout, ScrollTrack
from chartnav.raster import RGBA, draw_hline, draw_text, draw_vline, fill_capsule, fill_rect, text_size
from chartnav.scales import BandScaleView, LinearScaleView, ScaleView, format_ticks_for_axis


@dataclass(frozen=True)
class ChartStyle:
    background: RGBA = (255, 255, 255, 255)
    mark_color: RGBA = (153, 187, 221, 255)
    symbol_color: RGBA = (0, 0, 0, 255)
    axis_color: RGBA = (0, 0, 0, 255)
    text_color: RGBA = (0, 0, 0, 255)
    track_color: RGBA = (238, 238, 238, 255)
    thumb_color: RGBA = (204, 204, 204, 255)
    end_cap_color: RGBA = (255, 255, 255, 255)
    button_color: RGBA = (239, 239, 239, 255)
    button_border_color: RGBA = (118, 118, 118, 255)
    tick_count: int = 3
    tick_length: int = 6
    font_size_px: float = 11.0

    def __post_init__(self) -> None:
        if self.tick_count <= 0:
            raise ChartConfigError("tick_count must be > 0")
        if self.font_size_px <= 0:
            raise ChartConfigError("font_size_px must be > 0")


def clip_to_plot(canvas: np.ndarray, layout: ChartLayout, style: ChartStyle) -> None:
    """Paint the background over everything outside the plot rectangle."""
    x0, x1 = layout.x_pixel_range
    y0, y1 = layout.y_pixel_range
    h, w = canvas.shape[:2]
    fill_rect(canvas, 0, 0, w, y0, style.background)
    fill_rect(canvas, 0, y1 + 1, w, h - y1 - 1, style.background)
    fill_rect(canvas, 0, 0, x0, h, style.background)
    fill_rect(canvas, x1 + 1, 0, w - x1 - 1, h, style.background)


def draw_chrome(
    canvas: np.ndarray,
    layout: ChartLayout,
    x_view: ScaleView,
    y_view: ScaleView,
    *,
    x_label: str,
    y_label: str,
    style: ChartStyle,
) -> None:
    clip_to_plot(canvas, layout, style)
    _draw_x_axis(canvas, layout, x_view, x_label, style)
    _draw_y_axis(canvas, layout, y_view, y_label, style)
    if isinstance(x_view, LinearScaleView):
        _draw_scrollbar(canvas, layout.x_track, x_view, style)
    if isinstance(y_view, LinearScaleView):
        _draw_scrollbar(canvas, layout.y_track, y_view, style)
    _draw_zoom_buttons(canvas, layout, style)


def _draw_x_axis(canvas: np.ndarray, layout: ChartLayout, view: ScaleView, label: str, style: ChartStyle) -> None:
    axis_y = layout.height - layout.margin.bottom
    x0, x1 = layout.x_pixel_range
    draw_hline(canvas, x0, x1, axis_y, style.axis_color)
    label_top = axis_y + style.tick_length + 2
    if isinstance(view, BandScaleView):
        keys = [str(k) for k in view.keys]
        widest = max((text_size(k, font_size_px=style.font_size_px)[0] for k in keys), default=0)
        stride = max(1, int(math.ceil((widest + 4) / max(1.0, view.step))))
        for i, key in enumerate(view.keys):
            left = view.to_pixel(key)
            if left is None:
                continue
            px = int(round(left + view.bandwidth / 2.0))
            draw_vline(canvas, px, axis_y, axis_y + style.tick_length, style.axis_color)
            if i % stride == 0:
                draw_text(canvas, px, label_top, str(key), style.text_color, anchor="middle", font_size_px=style.font_size_px)
    else:
        ticks = view.ticks(style.tick_count)
        for value, text in zip(ticks.tolist(), format_ticks_for_axis(ticks), strict=False):
            px = int(round(view.to_pixel(value)))
            draw_vline(canvas, px, axis_y, axis_y + style.tick_length, style.axis_color)
            draw_text(canvas, px, label_top, text, style.text_color, anchor="middle", font_size_px=style.font_size_px)
    _, label_h = text_size(label or " ", font_size_px=style.font_size_px)
    draw_text(
        canvas,
        layout.width / 2.0,
        layout.height - layout.scroll_size - label_h - 4,
        label,
        style.text_color,
        anchor="middle",
        font_size_px=style.font_size_px,
    )


def _draw_y_axis(canvas: np.ndarray, layout: ChartLayout, view: ScaleView, label: str, style: ChartStyle) -> None:
    axis_x = layout.margin.left
    y0, y1 = layout.y_pixel_range
    draw_vline(canvas, axis_x, y0, y1, style.axis_color)
    if isinstance(view, LinearScaleView):
        ticks = view.ticks(style.tick_count)
        for value, text in zip(ticks.tolist(), format_ticks_for_axis(ticks), strict=False):
            py = int(round(view.to_pixel(value)))
            draw_hline(canvas, axis_x - style.tick_length, axis_x, py, style.axis_color)
            _, th = text_size(text, font_size_px=style.font_size_px)
            draw_text(
                canvas,
                axis_x - style.tick_length - 3,
                py - th / 2.0,
                text,
                style.text_color,
                anchor="end",
                font_size_px=style.font_size_px,
            )
    _, label_h = text_size(label or " ", font_size_px=style.font_size_px)
    draw_text(
        canvas,
        axis_x,
        max(0.0, layout.padding.top * 0.7 - label_h),
        label,
        style.text_color,
        anchor="middle",
        font_size_px=style.font_size_px,
    )


def _draw_scrollbar(canvas: np.ndarray, track: ScrollTrack, view: LinearScaleView, style: ChartStyle) -> None:
    rect = track.rect()
    fill_rect(canvas, rect.x, rect.y, rect.width, rect.height, style.track_color)
    half = track.thickness / 2.0
    first, last = track.thumb_span(view.extent, view.window)
    a = first + half
    b = max(a, last - half)
    if track.vertical:
        cx = track.x + half
        fill_capsule(canvas, cx, a, cx, b, track.thickness, style.thumb_color)
        draw_hline(canvas, track.x, track.x + track.thickness, int(round(a + 1)), style.end_cap_color)
        draw_hline(canvas, track.x, track.x + track.thickness, int(round(b - 1)), style.end_cap_color)
    else:
        cy = track.y + half
        fill_capsule(canvas, a, cy, b, cy, track.thickness, style.thumb_color)
        draw_vline(canvas, int(round(a + 1)), track.y, track.y + track.thickness, style.end_cap_color)
        draw_vline(canvas, int(round(b - 1)), track.y, track.y + track.thickness, style.end_cap_color)


def _draw_zoom_buttons(canvas: np.ndarray, layout: ChartLayout, style: ChartStyle) -> None:
    for button, glyph in (("zoom_in", "+"), ("zoom_out", "-")):
        r = layout.zoom_button_rect(button)  # type: ignore[arg-type]
        fill_rect(canvas, r.x, r.y, r.width, r.height, style.button_color)
        draw_hline(canvas, r.x, r.x + r.width - 1, r.y, style.button_border_color)
        draw_hline(canvas, r.x, r.x + r.width - 1, r.y + r.height - 1, style.button_border_color)
        draw_vline(canvas, r.x, r.y, r.y + r.height - 1, style.button_border_color)
        draw_vline(canvas, r.x + r.width - 1, r.y, r.y + r.height - 1, style.button_border_color)
        _, gh = text_size(glyph, font_size_px=style.font_size_px * 1.4)
        draw_text(
            canvas,
            r.x + r.width / 2.0,
            r.y + (r.height - gh) / 2.0,
            glyph,
            style.text_color,
            anchor="middle",
            font_size_px=style.font_size_px * 1.4,
        )
