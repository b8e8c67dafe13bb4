from __future__ import annotations

from functools import lru_cache
import math
from typing import Literal

import numpy as np

from chartnav.raster.canvas import RGBA, draw_pixel


SymbolName = Literal["circle", "cross", "diamond", "square", "star", "triangle", "wye"]
SYMBOL_NAMES: tuple[SymbolName, ...] = ("circle", "cross", "diamond", "square", "star", "triangle", "wye")
DEFAULT_SYMBOL_AREA = 100.0

Polyline = tuple[tuple[float, float], ...]


def draw_symbol(
    dst: np.ndarray,
    x: float,
    y: float,
    symbol: SymbolName,
    color: RGBA,
    *,
    area: float = DEFAULT_SYMBOL_AREA,
) -> None:
    """Outline `symbol` centred on (x, y); `area` is the nominal symbol area in px^2."""
    cx = int(round(x))
    cy = int(round(y))
    for path in _symbol_paths(symbol, float(area)):
        for (ax, ay), (bx, by) in zip(path[:-1], path[1:], strict=False):
            _draw_line_segment(dst, cx + int(round(ax)), cy + int(round(ay)), cx + int(round(bx)), cy + int(round(by)), color)


def symbol_for_index(index: int) -> SymbolName:
    return SYMBOL_NAMES[index % len(SYMBOL_NAMES)]


@lru_cache(maxsize=64)
def _symbol_paths(symbol: SymbolName, area: float) -> tuple[Polyline, ...]:
    if symbol == "circle":
        r = math.sqrt(area / math.pi)
        return (_closed(_regular(20, r)),)
    if symbol == "cross":
        s = math.sqrt(area / 5.0) / 2.0
        pts = (
            (-3 * s, -s), (-s, -s), (-s, -3 * s), (s, -3 * s), (s, -s), (3 * s, -s),
            (3 * s, s), (s, s), (s, 3 * s), (-s, 3 * s), (-s, s), (-3 * s, s),
        )
        return (_closed(pts),)
    if symbol == "diamond":
        ry = math.sqrt(area / (2.0 * math.tan(math.pi / 6.0)))
        rx = ry * math.tan(math.pi / 6.0)
        return (_closed(((0.0, -ry), (rx, 0.0), (0.0, ry), (-rx, 0.0))),)
    if symbol == "square":
        h = math.sqrt(area) / 2.0
        return (_closed(((-h, -h), (h, -h), (h, h), (-h, h))),)
    if symbol == "star":
        outer = math.sqrt(area / math.pi) * 1.25
        inner = outer * 0.45
        pts = []
        for i in range(10):
            r = outer if i % 2 == 0 else inner
            a = -math.pi / 2.0 + i * math.pi / 5.0
            pts.append((r * math.cos(a), r * math.sin(a)))
        return (_closed(tuple(pts)),)
    if symbol == "triangle":
        side = math.sqrt(4.0 * area / math.sqrt(3.0))
        return (_closed(_regular(3, side / math.sqrt(3.0))),)
    if symbol == "wye":
        r = math.sqrt(area / math.pi) * 1.1
        spokes = []
        for i in range(3):
            a = -math.pi / 2.0 + i * 2.0 * math.pi / 3.0
            spokes.append(((0.0, 0.0), (r * math.cos(a), r * math.sin(a))))
        return tuple(spokes)
    raise ValueError(f"unsupported symbol: {symbol!r}")


def _regular(n: int, r: float) -> Polyline:
    return tuple(
        (r * math.cos(-math.pi / 2.0 + 2.0 * math.pi * i / n), r * math.sin(-math.pi / 2.0 + 2.0 * math.pi * i / n))
        for i in range(n)
    )


def _closed(points: Polyline) -> Polyline:
    return tuple(points) + (points[0],)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        draw_pixel(dst, x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
