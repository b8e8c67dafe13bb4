from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def _blend(region: np.ndarray, color: RGBA, coverage: np.ndarray | float = 1.0) -> None:
    a = (color[3] / 255.0) * np.asarray(coverage, dtype=np.float32)
    if np.ndim(a) == 2:
        a = a[:, :, None]
    src = np.asarray(color[0:3], dtype=np.float32)
    region[..., :3] = (src * a + region[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    region[..., 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x : x + 1], color)


def fill_rect(dst: np.ndarray, x: float, y: float, width: float, height: float, color: RGBA) -> None:
    xa = max(0, int(round(x)))
    ya = max(0, int(round(y)))
    xb = min(dst.shape[1], int(round(x + width)))
    yb = min(dst.shape[0], int(round(y + height)))
    if xa >= xb or ya >= yb:
        return
    _blend(dst[ya:yb, xa:xb], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y : y + 1, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    _blend(dst[ya : yb + 1, x : x + 1], color)


def fill_capsule(
    dst: np.ndarray,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    thickness: float,
    color: RGBA,
) -> None:
    """Stroke the segment (x0, y0)-(x1, y1) with round caps."""
    r = thickness * 0.5
    bx0 = max(0, int(np.floor(min(x0, x1) - r)))
    by0 = max(0, int(np.floor(min(y0, y1) - r)))
    bx1 = min(dst.shape[1], int(np.ceil(max(x0, x1) + r)) + 1)
    by1 = min(dst.shape[0], int(np.ceil(max(y0, y1) + r)) + 1)
    if bx0 >= bx1 or by0 >= by1:
        return
    ys, xs = np.mgrid[by0:by1, bx0:bx1].astype(np.float32)
    xs += 0.5
    ys += 0.5
    dx = x1 - x0
    dy = y1 - y0
    length_sq = dx * dx + dy * dy
    if length_sq <= 0.0:
        t = np.zeros_like(xs)
    else:
        t = np.clip(((xs - x0) * dx + (ys - y0) * dy) / length_sq, 0.0, 1.0)
    dist = np.hypot(xs - (x0 + t * dx), ys - (y0 + t * dy))
    coverage = np.clip(r + 0.5 - dist, 0.0, 1.0)
    if not np.any(coverage > 0):
        return
    _blend(dst[by0:by1, bx0:bx1], color, coverage)
