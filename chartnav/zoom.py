from __future__ import annotations

from typing import Literal

from chartnav.config import NavigationConfig
from chartnav.scales import AxisScale


ZoomDirection = Literal["in", "out"]


def zoom_window(
    extent: tuple[float, float],
    window: tuple[float, float],
    direction: ZoomDirection,
    *,
    config: NavigationConfig,
) -> tuple[float, float]:
    e0, e1 = extent
    lo, hi = window
    span = hi - lo
    if direction == "in":
        min_span = config.min_window_fraction * (e1 - e0)
        new_span = max(min_span, span * config.zoom_in_ratio)
        center = (lo + hi) * 0.5
        return (center - new_span * 0.5, center + new_span * 0.5)
    if direction == "out":
        # Inverse of one zoom-in step; each bound then clamps on its own.
        grow = span * config.zoom_step / (2.0 * config.zoom_in_ratio)
        return (max(e0, lo - grow), min(e1, hi + grow))
    raise ValueError(f"unsupported zoom direction: {direction!r}")


def zoom(scale: AxisScale, direction: ZoomDirection, *, config: NavigationConfig) -> bool:
    if not scale.is_numeric:
        if direction not in ("in", "out"):
            raise ValueError(f"unsupported zoom direction: {direction!r}")
        return False
    target = zoom_window(scale.extent, scale.window, direction, config=config)
    return scale.set_window(target)


def zoom_2d(
    x_scale: AxisScale,
    y_scale: AxisScale,
    direction: ZoomDirection,
    *,
    config: NavigationConfig,
) -> bool:
    x_changed = zoom(x_scale, direction, config=config)
    y_changed = zoom(y_scale, direction, config=config)
    return x_changed or y_changed
