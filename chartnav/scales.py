from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import logging
import math

import numpy as np

from chartnav.config import DEFAULT_MIN_WINDOW_FRACTION
from chartnav.errors import ChartConfigError, DatasetError, UnsupportedScaleOperation


LOGGER = logging.getLogger(__name__)

DEFAULT_BAND_PADDING = 0.2


def normalize_extent(lo: float, hi: float) -> tuple[float, float]:
    lo = float(lo)
    hi = float(hi)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ChartConfigError(f"extent bounds must be finite: ({lo}, {hi})")
    if lo > hi:
        lo, hi = hi, lo
    if lo == hi:
        LOGGER.debug("zero-span extent at %s widened to (%s, %s)", lo, lo - 1.0, hi + 1.0)
        lo -= 1.0
        hi += 1.0
    return (lo, hi)


def compute_extent(values: np.ndarray) -> tuple[float, float]:
    arr = np.asarray(values, dtype=np.float64)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        raise DatasetError("cannot compute an extent from a series with no finite values")
    if finite.size != arr.size:
        LOGGER.warning("dropped %d non-finite values while computing extent", arr.size - finite.size)
    return normalize_extent(float(np.min(finite)), float(np.max(finite)))


def _validate_pixel_range(pixel_range: tuple[float, float]) -> tuple[float, float]:
    p0, p1 = float(pixel_range[0]), float(pixel_range[1])
    if not p0 < p1:
        raise ChartConfigError(f"pixel range must be increasing: ({p0}, {p1})")
    return (p0, p1)


@dataclass(frozen=True)
class LinearScaleView:
    """Read-only snapshot of a numeric axis handed to renderers."""

    extent: tuple[float, float]
    window: tuple[float, float]
    pixel_range: tuple[float, float]
    inverted: bool = False

    @property
    def is_numeric(self) -> bool:
        return True

    @property
    def span(self) -> float:
        return self.window[1] - self.window[0]

    def to_pixel(self, value: float) -> float:
        p0, p1 = self.pixel_range
        t = (float(value) - self.window[0]) / self.span
        if self.inverted:
            return p1 - t * (p1 - p0)
        return p0 + t * (p1 - p0)

    def to_pixels(self, values: np.ndarray) -> np.ndarray:
        p0, p1 = self.pixel_range
        t = (np.asarray(values, dtype=np.float64) - self.window[0]) / self.span
        if self.inverted:
            return p1 - t * (p1 - p0)
        return p0 + t * (p1 - p0)

    def to_value(self, pixel: float) -> float:
        p0, p1 = self.pixel_range
        t = (float(pixel) - p0) / (p1 - p0)
        if self.inverted:
            t = 1.0 - t
        return self.window[0] + t * self.span

    def ticks(self, target: int = 3) -> np.ndarray:
        ticks = generate_nice_ticks(self.window[0], self.window[1], target)
        eps = max(1e-12, self.span * 1e-9)
        return ticks[(ticks >= self.window[0] - eps) & (ticks <= self.window[1] + eps)]


@dataclass(frozen=True)
class BandScaleView:
    keys: tuple[Hashable, ...]
    pixel_range: tuple[float, float]
    padding: float = DEFAULT_BAND_PADDING

    @property
    def is_numeric(self) -> bool:
        return False

    @property
    def extent(self) -> tuple[Hashable, ...]:
        return self.keys

    @property
    def window(self) -> tuple[Hashable, ...]:
        return self.keys

    @property
    def step(self) -> float:
        p0, p1 = self.pixel_range
        return (p1 - p0) / max(1.0, len(self.keys) - self.padding + 2.0 * self.padding)

    @property
    def bandwidth(self) -> float:
        return self.step * (1.0 - self.padding)

    def _first_band(self) -> float:
        p0, p1 = self.pixel_range
        used = self.step * (len(self.keys) - self.padding)
        return p0 + (p1 - p0 - used) * 0.5

    def to_pixel(self, key: Hashable) -> float | None:
        try:
            index = self.keys.index(key)
        except ValueError:
            return None
        return self._first_band() + self.step * index

    def to_value(self, pixel: float) -> float:
        raise UnsupportedScaleOperation("band scales have no inverse mapping")


class LinearAxisScale:
    """Numeric axis: immutable full extent plus a mutable, clamped window."""

    def __init__(
        self,
        extent: tuple[float, float],
        pixel_range: tuple[float, float],
        *,
        inverted: bool = False,
        min_window_fraction: float = DEFAULT_MIN_WINDOW_FRACTION,
    ) -> None:
        if not (0.0 < min_window_fraction <= 1.0):
            raise ChartConfigError("min_window_fraction must be in (0, 1]")
        self._extent = normalize_extent(*extent)
        self._pixel_range = _validate_pixel_range(pixel_range)
        self._inverted = bool(inverted)
        self._min_window_fraction = float(min_window_fraction)
        self._window = self._extent

    @property
    def is_numeric(self) -> bool:
        return True

    @property
    def extent(self) -> tuple[float, float]:
        return self._extent

    @property
    def window(self) -> tuple[float, float]:
        return self._window

    @property
    def pixel_range(self) -> tuple[float, float]:
        return self._pixel_range

    @property
    def extent_span(self) -> float:
        return self._extent[1] - self._extent[0]

    @property
    def min_window_fraction(self) -> float:
        return self._min_window_fraction

    @property
    def min_span(self) -> float:
        return self._min_window_fraction * self.extent_span

    def set_window(self, window: tuple[float, float]) -> bool:
        lo, hi = float(window[0]), float(window[1])
        if not (math.isfinite(lo) and math.isfinite(hi)):
            LOGGER.debug("ignored non-finite window request (%s, %s)", lo, hi)
            return False
        if lo > hi:
            lo, hi = hi, lo
        e0, e1 = self._extent
        lo = min(max(lo, e0), e1)
        hi = min(max(hi, e0), e1)
        min_span = self.min_span
        if hi - lo < min_span:
            center = (lo + hi) * 0.5
            lo = center - min_span * 0.5
            hi = lo + min_span
            if lo < e0:
                lo, hi = e0, e0 + min_span
            elif hi > e1:
                lo, hi = e1 - min_span, e1
        changed = (lo, hi) != self._window
        self._window = (lo, hi)
        return changed

    def reset(self) -> bool:
        changed = self._window != self._extent
        self._window = self._extent
        return changed

    def view(self) -> LinearScaleView:
        return LinearScaleView(
            extent=self._extent,
            window=self._window,
            pixel_range=self._pixel_range,
            inverted=self._inverted,
        )

    def to_pixel(self, value: float) -> float:
        return self.view().to_pixel(value)

    def to_value(self, pixel: float) -> float:
        return self.view().to_value(pixel)


class BandAxisScale:
    """Categorical axis. Its window is always the full key set."""

    def __init__(
        self,
        keys: Sequence[Hashable],
        pixel_range: tuple[float, float],
        *,
        padding: float = DEFAULT_BAND_PADDING,
    ) -> None:
        if not (0.0 <= padding < 1.0):
            raise ChartConfigError("band padding must be in [0, 1)")
        self._keys = tuple(keys)
        self._pixel_range = _validate_pixel_range(pixel_range)
        self._padding = float(padding)

    @property
    def is_numeric(self) -> bool:
        return False

    @property
    def extent(self) -> tuple[Hashable, ...]:
        return self._keys

    @property
    def window(self) -> tuple[Hashable, ...]:
        return self._keys

    @property
    def pixel_range(self) -> tuple[float, float]:
        return self._pixel_range

    def set_window(self, window: object) -> bool:
        return False

    def reset(self) -> bool:
        return False

    def view(self) -> BandScaleView:
        return BandScaleView(keys=self._keys, pixel_range=self._pixel_range, padding=self._padding)

    def to_pixel(self, key: Hashable) -> float | None:
        return self.view().to_pixel(key)

    def to_value(self, pixel: float) -> float:
        raise UnsupportedScaleOperation("band scales have no inverse mapping")


AxisScale = LinearAxisScale | BandAxisScale
ScaleView = LinearScaleView | BandScaleView


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Snap accumulated drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [format_tick(float(ticks[0]))]
    step = float(abs(ticks[1] - ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
