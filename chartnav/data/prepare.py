from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
import math

import numpy as np


OTHER_KEY = "Other"
_E10 = math.sqrt(50.0)
_E5 = math.sqrt(10.0)
_E2 = math.sqrt(2.0)


@dataclass(frozen=True)
class HistogramBin:
    x0: float
    x1: float
    count: int


def count_categories(keys: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    counts: dict[Hashable, int] = {}
    for key in keys:
        counts[key] = counts.get(key, 0) + 1
    # sorted() is stable, so ties keep first-appearance order.
    return sorted(counts.items(), key=lambda item: -item[1])


def aggregate_other(counts: list[tuple[Hashable, int]], fraction: float) -> list[tuple[Hashable, int]]:
    """Fold the smallest `fraction` of the categories into one trailing "Other" bar."""
    if not (0.0 <= fraction <= 1.0):
        raise ValueError("fraction must be in [0, 1]")
    n = int(math.floor(fraction * len(counts) + 0.5))
    if n <= 0:
        return list(counts)
    kept = list(counts[: len(counts) - n])
    total = sum(count for _, count in counts[len(counts) - n :])
    kept.append((OTHER_KEY, total))
    return kept


def tick_increment(lo: float, hi: float, count: int) -> float:
    """Round step of 1, 2 or 5 times a power of ten near `(hi - lo) / count`."""
    if count <= 0:
        raise ValueError("count must be > 0")
    step = (hi - lo) / count
    power = math.floor(math.log10(step))
    error = step / 10.0**power
    if error >= _E10:
        factor = 10.0
    elif error >= _E5:
        factor = 5.0
    elif error >= _E2:
        factor = 2.0
    else:
        factor = 1.0
    return factor * 10.0**power


def histogram_thresholds(lo: float, hi: float, target: int = 10) -> np.ndarray:
    """Bin edges strictly inside `(lo, hi)`, on multiples of `tick_increment`."""
    inc = tick_increment(lo, hi, target)
    if inc >= 1.0:
        k = np.arange(math.ceil(lo / inc), math.floor(hi / inc) + 1, dtype=np.float64)
        ticks = k * inc
    else:
        # Divide by the inverse step so decimal edges come out exact.
        inv = round(1.0 / inc)
        k = np.arange(math.ceil(lo * inv), math.floor(hi * inv) + 1, dtype=np.float64)
        ticks = k / inv
    return ticks[(ticks > lo) & (ticks < hi)]


def histogram_bins(values: np.ndarray, lo: float, hi: float, target: int = 10) -> list[HistogramBin]:
    if not lo < hi:
        raise ValueError("histogram domain must satisfy lo < hi")
    arr = np.asarray(values, dtype=np.float64)
    arr = arr[np.isfinite(arr) & (arr >= lo) & (arr <= hi)]
    edges = np.concatenate(([lo], histogram_thresholds(lo, hi, target), [hi]))
    # Right-closed lookup sends each value to the bin whose x0 <= value < x1;
    # values equal to hi fold into the last bin.
    idx = np.searchsorted(edges, arr, side="right") - 1
    idx = np.clip(idx, 0, edges.size - 2)
    counts = np.bincount(idx, minlength=edges.size - 1)
    return [
        HistogramBin(x0=float(edges[i]), x1=float(edges[i + 1]), count=int(counts[i]))
        for i in range(edges.size - 1)
    ]
