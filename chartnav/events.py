from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping


ChartEventType = Literal[
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "pointer_cancel",
    "zoom_in",
    "zoom_out",
]

_POSITIONAL = ("pointer_down", "pointer_move", "pointer_up")


@dataclass(frozen=True)
class ChartEvent:
    """Normalized host input event in chart-surface pixel coordinates."""

    event_type: ChartEventType
    x: float | None = None
    y: float | None = None


def parse_chart_event(event_type: str, payload: object = None) -> ChartEvent | None:
    """Parse a host `(event_type, payload)` pair into a `ChartEvent`.

    Pointer down/move/up need a mapping payload with finite `x` and `y`;
    cancel and zoom-button events carry no position. Anything else yields None.
    """

    if event_type in ("pointer_cancel", "zoom_in", "zoom_out"):
        return ChartEvent(event_type=event_type)  # type: ignore[arg-type]
    if event_type not in _POSITIONAL or not isinstance(payload, Mapping):
        return None
    try:
        x = float(payload["x"])
        y = float(payload["y"])
    except (KeyError, TypeError, ValueError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return ChartEvent(event_type=event_type, x=x, y=y)  # type: ignore[arg-type]
