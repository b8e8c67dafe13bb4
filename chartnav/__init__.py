from chartnav.config import NavigationConfig
from chartnav.errors import ChartConfigError, ChartNavError, DatasetError, UnsupportedScaleOperation
from chartnav.events import ChartEvent, parse_chart_event
from chartnav.interaction import IDLE, Dragging, DragState, Idle, ScrollbarInteraction
from chartnav.layout import Box, ChartLayout, ScrollTrack
from chartnav.navigator import ChartNavigator
from chartnav.scales import BandAxisScale, BandScaleView, LinearAxisScale, LinearScaleView
from chartnav.zoom import zoom, zoom_2d, zoom_window

__all__ = [
    "BandAxisScale",
    "BandScaleView",
    "Box",
    "ChartConfigError",
    "ChartEvent",
    "ChartLayout",
    "ChartNavError",
    "ChartNavigator",
    "DatasetError",
    "DragState",
    "Dragging",
    "IDLE",
    "Idle",
    "LinearAxisScale",
    "LinearScaleView",
    "NavigationConfig",
    "ScrollTrack",
    "ScrollbarInteraction",
    "UnsupportedScaleOperation",
    "parse_chart_event",
    "zoom",
    "zoom_2d",
    "zoom_window",
]
