from chartnav.charts.bar import BAR_CHART_LAYOUT, BarChart
from chartnav.charts.base import Chart
from chartnav.charts.chrome import ChartStyle, draw_chrome
from chartnav.charts.histogram import HISTOGRAM_LAYOUT, Histogram
from chartnav.charts.scatter import SCATTER_LAYOUT, ScatterPlot

__all__ = [
    "BAR_CHART_LAYOUT",
    "BarChart",
    "Chart",
    "ChartStyle",
    "HISTOGRAM_LAYOUT",
    "Histogram",
    "SCATTER_LAYOUT",
    "ScatterPlot",
    "draw_chrome",
]
