from chartnav.data.prepare import OTHER_KEY, HistogramBin, aggregate_other, count_categories, histogram_bins
from chartnav.data.provider import (
    DatasetProvider,
    InMemoryDatasets,
    column_index,
    column_keys,
    column_name,
    column_values,
)

__all__ = [
    "DatasetProvider",
    "HistogramBin",
    "InMemoryDatasets",
    "OTHER_KEY",
    "aggregate_other",
    "column_index",
    "column_keys",
    "column_name",
    "column_values",
    "count_categories",
    "histogram_bins",
]
