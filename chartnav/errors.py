from __future__ import annotations


class ChartNavError(Exception):
    """Base class for chartnav errors."""


class ChartConfigError(ChartNavError, ValueError):
    """Malformed layout, scale or navigation configuration, raised at construction."""


class DatasetError(ChartNavError, ValueError):
    pass


class UnsupportedScaleOperation(ChartNavError, TypeError):
    pass
