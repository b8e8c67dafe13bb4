from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Protocol

import numpy as np

from chartnav.errors import DatasetError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


class DatasetProvider(Protocol):
    def column_names(self, dataset_id: str) -> tuple[str, ...]:
        ...

    def rows(self, dataset_id: str) -> tuple[tuple[Any, ...], ...]:
        ...


class InMemoryDatasets:
    """Named tabular datasets held in memory, row-major."""

    def __init__(self) -> None:
        self._columns: dict[str, tuple[str, ...]] = {}
        self._rows: dict[str, tuple[tuple[Any, ...], ...]] = {}

    def register(self, dataset_id: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        if not dataset_id or not isinstance(dataset_id, str):
            raise DatasetError("dataset id must be a non-empty string")
        names = tuple(str(c) for c in columns)
        if not names:
            raise DatasetError(f"dataset `{dataset_id}` has no columns")
        if len(set(names)) != len(names):
            raise DatasetError(f"dataset `{dataset_id}` has duplicate column names")
        frozen_rows: list[tuple[Any, ...]] = []
        for i, row in enumerate(rows):
            values = tuple(row)
            if len(values) != len(names):
                raise DatasetError(f"row {i} of `{dataset_id}` has {len(values)} values, expected {len(names)}")
            frozen_rows.append(values)
        self._columns[dataset_id] = names
        self._rows[dataset_id] = tuple(frozen_rows)

    def register_frame(self, dataset_id: str, frame: Any) -> None:
        if pd is None:
            raise DatasetError("pandas is required to register a DataFrame")
        if not isinstance(frame, pd.DataFrame):
            raise DatasetError("`frame` must be a pandas DataFrame")
        self.register(dataset_id, list(frame.columns), list(frame.itertuples(index=False, name=None)))

    def dataset_ids(self) -> list[str]:
        return sorted(self._columns)

    def column_names(self, dataset_id: str) -> tuple[str, ...]:
        try:
            return self._columns[dataset_id]
        except KeyError:
            raise DatasetError(f"unknown dataset: {dataset_id}") from None

    def rows(self, dataset_id: str) -> tuple[tuple[Any, ...], ...]:
        try:
            return self._rows[dataset_id]
        except KeyError:
            raise DatasetError(f"unknown dataset: {dataset_id}") from None


def column_index(provider: DatasetProvider, dataset_id: str, column: str | int) -> int:
    names = provider.column_names(dataset_id)
    if isinstance(column, int):
        if not (0 <= column < len(names)):
            raise DatasetError(f"column index {column} out of range for `{dataset_id}`")
        return column
    if column not in names:
        raise DatasetError(f"column not found: {column}")
    return names.index(column)


def column_name(provider: DatasetProvider, dataset_id: str, column: str | int) -> str:
    return provider.column_names(dataset_id)[column_index(provider, dataset_id, column)]


def column_values(provider: DatasetProvider, dataset_id: str, column: str | int) -> np.ndarray:
    idx = column_index(provider, dataset_id, column)
    raw = [row[idx] for row in provider.rows(dataset_id)]
    if not raw:
        raise DatasetError(f"dataset `{dataset_id}` is empty")
    label = provider.column_names(dataset_id)[idx]
    return _coerce_ndarray(np.asarray(raw, dtype=object), label=label)


def column_keys(provider: DatasetProvider, dataset_id: str, column: str | int) -> tuple[str, ...]:
    idx = column_index(provider, dataset_id, column)
    return tuple("" if row[idx] is None else str(row[idx]) for row in provider.rows(dataset_id))


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise DatasetError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
