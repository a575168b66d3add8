"""Conversion between mappings and pandas objects."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

import pandas as pd

from map_toolkit.insertion import add


def to_series(mapping: Mapping[Hashable, Any], name: Hashable | None = None) -> pd.Series:
    """Return a Series indexed by the mapping's keys, in iteration order."""
    return pd.Series(list(mapping.values()), index=list(mapping.keys()), name=name, dtype=object)


def from_series(series: pd.Series, dropna: bool = False) -> dict[Hashable, Any]:
    """Build a dict from a Series' index and values.

    Raises DuplicateKeyError when the index repeats a label. With *dropna*,
    NA values are skipped.
    """
    result: dict[Hashable, Any] = {}
    for key, value in series.items():
        if dropna and pd.api.types.is_scalar(value) and pd.isna(value):
            continue
        add(result, key, value)
    return result


def to_frame(
    mapping: Mapping[Hashable, Any], key_column: str = "key", value_column: str = "value"
) -> pd.DataFrame:
    """Return a two-column frame with one row per pair."""
    return pd.DataFrame(
        {
            key_column: pd.Series(list(mapping.keys()), dtype=object),
            value_column: pd.Series(list(mapping.values()), dtype=object),
        }
    )


def from_frame(
    frame: pd.DataFrame, key_column: str = "key", value_column: str = "value"
) -> dict[Hashable, Any]:
    """Build a dict from two columns of *frame*.

    Raises KeyError when a column is missing and DuplicateKeyError when the
    key column repeats a value.
    """
    for column in (key_column, value_column):
        if column not in frame.columns:
            available = ", ".join(map(str, frame.columns))
            raise KeyError(f"Column '{column}' not found. Available: {available}")

    result: dict[Hashable, Any] = {}
    for key, value in zip(frame[key_column], frame[value_column]):
        add(result, key, value)
    return result
