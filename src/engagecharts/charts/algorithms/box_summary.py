"""
Box plot summary algorithm: five-number summary per category group.

This module is the statistical core of the Box plot chart type. It takes a
sequence of records, a group-key extractor and a numeric-value extractor,
and returns one BoxSummary (min, q1, median, q3, max) per group:

  1. Records are partitioned by key, keys kept in first-seen order.
  2. Each partition's values are extracted and sorted ascending.
  3. Quartiles are linearly interpolated at rank p * (n - 1).

Numeric coercion happens upstream (see charts.coercion); nothing here
validates values.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable, Hashable, Iterable, Mapping, Sequence, TypeVar

import pandas as pd

R = TypeVar("R")

QUARTILE_PS = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class BoxSummary:
    """Five-number summary of one group's values."""

    min: float
    q1: float
    median: float
    q3: float
    max: float

    @property
    def iqr(self) -> float:
        """Interquartile range (q3 - q1)."""
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


# -----------------------------------------------------------------------------
# Step 1: Partition records by group key (first-seen order)
# -----------------------------------------------------------------------------


def partition_by_key(records: Iterable[R], key_fn: Callable[[R], Hashable]) -> dict[Hashable, list[R]]:
    """Split records into per-key lists.

    Relative order within each list is the input order; dict order is the
    order in which each key is first seen.
    """
    parts: dict[Hashable, list[R]] = {}
    for record in records:
        parts.setdefault(key_fn(record), []).append(record)
    return parts


# -----------------------------------------------------------------------------
# Step 2 & 3: Quantiles over a sorted list
# -----------------------------------------------------------------------------


def interpolated_quantile(sorted_values: Sequence[float], p: float) -> float:
    """Quantile of an ascending, non-empty sequence by linear interpolation.

    rank r = p * (n - 1); lo = floor(r); hi = ceil(r);
    q = sorted[lo] + (r - lo) * (sorted[hi] - sorted[lo])
    """
    r = p * (len(sorted_values) - 1)
    lo = math.floor(r)
    hi = math.ceil(r)
    v_lo = float(sorted_values[lo])
    return v_lo + (r - lo) * (float(sorted_values[hi]) - v_lo)


def summarize_sorted(sorted_values: Sequence[float]) -> BoxSummary:
    """Five-number summary of an ascending, non-empty sequence."""
    q1, median, q3 = (interpolated_quantile(sorted_values, p) for p in QUARTILE_PS)
    return BoxSummary(
        min=float(sorted_values[0]),
        q1=q1,
        median=median,
        q3=q3,
        max=float(sorted_values[-1]),
    )


# -----------------------------------------------------------------------------
# Full pipeline: records -> per-group summaries
# -----------------------------------------------------------------------------


def compute_group_summaries(
    records: Iterable[R],
    key_fn: Callable[[R], Any],
    value_fn: Callable[[R], float],
) -> dict[str, BoxSummary]:
    """Compute the five-number summary for each group of records.

    Args:
        records: Records to summarize; may be empty.
        key_fn: Returns the group key of a record. Keys are stringified.
        value_fn: Returns the (already coerced) numeric measure of a record.

    Returns:
        Mapping group key -> BoxSummary, one entry per distinct key, in
        first-seen order. Empty input gives an empty dict.
    """
    summaries: dict[str, BoxSummary] = {}
    for key, group in partition_by_key(records, lambda rec: str(key_fn(rec))).items():
        values = sorted(value_fn(rec) for rec in group)
        summaries[key] = summarize_sorted(values)
    return summaries


# -----------------------------------------------------------------------------
# DataFrame adapters
# -----------------------------------------------------------------------------


def frame_group_summaries(df: pd.DataFrame, group_col: str, value_col: str) -> dict[str, BoxSummary]:
    """Run compute_group_summaries over the rows of a dataframe.

    value_col is expected to be numeric already (coerced upstream).
    """
    for col in (group_col, value_col):
        if col not in df.columns:
            raise ValueError(f"df must contain column {col!r}")
    records: list[Mapping[str, Any]] = df[[group_col, value_col]].to_dict("records")
    return compute_group_summaries(
        records,
        key_fn=lambda rec: rec[group_col],
        value_fn=lambda rec: float(rec[value_col]),
    )


def summaries_to_frame(summaries: Mapping[str, BoxSummary]) -> pd.DataFrame:
    """Table with one row per group: group, min, q1, median, q3, max."""
    rows = [{"group": key, **summary.to_dict()} for key, summary in summaries.items()]
    return pd.DataFrame(rows, columns=["group", "min", "q1", "median", "q3", "max"])
