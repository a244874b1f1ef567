"""
Engagement rollups - pure pandas reference.

Derived tables built from the raw per-post CSV (Platform, PostType, Date,
Likes) before plotting:

  1. average_by(): mean of a measure per combination of group columns,
     rows in first-seen order of the combination.
  2. platform_post_type_averages(): AvgLikes per (Platform, PostType), the
     input of the grouped bar chart.
  3. daily_averages(): AvgLikes per calendar day in chronological order,
     the input of the time series chart.

The measure column is expected to be numeric already (coerced upstream).
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from engagecharts.charts.coercion import coerce_date_column
from engagecharts.utils.logging import get_logger

logger = get_logger(__name__)


def average_by(
    df: pd.DataFrame,
    group_cols: Sequence[str],
    value_col: str,
    out_col: str,
) -> pd.DataFrame:
    """Mean of value_col for each combination of group_cols.

    Returns:
        DataFrame with columns [*group_cols, out_col], one row per combination,
        ordered by first appearance in df.
    """
    group_cols = list(group_cols)
    missing = [c for c in [*group_cols, value_col] if c not in df.columns]
    if missing:
        raise ValueError(f"df is missing columns: {missing}")
    if df.empty:
        return pd.DataFrame(columns=[*group_cols, out_col])

    tmp = df[group_cols].astype(str)
    tmp[value_col] = pd.to_numeric(df[value_col], errors="coerce")
    agg = (
        tmp.groupby(group_cols, sort=False)[value_col]
        .mean()
        .rename(out_col)
        .reset_index()
    )
    return agg


def platform_post_type_averages(
    df: pd.DataFrame,
    *,
    platform_col: str = "Platform",
    post_type_col: str = "PostType",
    value_col: str = "Likes",
    out_col: str = "AvgLikes",
) -> pd.DataFrame:
    """AvgLikes per (Platform, PostType)."""
    return average_by(df, [platform_col, post_type_col], value_col, out_col)


def daily_averages(
    df: pd.DataFrame,
    *,
    date_col: str = "Date",
    value_col: str = "Likes",
    out_col: str = "AvgLikes",
) -> pd.DataFrame:
    """Mean of value_col per calendar day, sorted by date.

    Rows whose date does not parse are dropped. The date column of the
    result holds normalized (midnight) timestamps.
    """
    dates = coerce_date_column(df, date_col)
    tmp = pd.DataFrame({
        date_col: dates.dt.normalize(),
        value_col: pd.to_numeric(df[value_col], errors="coerce"),
    }).dropna(subset=[date_col])
    n_dropped = len(df) - len(tmp)
    if n_dropped:
        logger.warning(f"daily_averages: dropped {n_dropped} row(s) without a valid {date_col!r}")
    agg = (
        tmp.groupby(date_col, sort=True)[value_col]
        .mean()
        .rename(out_col)
        .reset_index()
    )
    return agg
