"""Type coercion for raw CSV cells.

Numeric policy: parse as a number; anything that does not parse becomes the
default (0), and so do blank cells and non-finite values (inf, -inf, nan).
This is a lossy legacy rule (a missing value reads as zero likes) kept so
charts match earlier output.

coerce_numeric() and coerce_numeric_column() share one parser
(pd.to_numeric), so a cell gets the same value on either path.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pandas as pd

from engagecharts.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NUMERIC = 0.0


def coerce_numeric(value: Any, default: float = DEFAULT_NUMERIC) -> float:
    """Coerce one raw cell to a finite float, substituting default on failure.

    Examples:
        coerce_numeric("12") -> 12.0
        coerce_numeric(" 3.5 ") -> 3.5
        coerce_numeric("n/a") -> 0.0
        coerce_numeric("") -> 0.0
        coerce_numeric("inf") -> 0.0
        coerce_numeric("1_000") -> 0.0
    """
    if value is None:
        return float(default)
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return float(default)
        value = pd.to_numeric(value, errors="coerce")
    try:
        out = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(out):
        return float(default)
    return out


def coerce_numeric_column(df: pd.DataFrame, col: str, default: float = DEFAULT_NUMERIC) -> pd.Series:
    """Numeric series for df[col] with unparsable, missing and non-finite cells set to default.

    Returns a new float Series aligned to df.index; df is not modified.
    """
    if col not in df.columns:
        raise ValueError(f"df must contain column {col!r}")
    raw = df[col]
    if not pd.api.types.is_numeric_dtype(raw):
        raw = raw.astype(str).str.strip()
    numeric = pd.to_numeric(raw, errors="coerce").astype(float)
    numeric = numeric.where(np.isfinite(numeric))
    n_bad = int(numeric.isna().sum())
    if n_bad:
        logger.warning(f"column {col!r}: {n_bad} non-numeric value(s) coerced to {default}")
    return numeric.fillna(default)


def coerce_date_column(df: pd.DataFrame, col: str) -> pd.Series:
    """Datetime series for df[col]; unparsable cells become NaT."""
    if col not in df.columns:
        raise ValueError(f"df must contain column {col!r}")
    dates = pd.to_datetime(df[col], errors="coerce")
    n_bad = int(dates.isna().sum() - df[col].isna().sum())
    if n_bad > 0:
        logger.warning(f"column {col!r}: {n_bad} unparsable date(s) set to NaT")
    return dates
