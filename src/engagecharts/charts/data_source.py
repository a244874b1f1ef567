"""CSV data sources for engagement charts.

Provides data dir discovery, CSV loading with column checks, and the numeric
and date coercion applied before any chart is computed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from engagecharts.charts.coercion import coerce_date_column, coerce_numeric_column
from engagecharts.utils.logging import get_logger

logger = get_logger(__name__)

# Raw per-post engagement table
ENGAGEMENT_CSV = "socialMedia.csv"
ENGAGEMENT_COLUMNS = ("Platform", "PostType", "Date", "Likes")


class DataSourceError(Exception):
    """A chart's CSV source could not be loaded.

    Terminal for the chart that requested it; other charts are unaffected.
    """


def get_data_dir() -> Path:
    """Resolve the repository data/ directory.

    Package layout: <root>/src/engagecharts/charts/data_source.py
    Data: <root>/data/
    """
    pkg_root = Path(__file__).resolve().parent.parent.parent.parent
    return pkg_root / "data"


def get_data_csv_files(data_dir: Optional[Path] = None) -> list[str]:
    """List .csv filenames in data_dir (sorted)."""
    data_dir = data_dir or get_data_dir()
    if not data_dir.exists():
        return []
    return sorted(f.name for f in data_dir.iterdir() if f.suffix.lower() == ".csv")


def load_csv(
    path: str | Path,
    *,
    required_columns: Sequence[str] = (),
    numeric_columns: Sequence[str] = (),
    date_columns: Sequence[str] = (),
) -> pd.DataFrame:
    """Load a CSV and coerce the named columns.

    Args:
        path: CSV file path.
        required_columns: Columns that must be present.
        numeric_columns: Columns coerced to float; unparsable cells become 0.
        date_columns: Columns parsed to datetime; unparsable cells become NaT.

    Returns:
        DataFrame in file row order with coerced columns replaced.

    Raises:
        DataSourceError: File missing, unreadable, empty, or missing columns.
    """
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"CSV not found: {path}")
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise DataSourceError(f"CSV is empty: {path}") from e
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Failed to read {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in required_columns if c not in df.columns]
    if missing:
        raise DataSourceError(
            f"CSV {path.name} is missing required columns: {missing}. Found: {list(df.columns)}"
        )

    for col in numeric_columns:
        df[col] = coerce_numeric_column(df, col)
    for col in date_columns:
        df[col] = coerce_date_column(df, col)

    logger.info(f"loaded {path.name}: rows={len(df)} columns={list(df.columns)}")
    return df


def load_engagement_csv(path: str | Path) -> pd.DataFrame:
    """Load the raw per-post table (Platform, PostType, Date, Likes).

    Likes are coerced with the zero policy; Date stays as text so the
    rollups decide how to parse it.
    """
    return load_csv(path, required_columns=ENGAGEMENT_COLUMNS, numeric_columns=["Likes"])
