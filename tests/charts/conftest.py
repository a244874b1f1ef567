# tests/charts/conftest.py
"""Pytest configuration and shared fixtures for chart tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest


def pytest_configure() -> None:
    # Ensure engagecharts package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[2]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


ENGAGEMENT_CSV_TEXT = """Platform,PostType,Date,Likes
Twitter,Image,2024-03-02,10
Instagram,Video,2024-03-01,40
Twitter,Video,2024-03-01,20
Instagram,Image,2024-03-02,abc
Facebook,Link,2024-03-01,30
Twitter,Image,2024-03-01,30
"""


@pytest.fixture
def engagement_df() -> pd.DataFrame:
    """Small raw engagement table with numeric Likes (already coerced)."""
    return pd.DataFrame({
        "Platform": ["Twitter", "Instagram", "Twitter", "Instagram", "Facebook", "Twitter"],
        "PostType": ["Image", "Video", "Video", "Image", "Link", "Image"],
        "Date": ["2024-03-02", "2024-03-01", "2024-03-01", "2024-03-02", "2024-03-01", "2024-03-01"],
        "Likes": [10.0, 40.0, 20.0, 0.0, 30.0, 30.0],
    })


@pytest.fixture
def engagement_csv(tmp_path: Path) -> Path:
    """The same table written as CSV, with one non-numeric Likes cell."""
    path = tmp_path / "socialMedia.csv"
    path.write_text(ENGAGEMENT_CSV_TEXT, encoding="utf-8")
    return path
