"""Chart state for engagement charts.

This module defines the ChartType enum and ChartState dataclass used to
serialize and manage per-chart configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

DEFAULT_COLORS = ["#1f77b4", "#ff7f0e", "#2ca02c"]


class ChartType(Enum):
    """Enumeration of available chart types."""
    BOX_PLOT = "box_plot"
    GROUPED_BAR = "grouped_bar"
    TIME_SERIES = "time_series"


@dataclass
class ChartState:
    """Configuration state for a single chart.

    Holds the data source, the columns driving the chart and a few visual
    options. Which columns are used depends on chart_type.
    """
    chart_type: ChartType
    csv_file: str
    ycol: str
    group_col: Optional[str] = None      # x categories for box plot / grouped bar
    subgroup_col: Optional[str] = None   # bar color within each group (grouped bar only)
    date_col: Optional[str] = None       # x axis for time series
    title: str = ""
    width: int = 800
    height: int = 400
    box_fill: str = "lightgray"
    colors: list[str] = field(default_factory=lambda: list(DEFAULT_COLORS))
    line_shape: str = "spline"           # plotly line shape for time series
    show_legend: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize ChartState to a JSON-friendly dictionary."""
        return {
            "chart_type": self.chart_type.value,
            "csv_file": self.csv_file,
            "ycol": self.ycol,
            "group_col": self.group_col,
            "subgroup_col": self.subgroup_col,
            "date_col": self.date_col,
            "title": self.title,
            "width": self.width,
            "height": self.height,
            "box_fill": self.box_fill,
            "colors": list(self.colors),
            "line_shape": self.line_shape,
            "show_legend": self.show_legend,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChartState":
        """Deserialize ChartState from a dictionary.

        Missing optional fields fall back to defaults.

        Raises:
            ValueError: If chart_type is missing or unknown.
        """
        try:
            chart_type = ChartType(data.get("chart_type"))
        except ValueError as e:
            raise ValueError(f"Unknown chart_type {data.get('chart_type')!r}") from e
        colors = data.get("colors")
        if not isinstance(colors, list) or not colors:
            colors = list(DEFAULT_COLORS)
        return cls(
            chart_type=chart_type,
            csv_file=str(data.get("csv_file", "")),
            ycol=str(data.get("ycol", "")),
            group_col=data.get("group_col"),
            subgroup_col=data.get("subgroup_col"),
            date_col=data.get("date_col"),
            title=str(data.get("title", "")),
            width=int(data.get("width", 800)),
            height=int(data.get("height", 400)),
            box_fill=str(data.get("box_fill", "lightgray")),
            colors=[str(c) for c in colors],
            line_shape=str(data.get("line_shape", "spline")),
            show_legend=bool(data.get("show_legend", True)),
        )


def default_chart_states(csv_file: str = "socialMedia.csv") -> list[ChartState]:
    """The three charts of the engagement page, all fed by one raw CSV."""
    return [
        ChartState(
            chart_type=ChartType.BOX_PLOT,
            csv_file=csv_file,
            ycol="Likes",
            group_col="Platform",
            title="Likes by Platform",
            show_legend=False,
        ),
        ChartState(
            chart_type=ChartType.GROUPED_BAR,
            csv_file=csv_file,
            ycol="Likes",
            group_col="Platform",
            subgroup_col="PostType",
            title="Average Likes by Platform and Post Type",
        ),
        ChartState(
            chart_type=ChartType.TIME_SERIES,
            csv_file=csv_file,
            ycol="Likes",
            date_col="Date",
            title="Average Likes over Time",
            show_legend=False,
        ),
    ]
