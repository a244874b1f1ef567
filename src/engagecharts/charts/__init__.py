"""Engagement charts: data loading, statistics and Plotly figure generation."""

from engagecharts.charts.chart_renderer import ChartResult, render_chart, render_charts
from engagecharts.charts.chart_state import ChartState, ChartType, default_chart_states
from engagecharts.charts.figure_generator import FigureGenerator

__all__ = [
    "ChartResult",
    "ChartState",
    "ChartType",
    "FigureGenerator",
    "default_chart_states",
    "render_chart",
    "render_charts",
]
