"""Plotly figure generation for engagement charts.

This module provides the FigureGenerator class for creating Plotly figure
dictionaries from the raw engagement dataframe and a ChartState. Statistics
are computed by the algorithms package; this module only maps them to marks.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from engagecharts.charts.algorithms.box_summary import BoxSummary, frame_group_summaries
from engagecharts.charts.algorithms.engagement_rollup import daily_averages, platform_post_type_averages
from engagecharts.charts.chart_state import ChartState, ChartType
from engagecharts.charts.coercion import coerce_numeric_column
from engagecharts.utils.logging import get_logger

logger = get_logger(__name__)

WHISKER_COLOR = "black"
LINE_COLOR = "steelblue"


def _require_columns(df: pd.DataFrame, *cols: str | None) -> None:
    missing = [c for c in cols if not c or c not in df.columns]
    if missing:
        raise ValueError(f"df is missing columns required by the chart: {missing}")


class FigureGenerator:
    """Generates Plotly figure dictionaries from data and chart state.

    One method per chart type; make_figure() dispatches on state.chart_type.
    """

    def make_figure(self, df: pd.DataFrame, state: ChartState) -> dict:
        """Generate Plotly figure dictionary based on chart state.

        Args:
            df: Raw engagement dataframe (one row per post).
            state: ChartState to use for generating the figure.

        Returns:
            Plotly figure dictionary.

        Raises:
            ValueError: Required columns are missing or chart type is unknown.
        """
        logger.info(
            f"FigureGenerator.make_figure: chart_type={state.chart_type.value}, "
            f"rows={len(df)}, group_col={state.group_col}, ycol={state.ycol}"
        )
        if state.ycol in df.columns:
            df = df.assign(**{state.ycol: coerce_numeric_column(df, state.ycol)})

        if state.chart_type == ChartType.BOX_PLOT:
            fig = self._figure_box(df, state)
        elif state.chart_type == ChartType.GROUPED_BAR:
            fig = self._figure_grouped_bar(df, state)
        elif state.chart_type == ChartType.TIME_SERIES:
            fig = self._figure_time_series(df, state)
        else:
            raise ValueError(f"Unsupported chart type: {state.chart_type}")

        fig.update_layout(
            width=state.width,
            height=state.height,
            margin=dict(l=60, r=30, t=50 if state.title else 20, b=80),
            showlegend=state.show_legend,
        )
        if state.title:
            fig.update_layout(title_text=state.title)
        logger.debug(f"Figure generated: {len(fig.data)} traces")
        return fig.to_dict()

    def box_trace(self, summaries: dict[str, BoxSummary], state: ChartState) -> go.Box:
        """One Box trace drawn from precomputed summaries.

        Whisker spans min..max, the box spans q1..q3 and the median is a line,
        one box per group key in the mapping's order.
        """
        keys = list(summaries.keys())
        stats = list(summaries.values())
        return go.Box(
            x=keys,
            q1=[s.q1 for s in stats],
            median=[s.median for s in stats],
            q3=[s.q3 for s in stats],
            lowerfence=[s.min for s in stats],
            upperfence=[s.max for s in stats],
            name=state.ycol,
            fillcolor=state.box_fill,
            line=dict(color=WHISKER_COLOR, width=1),
            boxpoints=False,
            hoverinfo="x+y",
        )

    def _figure_box(self, df: pd.DataFrame, state: ChartState) -> go.Figure:
        """Box plot of ycol per group_col category."""
        _require_columns(df, state.group_col, state.ycol)
        tmp = pd.DataFrame({
            state.group_col: df[state.group_col].astype(str),
            state.ycol: df[state.ycol],
        })
        summaries = frame_group_summaries(tmp, state.group_col, state.ycol)
        logger.debug(f"box summaries: {summaries}")

        fig = go.Figure()
        fig.add_trace(self.box_trace(summaries, state))
        fig.update_layout(
            xaxis_title=state.group_col,
            yaxis_title=state.ycol,
            yaxis_rangemode="tozero",
            xaxis=dict(categoryorder="array", categoryarray=list(summaries.keys())),
        )
        return fig

    def _figure_grouped_bar(self, df: pd.DataFrame, state: ChartState) -> go.Figure:
        """Bars of mean ycol per group_col, one bar per subgroup_col value."""
        _require_columns(df, state.group_col, state.subgroup_col, state.ycol)
        out_col = f"Avg{state.ycol}"
        avg = platform_post_type_averages(
            df,
            platform_col=state.group_col,
            post_type_col=state.subgroup_col,
            value_col=state.ycol,
            out_col=out_col,
        )
        groups = list(dict.fromkeys(avg[state.group_col]))

        fig = go.Figure()
        for i, (subgroup, sub) in enumerate(avg.groupby(state.subgroup_col, sort=False)):
            fig.add_trace(go.Bar(
                x=sub[state.group_col].tolist(),
                y=sub[out_col].tolist(),
                name=str(subgroup),
                marker_color=state.colors[i % len(state.colors)],
            ))
        fig.update_layout(
            barmode="group",
            bargap=0.1,
            bargroupgap=0.05,
            xaxis_title=state.group_col,
            yaxis_title=f"Average {state.ycol}",
            yaxis_rangemode="tozero",
            xaxis=dict(categoryorder="array", categoryarray=groups),
            legend_title_text=state.subgroup_col,
        )
        return fig

    def _figure_time_series(self, df: pd.DataFrame, state: ChartState) -> go.Figure:
        """Smoothed line of mean ycol per day."""
        _require_columns(df, state.date_col, state.ycol)
        out_col = f"Avg{state.ycol}"
        daily = daily_averages(df, date_col=state.date_col, value_col=state.ycol, out_col=out_col)

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=daily[state.date_col].tolist(),
            y=daily[out_col].tolist(),
            mode="lines",
            name=out_col,
            line=dict(shape=state.line_shape, color=LINE_COLOR, width=2),
        ))
        fig.update_layout(
            xaxis_title=state.date_col,
            yaxis_title=f"Average Number of {state.ycol}",
            yaxis_rangemode="tozero",
            xaxis_tickangle=-45,
        )
        return fig
