"""Render pass: one load + one compute + one figure per chart.

Each chart is isolated. A DataSourceError while loading its CSV, or a
ValueError while building its figure, marks only that chart as failed; the
remaining charts still render.

Run:
    python -m engagecharts.charts.chart_renderer [out.html]
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import plotly.io as pio

from engagecharts.charts.chart_state import ChartState, default_chart_states
from engagecharts.charts.data_source import DataSourceError, get_data_dir, load_csv
from engagecharts.charts.figure_generator import FigureGenerator
from engagecharts.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class ChartResult:
    """Outcome of rendering one chart: a figure dict or an error message."""
    state: ChartState
    figure: Optional[dict] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.figure is not None


def render_chart(
    state: ChartState,
    data_dir: Optional[Path] = None,
    *,
    generator: Optional[FigureGenerator] = None,
) -> ChartResult:
    """Load the chart's CSV and build its figure.

    The CSV must hold the columns the state names (group_col, subgroup_col,
    date_col, ycol); ycol is coerced with the zero policy. A load failure
    (DataSourceError) or a chart the data cannot satisfy (ValueError from
    the figure generator) is returned as a failed ChartResult.
    """
    data_dir = data_dir or get_data_dir()
    generator = generator or FigureGenerator()
    csv_path = Path(data_dir) / state.csv_file
    label = state.title or state.chart_type.value
    required = [c for c in (state.group_col, state.subgroup_col, state.date_col, state.ycol) if c]
    try:
        df = load_csv(csv_path, required_columns=required, numeric_columns=[state.ycol] if state.ycol else [])
    except DataSourceError as e:
        logger.error(f"chart {label!r} not rendered: {e}")
        return ChartResult(state=state, error=str(e))
    try:
        figure = generator.make_figure(df, state)
    except ValueError as e:
        logger.exception(f"chart {label!r} not rendered: {e}")
        return ChartResult(state=state, error=str(e))
    return ChartResult(state=state, figure=figure)


def render_charts(states: Iterable[ChartState], data_dir: Optional[Path] = None) -> list[ChartResult]:
    """Render every chart independently, in order."""
    generator = FigureGenerator()
    results = [render_chart(state, data_dir, generator=generator) for state in states]
    n_failed = sum(not r.ok for r in results)
    logger.info(f"rendered {len(results) - n_failed}/{len(results)} chart(s)")
    return results


def results_to_html(results: Iterable[ChartResult], *, page_title: str = "Engagement Charts") -> str:
    """One standalone HTML page; failed charts appear as an error paragraph."""
    parts = []
    include_js: bool | str = "cdn"
    for result in results:
        if result.ok:
            parts.append(pio.to_html(result.figure, full_html=False, include_plotlyjs=include_js))
            include_js = False
        else:
            label = html.escape(result.state.title or result.state.chart_type.value)
            parts.append(f'<p class="chart-error">{label}: {html.escape(result.error or "")}</p>')
    body = "\n".join(parts)
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{html.escape(page_title)}</title>\n</head>\n<body>\n{body}\n</body>\n</html>\n"
    )


def export_html(results: Iterable[ChartResult], out_path: str | Path) -> Path:
    """Write results_to_html() to out_path and return the path."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(results_to_html(results), encoding="utf-8")
    logger.info(f"wrote {out_path}")
    return out_path


if __name__ == "__main__":
    import sys

    configure_logging()
    _out = sys.argv[1] if len(sys.argv) > 1 else "engagement_charts.html"
    _results = render_charts(default_chart_states())
    export_html(_results, _out)
    sys.exit(0 if all(r.ok for r in _results) else 1)
