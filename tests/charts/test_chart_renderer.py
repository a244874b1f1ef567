"""Unit tests for the render pass: per-chart isolation and HTML export."""

from engagecharts.charts.chart_renderer import ChartResult, export_html, render_chart, render_charts
from engagecharts.charts.chart_state import ChartState, ChartType, default_chart_states


def test_render_chart_success(engagement_csv):
    state = default_chart_states(csv_file=engagement_csv.name)[0]
    result = render_chart(state, engagement_csv.parent)
    assert result.ok
    assert result.error is None
    assert result.figure["data"][0]["type"] == "box"


def test_render_chart_missing_source_is_failed_result(tmp_path):
    state = ChartState(chart_type=ChartType.BOX_PLOT, csv_file="gone.csv", ycol="Likes", group_col="Platform")
    result = render_chart(state, tmp_path)
    assert not result.ok
    assert result.figure is None
    assert "gone.csv" in result.error


def test_failed_chart_does_not_affect_others(engagement_csv):
    states = default_chart_states(csv_file=engagement_csv.name)
    broken = ChartState(chart_type=ChartType.BOX_PLOT, csv_file="missing.csv", ycol="Likes", group_col="Platform")
    results = render_charts([states[0], broken, states[1], states[2]], engagement_csv.parent)
    assert [r.ok for r in results] == [True, False, True, True]
    assert [r.figure["data"][0]["type"] for r in results if r.ok] == ["box", "bar", "scatter"]


def test_export_html_writes_figures_and_errors(tmp_path, engagement_csv):
    ok = render_chart(default_chart_states(csv_file=engagement_csv.name)[0], engagement_csv.parent)
    failed = ChartResult(
        state=ChartState(chart_type=ChartType.TIME_SERIES, csv_file="t.csv", ycol="Likes", title="Trend <daily>"),
        error="CSV not found: t.csv",
    )
    out = export_html([ok, failed], tmp_path / "out" / "page.html")
    text = out.read_text(encoding="utf-8")
    assert text.startswith("<!DOCTYPE html>")
    assert "plotly" in text.lower()
    assert "Trend &lt;daily&gt;: CSV not found: t.csv" in text


def test_render_chart_uses_configured_columns(tmp_path):
    """A configured chart over a table without the engagement columns still renders."""
    (tmp_path / "shares.csv").write_text("Region,Shares\nNorth,5\nSouth,x\nNorth,7\n", encoding="utf-8")
    state = ChartState(chart_type=ChartType.BOX_PLOT, csv_file="shares.csv", ycol="Shares", group_col="Region")
    result = render_chart(state, tmp_path)
    assert result.ok, result.error
    box = result.figure["data"][0]
    assert list(box["x"]) == ["North", "South"]
    assert list(box["median"]) == [6.0, 0.0]


def test_render_chart_missing_configured_column_is_failed_result(tmp_path):
    (tmp_path / "shares.csv").write_text("Region,Shares\nNorth,5\n", encoding="utf-8")
    state = ChartState(chart_type=ChartType.BOX_PLOT, csv_file="shares.csv", ycol="Likes", group_col="Region")
    result = render_chart(state, tmp_path)
    assert not result.ok
    assert "Likes" in result.error


def test_invalid_chart_state_does_not_affect_others(engagement_csv):
    """A chart the data cannot satisfy fails alone instead of aborting the pass."""
    states = default_chart_states(csv_file=engagement_csv.name)
    no_subgroup = ChartState(
        chart_type=ChartType.GROUPED_BAR, csv_file=engagement_csv.name, ycol="Likes", group_col="Platform",
    )
    results = render_charts([states[0], no_subgroup, states[2]], engagement_csv.parent)
    assert [r.ok for r in results] == [True, False, True]
    assert results[1].figure is None
    assert "missing columns" in results[1].error
