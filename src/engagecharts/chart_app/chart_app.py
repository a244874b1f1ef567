"""Engagement chart app: standalone NiceGUI page with every configured chart.

Runs in native or web mode via env vars. Uses @ui.page("/") pattern.

Run:
    python -m engagecharts.chart_app.chart_app

Env vars:
    ENGAGECHARTS_GUI_NATIVE: 1/0 (default 0)
    ENGAGECHARTS_GUI_RELOAD: 1/0 (default 0)
    HOST: bind host (default 127.0.0.1 native, 0.0.0.0 web)
    PORT: bind port (default find_open_port native, 8080 web)
"""

from __future__ import annotations

import os
from multiprocessing import freeze_support

from nicegui import ui

from engagecharts.charts.chart_config import ChartConfig
from engagecharts.charts.chart_renderer import ChartResult, render_charts
from engagecharts.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

PAGE_TITLE = "Engagement Charts"


def _env_bool(name: str, default: bool) -> bool:
    """Parse env var as bool; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Parse env var as int; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def build_chart_card(result: ChartResult) -> None:
    """One card per chart: the figure, or an error label when its source failed."""
    title = result.state.title or result.state.chart_type.value
    with ui.card().classes("w-full"):
        ui.label(title).classes("text-lg")
        if result.ok:
            ui.plotly(result.figure).classes("w-full")
        else:
            ui.label(f"Failed to load: {result.error}").classes("text-negative")


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@ui.page("/")
def home() -> None:
    """Home page: all charts from the user config (or the defaults)."""
    ui.page_title(PAGE_TITLE)

    cfg = ChartConfig.load()
    results = render_charts(cfg.get_chart_states(), cfg.get_data_dir())
    with ui.column().classes("w-full gap-4 p-4"):
        for result in results:
            build_chart_card(result)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(*, reload: bool | None = None, native_bool: bool | None = None) -> None:
    """Start the chart application.

    Env vars (used when arg is None):
      - ENGAGECHARTS_GUI_NATIVE: 1/0
      - ENGAGECHARTS_GUI_RELOAD: 1/0
      - HOST: bind host
      - PORT: bind port
    """
    configure_logging()
    native_bool = _env_bool("ENGAGECHARTS_GUI_NATIVE", False) if native_bool is None else native_bool
    reload = _env_bool("ENGAGECHARTS_GUI_RELOAD", False) if reload is None else reload

    if native_bool:
        from nicegui import native as native_module
        port = _env_int("PORT", native_module.find_open_port())
    else:
        port = _env_int("PORT", 8080)

    host = os.getenv("HOST", "127.0.0.1" if native_bool else "0.0.0.0")

    logger.info("Starting %s: host=%s port=%s reload=%s native=%s", PAGE_TITLE, host, port, reload, native_bool)

    run_kwargs: dict = {
        "host": host,
        "port": port,
        "reload": reload,
        "native": native_bool,
        "title": PAGE_TITLE,
    }
    if native_bool:
        run_kwargs["window_size"] = (1000, 1400)
    ui.run(**run_kwargs)


if __name__ in {"__main__", "__mp_main__"}:
    freeze_support()
    main()
