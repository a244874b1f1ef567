"""
Logging for engagecharts.

Library modules (coercion, data_source, figure_generator, chart_renderer)
only call get_logger(__name__). The two entry points, the NiceGUI page
(chart_app.main) and the HTML export (python -m
engagecharts.charts.chart_renderer), call configure_logging() once to get
stderr output. The level comes from ENGAGECHARTS_LOG_LEVEL unless passed.

Coerce-to-zero substitutions and unparsable dates are logged as warnings,
failed charts as errors, so INFO shows one line per loaded CSV and a
render summary; DEBUG adds the box summaries and trace counts.

Nothing here touches the root logger or writes files.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "engagecharts"
LOG_LEVEL_ENV = "ENGAGECHARTS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[Union[str, int]] = None, *, force: bool = False) -> None:
    """Attach one stderr handler to the engagecharts logger.

    Args:
        level: Level name or number; defaults to ENGAGECHARTS_LOG_LEVEL, else INFO.
        force: Replace existing handlers instead of keeping an attached stderr one.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    elif any(isinstance(h, logging.StreamHandler) and h.stream is sys.stderr for h in logger.handlers):
        return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for name, or the package 'engagecharts' logger when None."""
    return logging.getLogger(name or LOGGER_NAME)
