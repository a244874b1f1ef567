"""
engagecharts: Descriptive charts for social-media engagement metrics.

This package provides:
- Five-number box-plot summaries per category group
- CSV loading with the legacy coerce-to-zero numeric policy
- Plotly figures for box plots, grouped bars and time series
- A NiceGUI page that renders every configured chart
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from engagecharts.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from engagecharts.utils.logging import LOGGER_NAME, configure_logging, get_logger

from engagecharts.charts.algorithms.box_summary import BoxSummary, compute_group_summaries

# Ensure engagecharts logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger(LOGGER_NAME)
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "BoxSummary",
    "compute_group_summaries",
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
