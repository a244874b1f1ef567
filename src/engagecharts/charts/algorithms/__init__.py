"""Algorithms used by chart figure generation.

box_summary is the pure-Python five-number summary per group behind the box
plot; engagement_rollup holds the pandas rollups behind the grouped bar and
time series charts.
"""
