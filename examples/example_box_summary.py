"""Print the box plot summaries for the sample engagement CSV, then show the box figure."""

import plotly.graph_objects as go

from engagecharts.charts.algorithms.box_summary import frame_group_summaries, summaries_to_frame
from engagecharts.charts.chart_state import default_chart_states
from engagecharts.charts.data_source import ENGAGEMENT_CSV, get_data_dir, load_engagement_csv
from engagecharts.charts.figure_generator import FigureGenerator
from engagecharts.utils.logging import configure_logging

configure_logging(level="DEBUG")

df = load_engagement_csv(get_data_dir() / ENGAGEMENT_CSV)
summaries = frame_group_summaries(df, "Platform", "Likes")
print(summaries_to_frame(summaries).to_string(index=False))

box_state = default_chart_states()[0]
fig = go.Figure(FigureGenerator().make_figure(df, box_state))
fig.show()
