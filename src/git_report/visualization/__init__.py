"""Visualization layer: chart specifications, plotly rendering, HTML report."""

from .charts import BarSeries, ChartSpec, build_activity_chart, build_author_ranking_chart
from .render import render_chart
from .report import ReportContext, build_report, render_report, write_report

__all__ = [
    "BarSeries",
    "ChartSpec",
    "ReportContext",
    "build_activity_chart",
    "build_author_ranking_chart",
    "build_report",
    "render_chart",
    "render_report",
    "write_report",
]
