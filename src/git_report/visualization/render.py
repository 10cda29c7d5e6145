"""Render ChartSpecs to embeddable HTML fragments with plotly."""

from typing import Union

import plotly.graph_objects as go

from ..exceptions import RenderError
from ..logging_config import get_logger
from .charts import ChartSpec

logger = get_logger(__name__)


def build_figure(spec: ChartSpec) -> go.Figure:
    fig = go.Figure()
    for series in spec.series:
        fig.add_trace(
            go.Bar(
                x=list(series.x),
                y=list(series.y),
                name=series.name,
                orientation=spec.orientation,
            )
        )

    layout = {"title": {"text": spec.title}, "width": spec.width}
    if spec.barmode:
        layout["barmode"] = spec.barmode
    if spec.margin:
        layout["margin"] = dict(spec.margin)
    fig.update_layout(**layout)
    return fig


def render_chart(spec: ChartSpec, include_plotlyjs: Union[bool, str] = False) -> str:
    """Return a ``<div>`` fragment for *spec*.

    Args:
        spec: Chart to render
        include_plotlyjs: Passed to plotly: "cdn" adds a script tag pointing
            at the CDN, True inlines plotly.js, False assumes the page
            already loads it

    Raises:
        RenderError: If plotly rejects the chart
    """
    try:
        html = build_figure(spec).to_html(full_html=False, include_plotlyjs=include_plotlyjs)
    except (ValueError, TypeError) as e:
        raise RenderError(f"chart '{spec.title}'", str(e))
    logger.debug("Rendered chart %r (%d series)", spec.title, len(spec.series))
    return html
