"""Build chart specifications from aggregated commit data.

A ChartSpec is a plain description of bar series plus layout hints. It
holds no plotly objects, so the builders stay pure and can be compared
directly in tests; ``render.render_chart`` turns a spec into markup.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

from ..history.models import AuthorTotal

ACTIVITY_TITLE = "Commit activity per author"
RANKING_TITLE = "Commits per author"

# room for the legend inside the containing div
LEGEND_ALLOWANCE = 50
RANKING_MARGIN = 200


@dataclass(frozen=True)
class BarSeries:
    x: tuple[Union[str, int], ...]
    y: tuple[Union[str, int], ...]
    name: Optional[str] = None


@dataclass(frozen=True)
class ChartSpec:
    title: str
    width: int
    series: tuple[BarSeries, ...] = ()
    orientation: str = "v"  # "v" vertical bars, "h" horizontal bars
    barmode: Optional[str] = None  # "stack" to pile series on each other
    margin: tuple[tuple[str, int], ...] = ()  # plotly margin items, e.g. (("l", 200),)

    @property
    def is_empty(self) -> bool:
        return all(len(s.x) == 0 for s in self.series)


def build_activity_chart(
    monthly: Mapping[str, Mapping[str, int]], plot_width: int
) -> ChartSpec:
    """One stacked series per author with their commits per month.

    Authors are ordered by name so the legend is stable across runs. An
    author only has bars for months they committed in.
    """
    series = []
    for author in sorted(monthly):
        months = sorted(monthly[author])
        series.append(
            BarSeries(
                x=tuple(months),
                y=tuple(monthly[author][m] for m in months),
                name=author,
            )
        )

    return ChartSpec(
        title=ACTIVITY_TITLE,
        width=plot_width - LEGEND_ALLOWANCE,
        series=tuple(series),
        barmode="stack",
    )


def build_author_ranking_chart(ranked: Sequence[AuthorTotal], plot_width: int) -> ChartSpec:
    """Horizontal bars of commit counts, in the order given.

    ``ranked`` is ascending (from ``top_n_authors``), and plotly draws the
    first category at the bottom, so the top contributor ends up on top.
    """
    return ChartSpec(
        title=RANKING_TITLE,
        width=plot_width // 2,
        series=(
            BarSeries(
                x=tuple(a.count for a in ranked),
                y=tuple(a.author for a in ranked),
            ),
        ),
        orientation="h",
        margin=(("l", RANKING_MARGIN), ("r", RANKING_MARGIN)),
    )
