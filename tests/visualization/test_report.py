"""Tests for chart rendering and report assembly."""

import pytest

from git_report.exceptions import WriteError
from git_report.history.models import AuthorTotal
from git_report.languages import LanguageStats
from git_report.visualization.charts import build_activity_chart, build_author_ranking_chart
from git_report.visualization.render import build_figure, render_chart
from git_report.visualization.report import (
    ReportContext,
    build_report,
    render_report,
    write_report,
)


@pytest.fixture
def activity():
    return build_activity_chart({"Alice": {"2024-01": 1, "2024-02": 2}, "Bob": {"2024-01": 1}}, 1200)


@pytest.fixture
def ranking():
    return build_author_ranking_chart([AuthorTotal("Bob", 1), AuthorTotal("Alice", 3)], 1200)


@pytest.fixture
def languages():
    return [
        LanguageStats(name="Python", files=2, code=10, comments=2, blanks=3),
        LanguageStats(name="Rust", files=1, code=4, comments=1, blanks=0),
    ]


class TestRenderChart:
    def test_figure_layout(self, activity):
        fig = build_figure(activity)
        assert len(fig.data) == 2
        assert fig.layout.barmode == "stack"
        assert fig.layout.width == 1150
        assert fig.data[0].name == "Alice"

    def test_horizontal_figure(self, ranking):
        fig = build_figure(ranking)
        assert fig.data[0].orientation == "h"
        assert list(fig.data[0].y) == ["Bob", "Alice"]
        assert fig.layout.margin.l == 200

    def test_fragment_without_plotlyjs(self, ranking):
        html = render_chart(ranking, include_plotlyjs=False)
        assert "<div" in html
        assert "<html" not in html
        assert "cdn.plot.ly" not in html
        assert "Commits per author" in html

    def test_fragment_with_cdn(self, activity):
        html = render_chart(activity, include_plotlyjs="cdn")
        assert "cdn.plot.ly" in html

    def test_empty_chart_renders(self):
        html = render_chart(build_activity_chart({}, 1200))
        assert "<div" in html


class TestBuildReport:
    def test_contains_everything(self, activity, ranking, languages):
        html = build_report("/tmp/repo", activity, ranking, languages, commit_count=4, author_count=2)
        assert html.startswith("<!DOCTYPE html>")
        assert "/tmp/repo" in html
        assert "Commit activity per author" in html
        assert "Commits per author" in html
        assert "<td>Python</td>" in html
        assert "<td>Rust</td>" in html
        assert html.count("cdn.plot.ly") == 1

    def test_totals_row(self, languages):
        context = ReportContext(
            path="/r",
            activity_plot="",
            commits_per_author_plot="",
            languages=languages,
            commit_count=0,
            author_count=0,
        )
        assert context.totals == {"files": 3, "lines": 20, "code": 14, "comments": 3, "blanks": 3}
        html = render_report(context)
        assert "<td>Total</td><td>3</td><td>20</td>" in html

    def test_no_languages(self):
        context = ReportContext("/r", "", "", [], 0, 0)
        assert "No recognised source files." in render_report(context)

    def test_path_is_escaped(self):
        context = ReportContext("/tmp/<repo>", "", "", [], 0, 0)
        html = render_report(context)
        assert "/tmp/&lt;repo&gt;" in html
        assert "/tmp/<repo>" not in html

    def test_inline_plotlyjs(self, activity, ranking):
        html = build_report("/r", activity, ranking, [], 4, 2, include_plotlyjs="inline")
        # the whole plotly.js bundle is embedded
        assert len(html) > 1_000_000


class TestWriteReport:
    def test_writes_file(self, tmp_path):
        out = tmp_path / "report.html"
        result = write_report("<html></html>", out)
        assert result == str(out.resolve())
        assert out.read_text(encoding="utf-8") == "<html></html>"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(WriteError) as exc_info:
            write_report("x", tmp_path / "missing" / "report.html")
        assert "Cannot write report" in str(exc_info.value)
