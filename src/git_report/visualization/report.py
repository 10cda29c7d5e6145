"""Assemble the self-contained HTML report.

The page is a fixed jinja2 template (``templates/index.html``) filled with
the repository path, the two rendered chart fragments and the language
table. plotly.js is loaded once, by the first chart fragment.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from ..exceptions import RenderError, WriteError
from ..languages import LanguageStats
from ..logging_config import get_logger
from .charts import ChartSpec
from .render import render_chart

logger = get_logger(__name__)

TEMPLATE_NAME = "index.html"


@dataclass(frozen=True)
class ReportContext:
    path: str
    activity_plot: str
    commits_per_author_plot: str
    languages: Sequence[LanguageStats]
    commit_count: int
    author_count: int

    @property
    def totals(self) -> dict[str, int]:
        return {
            "files": sum(lang.files for lang in self.languages),
            "lines": sum(lang.lines for lang in self.languages),
            "code": sum(lang.code for lang in self.languages),
            "comments": sum(lang.comments for lang in self.languages),
            "blanks": sum(lang.blanks for lang in self.languages),
        }


def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("git_report.visualization", "templates"),
        autoescape=select_autoescape(["html"]),
    )


def render_report(context: ReportContext) -> str:
    """Fill the HTML template.

    Raises:
        RenderError: If the template can't be loaded or rendered
    """
    try:
        template = _environment().get_template(TEMPLATE_NAME)
        return template.render(report=context)
    except TemplateError as e:
        raise RenderError(f"template '{TEMPLATE_NAME}'", str(e))


def build_report(
    repo_path,
    activity: ChartSpec,
    ranking: ChartSpec,
    languages: Sequence[LanguageStats],
    commit_count: int,
    author_count: int,
    include_plotlyjs: str = "cdn",
) -> str:
    """Render both charts and the template; return the page as a string."""
    plotlyjs = True if include_plotlyjs == "inline" else include_plotlyjs
    context = ReportContext(
        path=str(repo_path),
        activity_plot=render_chart(activity, include_plotlyjs=plotlyjs),
        commits_per_author_plot=render_chart(ranking, include_plotlyjs=False),
        languages=languages,
        commit_count=commit_count,
        author_count=author_count,
    )
    return render_report(context)


def write_report(html: str, output_path) -> str:
    """Write *html* to *output_path*.

    Returns:
        Absolute path to the written file

    Raises:
        WriteError: If the file can't be written
    """
    out = Path(output_path).resolve()
    try:
        out.write_text(html, encoding="utf-8")
    except OSError as e:
        raise WriteError(out, str(e))
    logger.info("Report written to %s", out)
    return str(out)
