"""Command-line interface for git-report."""

import webbrowser
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .api import run_report
from .config import load_config
from .exceptions import GitReportError
from .logging_config import setup_logging

app = typer.Typer(
    name="git-report",
    help="Generate an HTML report of a git repository's commit activity and languages",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"git-report {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Path to a git repository",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML file path [default: git-report.html]",
        dir_okay=False,
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        help="Number of authors in the commits-per-author chart [default: 10]",
        min=0,
    ),
    open_browser: Optional[bool] = typer.Option(
        None,
        "--open/--no-open",
        help="Open the report in a browser when done",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Generate a static HTML report for a local git repository.

    The report includes:
    - Stacked monthly commit activity per author
    - The top authors by commit count
    - Lines of code per language

    [bold cyan]Examples:[/bold cyan]

      git-report .

      git-report ~/src/project --output project.html --top 5 --no-open
    """
    # flags only until the config files and environment have been read
    verbosity = "quiet" if quiet else "verbose" if verbose else "normal"
    logger = setup_logging(verbosity)

    try:
        settings = load_config(
            config_file=config,
            output_path=str(output) if output is not None else None,
            top_n=top,
            open_browser=open_browser,
            log_file=str(log_file) if log_file is not None else None,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(settings.verbosity, settings.log_file)
        report_path = run_report(path, settings)
    except GitReportError as e:
        logger.debug("Report generation failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    console.print(f"Report saved to: [bold green]{report_path}[/bold green]")

    if settings.open_browser and webbrowser.open(Path(report_path).as_uri()):
        console.print("Done!")


if __name__ == "__main__":
    app()
