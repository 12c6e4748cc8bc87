"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..analysis import KlocAnalyzer
from ..exceptions import KlocAnalyzerError
from ..formatters import CsvFormatter, JsonFormatter, RichFormatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, default_report_path, err_console, resolve_config
from .progress import CommitProgress


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"[bold cyan]kloc-analyzer[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def analyze(
    repo: Path = typer.Option(
        ...,
        "--repo",
        "-r",
        help="Path to the git repository",
    ),
    from_date: Optional[str] = typer.Option(
        None,
        "--from",
        "-f",
        help="Start date (YYYY-MM-DD), defaults to repository start",
    ),
    to_date: Optional[str] = typer.Option(
        None,
        "--to",
        "-t",
        help="End date (YYYY-MM-DD), defaults to current date",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="CSV file to write (default: timestamped kloc-report-*.csv)",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Disable progress output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print JSON to stdout instead of the table",
    ),
    min_kloc: Optional[float] = typer.Option(
        None,
        "--min-kloc",
        help="Only report contributors with at least this KLOC",
        min=0.0,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Analyze KLOC (Kilo Lines of Code) statistics for git contributors.

    Commits are grouped by author email. Contributors are ranked by lines
    added / 1000. A CSV report is always written.

    [bold cyan]Examples:[/bold cyan]

      kloc-analyzer --repo .

      kloc-analyzer -r ../project --from 2024-01-01 --to 2024-06-30

      kloc-analyzer -r . -o team.csv --no-progress --json
    """
    logger = get_logger(__name__)

    try:
        settings = resolve_config(
            config=config,
            no_progress=no_progress,
            min_kloc=min_kloc,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(settings.verbosity, settings.log_file)

        if settings.show_progress and not json_output:
            err_console.print(f"Analyzing repository: [bold]{escape(str(repo))}[/bold]")

        if settings.show_progress:
            with CommitProgress(err_console) as progress:
                result = KlocAnalyzer(
                    repo, from_date, to_date, config=settings, progress=progress
                ).analyze()
        else:
            result = KlocAnalyzer(repo, from_date, to_date, config=settings).analyze()

        if json_output:
            JsonFormatter().render(result)
        else:
            RichFormatter(console).render(result)

        report_path = CsvFormatter().write(result, output or default_report_path(settings))
        if not json_output:
            console.print(f"\nResults saved to: [green]{report_path}[/green]")

    except KlocAnalyzerError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
