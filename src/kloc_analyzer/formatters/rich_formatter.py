"""Rich terminal formatter for kloc-analyzer."""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import AnalysisResult
from ..utils import format_duration, format_number
from .base import BaseFormatter

EMAIL_WIDTH = 37


def _net_cell(net: int) -> str:
    if net < 0:
        return f"[red]{format_number(net)}[/red]"
    return format_number(net)


class RichFormatter(BaseFormatter):
    """Bordered contributor table, totals row and summary block."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self.console.print()
        self.console.rule("[bold cyan]GIT KLOC STATISTICS REPORT[/bold cyan]")

        if not result.contributors:
            self.console.print("[yellow]No contributors found in the specified date range.[/yellow]")
            return

        self.console.print(self.build_table(result))
        self._print_summary(result)

    def format(self, result: AnalysisResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    def build_table(self, result: AnalysisResult) -> Table:
        table = Table(
            box=box.SQUARE,
            caption=f"{result.from_date} to {result.to_date}",
            show_lines=False,
        )
        table.add_column("Email", style="cyan", no_wrap=True)
        table.add_column("KLOC", justify="right", style="bold")
        table.add_column("Added", justify="right", style="green")
        table.add_column("Deleted", justify="right", style="red")
        table.add_column("Net", justify="right")
        table.add_column("Commits", justify="right")

        for rank, s in enumerate(result.contributors, start=1):
            table.add_row(
                f"#{rank:>2} {escape(s.email[:EMAIL_WIDTH])}",
                f"{s.kloc:.2f}",
                format_number(s.lines_added),
                format_number(s.lines_deleted),
                _net_cell(s.net_lines),
                format_number(s.commits),
            )

        totals = result.totals
        table.add_section()
        table.add_row(
            "[bold]TOTAL[/bold]",
            f"{totals.kloc:.2f}",
            format_number(totals.lines_added),
            format_number(totals.lines_deleted),
            _net_cell(totals.net_lines),
            format_number(totals.commits),
        )
        return table

    def _print_summary(self, result: AnalysisResult) -> None:
        summary = result.summary
        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"- Total contributors: {summary.total_contributors}")
        self.console.print(f"- Average KLOC per contributor: {summary.average_kloc:.2f}")
        self.console.print(f"- Average commits per contributor: {summary.average_commits:.1f}")
        if summary.top_contributor is not None:
            top = summary.top_contributor
            self.console.print(
                f"- Top contributor: {top.author} ({top.kloc:.2f} KLOC)", markup=False
            )
        self.console.print(
            f"\n[dim]Total execution time: {format_duration(summary.execution_time)}[/dim]"
        )
