"""CLI entry point."""

import typer

app = typer.Typer(
    name="kloc-analyzer",
    help="kloc-analyzer - KLOC statistics for git contributors",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import analyze as _analyze  # noqa: F401, E402


def main() -> None:
    app()
