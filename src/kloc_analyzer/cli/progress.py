"""Progress display for commit aggregation."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class CommitProgress:
    """Rich progress bar fed by the Aggregator's ``(processed, total)`` callback."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __enter__(self) -> "CommitProgress":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    def start(self) -> None:
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self._progress.start()

    def update(self, processed: int, total: int) -> None:
        if self._progress is None:
            return
        if self._task_id is None:
            self._task_id = self._progress.add_task("Processing commits", total=total)
        self._progress.update(self._task_id, completed=processed, total=total)

    __call__ = update

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None
