"""CSV formatter for kloc-analyzer."""

import csv
import io
from pathlib import Path
from typing import Union

from ..exceptions import ReportWriteError
from ..logging_config import get_logger
from ..models import AnalysisResult
from .base import BaseFormatter

logger = get_logger(__name__)

CSV_HEADER = ["Author", "Email", "KLOC", "Lines Added", "Lines Deleted", "Net Lines", "Commits"]


class CsvFormatter(BaseFormatter):
    """Render ranked contributors as CSV with standard quoting."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result), end="")

    def format(self, result: AnalysisResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for s in result.contributors:
            writer.writerow([
                s.author, s.email, f"{s.kloc:.2f}",
                s.lines_added, s.lines_deleted, s.net_lines, s.commits,
            ])
        return output.getvalue()

    def write(self, result: AnalysisResult, path: Union[str, Path]) -> Path:
        """Write the CSV report to ``path``, creating parent directories.

        Raises:
            ReportWriteError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(self.format(result))
        except OSError as e:
            raise ReportWriteError(path, str(e))
        logger.info("Results saved to %s", path)
        return path
