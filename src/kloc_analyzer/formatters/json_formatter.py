"""JSON formatter for kloc-analyzer."""

import json
from dataclasses import asdict

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the full result as JSON on stdout."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        summary = asdict(result.summary)
        top = result.summary.top_contributor
        summary["top_contributor"] = top.email if top else None
        data = {
            "repository": result.repo_path,
            "from": result.from_date,
            "to": result.to_date,
            "commits_analyzed": result.commits_analyzed,
            "contributors": [asdict(s) for s in result.contributors],
            "totals": asdict(result.totals),
            "summary": summary,
        }
        return json.dumps(data, indent=2)
