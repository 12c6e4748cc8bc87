"""Tests for the kloc-analyzer command line."""

import csv
import datetime as dt
import io
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from kloc_analyzer import __version__
from kloc_analyzer.analysis import engine
from kloc_analyzer.cli import app
from kloc_analyzer.cli._common import default_report_path
from kloc_analyzer.cli.progress import CommitProgress
from kloc_analyzer.config import AnalysisConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_git(monkeypatch, scenario_source):
    """Route the analyzer's git access to the scripted scenario."""
    monkeypatch.setattr(engine, "GitHistorySource", lambda repo_path, **kwargs: scenario_source)
    return scenario_source


def _run(*args):
    return runner.invoke(app, list(args))


class TestCliBasics:
    def test_help(self):
        result = _run("--help")
        assert result.exit_code == 0
        assert "--repo" in result.output
        assert "--no-progress" in result.output

    def test_version(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_repo_is_required(self):
        assert _run().exit_code != 0


class TestCliReport:
    def test_table_and_csv(self, fake_git, repo_dir, tmp_path):
        out = tmp_path / "team.csv"
        result = _run("--repo", str(repo_dir), "--from", "2024-01-01", "--to", "2024-12-31",
                      "--output", str(out), "--no-progress")

        assert result.exit_code == 0, result.output
        assert "# 1 jane@y" in result.output
        assert "Top contributor: Jane (0.20 KLOC)" in result.output
        assert "Results saved to" in result.output

        rows = list(csv.reader(out.open(encoding="utf-8")))
        assert rows[0][0] == "Author"
        assert [r[1] for r in rows[1:]] == ["jane@y", "john@x"]

    def test_default_csv_name(self, fake_git, repo_dir, tmp_path):
        result = _run("--repo", str(repo_dir), "--no-progress")
        assert result.exit_code == 0, result.output
        reports = list(tmp_path.glob("kloc-report-*.csv"))
        assert len(reports) == 1

    def test_with_progress(self, fake_git, repo_dir, tmp_path):
        result = _run("--repo", str(repo_dir), "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output

    def test_json(self, fake_git, repo_dir, tmp_path):
        result = _run("--repo", str(repo_dir), "--json", "--no-progress", "--quiet",
                      "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [c["email"] for c in data["contributors"]] == ["jane@y", "john@x"]
        assert (tmp_path / "r.csv").exists()

    def test_min_kloc(self, fake_git, repo_dir, tmp_path):
        out = tmp_path / "r.csv"
        result = _run("--repo", str(repo_dir), "--min-kloc", "0.2", "--no-progress", "-o", str(out))
        assert result.exit_code == 0, result.output
        assert "john@x" not in out.read_text()


class TestCliVerbosity:
    def test_env_verbosity_sets_log_level(self, fake_git, repo_dir, tmp_path, monkeypatch):
        monkeypatch.setenv("KLOC_VERBOSITY", "verbose")
        result = _run("--repo", str(repo_dir), "--no-progress", "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output
        assert logging.getLogger("kloc_analyzer").level == logging.DEBUG

    def test_project_file_verbosity(self, fake_git, repo_dir, tmp_path):
        (tmp_path / "kloc-analyzer.toml").write_text('verbosity = "quiet"\n')
        result = _run("--repo", str(repo_dir), "--no-progress", "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output
        assert logging.getLogger("kloc_analyzer").level == logging.ERROR

    def test_flag_beats_env(self, fake_git, repo_dir, tmp_path, monkeypatch):
        monkeypatch.setenv("KLOC_VERBOSITY", "verbose")
        result = _run("--repo", str(repo_dir), "--no-progress", "--quiet",
                      "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output
        assert logging.getLogger("kloc_analyzer").level == logging.ERROR

    def test_log_file_from_env(self, fake_git, repo_dir, tmp_path, monkeypatch):
        log_path = tmp_path / "kloc.log"
        monkeypatch.setenv("KLOC_VERBOSITY", "verbose")
        monkeypatch.setenv("KLOC_LOG_FILE", str(log_path))
        result = _run("--repo", str(repo_dir), "--no-progress", "-o", str(tmp_path / "r.csv"))
        assert result.exit_code == 0, result.output
        assert "Found 3 commits" in log_path.read_text(encoding="utf-8")


class TestCliErrors:
    def test_inverted_range(self, fake_git, repo_dir, tmp_path):
        result = _run("--repo", str(repo_dir), "--from", "2024-12-31", "--to", "2024-01-01",
                      "--no-progress")
        assert result.exit_code == 1
        assert "must be before" in result.output
        assert fake_git.calls == []
        assert not list(tmp_path.glob("*.csv"))

    def test_bad_date(self, fake_git, repo_dir):
        result = _run("--repo", str(repo_dir), "--from", "yesterday", "--no-progress")
        assert result.exit_code == 1
        assert "YYYY-MM-DD" in result.output

    def test_missing_repo(self, tmp_path):
        result = _run("--repo", str(tmp_path / "nope"), "--no-progress")
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_not_a_repo(self, tmp_path):
        result = _run("--repo", str(tmp_path), "--no-progress")
        assert result.exit_code == 1
        assert "Not a git repository" in result.output

    def test_listing_failure(self, fake_git, repo_dir):
        fake_git.fail_log = True
        result = _run("--repo", str(repo_dir), "--no-progress")
        assert result.exit_code == 1
        assert "Git command failed" in result.output


class TestCommitProgress:
    def test_update_before_start_is_ignored(self):
        CommitProgress(Console(file=io.StringIO())).update(1, 10)

    def test_tracks_processed_commits(self):
        with CommitProgress(Console(file=io.StringIO())) as progress:
            progress(0, 4)
            progress(4, 4)
            task = progress._progress.tasks[0]
            assert (task.completed, task.total) == (4, 4)
        assert progress._progress is None


class TestDefaultReportPath:
    def test_timestamped_name(self):
        config = AnalysisConfig(output_dir="reports", output_prefix="team")
        path = default_report_path(config, now=dt.datetime(2024, 5, 6, 7, 8, 9))
        assert path == Path("reports") / "team-20240506-070809.csv"
