"""Shared test fixtures for kloc-analyzer."""

import pytest

from kloc_analyzer.exceptions import RetrievalError
from kloc_analyzer.history.source import HistorySource

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40


class FakeHistorySource(HistorySource):
    """HistorySource returning scripted git output and recording every call."""

    def __init__(
        self,
        repo_path,
        log_text="",
        numstat_text="",
        show_texts=None,
        fail_log=False,
        fail_numstat=False,
        fail_show=(),
    ):
        super().__init__(repo_path)
        self.log_text = log_text
        self.numstat_text = numstat_text
        self.show_texts = show_texts or {}
        self.fail_log = fail_log
        self.fail_numstat = fail_numstat
        self.fail_show = set(fail_show)
        self.calls = []

    def log_commits(self, from_date, to_date):
        self.calls.append(("log_commits", from_date, to_date))
        if self.fail_log:
            raise RetrievalError("git log", "fatal: bad revision")
        return self.log_text

    def log_numstat(self, from_date, to_date):
        self.calls.append(("log_numstat", from_date, to_date))
        if self.fail_numstat:
            raise RetrievalError("git log --numstat", "fatal: out of memory")
        return self.numstat_text

    def show_numstat(self, commit_id):
        self.calls.append(("show_numstat", commit_id))
        if commit_id in self.fail_show:
            raise RetrievalError(f"git show {commit_id}", "fatal: bad object")
        return self.show_texts.get(commit_id, "")

    def call_names(self):
        return [c[0] for c in self.calls]


def log_line(commit_hash, author, email, date="2024-03-01", subject="Change"):
    return "|".join([commit_hash, author, email, date, subject])


def numstat_block(commit_hash, *files):
    """``files`` are (added, deleted) pairs; tokens may be '-'."""
    lines = [commit_hash]
    lines.extend(f"{a}\t{d}\tfile{i}.py" for i, (a, d) in enumerate(files))
    return "\n".join(lines)


@pytest.fixture
def repo_dir(tmp_path):
    """A directory that passes the repository check."""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def make_source(repo_dir):
    """Factory for FakeHistorySource bound to ``repo_dir``."""

    def _make(**kwargs):
        return FakeHistorySource(repo_dir, **kwargs)

    return _make


@pytest.fixture
def scenario_source(make_source):
    """john@x twice (+100/-10, +50/-5), jane@y once (+200/-20)."""
    log_text = "\n".join([
        log_line(HASH_A, "John", "john@x"),
        log_line(HASH_B, "John", "john@x"),
        log_line(HASH_C, "Jane", "jane@y"),
    ])
    numstat_text = "\n\n".join([
        numstat_block(HASH_A, (60, 4), (40, 6)),
        numstat_block(HASH_B, (50, 5)),
        numstat_block(HASH_C, (200, 20)),
    ])
    show_texts = {
        HASH_A: "60\t4\ta.py\n40\t6\tb.py\n",
        HASH_B: "50\t5\ta.py\n",
        HASH_C: "200\t20\tc.py\n",
    }
    return make_source(log_text=log_text, numstat_text=numstat_text, show_texts=show_texts)


@pytest.fixture(name="log_line")
def log_line_fixture():
    return log_line


@pytest.fixture(name="numstat_block")
def numstat_block_fixture():
    return numstat_block
