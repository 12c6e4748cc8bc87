"""Data models for commit history and per-commit change counts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    hash: str
    author: str  # display name as recorded on this commit
    email: str  # contributor identity key
    date: str  # YYYY-MM-DD
    subject: str = ""


@dataclass(frozen=True)
class ChangeCount:
    """Lines added and deleted by one commit, summed over its files."""

    added: int = 0
    deleted: int = 0

    def __add__(self, other: "ChangeCount") -> "ChangeCount":
        return ChangeCount(self.added + other.added, self.deleted + other.deleted)


ZERO_CHANGE = ChangeCount(0, 0)
