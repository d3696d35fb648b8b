"""Records parsed from git output."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogEntry:
    """One commit as reported by ``git log``."""

    hash: str
    author_name: str
    author_email: str
    date: str
    subject: str


@dataclass(frozen=True)
class StatusEntry:
    """One changed path as reported by ``git status --porcelain``.

    ``index`` and ``work_tree`` are the single-character X and Y status codes.
    ``original_path`` is set only for renames and copies.
    """

    path: str
    index: str
    work_tree: str
    original_path: str | None = None


@dataclass(frozen=True)
class StatusResult:
    """Branch line and changed paths of the working tree."""

    branch: str
    changes: tuple[StatusEntry, ...]
