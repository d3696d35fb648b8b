"""Integration tests running commands against a real git repository.

Skipped when git is not installed.
"""

import shutil
import subprocess
import zipfile
from pathlib import Path

import pytest

from gitcmd.core.errors import ProcessExecutionError
from gitcmd.core.git import Git

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q", "-b", "master")
    _git(repo, "config", "user.name", "John Doe")
    _git(repo, "config", "user.email", "john@example.com")
    _git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("hello\n", encoding="utf-8")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "Initial Commit")

    (repo / "src").mkdir()
    (repo / "src" / "app.py").write_text("print('hi')\n", encoding="utf-8")
    _git(repo, "add", "src/app.py")
    _git(repo, "commit", "-q", "-m", "Add app | with a pipe")
    return repo


def test_log_returns_newest_first(repo: Path) -> None:
    entries = Git(repo).log()

    assert [e.subject for e in entries] == ["Add app | with a pipe", "Initial Commit"]
    assert entries[0].author_name == "John Doe"
    assert entries[0].author_email == "john@example.com"
    assert len(entries[0].hash) == 40


def test_log_reverse_and_limit(repo: Path) -> None:
    entries = Git(repo).log(options={"reverse": True, "limit": 1})

    # git applies -n before --reverse
    assert [e.subject for e in entries] == ["Add app | with a pipe"]


def test_log_with_path(repo: Path) -> None:
    entries = Git(repo).log("HEAD", "README.md")

    assert [e.subject for e in entries] == ["Initial Commit"]


def test_archive_zip(repo: Path, tmp_path: Path) -> None:
    target = tmp_path / "repo.zip"

    Git(repo).archive(str(target), "master", options={"format": "zip", "prefix": "proj/"})

    with zipfile.ZipFile(target) as archive:
        assert "proj/README.md" in archive.namelist()
        assert "proj/src/app.py" in archive.namelist()


def test_status_reports_changes(repo: Path) -> None:
    (repo / "README.md").write_text("changed\n", encoding="utf-8")
    (repo / "new file.txt").write_text("x\n", encoding="utf-8")

    result = Git(repo).status()

    assert result.branch == "master"
    changes = {c.path: (c.index, c.work_tree) for c in result.changes}
    assert changes == {"README.md": (" ", "M"), "new file.txt": ("?", "?")}


def test_status_outside_repository_fails(tmp_path: Path) -> None:
    outside = tmp_path / "not-a-repo"
    outside.mkdir()

    with pytest.raises(ProcessExecutionError) as exc_info:
        Git(outside).status()

    assert exc_info.value.command_line.endswith("status --porcelain -s -b --null")
    assert exc_info.value.exit_code != 0


def test_push_without_remote_fails(repo: Path) -> None:
    with pytest.raises(ProcessExecutionError) as exc_info:
        Git(repo).push("nonexistent-remote", "master")

    assert exc_info.value.argv[1:] == ("push", "nonexistent-remote", "master")
