"""Tests for PushCommand."""

from pathlib import Path

from gitcmd.commands.push import PushCommand
from tests.fakes.process_runner import FakeProcessRunner

REPO = Path("/repo")


def test_bare_push() -> None:
    assert PushCommand(FakeProcessRunner(), REPO).build_arguments() == ("push",)


def test_flags_in_schema_order() -> None:
    command = PushCommand(FakeProcessRunner(), REPO)

    argv = command.build_arguments(
        "origin", "main", {"set-upstream": True, "force": True, "tags": True}
    )

    assert argv == ("push", "--tags", "--force", "--set-upstream", "origin", "main")


def test_refspec_ignored_without_repository() -> None:
    command = PushCommand(FakeProcessRunner(), REPO)

    assert command.build_arguments(None, "main") == ("push",)


def test_repository_without_refspec() -> None:
    command = PushCommand(FakeProcessRunner(), REPO)

    assert command.build_arguments("origin", options={"all": True}) == ("push", "--all", "origin")


def test_call_runs_git() -> None:
    runner = FakeProcessRunner()

    PushCommand(runner, REPO)("origin", "main")

    assert runner.calls == [(("git", "push", "origin", "main"), REPO)]
