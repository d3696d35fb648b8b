"""CLI tests over a fake process runner."""

import json
from pathlib import Path

from click.testing import CliRunner

from gitcmd.cli.cli import cli
from gitcmd.core.context import GitCmdContext
from gitcmd.core.global_config import GlobalConfig, load_global_config
from tests.fakes.process_runner import FakeProcessRunner

LOG_OUTPUT = "1a821f3f8483||John Doe||john@example.com||Fri Jan 17 2014||Initial Commit\n"


def _context(
    runner: FakeProcessRunner, cwd: Path, config_path: Path | None = None
) -> GitCmdContext:
    return GitCmdContext(
        runner=runner, cwd=cwd, global_config=GlobalConfig(), config_path=config_path
    )


def test_log_json_output(tmp_path: Path) -> None:
    fake = FakeProcessRunner(stdout=LOG_OUTPUT)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["log", "--json", "-n", "5", "--no-merges"], obj=_context(fake, tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout.strip()) == {
        "hash": "1a821f3f8483",
        "author_name": "John Doe",
        "author_email": "john@example.com",
        "date": "Fri Jan 17 2014",
        "subject": "Initial Commit",
    }
    assert fake.last_argv == (
        "git",
        "log",
        "-n",
        "5",
        "--skip=0",
        "--format=%H||%aN||%aE||%aD||%s",
        "--no-merges",
    )


def test_log_table_output(tmp_path: Path) -> None:
    fake = FakeProcessRunner(stdout=LOG_OUTPUT)

    result = CliRunner().invoke(cli, ["log"], obj=_context(fake, tmp_path))

    assert result.exit_code == 0, result.output
    assert "Initial Commit" in result.output
    assert "1a821f3" in result.output


def test_log_paths_after_separator(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(
        cli, ["log", "--json", "HEAD", "--", "src"], obj=_context(fake, tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert fake.last_argv[-3:] == ("HEAD", "--", "src")


def test_log_paths_without_revision(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(cli, ["log", "--json", "--", "src"], obj=_context(fake, tmp_path))

    assert result.exit_code == 0, result.output
    assert fake.last_argv == (
        "git",
        "log",
        "-n",
        "1000",
        "--skip=0",
        "--format=%H||%aN||%aE||%aD||%s",
        "--",
        "src",
    )


def test_log_options_after_revision_before_separator(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(
        cli, ["log", "main", "--reverse", "--", "a.py", "b.py"], obj=_context(fake, tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert fake.last_argv[-5:] == ("--reverse", "main", "--", "a.py", "b.py")


def test_repo_option_overrides_cwd(tmp_path: Path) -> None:
    fake = FakeProcessRunner()
    repo = tmp_path / "repo"
    repo.mkdir()

    result = CliRunner().invoke(cli, ["-C", str(repo), "push"], obj=_context(fake, tmp_path))

    assert result.exit_code == 0, result.output
    assert fake.calls == [(("git", "push"), repo)]


def test_git_failure_prints_error_and_exits_1(tmp_path: Path) -> None:
    fake = FakeProcessRunner(exit_code=128, stderr="fatal: not a git repository")

    result = CliRunner().invoke(cli, ["status"], obj=_context(fake, tmp_path))

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "git status --porcelain -s -b --null" in result.output
    assert "fatal: not a git repository" in result.output


def test_archive_arguments(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(
        cli,
        ["archive", "--format", "zip", "--prefix", "proj/", "repo.zip", "master", "src"],
        obj=_context(fake, tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert fake.last_argv == (
        "git",
        "archive",
        "--format=zip",
        "--prefix=proj/",
        "-o",
        "repo.zip",
        "master",
        "src",
    )


def test_archive_rejects_unknown_format_before_git_runs(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(
        cli, ["archive", "--format", "rar", "repo.rar"], obj=_context(fake, tmp_path)
    )

    assert result.exit_code == 2
    assert fake.calls == []


def test_push_flags(tmp_path: Path) -> None:
    fake = FakeProcessRunner()

    result = CliRunner().invoke(
        cli, ["push", "-u", "--force", "origin", "feature"], obj=_context(fake, tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert fake.last_argv == ("git", "push", "--force", "--set-upstream", "origin", "feature")


def test_status_output(tmp_path: Path) -> None:
    fake = FakeProcessRunner(stdout="## main\0 M a.txt\0R  b.txt\0c.txt\0")

    result = CliRunner().invoke(cli, ["status"], obj=_context(fake, tmp_path))

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["## main", " M a.txt", "R  b.txt <- c.txt"]


def test_config_show(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli, ["config", "show"], obj=_context(FakeProcessRunner(), tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert "git_binary=git" in result.stdout
    assert "debug=false" in result.stdout


def test_config_set_writes_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"

    result = CliRunner().invoke(
        cli,
        ["config", "set", "debug", "true"],
        obj=_context(FakeProcessRunner(), tmp_path, config_path),
    )

    assert result.exit_code == 0, result.output
    assert load_global_config(config_path).debug is True


def test_config_set_rejects_bad_boolean(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"

    result = CliRunner().invoke(
        cli,
        ["config", "set", "debug", "maybe"],
        obj=_context(FakeProcessRunner(), tmp_path, config_path),
    )

    assert result.exit_code == 1
    assert "Invalid boolean value for debug: maybe" in result.output
    assert not config_path.exists()
