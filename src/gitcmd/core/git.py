"""Repository-bound entry point for git commands.

Usage:
    git = Git(Path("/path/to/repo"))
    logs = git.log(options={"limit": 10})
    git.archive("repo.zip", "master", options={"format": "zip"})
"""

from collections.abc import Mapping
from pathlib import Path

from gitcmd.commands.archive import ArchiveCommand
from gitcmd.commands.base import DEFAULT_BINARY
from gitcmd.commands.log import LogCommand
from gitcmd.commands.push import PushCommand
from gitcmd.commands.status import StatusCommand
from gitcmd.core.arguments import PathArg
from gitcmd.core.process import ProcessRunner, RealProcessRunner
from gitcmd.core.types import LogEntry, StatusResult


class Git:
    """Runs commands against one repository working directory.

    Each call constructs a fresh command, so no state is shared between
    invocations. Concurrent calls against the same repository must be
    serialized by the caller.
    """

    def __init__(
        self,
        repository: Path,
        *,
        runner: ProcessRunner | None = None,
        binary: str = DEFAULT_BINARY,
    ) -> None:
        self.repository = repository
        self._runner = runner if runner is not None else RealProcessRunner()
        self._binary = binary

    def log(
        self,
        rev_range: str = "",
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> list[LogEntry]:
        return LogCommand(self._runner, self.repository, binary=self._binary)(
            rev_range, path, options
        )

    def archive(
        self,
        file: str | Path,
        tree: str | None = None,
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        ArchiveCommand(self._runner, self.repository, binary=self._binary)(
            file, tree, path, options
        )

    def push(
        self,
        repository: str | None = None,
        refspec: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        PushCommand(self._runner, self.repository, binary=self._binary)(
            repository, refspec, options
        )

    def status(self) -> StatusResult:
        return StatusCommand(self._runner, self.repository, binary=self._binary)()
