"""Shared contract for git subcommands.

A command resolves its options against its schema, builds an argument vector
with ArgumentBuilder, runs it through a ProcessRunner and, when git produces
structured output, parses it into records. Every step except running is pure,
so ``build_arguments`` can be exercised without spawning a process.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, ClassVar

from gitcmd.core.arguments import ArgumentBuilder
from gitcmd.core.options import OptionSchema, ResolvedOptions, resolve_options
from gitcmd.core.process import ExecutionResult, ProcessRunner

DEFAULT_BINARY = "git"


class GitCommand(ABC):
    """One git subcommand bound to a runner and a working directory.

    Subclasses set ``name`` (the subcommand token) and ``schema`` and
    implement ``__call__``. Any non-zero exit propagates as
    ProcessExecutionError.
    """

    name: ClassVar[str]
    schema: ClassVar[OptionSchema] = OptionSchema({})

    def __init__(self, runner: ProcessRunner, cwd: Path, *, binary: str = DEFAULT_BINARY) -> None:
        self._runner = runner
        self._cwd = cwd
        self._binary = binary

    def resolve(self, options: Mapping[str, object] | None) -> ResolvedOptions:
        return resolve_options(self.schema, options)

    def builder(self) -> ArgumentBuilder:
        """Start an argument vector with the subcommand token."""
        return ArgumentBuilder(self.name)

    def execute(self, argv: Sequence[str]) -> ExecutionResult:
        """Run ``argv`` (without the binary) in the command's working directory."""
        return self._runner.run([self._binary, *argv], self._cwd)

    def output(self, argv: Sequence[str]) -> str:
        return self.execute(argv).stdout_text

    @abstractmethod
    def __call__(self, *args: Any, **kwargs: Any) -> Any: ...
