"""Error taxonomy for git command invocation.

Option errors are raised before any process is spawned. Process errors carry
the exact argument vector that was attempted so failures can be diagnosed
without re-running the command.
"""

import os
from collections.abc import Sequence
from pathlib import Path


class GitCommandError(Exception):
    """Base class for every error raised by gitcmd."""


class OptionError(GitCommandError):
    """Caller-supplied options did not satisfy the command's schema."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownOption(OptionError):
    """An option was supplied that the command does not recognize."""

    def __init__(self, name: str, known: Sequence[str]) -> None:
        known_str = ", ".join(f'"{k}"' for k in known)
        super().__init__(
            name, f'The option "{name}" does not exist. Known options are: {known_str}'
        )


class InvalidOptionType(OptionError):
    """An option value has a type the schema does not allow."""

    def __init__(self, name: str, value: object, allowed: Sequence[type]) -> None:
        allowed_str = ", ".join(_type_name(t) for t in allowed)
        super().__init__(
            name,
            f'The option "{name}" with value {value!r} is expected to be of type '
            f'"{allowed_str}", but is of type "{_type_name(type(value))}"',
        )
        self.value = value


class InvalidOptionValue(OptionError):
    """An option value falls outside the schema's allowed set."""

    def __init__(self, name: str, value: object, allowed: Sequence[object]) -> None:
        allowed_str = ", ".join(repr(v) for v in allowed)
        super().__init__(
            name,
            f'The option "{name}" with value {value!r} is invalid. '
            f"Accepted values are: {allowed_str}",
        )
        self.value = value


class ProcessSpawnError(GitCommandError):
    """git could not be started.

    ``filename`` is the path the OS reported, which is the working directory
    rather than the binary when changing into ``cwd`` failed.
    """

    def __init__(
        self,
        argv: Sequence[str],
        reason: str,
        *,
        cwd: Path | None = None,
        filename: str | bytes | None = None,
    ) -> None:
        self.argv = tuple(argv)
        self.reason = reason
        self.cwd = cwd
        self.filename = filename

        if cwd is not None and filename is not None and os.fspath(filename) == os.fspath(cwd):
            message = f"Working directory not found or not accessible: {cwd}"
        else:
            message = f"Command not found or not executable: {argv[0]}"
        message += f"\nFull command: {format_argv(argv)}"
        message += f"\n{reason}"
        super().__init__(message)


class ProcessExecutionError(GitCommandError):
    """git ran but exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], exit_code: int, stdout: str, stderr: str) -> None:
        self.argv = tuple(argv)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

        message = f"Command: {format_argv(argv)}"
        message += f"\nExit code: {exit_code}"
        stderr_stripped = stderr.strip()
        if stderr_stripped:
            message += f"\nstderr: {stderr_stripped}"
        super().__init__(message)

    @property
    def command_line(self) -> str:
        return format_argv(self.argv)


class MalformedOutput(GitCommandError):
    """git output did not have the expected shape.

    ``expected`` and ``actual`` are field counts, set only for field-delimited
    records.
    """

    def __init__(
        self,
        line: str,
        message: str,
        *,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @classmethod
    def arity(cls, line: str, expected: int, actual: int) -> "MalformedOutput":
        return cls(
            line,
            f"Expected {expected} fields but found {actual} in output line: {line!r}",
            expected=expected,
            actual=actual,
        )


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(argv)


def _type_name(t: type) -> str:
    if t is type(None):
        return "None"
    return t.__name__
