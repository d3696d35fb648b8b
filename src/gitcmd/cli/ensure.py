"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix and exit with status 1.
"""

from collections.abc import Callable
from typing import TypeVar

import click

from gitcmd.cli.output import user_output
from gitcmd.core.errors import GitCommandError

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def git_succeeds(operation: Callable[[], T]) -> T:
        """Run a git operation, turning GitCommandError into a styled exit.

        The error message already names the attempted command line and
        git's stderr, so it is printed as-is.

        Raises:
            SystemExit: If the operation raises GitCommandError (with exit code 1)
        """
        try:
            return operation()
        except GitCommandError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e
