"""Process execution for git commands.

Architecture:
- ProcessRunner: Abstract interface for running an argument vector
- RealProcessRunner: Production implementation using subprocess

The argument vector is always passed as discrete tokens; no shell is involved.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gitcmd.core.errors import ProcessExecutionError, ProcessSpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Captured outcome of one process run."""

    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


# ============================================================================
# Abstract Interface
# ============================================================================


class ProcessRunner(ABC):
    """Abstract interface for running an external command.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def run(self, argv: Sequence[str], cwd: Path) -> ExecutionResult:
        """Run ``argv`` in ``cwd`` and wait for it to finish.

        Args:
            argv: Full argument vector, binary first
            cwd: Working directory for the child process

        Returns:
            ExecutionResult for a zero exit status

        Raises:
            ProcessSpawnError: If the binary or working directory cannot be used
            ProcessExecutionError: If the process exits with a non-zero status
        """
        ...


# ============================================================================
# Production Implementation
# ============================================================================


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.run().

    Blocks until the child exits. No timeout is applied.
    """

    def run(self, argv: Sequence[str], cwd: Path) -> ExecutionResult:
        cmd = list(argv)
        logger.debug("Running %s in %s", cmd, cwd)

        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            # chdir failures surface here too, with the cwd as the filename
            raise ProcessSpawnError(cmd, str(e), cwd=cwd, filename=e.filename) from e

        logger.debug("Command %s exited with %d", cmd[0], completed.returncode)

        result = ExecutionResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
        )
        if result.exit_code != 0:
            raise ProcessExecutionError(
                cmd,
                exit_code=result.exit_code,
                stdout=result.stdout_text,
                stderr=result.stderr_text,
            )
        return result
