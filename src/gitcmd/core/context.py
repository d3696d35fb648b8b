"""Application context with dependency injection."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from gitcmd.core.git import Git
from gitcmd.core.global_config import GlobalConfig, load_global_config
from gitcmd.core.process import ProcessRunner, RealProcessRunner

DEBUG_ENV_VAR = "GITCMD_DEBUG"


@dataclass(frozen=True)
class GitCmdContext:
    """Immutable context holding all dependencies for gitcmd operations.

    Created at CLI entry point and threaded through the application.
    """

    runner: ProcessRunner
    cwd: Path
    global_config: GlobalConfig
    config_path: Path | None = None

    def git(self, repository: Path | None = None) -> Git:
        """Return a Git facade for ``repository`` (defaults to cwd)."""
        return Git(
            repository if repository is not None else self.cwd,
            runner=self.runner,
            binary=self.global_config.git_binary,
        )


def configure_logging(global_config: GlobalConfig) -> None:
    """Enable debug logging if GITCMD_DEBUG is set or the config asks for it."""
    if os.getenv(DEBUG_ENV_VAR) or global_config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def create_context(config_path: Path | None = None) -> GitCmdContext:
    """Create production context with real implementations.

    Args:
        config_path: Global config file to load (defaults to ~/.gitcmd/config.toml)

    Returns:
        GitCmdContext with a RealProcessRunner and the current directory
    """
    global_config = load_global_config(config_path)
    configure_logging(global_config)
    return GitCmdContext(
        runner=RealProcessRunner(),
        cwd=Path.cwd(),
        global_config=global_config,
        config_path=config_path,
    )
