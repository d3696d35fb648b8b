"""git subcommands."""

from gitcmd.commands.archive import ArchiveCommand
from gitcmd.commands.base import GitCommand
from gitcmd.commands.log import LogCommand
from gitcmd.commands.push import PushCommand
from gitcmd.commands.status import StatusCommand

__all__ = [
    "GitCommand",
    "ArchiveCommand",
    "LogCommand",
    "PushCommand",
    "StatusCommand",
]
