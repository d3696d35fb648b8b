"""Typed invocation of git subcommands."""

from gitcmd.commands import ArchiveCommand, GitCommand, LogCommand, PushCommand, StatusCommand
from gitcmd.core.arguments import ArgumentBuilder, normalize_paths, project_flags
from gitcmd.core.errors import (
    GitCommandError,
    InvalidOptionType,
    InvalidOptionValue,
    MalformedOutput,
    OptionError,
    ProcessExecutionError,
    ProcessSpawnError,
    UnknownOption,
)
from gitcmd.core.git import Git
from gitcmd.core.options import OptionSchema, OptionSpec, ResolvedOptions, resolve_options
from gitcmd.core.parsing import split_lines, split_record
from gitcmd.core.process import ExecutionResult, ProcessRunner, RealProcessRunner
from gitcmd.core.types import LogEntry, StatusEntry, StatusResult

__version__ = "0.1.0"

__all__ = [
    # Repository facade
    "Git",
    # Commands
    "GitCommand",
    "ArchiveCommand",
    "LogCommand",
    "PushCommand",
    "StatusCommand",
    # Options
    "OptionSchema",
    "OptionSpec",
    "ResolvedOptions",
    "resolve_options",
    # Arguments
    "ArgumentBuilder",
    "project_flags",
    "normalize_paths",
    # Process execution
    "ProcessRunner",
    "RealProcessRunner",
    "ExecutionResult",
    # Output parsing
    "split_lines",
    "split_record",
    # Records
    "LogEntry",
    "StatusEntry",
    "StatusResult",
    # Errors
    "GitCommandError",
    "OptionError",
    "UnknownOption",
    "InvalidOptionType",
    "InvalidOptionValue",
    "ProcessSpawnError",
    "ProcessExecutionError",
    "MalformedOutput",
]
