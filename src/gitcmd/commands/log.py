"""Show commit logs - ``git log``."""

from collections.abc import Mapping

from gitcmd.commands.base import GitCommand
from gitcmd.core.arguments import PathArg, normalize_paths, project_flags
from gitcmd.core.options import OptionSchema, flag, integer, optional_string
from gitcmd.core.parsing import split_lines, split_record
from gitcmd.core.types import LogEntry

FIELD_DELIMITER = "||"
LOG_FORMAT = FIELD_DELIMITER.join(["%H", "%aN", "%aE", "%aD", "%s"])
LOG_FIELDS = 5


class LogCommand(GitCommand):
    """Return commit logs as LogEntry records.

    Example:
        >>> logs = LogCommand(RealProcessRunner(), Path("/path/to/repo"))(options={"limit": 10})
        >>> logs[0].subject
        'Initial Commit'

    Options:
        limit: Limits the number of commits to show
        skip: Skip number commits before starting to show the commit output
        grep: Only show commits whose message matches the pattern
        extended-regexp: Treat the grep pattern as an extended regular expression
        no-merges: Do not print commits with more than one parent
        reverse: Output the commits in reverse order
    """

    name = "log"
    schema = OptionSchema(
        {
            "limit": integer(1000),
            "skip": integer(0),
            "grep": optional_string(),
            "extended-regexp": flag(),
            "no-merges": flag(),
            "reverse": flag(),
        }
    )
    flags = ("extended-regexp", "no-merges", "reverse")

    def build_arguments(
        self,
        rev_range: str = "",
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> tuple[str, ...]:
        resolved = self.resolve(options)
        builder = (
            self.builder()
            .add("-n")
            .add(resolved["limit"])
            .add_key_value("skip", resolved["skip"])
            .add_key_value("format", LOG_FORMAT)
        )

        project_flags(builder, resolved, self.flags)

        if resolved["grep"]:
            builder.add_key_value("grep", resolved["grep"])

        if rev_range:
            builder.add(rev_range)

        paths = normalize_paths(path)
        if paths:
            builder.add("--").add_all(paths)

        return builder.build()

    def __call__(
        self,
        rev_range: str = "",
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> list[LogEntry]:
        argv = self.build_arguments(rev_range, path, options)
        return parse_log(self.output(argv))


def parse_log(raw: str) -> list[LogEntry]:
    """Parse ``--format=%H||%aN||%aE||%aD||%s`` output, one commit per line."""
    entries: list[LogEntry] = []
    for line in split_lines(raw):
        if not line:
            continue
        commit_hash, name, email, date, subject = split_record(line, FIELD_DELIMITER, LOG_FIELDS)
        entries.append(
            LogEntry(
                hash=commit_hash,
                author_name=name,
                author_email=email,
                date=date,
                subject=subject,
            )
        )
    return entries
