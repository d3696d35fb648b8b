"""Show the working tree status - ``git status``."""

from gitcmd.commands.base import GitCommand
from gitcmd.core.errors import MalformedOutput
from gitcmd.core.parsing import split_lines
from gitcmd.core.types import StatusEntry, StatusResult

BRANCH_PREFIX = "## "


class StatusCommand(GitCommand):
    """Return the branch line and changed paths of the working tree.

    Uses the NUL-terminated porcelain format so paths containing spaces or
    newlines come back unquoted.
    """

    name = "status"

    def build_arguments(self) -> tuple[str, ...]:
        return self.builder().add_all(["--porcelain", "-s", "-b", "--null"]).build()

    def __call__(self) -> StatusResult:
        return parse_status(self.output(self.build_arguments()))


def parse_status(raw: str) -> StatusResult:
    """Parse ``git status --porcelain -b --null`` output.

    Entries look like ``XY path``. For renames and copies the entry is
    followed by a separate entry holding the original path.
    """
    branch = ""
    changes: list[StatusEntry] = []

    entries = iter(split_lines(raw, terminator="\0"))
    for entry in entries:
        if entry.startswith(BRANCH_PREFIX):
            branch = entry[len(BRANCH_PREFIX) :]
            continue

        if len(entry) < 4 or entry[2] != " ":
            raise MalformedOutput(entry, f"Expected an 'XY path' status entry, got {entry!r}")

        index, work_tree, path = entry[0], entry[1], entry[3:]
        original_path = None
        if index in ("R", "C"):
            original_path = next(entries, None)
            if original_path is None:
                raise MalformedOutput(
                    entry, f"Missing original path after rename or copy entry {entry!r}"
                )

        changes.append(
            StatusEntry(path=path, index=index, work_tree=work_tree, original_path=original_path)
        )

    return StatusResult(branch=branch, changes=tuple(changes))
