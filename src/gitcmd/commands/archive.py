"""Create an archive of files from a named tree - ``git archive``."""

from collections.abc import Mapping
from pathlib import Path

from gitcmd.commands.base import GitCommand
from gitcmd.core.arguments import PathArg, normalize_paths
from gitcmd.core.options import OptionSchema, optional_string

ARCHIVE_FORMATS = ("tar", "zip")


class ArchiveCommand(GitCommand):
    """Write an archive of ``tree`` to ``file``.

    The archive itself is never read back; ``format`` and ``prefix`` are
    passed through to git.

    Options:
        format: Format of the resulting archive, "tar" or "zip"
        prefix: Prepend prefix/ to each filename in the archive
    """

    name = "archive"
    schema = OptionSchema(
        {
            "format": optional_string(values=ARCHIVE_FORMATS),
            "prefix": optional_string(),
        }
    )

    def build_arguments(
        self,
        file: str | Path,
        tree: str | None = None,
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> tuple[str, ...]:
        resolved = self.resolve(options)
        builder = self.builder()

        if resolved["format"]:
            builder.add_key_value("format", resolved["format"])

        if resolved["prefix"]:
            builder.add_key_value("prefix", resolved["prefix"])

        builder.add("-o").add(file)

        if tree:
            builder.add(tree)

        # git archive takes paths positionally after the tree-ish, no "--"
        builder.add_all(normalize_paths(path))

        return builder.build()

    def __call__(
        self,
        file: str | Path,
        tree: str | None = None,
        path: PathArg = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        self.execute(self.build_arguments(file, tree, path, options))
