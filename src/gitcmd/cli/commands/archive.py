from pathlib import Path

import click

from gitcmd.cli.ensure import Ensure
from gitcmd.cli.output import user_output
from gitcmd.commands.archive import ARCHIVE_FORMATS
from gitcmd.core.context import GitCmdContext


@click.command("archive")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("tree", required=False, default=None)
@click.argument("paths", nargs=-1)
@click.option(
    "--format",
    "archive_format",
    type=click.Choice(ARCHIVE_FORMATS),
    default=None,
    help="Archive format (defaults to git's choice based on FILE).",
)
@click.option("--prefix", default=None, help="Prepend PREFIX/ to each filename.")
@click.pass_obj
def archive_cmd(
    ctx: GitCmdContext,
    file: Path,
    tree: str | None,
    paths: tuple[str, ...],
    archive_format: str | None,
    prefix: str | None,
) -> None:
    """Create an archive of files from a named tree.

    Examples:
        gitcmd archive repo.zip master
        gitcmd archive --format tar --prefix project/ repo.tar HEAD src
    """
    options = {"format": archive_format, "prefix": prefix}
    git = ctx.git()
    Ensure.git_succeeds(lambda: git.archive(file, tree, paths, options))
    user_output(f"Wrote {file}")
