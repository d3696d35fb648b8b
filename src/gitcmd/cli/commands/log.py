import json
from dataclasses import asdict

import click
from rich.console import Console
from rich.table import Table

from gitcmd.cli.ensure import Ensure
from gitcmd.cli.output import machine_output
from gitcmd.cli.path_separator import PathSeparatorCommand
from gitcmd.core.context import GitCmdContext
from gitcmd.core.types import LogEntry


def _render_table(entries: list[LogEntry]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("hash", style="cyan", no_wrap=True)
    table.add_column("author", no_wrap=True)
    table.add_column("date", no_wrap=True)
    table.add_column("subject")

    for entry in entries:
        table.add_row(entry.hash[:7], entry.author_name, entry.date, entry.subject)

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True)
    console.print(table)


@click.command("log", cls=PathSeparatorCommand)
@click.argument("rev_range", required=False, default="")
@click.option("-n", "--limit", type=int, default=None, help="Limit the number of commits.")
@click.option("--skip", type=int, default=None, help="Skip this many commits first.")
@click.option("--grep", default=None, help="Only commits whose message matches PATTERN.")
@click.option("-E", "--extended-regexp", is_flag=True, help="Treat --grep as an ERE.")
@click.option("--no-merges", is_flag=True, help="Do not show merge commits.")
@click.option("--reverse", is_flag=True, help="Show oldest commits first.")
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per commit.")
@click.pass_obj
def log_cmd(
    ctx: GitCmdContext,
    rev_range: str,
    paths: tuple[str, ...],
    limit: int | None,
    skip: int | None,
    grep: str | None,
    extended_regexp: bool,
    no_merges: bool,
    reverse: bool,
    as_json: bool,
) -> None:
    """Show commit logs.

    Paths must follow a literal "--" so they are never read as revisions.

    Examples:
        gitcmd log
        gitcmd log -n 10 --no-merges main..feature
        gitcmd log HEAD -- src/
        gitcmd log -- README.md
    """
    options: dict[str, object] = {
        "extended-regexp": extended_regexp,
        "no-merges": no_merges,
        "reverse": reverse,
    }
    if limit is not None:
        options["limit"] = limit
    if skip is not None:
        options["skip"] = skip
    if grep is not None:
        options["grep"] = grep

    git = ctx.git()
    entries = Ensure.git_succeeds(lambda: git.log(rev_range, paths, options))

    if as_json:
        for entry in entries:
            machine_output(json.dumps(asdict(entry)))
        return

    _render_table(entries)
