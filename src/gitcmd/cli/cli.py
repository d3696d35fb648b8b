from dataclasses import replace
from pathlib import Path

import click

from gitcmd.cli.commands.archive import archive_cmd
from gitcmd.cli.commands.config import config_group
from gitcmd.cli.commands.log import log_cmd
from gitcmd.cli.commands.push import push_cmd
from gitcmd.cli.commands.status import status_cmd
from gitcmd.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitcmd")
@click.option(
    "-C",
    "--repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if git was started in this directory.",
)
@click.pass_context
def cli(ctx: click.Context, repo: Path | None) -> None:
    """Run git subcommands with validated options and parsed output."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    if repo is not None:
        ctx.obj = replace(ctx.obj, cwd=repo)


cli.add_command(archive_cmd)
cli.add_command(config_group)
cli.add_command(log_cmd)
cli.add_command(push_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `gitcmd` console script."""
    cli()
