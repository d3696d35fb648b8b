import click

from gitcmd.cli.ensure import Ensure
from gitcmd.cli.output import machine_output
from gitcmd.core.context import GitCmdContext


@click.command("status")
@click.pass_obj
def status_cmd(ctx: GitCmdContext) -> None:
    """Show the branch and changed paths of the working tree."""
    git = ctx.git()
    result = Ensure.git_succeeds(git.status)

    machine_output(f"## {result.branch}")
    for change in result.changes:
        line = f"{change.index}{change.work_tree} {change.path}"
        if change.original_path is not None:
            line += f" <- {change.original_path}"
        machine_output(line)
