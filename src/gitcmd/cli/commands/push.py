import click

from gitcmd.cli.ensure import Ensure
from gitcmd.core.context import GitCmdContext


@click.command("push")
@click.argument("repository", required=False, default=None)
@click.argument("refspec", required=False, default=None)
@click.option("--all", "push_all", is_flag=True, help="Push all branches.")
@click.option("--mirror", is_flag=True, help="Mirror all refs to the remote.")
@click.option("--tags", is_flag=True, help="Push all tags.")
@click.option("-f", "--force", is_flag=True, help="Force-update remote refs.")
@click.option("-u", "--set-upstream", is_flag=True, help="Set upstream tracking.")
@click.pass_obj
def push_cmd(
    ctx: GitCmdContext,
    repository: str | None,
    refspec: str | None,
    push_all: bool,
    mirror: bool,
    tags: bool,
    force: bool,
    set_upstream: bool,
) -> None:
    """Update remote refs along with associated objects."""
    options = {
        "all": push_all,
        "mirror": mirror,
        "tags": tags,
        "force": force,
        "set-upstream": set_upstream,
    }
    git = ctx.git()
    Ensure.git_succeeds(lambda: git.push(repository, refspec, options))
