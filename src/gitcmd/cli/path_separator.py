"""Click command class that keeps git's ``--`` path separator."""

import click

PATHS_PARAM = "paths"


class PathSeparatorCommand(click.Command):
    """Click Command that passes everything after a literal ``--`` as paths.

    click consumes ``--`` itself and would feed the following words to the
    remaining positional arguments, so ``log -- src`` would read ``src`` as a
    revision. This class splits the arguments at the first ``--`` before click
    parses them and hands the tail to the callback as ``paths``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        paths: tuple[str, ...] = ()
        if "--" in args:
            index = args.index("--")
            paths = tuple(args[index + 1 :])
            args = args[:index]

        remaining = super().parse_args(ctx, args)
        ctx.params[PATHS_PARAM] = paths
        return remaining

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        return [*super().collect_usage_pieces(ctx), "[-- PATHS...]"]
