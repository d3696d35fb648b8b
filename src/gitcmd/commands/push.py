"""Update remote refs along with associated objects - ``git push``."""

from collections.abc import Mapping

from gitcmd.commands.base import GitCommand
from gitcmd.core.arguments import project_flags
from gitcmd.core.options import OptionSchema, flag


class PushCommand(GitCommand):
    """Push to ``repository``, optionally limited to ``refspec``.

    ``refspec`` is only passed when ``repository`` is given, since git reads
    the first positional argument as the repository.
    """

    name = "push"
    schema = OptionSchema(
        {
            "all": flag(),
            "mirror": flag(),
            "tags": flag(),
            "force": flag(),
            "set-upstream": flag(),
        }
    )

    def build_arguments(
        self,
        repository: str | None = None,
        refspec: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> tuple[str, ...]:
        resolved = self.resolve(options)
        builder = self.builder()

        project_flags(builder, resolved, self.schema.names)

        if repository:
            builder.add(repository)
            if refspec:
                builder.add(refspec)

        return builder.build()

    def __call__(
        self,
        repository: str | None = None,
        refspec: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        self.execute(self.build_arguments(repository, refspec, options))
