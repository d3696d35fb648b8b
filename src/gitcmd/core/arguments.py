"""Argument vector construction.

git is sensitive to argument position (flags before revisions, paths after a
literal ``--``), so the builder is append-only and preserves call order.
"""

import os
from collections.abc import Iterable, Sequence

from gitcmd.core.options import ResolvedOptions


class ArgumentBuilder:
    """Append-only builder for a subprocess argument vector.

    Usage:
        argv = ArgumentBuilder("log").add("-n").add("10").add_key_value("skip", 0).build()
        # ("log", "-n", "10", "--skip=0")
    """

    def __init__(self, *tokens: str) -> None:
        self._tokens: list[str] = []
        for token in tokens:
            self.add(token)

    def add(self, token: object) -> "ArgumentBuilder":
        """Append a literal token."""
        self._tokens.append(str(token))
        return self

    def add_key_value(self, key: str, value: object) -> "ArgumentBuilder":
        """Append a single ``--key=value`` token."""
        return self.add(f"--{key}={value}")

    def add_all(self, tokens: Iterable[object]) -> "ArgumentBuilder":
        for token in tokens:
            self.add(token)
        return self

    def build(self) -> tuple[str, ...]:
        """Return the finished argument vector."""
        return tuple(self._tokens)


def project_flags(
    builder: ArgumentBuilder, options: ResolvedOptions, names: Sequence[str]
) -> ArgumentBuilder:
    """Append ``--name`` for each of ``names`` whose resolved value is True.

    Tokens are emitted in the order of ``names``. Names whose value is not
    exactly True are skipped.
    """
    for name in names:
        if options.get(name) is True:
            builder.add(f"--{name}")
    return builder


PathArg = str | os.PathLike[str] | Iterable[str | os.PathLike[str]] | None


def normalize_paths(path: PathArg) -> tuple[str, ...]:
    """Normalize a "single path, many paths or nothing" argument to a tuple."""
    if path is None:
        return ()
    if isinstance(path, (str, os.PathLike)):
        single = os.fspath(path)
        return (single,) if single else ()
    return tuple(os.fspath(p) for p in path)
