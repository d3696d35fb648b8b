"""Parsing of git's line-oriented output.

Structured commands ask git for one record per line with fields joined by a
multi-character delimiter that is unlikely to occur inside free text such as
commit subjects.
"""

from gitcmd.core.errors import MalformedOutput


def split_lines(raw: str, terminator: str = "\n") -> list[str]:
    """Split ``raw`` into lines.

    A single trailing empty segment produced by a final terminator is dropped;
    other empty lines are kept. When splitting on ``"\\n"``, a trailing
    carriage return is removed from each line so CRLF output parses the same
    as LF output.
    """
    if not raw:
        return []

    lines = raw.split(terminator)
    if lines[-1] == "":
        lines.pop()

    if terminator == "\n":
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines


def split_record(line: str, delimiter: str, arity: int) -> tuple[str, ...]:
    """Split one output line into exactly ``arity`` fields.

    Empty fields produced by the split are discarded before the arity check,
    so a delimiter at either end of the line is tolerated.

    Raises:
        MalformedOutput: If the number of non-empty fields is not ``arity``
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    fields = tuple(field for field in line.split(delimiter) if field)
    if len(fields) != arity:
        raise MalformedOutput.arity(line, expected=arity, actual=len(fields))
    return fields
