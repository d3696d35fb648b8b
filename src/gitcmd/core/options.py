"""Option schemas and resolution.

Each command declares an OptionSchema once, at class definition time. Every
invocation resolves the caller's options against it, producing a fresh
read-only mapping in which every schema key is present and every value has
been type- and value-checked.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from gitcmd.core.errors import InvalidOptionType, InvalidOptionValue, UnknownOption

NoneType = type(None)

ResolvedOptions = Mapping[str, object]


@dataclass(frozen=True)
class OptionSpec:
    """Default, allowed types and (optionally) allowed values of one option.

    Types are compared exactly, so a ``bool`` is not accepted where only
    ``int`` is allowed.
    """

    default: object
    types: tuple[type, ...]
    values: tuple[object, ...] | None = None

    def __post_init__(self) -> None:
        if not self.types:
            raise ValueError("OptionSpec requires at least one allowed type")


def flag(default: bool = False) -> OptionSpec:
    """Boolean option rendered as ``--name`` when true."""
    return OptionSpec(default=default, types=(bool,))


def integer(default: int) -> OptionSpec:
    return OptionSpec(default=default, types=(int,))


def optional_string(values: tuple[str, ...] | None = None) -> OptionSpec:
    """String option that defaults to None, optionally restricted to ``values``."""
    return OptionSpec(default=None, types=(NoneType, str), values=values)


class OptionSchema:
    """Ordered, immutable mapping of option name to OptionSpec."""

    def __init__(self, specs: Mapping[str, OptionSpec]) -> None:
        self._specs = MappingProxyType(dict(specs))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    @property
    def defaults(self) -> dict[str, object]:
        return {name: spec.default for name, spec in self._specs.items()}

    def __getitem__(self, name: str) -> OptionSpec:
        return self._specs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OptionSchema({dict(self._specs)!r})"


def resolve_options(
    schema: OptionSchema, supplied: Mapping[str, object] | None = None
) -> ResolvedOptions:
    """Validate ``supplied`` against ``schema`` and fill in defaults.

    Args:
        schema: The command's option schema
        supplied: Options passed by the caller (may be None or empty)

    Returns:
        Read-only mapping containing exactly the schema's keys, in schema order

    Raises:
        UnknownOption: If a supplied key is not part of the schema
        InvalidOptionType: If a supplied value's type is not allowed
        InvalidOptionValue: If a non-None value is outside the allowed set
    """
    supplied = supplied or {}

    for name in supplied:
        if name not in schema:
            raise UnknownOption(name, schema.names)

    resolved: dict[str, object] = {}
    for name in schema:
        spec = schema[name]
        if name not in supplied:
            resolved[name] = spec.default
            continue

        value = supplied[name]
        if type(value) not in spec.types:
            raise InvalidOptionType(name, value, spec.types)
        if spec.values is not None and value is not None and value not in spec.values:
            raise InvalidOptionValue(name, value, spec.values)
        resolved[name] = value

    return MappingProxyType(resolved)
