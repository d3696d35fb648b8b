from dataclasses import replace

import click

from gitcmd.cli.ensure import Ensure
from gitcmd.cli.output import machine_output, user_output
from gitcmd.core.context import GitCmdContext
from gitcmd.core.global_config import (
    CONFIG_KEYS,
    GlobalConfig,
    global_config_path,
    save_global_config,
)


def _parse_boolean_value(value: str, field_name: str) -> bool:
    """Parse "true" or "false" (case-insensitive).

    Raises:
        SystemExit: If the value is not "true" or "false"
    """
    Ensure.invariant(
        value.lower() in ("true", "false"), f"Invalid boolean value for {field_name}: {value}"
    )
    return value.lower() == "true"


def _update_global_config_field(
    current_config: GlobalConfig, field_name: str, value: str
) -> GlobalConfig:
    """Return a new GlobalConfig with one field changed."""
    match field_name:
        case "git_binary":
            Ensure.invariant(bool(value), "git_binary must not be empty")
            return replace(current_config, git_binary=value)
        case "debug":
            return replace(current_config, debug=_parse_boolean_value(value, field_name))
        case _:
            user_output(f"Invalid global config field: {field_name}")
            raise SystemExit(1)


@click.group("config")
def config_group() -> None:
    """Manage gitcmd configuration."""


@config_group.command("show")
@click.pass_obj
def config_show(ctx: GitCmdContext) -> None:
    """Print configuration keys and values."""
    machine_output(f"git_binary={ctx.global_config.git_binary}")
    machine_output(f"debug={str(ctx.global_config.debug).lower()}")


@config_group.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS), metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GitCmdContext, key: str, value: str) -> None:
    """Set a global configuration value."""
    updated = _update_global_config_field(ctx.global_config, key, value)
    save_global_config(updated, ctx.config_path)
    path = ctx.config_path if ctx.config_path is not None else global_config_path()
    user_output(f"Set {key}={value} in {path}")
