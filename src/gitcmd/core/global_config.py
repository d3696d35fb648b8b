"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.gitcmd/config.toml.
A missing file yields the defaults.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

CONFIG_KEYS = ("git_binary", "debug")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GitCmdContext.
    """

    git_binary: str = "git"
    debug: bool = False


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".gitcmd" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config from ~/.gitcmd/config.toml.

    Args:
        path: Config file path (defaults to ~/.gitcmd/config.toml)

    Returns:
        GlobalConfig with loaded values, or defaults if the file doesn't exist

    Raises:
        ValueError: If a key has the wrong type
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        return GlobalConfig()

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))

    git_binary = data.get("git_binary", "git")
    if not isinstance(git_binary, str) or not git_binary:
        raise ValueError(f"'git_binary' must be a non-empty string in {config_path}")

    debug = data.get("debug", False)
    if not isinstance(debug, bool):
        raise ValueError(f"'debug' must be true or false in {config_path}")

    return GlobalConfig(git_binary=git_binary, debug=debug)


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, creating the config directory if needed.

    Uses tomlkit so existing comments and formatting are preserved.
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global gitcmd configuration"))

    doc["git_binary"] = config.git_binary
    doc["debug"] = config.debug

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
