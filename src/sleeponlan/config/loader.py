"""YAML configuration loader and validator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from sleeponlan.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("/etc/sleep-on-lan.yaml")
DEFAULT_INTERFACE = "eth0"
DEFAULT_PORT = 9
DEFAULT_SLEEP_COMMAND = "systemctl hibernate"
DRY_RUN_COMMAND = "echo '[DRY RUN] Shutting down...'"


@dataclass(frozen=True)
class ServerConfig:
    """Inputs for one daemon run."""

    interface: str
    port: int
    sleep_command: str
    dry_run: bool = False


def load_config(path: Path) -> Optional[dict[str, Any]]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed configuration dictionary, or None if file is empty

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    with open(path) as f:
        result: Optional[dict[str, Any]] = yaml.safe_load(f)
        return result


def validate_config(config: Any) -> list[str]:
    """
    Validate a loaded configuration dictionary.

    Returns:
        List of validation error messages (empty list = valid)
    """
    if not isinstance(config, dict):
        return ["Config root must be a YAML mapping"]

    main = config.get("main", {})
    if main is None:
        main = {}
    if not isinstance(main, dict):
        return ["'main' must be a mapping"]

    errors: list[str] = []

    interface = main.get("interface", DEFAULT_INTERFACE)
    if not isinstance(interface, str) or not interface.strip():
        errors.append("main.interface: must be a non-empty string")

    port = main.get("port", DEFAULT_PORT)
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port <= 65535:
        errors.append(f"main.port: must be an integer between 1 and 65535, got {port!r}")

    sleep_cmd = main.get("sleep-cmd", DEFAULT_SLEEP_COMMAND)
    if not isinstance(sleep_cmd, str):
        errors.append("main.sleep-cmd: must be a string")
    elif "\0" in sleep_cmd:
        errors.append("main.sleep-cmd: must not contain NUL characters")

    return errors


def settings_from_config(config: dict[str, Any], dry_run: bool = False) -> ServerConfig:
    """
    Build the daemon settings from a validated config dict.

    In dry-run mode the configured sleep command is replaced by a harmless echo.
    """
    main = config.get("main") or {}
    sleep_command = DRY_RUN_COMMAND if dry_run else main.get("sleep-cmd", DEFAULT_SLEEP_COMMAND)
    return ServerConfig(
        interface=main.get("interface", DEFAULT_INTERFACE).strip(),
        port=int(main.get("port", DEFAULT_PORT)),
        sleep_command=sleep_command,
        dry_run=dry_run,
    )


def read_settings(path: Path, dry_run: bool = False) -> ServerConfig:
    """
    Load, validate and convert a config file in one step.

    Raises:
        ConfigError: If the file is missing, unreadable, empty or invalid
    """
    try:
        raw = load_config(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(str(path), str(exc)) from exc
    if not raw:
        raise ConfigError(str(path), "config file is empty")
    errors = validate_config(raw)
    if errors:
        raise ConfigError(str(path), "; ".join(errors))
    return settings_from_config(raw, dry_run=dry_run)
