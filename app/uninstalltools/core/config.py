"""Process-wide configuration of uninstalltools.

This module provides the immutable configuration model and its I/O
functions. The configuration is built once at startup and passed
explicitly to the discovery components.

Configuration is stored in ~/.config/uninstalltools/config.toml
"""

import logging
import ntpath
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from uninstalltools.core.paths import get_config_path

logger = logging.getLogger(__name__)


class ToolsConfig(BaseModel):
    """Configuration for program root discovery and unattended runs.

    Attributes:
        custom_program_files: User-defined directories applications get
            installed into, in priority order.
        quiet_automation: Run uninstallers unattended where possible.
        quiet_automation_kill_stuck: Allow unattended runs to terminate
            unresponsive uninstaller processes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    custom_program_files: Annotated[
        tuple[str, ...],
        Field(description="User-defined program roots"),
    ] = ()
    quiet_automation: Annotated[
        bool,
        Field(description="Run uninstallers unattended"),
    ] = False
    quiet_automation_kill_stuck: Annotated[
        bool,
        Field(description="Terminate stuck processes during unattended runs"),
    ] = False

    @field_validator("custom_program_files")
    @classmethod
    def validate_custom_program_files(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Strip surrounding whitespace and reject blank or relative roots."""
        roots = tuple(root.strip() for root in v)
        if any(not root for root in roots):
            msg = "Custom program roots cannot be empty"
            raise ValueError(msg)
        # Windows drive paths must validate on any host
        relative = [root for root in roots if not (ntpath.isabs(root) or os.path.isabs(root))]
        if relative:
            msg = f"Custom program roots must be absolute paths: {', '.join(relative)}"
            raise ValueError(msg)
        return roots


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ToolsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ToolsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ToolsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ToolsConfig:
    """Load configuration, falling back to defaults if no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded ToolsConfig, or the default configuration.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return ToolsConfig()


def save_config(config: ToolsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ToolsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create config directory: {e}") from e

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: ToolsConfig) -> dict[str, object]:
    """Convert ToolsConfig to a dictionary for TOML serialization.

    Flags are only written when enabled to keep the file clean.

    Args:
        config: The ToolsConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"custom_program_files": list(config.custom_program_files)}

    if config.quiet_automation:
        result["quiet_automation"] = True

    if config.quiet_automation_kill_stuck:
        result["quiet_automation_kill_stuck"] = True

    return result
