"""Configuration loading and validation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from apexscope.languages.apex import DEFAULT_SCOPES
from apexscope.workspace import WorkspaceFolder

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "apexscope.yaml"
DEFAULT_SUFFIXES = [".cls", ".trigger"]

_SCOPE_RE = re.compile(r"^\w+$")


class ConfigError(Exception):
    """Error in apexscope configuration."""

    def __init__(self, message: str, file: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.file = file

    def to_json(self) -> dict[str, Any]:
        """Serialize error to JSON format for machine parsing."""
        result: dict[str, Any] = {
            "error": "config_invalid",
            "message": self.message,
        }
        if self.file:
            result["file"] = self.file
        return result

    def __str__(self) -> str:
        if self.file:
            return f"{self.message} | file: {self.file}"
        return self.message


@dataclass
class ScopeConfig:
    """Which scopes to document and where to look for sources.

    `scope` is ordered: when several keywords could match a line, the
    earliest one wins.
    """

    scope: list[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))
    suffixes: list[str] = field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    workspace_folders: dict[str, str] = field(default_factory=dict)

    @property
    def folders(self) -> list[WorkspaceFolder]:
        return [WorkspaceFolder(name, path) for name, path in self.workspace_folders.items()]


def get_default_config() -> ScopeConfig:
    """Return the default configuration."""
    return ScopeConfig()


def _as_str_list(value: Any, key: str, config_file: Optional[str]) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings", file=config_file)
    return value


def validate_config(config: ScopeConfig, config_file: Optional[str] = None) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If configuration is invalid.
    """
    if not config.scope:
        raise ConfigError("At least one scope must be configured", file=config_file)
    for scope in config.scope:
        if not _SCOPE_RE.match(scope):
            raise ConfigError(
                f"Invalid scope '{scope}': scopes are single keywords",
                file=config_file,
            )
    for suffix in config.suffixes:
        if not suffix.startswith("."):
            raise ConfigError(
                f"Invalid suffix '{suffix}': must start with '.'",
                file=config_file,
            )


def load_config(config_path: Optional[Path] = None) -> ScopeConfig:
    """Load configuration from a YAML file.

    A missing file yields the defaults. Unknown keys are ignored.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_PATH)
    config_file = str(path)

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return get_default_config()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", file=config_file)

    if data is None:
        return get_default_config()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", file=config_file)

    config = get_default_config()
    if "scope" in data:
        config.scope = [s.lower() for s in _as_str_list(data["scope"], "scope", config_file)]
    if "suffixes" in data:
        config.suffixes = _as_str_list(data["suffixes"], "suffixes", config_file)
    if "workspace_folders" in data:
        folders = data["workspace_folders"]
        if not isinstance(folders, dict):
            raise ConfigError("'workspace_folders' must be a mapping", file=config_file)
        config.workspace_folders = {str(k): str(v) for k, v in folders.items()}

    validate_config(config, config_file)
    logger.debug("Loaded config from %s: scopes=%s", path, config.scope)
    return config
