"""
Config file loading and management.

The config file is YAML (default ~/.config/openai-api/config.yaml) with the
same fields as Defaults. String values may use ${ENV_VAR} syntax; expansion
happens when runtime.py builds the process-wide defaults, so the file itself
keeps the placeholders.
"""

from pathlib import Path
from typing import Optional
import yaml
from pydantic import ValidationError

from openai_api.errors import ConfigError
from .schemas import Defaults


CONFIG_FILENAME = "config.yaml"
DEFAULT_CONFIG_DIR = Path("~/.config/openai-api")


class ConfigFileManager:
    """
    Manages the on-disk defaults file.

    Usage:
        manager = ConfigFileManager(path)
        defaults = manager.load()   # Returns Defaults (unexpanded)
        manager.save(defaults)      # Persists to disk
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: YAML file path (default: ~/.config/openai-api/config.yaml)
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / CONFIG_FILENAME
        self.config_path = Path(config_path).expanduser().resolve()

    def exists(self) -> bool:
        return self.config_path.exists()

    def load(self) -> Defaults:
        """
        Load defaults from disk.

        Returns plain Defaults if the file doesn't exist.

        Raises:
            ConfigError: file is not valid YAML or fails validation
        """
        if not self.config_path.exists():
            return Defaults()

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {self.config_path}, got {type(data).__name__}")

        try:
            return Defaults.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {self.config_path}: {e}") from e

    def save(self, defaults: Defaults) -> None:
        """Save defaults to disk, creating the parent directory if needed."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = defaults.model_dump(exclude_none=True)

        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def update(self, updates: dict) -> Defaults:
        """
        Update specific fields in the file.

        Args:
            updates: Dict of fields to update (http_options is merged, not replaced)

        Returns:
            Updated Defaults
        """
        data = self.load().model_dump()
        _deep_merge(data, updates)

        try:
            new_defaults = Defaults.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config update: {e}") from e

        self.save(new_defaults)
        return new_defaults


def _deep_merge(base: dict, updates: dict) -> None:
    """Deep merge updates into base dict (mutates base)."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config_file(config_path: Optional[Path] = None) -> Defaults:
    """Convenience function to load the defaults file."""
    return ConfigFileManager(config_path).load()
