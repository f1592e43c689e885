"""
Configuration management for openai-api.

Two layers:
- Defaults: process-wide, loaded once from config file + environment
- Config: per-call override, shadows Defaults for a single call

Usage:
    from openai_api.config import Config, get_defaults, resolve

    defaults = get_defaults()
    api_key = resolve("api_key", Config(api_key="sk-..."), defaults)
"""

from .schemas import (
    Config,
    Defaults,
    CONFIG_FIELDS,
    DEFAULT_API_URL,
    resolve,
    resolve_env_vars,
)

from .config_file import (
    ConfigFileManager,
    load_config_file,
)

from .runtime import (
    build_defaults,
    get_config_path,
    get_defaults,
    reload_defaults,
)


__all__ = [
    # Schemas
    "Config",
    "Defaults",
    "CONFIG_FIELDS",
    "DEFAULT_API_URL",
    "resolve",
    "resolve_env_vars",
    # Config file
    "ConfigFileManager",
    "load_config_file",
    # Runtime
    "build_defaults",
    "get_config_path",
    "get_defaults",
    "reload_defaults",
]
