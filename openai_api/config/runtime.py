"""
Runtime access to the process-wide defaults.

Resolution order for each field:
1. Config file at $OPENAI_CONFIG_PATH (default ~/.config/openai-api/config.yaml),
   with ${ENV_VAR} references expanded
2. Environment variables (a .env file is loaded first)
3. Built-in defaults (api_url = https://api.openai.com)

The result is built once and cached. It is never mutated; reload_defaults()
replaces it wholesale.
"""

import logging
import os
from pathlib import Path
from functools import lru_cache
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .config_file import ConfigFileManager, CONFIG_FILENAME, DEFAULT_CONFIG_DIR
from .schemas import Defaults

logger = logging.getLogger(__name__)

ENV_VARS = {
    "api_key": "OPENAI_API_KEY",
    "organization_key": "OPENAI_ORGANIZATION_KEY",
    "api_url": "OPENAI_API_URL",
    "azure_deployment_id": "OPENAI_AZURE_DEPLOYMENT_ID",
    "azure_api_version": "OPENAI_AZURE_API_VERSION",
}

TIMEOUT_ENV_VAR = "OPENAI_HTTP_TIMEOUT"


def get_config_path() -> Path:
    """Get the config file path from environment."""
    default = DEFAULT_CONFIG_DIR / CONFIG_FILENAME
    return Path(os.getenv('OPENAI_CONFIG_PATH', str(default))).expanduser().resolve()


def _env_values() -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for field, var_name in ENV_VARS.items():
        env_value = os.getenv(var_name)
        if env_value:
            data[field] = env_value

    timeout = os.getenv(TIMEOUT_ENV_VAR)
    if timeout:
        try:
            data["http_options"] = {"timeout": float(timeout)}
        except ValueError:
            logger.warning(f"Ignoring non-numeric {TIMEOUT_ENV_VAR}={timeout!r}")

    return data


def build_defaults(file_defaults: Optional[Defaults] = None) -> Defaults:
    """
    Merge config file values over environment values.

    Empty file values (e.g. a ${VAR} placeholder whose variable is unset)
    do not shadow the environment.
    """
    data = _env_values()

    if file_defaults is not None:
        file_data = file_defaults.expanded().model_dump(exclude_unset=True)
        for field, value in file_data.items():
            if not value:
                continue
            if field == "http_options":
                data["http_options"] = {**data.get("http_options", {}), **value}
            else:
                data[field] = value

    return Defaults.model_validate(data)


@lru_cache(maxsize=1)
def get_defaults() -> Defaults:
    """
    Load and cache the process-wide defaults.

    Returns Defaults built from the environment alone if no config file exists.
    """
    load_dotenv()

    manager = ConfigFileManager(get_config_path())
    if manager.exists():
        logger.debug(f"Loading defaults from {manager.config_path}")
        defaults = build_defaults(manager.load())
    else:
        defaults = build_defaults()

    logger.debug(
        f"Resolved defaults: api_url={defaults.api_url}, "
        f"has_api_key={bool(defaults.api_key)}, "
        f"azure_deployment_id={defaults.azure_deployment_id}"
    )
    return defaults


def reload_defaults() -> Defaults:
    """Force reload of the defaults (clears cache)."""
    get_defaults.cache_clear()
    return get_defaults()
