"""
Configuration schemas for openai-api.

Two models share the same fields:
- Config: per-call override, every field optional
- Defaults: process-wide defaults, loaded once (see runtime.py)

A per-call Config only shadows Defaults for one call; neither is mutated.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
import os
import re


DEFAULT_API_URL = "https://api.openai.com"

CONFIG_FIELDS = (
    "api_key",
    "organization_key",
    "api_url",
    "azure_deployment_id",
    "azure_api_version",
    "http_options",
)


class Config(BaseModel):
    """Per-call configuration override. Empty fields fall back to Defaults."""
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, description="Bearer token for the API")
    organization_key: Optional[str] = Field(None, description="Sent as OpenAI-Organization")
    api_url: Optional[str] = Field(None, description="Base URL, without /v1")
    azure_deployment_id: Optional[str] = Field(None, description="Enables deployment routing")
    azure_api_version: Optional[str] = Field(None, description="Sent as api-version query param")
    http_options: Optional[Dict[str, Any]] = Field(
        None,
        description="Transport keyword arguments (timeout, proxies, verify, params...)"
    )


class Defaults(BaseModel):
    """
    Process-wide defaults.

    Built once by runtime.get_defaults() from the config file and environment.
    """
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    organization_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    azure_deployment_id: Optional[str] = None
    azure_api_version: Optional[str] = None
    http_options: Dict[str, Any] = Field(default_factory=dict)

    def expanded(self) -> "Defaults":
        """
        Return a copy with ${ENV_VAR} references resolved in string fields.

        Only explicitly set fields are carried over, so a field that was never
        written stays unset and callers can tell it apart from a real value.
        """
        data = self.model_dump(exclude_unset=True)
        for name, value in data.items():
            if isinstance(value, str):
                data[name] = resolve_env_vars(value)
        return Defaults.model_validate(data)

    @classmethod
    def template(cls) -> "Defaults":
        """Config file template pointing every credential at the environment."""
        return cls(
            api_key="${OPENAI_API_KEY}",
            organization_key="${OPENAI_ORGANIZATION_KEY}",
            api_url=DEFAULT_API_URL,
            azure_deployment_id="${OPENAI_AZURE_DEPLOYMENT_ID}",
            azure_api_version="${OPENAI_AZURE_API_VERSION}",
            http_options={"timeout": 600},
        )


def resolve(field: str, config: Optional[Config], defaults: Defaults) -> Any:
    """
    Resolve one configuration field.

    Returns the per-call value when present and non-empty, else the default.
    """
    if field not in CONFIG_FIELDS:
        raise KeyError(f"Unknown config field: {field}")

    value = getattr(config, field, None) if config is not None else None
    if value:
        return value
    return getattr(defaults, field)


def resolve_env_vars(value: str) -> str:
    """
    Resolve ${ENV_VAR} references in a string.

    Examples:
        "${OPENAI_API_KEY}" -> actual value from environment
        "literal-value" -> "literal-value"
        "${MISSING_VAR}" -> "" (empty string if not set)
    """
    if not isinstance(value, str):
        return value

    pattern = r'\$\{([^}]+)\}'

    def replace(match):
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return re.sub(pattern, replace, value)
