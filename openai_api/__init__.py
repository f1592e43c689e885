"""
openai-api: a thin client for the OpenAI HTTP API.

Provides:
- Config / Defaults: per-call overrides over process-wide defaults
- Client: request pipeline (URL + headers, JSON/multipart body, transport, normalization)
- Ok / Error: the only result shapes a call returns
- endpoints: completions, moderations, models, files, ... one module each
"""

from openai_api.config import Config, Defaults, get_defaults, reload_defaults
from openai_api.errors import OpenAIAPIError, ConfigError, ResultError
from openai_api.rest import (
    Client,
    Ok,
    Error,
    Result,
    ResponsePayload,
)
from openai_api import endpoints

__all__ = [
    "Config",
    "Defaults",
    "get_defaults",
    "reload_defaults",

    "OpenAIAPIError",
    "ConfigError",
    "ResultError",

    "Client",
    "Ok",
    "Error",
    "Result",
    "ResponsePayload",

    "endpoints",
]
