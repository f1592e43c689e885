"""Text completions, including the deprecated per-engine route."""

from typing import Optional

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "completions"
ENGINES_BASE_URL = "engines"


def url() -> str:
    return BASE_URL


def deprecated_url(engine_id: str) -> str:
    return f"{ENGINES_BASE_URL}/{engine_id}/completions"


def fetch(params: Params, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_post(url(), params, config)


def fetch_by_engine(
    engine_id: str,
    params: Params,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    """Deprecated upstream; prefer fetch() with a `model` param."""
    return (client or default_client()).api_post(deprecated_url(engine_id), params, config)
