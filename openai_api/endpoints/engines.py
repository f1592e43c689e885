"""Engine listing. Deprecated upstream in favour of models."""

from typing import Optional

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client

BASE_URL = "engines"


def url(engine_id: Optional[str] = None) -> str:
    if engine_id:
        return f"{BASE_URL}/{engine_id}"
    return BASE_URL


def list(config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(), config)


def retrieve(engine_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(engine_id), config)
