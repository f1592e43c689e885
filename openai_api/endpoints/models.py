from typing import Optional

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client

BASE_URL = "models"


def url(model_id: Optional[str] = None) -> str:
    if model_id:
        return f"{BASE_URL}/{model_id}"
    return BASE_URL


def list(config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(), config)


def retrieve(model_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(model_id), config)


def delete(model_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    """Delete a fine-tuned model owned by the caller's organization."""
    return (client or default_client()).api_delete(url(model_id), config)
