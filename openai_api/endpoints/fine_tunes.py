from typing import Optional

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "fine-tunes"


def url(fine_tune_id: Optional[str] = None) -> str:
    if fine_tune_id:
        return f"{BASE_URL}/{fine_tune_id}"
    return BASE_URL


def list(config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(), config)


def create(params: Params, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_post(url(), params, config)


def retrieve(fine_tune_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(fine_tune_id), config)


def cancel(fine_tune_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_post(f"{url(fine_tune_id)}/cancel", None, config)


def list_events(fine_tune_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(f"{url(fine_tune_id)}/events", config)
