from typing import Optional

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "chat/completions"


def url() -> str:
    return BASE_URL


def fetch(params: Params, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_post(url(), params, config)
