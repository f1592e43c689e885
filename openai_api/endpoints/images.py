"""Image generation, edits and variations. Edits and variations upload the source image."""

from pathlib import Path
from typing import Optional, Union

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "images"
FILE_PARAM = "image"


def generations_url() -> str:
    return f"{BASE_URL}/generations"


def edits_url() -> str:
    return f"{BASE_URL}/edits"


def variations_url() -> str:
    return f"{BASE_URL}/variations"


def generate(params: Params, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_post(generations_url(), params, config)


def edit(
    file_path: Union[str, Path],
    params: Params = None,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    return (client or default_client()).multipart_api_post(edits_url(), file_path, FILE_PARAM, params, config)


def variation(
    file_path: Union[str, Path],
    params: Params = None,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    return (client or default_client()).multipart_api_post(variations_url(), file_path, FILE_PARAM, params, config)
