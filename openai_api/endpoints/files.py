"""Uploaded files (fine-tuning data and the like)."""

from pathlib import Path
from typing import Optional, Union

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "files"
FILE_PARAM = "file"


def url(file_id: Optional[str] = None) -> str:
    if file_id:
        return f"{BASE_URL}/{file_id}"
    return BASE_URL


def list(config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(), config)


def retrieve(file_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_get(url(file_id), config)


def upload(
    file_path: Union[str, Path],
    params: Params = None,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    """
    Upload a local file.

    Args:
        params: Extra form fields, typically {"purpose": "fine-tune"}

    Raises:
        FileNotFoundError: file_path does not exist
    """
    return (client or default_client()).multipart_api_post(url(), file_path, FILE_PARAM, params, config)


def delete(file_id: str, config: Optional[Config] = None, client: Optional[Client] = None) -> Result:
    return (client or default_client()).api_delete(url(file_id), config)
