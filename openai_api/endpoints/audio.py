"""Speech to text. Both operations upload the audio file under the `file` field."""

from pathlib import Path
from typing import Optional, Union

from openai_api.config import Config
from openai_api.rest import Client, Result, default_client
from openai_api.rest.body import Params

BASE_URL = "audio"
FILE_PARAM = "file"


def transcriptions_url() -> str:
    return f"{BASE_URL}/transcriptions"


def translations_url() -> str:
    return f"{BASE_URL}/translations"


def transcribe(
    file_path: Union[str, Path],
    params: Params = None,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    return (client or default_client()).multipart_api_post(transcriptions_url(), file_path, FILE_PARAM, params, config)


def translate(
    file_path: Union[str, Path],
    params: Params = None,
    config: Optional[Config] = None,
    client: Optional[Client] = None
) -> Result:
    return (client or default_client()).multipart_api_post(translations_url(), file_path, FILE_PARAM, params, config)
