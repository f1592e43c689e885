#!/usr/bin/env python3
import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

Params = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]], None]

# (field_name, (filename_or_None, content)) in the shape requests' `files=` accepts
MultipartPart = Tuple[str, Tuple[Any, Any]]


@dataclass
class MultipartBody:
    parts: List[MultipartPart]

    @property
    def file_part(self) -> MultipartPart:
        return self.parts[0]

    @property
    def fields(self) -> List[Tuple[str, Any]]:
        return [(name, value) for name, (_, value) in self.parts[1:]]


def key_name(key: Any) -> Any:
    """String form of a parameter key. Enum members use their value (or name)."""
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    return key


def params_to_dict(params: Params) -> Dict[Any, Any]:
    if params is None:
        return {}
    items = params.items() if isinstance(params, Mapping) else params
    return {key_name(k): v for k, v in items}


def encode_json(params: Params) -> str:
    """
    Serialize parameters as a JSON object.

    Raises:
        TypeError: a value is not JSON serializable
        ValueError: NaN or Infinity (not valid JSON), or a circular reference
    """
    return json.dumps(params_to_dict(params), allow_nan=False)


def _form_value(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def encode_multipart(file_path: Union[str, Path], file_param: str, params: Params = None) -> MultipartBody:
    """
    Build a multipart body: one file part followed by one field per parameter.

    The file is read fully and closed before returning, so nothing is left open
    while the request is in flight.

    Raises:
        FileNotFoundError: file_path does not exist
    """
    filename = os.path.basename(str(file_path))

    with open(file_path, "rb") as f:
        content = f.read()

    logger.debug(f"Read upload file {filename} ({len(content)} bytes) for field '{file_param}'")

    parts: List[MultipartPart] = [(file_param, (filename, content))]
    for key, value in params_to_dict(params).items():
        parts.append((str(key), (None, _form_value(value))))

    return MultipartBody(parts=parts)
