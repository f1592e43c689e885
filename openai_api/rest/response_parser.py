"""
Response normalization.

Maps every transport outcome onto Ok(value) or Error(value):

    200 + JSON object      -> Ok(ResponsePayload)   top-level keys canonicalized
    200 + other JSON value -> Ok(decoded)
    200 + not JSON         -> Ok(raw body)
    non-200 + JSON         -> Error(decoded)
    non-200 + not JSON     -> Error(raw body)
    no response            -> Error(reason)

Decoding never raises.
"""

import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from openai_api.errors import ResultError
from .transport import TransportFailure, TransportOutcome

logger = logging.getLogger(__name__)


class ResponsePayload(dict):
    """
    Decoded JSON object with canonical top-level keys.

    Behaves as a dict; top-level fields are also attributes
    (payload.choices is payload["choices"]). Nested values are plain dicts.
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        return list(super().__dir__()) + [k for k in self if k.isidentifier()]


def canonical_key(key: Any) -> Any:
    return sys.intern(key) if isinstance(key, str) else key


def canonicalize(data: Dict[str, Any]) -> ResponsePayload:
    """Top level only; nested structures keep their string keys."""
    return ResponsePayload((canonical_key(k), v) for k, v in data.items())


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Error:
    value: Any

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ResultError(self.value)


Result = Union[Ok, Error]


def decode_body(body: Any) -> Tuple[bool, Any]:
    """Try to decode a JSON body. Returns (True, decoded) or (False, body)."""
    if not isinstance(body, (str, bytes, bytearray)):
        return False, body
    try:
        return True, json.loads(body)
    except (ValueError, RecursionError):
        return False, body


def handle_response(outcome: TransportOutcome) -> Result:
    if isinstance(outcome, TransportFailure):
        return Error(outcome.reason)

    decoded, value = decode_body(outcome.body)

    if outcome.status_code == 200:
        if decoded and isinstance(value, dict):
            return Ok(canonicalize(value))
        if not decoded:
            logger.debug("Passing through non-JSON 200 response body")
        return Ok(value)

    logger.debug(
        f"API error response: status_code={outcome.status_code}, decoded={decoded}"
    )
    return Error(value)
