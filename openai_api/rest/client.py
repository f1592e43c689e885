#!/usr/bin/env python3
"""
REST client for the OpenAI HTTP API.

Orchestrates the request pipeline:
- request_builder: URL, headers, transport options
- body: JSON or multipart encoding
- transport: HTTP call via requests
- response_parser: Ok / Error normalization

No retries, no streaming. Remote and transport failures come back as
Error results; only local encoding/IO failures raise.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from openai_api.config import Config, Defaults, get_defaults
from .body import Params, encode_json, encode_multipart
from .request_builder import build_request
from .response_parser import Result, handle_response
from .transport import Transport

logger = logging.getLogger(__name__)


class Client:
    """
    Issues one API call per method invocation.

    The client holds no per-call state, so one instance can be shared across
    threads.
    """

    def __init__(self, defaults: Optional[Defaults] = None, transport: Optional[Transport] = None):
        """
        Args:
            defaults: Process-wide defaults (default: openai_api.config.get_defaults())
            transport: HTTP transport (default: requests-backed Transport)
        """
        self._defaults = defaults
        self.transport = transport or Transport()

    @property
    def defaults(self) -> Defaults:
        if self._defaults is None:
            return get_defaults()
        return self._defaults

    def api_get(self, path: str, config: Optional[Config] = None) -> Result:
        request = build_request(path, config, self.defaults)
        outcome = self.transport.get(request.url, request.headers, request.options)
        return self._finish(path, outcome)

    def api_post(self, path: str, params: Params = None, config: Optional[Config] = None) -> Result:
        """
        POST a JSON body.

        Raises:
            TypeError/ValueError: params are not JSON serializable
        """
        body = encode_json(params)
        request = build_request(path, config, self.defaults)
        outcome = self.transport.post(request.url, request.headers, request.options, data=body)
        return self._finish(path, outcome)

    def multipart_api_post(
        self,
        path: str,
        file_path: Union[str, Path],
        file_param: str,
        params: Params = None,
        config: Optional[Config] = None
    ) -> Result:
        """
        POST a multipart body with one file part and the remaining params as fields.

        Raises:
            FileNotFoundError: file_path does not exist (no request is sent)
        """
        body = encode_multipart(file_path, file_param, params)
        request = build_request(path, config, self.defaults, json_body=False)
        outcome = self.transport.post(request.url, request.headers, request.options, files=body.parts)
        return self._finish(path, outcome)

    def api_delete(self, path: str, config: Optional[Config] = None) -> Result:
        request = build_request(path, config, self.defaults)
        outcome = self.transport.delete(request.url, request.headers, request.options)
        return self._finish(path, outcome)

    def _finish(self, path: str, outcome) -> Result:
        result = handle_response(outcome)
        logger.debug(f"API call finished: path={path}, ok={result.ok}")
        return result


_default_client: Optional[Client] = None


def default_client() -> Client:
    """Shared client bound to the process-wide defaults."""
    global _default_client
    if _default_client is None:
        _default_client = Client()
    return _default_client
