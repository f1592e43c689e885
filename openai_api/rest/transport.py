#!/usr/bin/env python3
import logging
import requests
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class HTTPResponse:
    status_code: int
    body: str


@dataclass(frozen=True)
class TransportFailure:
    reason: str


TransportOutcome = Union[HTTPResponse, TransportFailure]


def failure_reason(error: requests.exceptions.RequestException) -> str:
    # Order matters: ConnectTimeout is both a Timeout and a ConnectionError,
    # SSLError and ProxyError are ConnectionErrors.
    if isinstance(error, requests.exceptions.Timeout):
        return "timeout"
    if isinstance(error, requests.exceptions.SSLError):
        return "ssl_error"
    if isinstance(error, requests.exceptions.ProxyError):
        return "proxy_error"
    if isinstance(error, requests.exceptions.ConnectionError):
        return "connection_error"
    return str(error) or type(error).__name__


class Transport:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def request(
        self,
        method: str,
        url: str,
        headers: List[Tuple[str, str]],
        options: Dict[str, Any],
        data: Optional[str] = None,
        files: Optional[List] = None,
    ) -> TransportOutcome:
        self.logger.debug(
            f"API request: method={method}, url={url}, "
            f"has_body={data is not None}, multipart={files is not None}, "
            f"options={sorted(options)}",
            extra={"method": method, "url": url},
        )

        try:
            response = requests.request(
                method,
                url,
                headers=dict(headers),
                data=data,
                files=files,
                **options
            )
        except requests.exceptions.RequestException as e:
            reason = failure_reason(e)
            self.logger.debug(
                f"API transport failure: method={method}, url={url}, "
                f"reason={reason}, error_type={type(e).__name__}, error={e}",
                extra={"method": method, "url": url, "error": reason},
            )
            return TransportFailure(reason=reason)

        self.logger.debug(
            f"API response: method={method}, url={url}, "
            f"status_code={response.status_code}, body_length={len(response.text)}",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return HTTPResponse(status_code=response.status_code, body=response.text)

    def get(self, url, headers, options) -> TransportOutcome:
        return self.request("GET", url, headers, options)

    def post(self, url, headers, options, data=None, files=None) -> TransportOutcome:
        return self.request("POST", url, headers, options, data=data, files=files)

    def delete(self, url, headers, options) -> TransportOutcome:
        return self.request("DELETE", url, headers, options)
