"""
Request composition: URL, headers and transport options for one call.

Pure functions of (path, per-call Config, Defaults). No I/O.

Routing:
    standard:   {api_url}/v1/{path}
    deployment: {api_url}/deployments/{azure_deployment_id}/{path}

Deployment mode also adds an `api-key` header (alongside the bearer header)
and an `api-version` query parameter when a version is configured.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from collections.abc import Mapping

from openai_api.config import Config, Defaults, resolve

logger = logging.getLogger(__name__)

Header = Tuple[str, str]

# The request body is composed per call and never taken from http_options.
BODY_OPTIONS = ("data", "files", "json")


@dataclass
class RequestDescriptor:
    url: str
    headers: List[Header]
    options: Dict[str, Any] = field(default_factory=dict)

    def header_dict(self) -> Dict[str, str]:
        return dict(self.headers)


def resolve_url(path: str, config: Optional[Config], defaults: Defaults) -> str:
    base_url = (resolve("api_url", config, defaults) or "").rstrip("/")
    azure_deployment_id = resolve("azure_deployment_id", config, defaults)
    path = path.lstrip("/")

    if azure_deployment_id:
        return f"{base_url}/deployments/{azure_deployment_id}/{path}"
    return f"{base_url}/v1/{path}"


def bearer(config: Optional[Config], defaults: Defaults) -> Header:
    api_key = resolve("api_key", config, defaults) or ""
    return ("Authorization", f"Bearer {api_key}")


def add_organization_header(headers: List[Header], config: Optional[Config], defaults: Defaults) -> List[Header]:
    org_key = resolve("organization_key", config, defaults)
    if org_key:
        return headers + [("OpenAI-Organization", org_key)]
    return headers


def add_azure_header(headers: List[Header], config: Optional[Config], defaults: Defaults) -> List[Header]:
    api_key = resolve("api_key", config, defaults)
    azure_deployment_id = resolve("azure_deployment_id", config, defaults)
    if azure_deployment_id and api_key:
        return headers + [("api-key", api_key)]
    return headers


def request_headers(
    config: Optional[Config],
    defaults: Defaults,
    json_body: bool = True
) -> List[Header]:
    """
    Build the ordered header list.

    Args:
        json_body: False for multipart uploads, where the transport writes
                   the Content-Type with its boundary

    Returns:
        [Authorization, Content-type?, OpenAI-Organization?, api-key?]
    """
    headers = [bearer(config, defaults)]
    if json_body:
        headers.append(("Content-type", "application/json"))

    headers = add_organization_header(headers, config, defaults)
    headers = add_azure_header(headers, config, defaults)
    return headers


def add_azure_query_params(params: Any, config: Optional[Config], defaults: Defaults) -> Any:
    """
    Append api-version to a params value without mutating it.

    params may be None, a mapping, or a sequence of (name, value) pairs.
    """
    api_version = resolve("azure_api_version", config, defaults)
    azure_deployment_id = resolve("azure_deployment_id", config, defaults)

    if not (azure_deployment_id and api_version):
        return params

    if params is None:
        return [("api-version", api_version)]
    if isinstance(params, Mapping):
        return {**params, "api-version": api_version}
    return list(params) + [("api-version", api_version)]


def merge_headers(headers: List[Header], extra: Any) -> List[Header]:
    """
    Append headers from http_options that the composed list does not already set.

    Names compare case-insensitively; composed headers always win. Content-Type
    is never taken from http_options (multipart calls need the boundary one).
    """
    if not extra:
        return headers

    taken = {name.lower() for name, _ in headers} | {"content-type"}
    items = extra.items() if isinstance(extra, Mapping) else extra
    return headers + [(str(name), str(value)) for name, value in items if str(name).lower() not in taken]


def request_options(config: Optional[Config], defaults: Defaults) -> Dict[str, Any]:
    """
    Transport options with deployment query params merged into `params`.

    Returns a new dict; the configured http_options are left untouched.
    `headers` is removed (see merge_headers) and body keys are dropped.
    """
    opts = dict(resolve("http_options", config, defaults) or {})
    opts.pop("headers", None)

    for key in BODY_OPTIONS:
        if key in opts:
            logger.warning(f"Ignoring http_options['{key}']: request bodies come from params")
            del opts[key]

    params = add_azure_query_params(opts.get("params"), config, defaults)
    if params is not None:
        opts["params"] = params

    return opts


def build_request(
    path: str,
    config: Optional[Config],
    defaults: Defaults,
    json_body: bool = True
) -> RequestDescriptor:
    http_options = resolve("http_options", config, defaults) or {}
    headers = merge_headers(
        request_headers(config, defaults, json_body=json_body),
        http_options.get("headers"),
    )
    return RequestDescriptor(
        url=resolve_url(path, config, defaults),
        headers=headers,
        options=request_options(config, defaults),
    )
