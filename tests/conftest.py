"""
Shared fixtures for openai-api tests.

No network: a RecordingTransport captures each call and returns a canned
outcome, and requests.request is patched where the real Transport is tested.
"""

import pytest

from openai_api.config import Config, Defaults
from openai_api.rest import Client, HTTPResponse, Transport


class RecordingTransport(Transport):
    """Transport that records calls instead of hitting the network."""

    def __init__(self, outcome=None):
        super().__init__()
        self.outcome = outcome or HTTPResponse(status_code=200, body='{"object": "ok"}')
        self.calls = []

    def request(self, method, url, headers, options, data=None, files=None):
        self.calls.append({
            "method": method,
            "url": url,
            "headers": list(headers),
            "options": options,
            "data": data,
            "files": files,
        })
        return self.outcome

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def defaults():
    """Process-wide defaults for a plain (non-Azure) setup."""
    return Defaults(api_key="sk-default", api_url="https://api.example.com")


@pytest.fixture
def azure_defaults():
    """Defaults with deployment routing enabled."""
    return Defaults(
        api_key="azure-key",
        api_url="https://my-resource.openai.azure.com/openai",
        azure_deployment_id="my-deployment",
        azure_api_version="2023-05-15",
    )


@pytest.fixture
def empty_config():
    return Config()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(defaults, transport):
    return Client(defaults=defaults, transport=transport)


@pytest.fixture
def upload_file(tmp_path):
    """A small JSONL file to upload."""
    path = tmp_path / "training-data.jsonl"
    path.write_text('{"prompt": "a", "completion": "b"}\n')
    return path
