"""
Tests for openai_api/cli/

Config commands run against the temp config path set by the root conftest.
API commands run against a patched shared client.
"""

import json
from unittest.mock import patch

import pytest
import yaml

from openai_api.cli import build_parser, main
from openai_api.cli.config import _mask_key, _parse_value
from openai_api.rest import Client, Error, HTTPResponse, Ok
from openai_api.rest import client as client_module


@pytest.fixture
def shared_transport(monkeypatch, transport):
    """Route endpoint calls made by CLI commands to the recording transport."""
    monkeypatch.setattr(client_module, "_default_client", Client(transport=transport))
    return transport


class TestParser:

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_complete_args(self):
        args = build_parser().parse_args(["complete", "-m", "m", "-p", "hi", "--max-tokens", "5"])
        assert args.model == "m"
        assert args.prompt == "hi"
        assert args.max_tokens == 5


class TestConfigCommands:

    def test_init_creates_template(self, isolated_defaults, capsys):
        assert main(["config", "init"]) == 0

        data = yaml.safe_load(isolated_defaults.read_text())
        assert data["api_key"] == "${OPENAI_API_KEY}"
        assert "Created config" in capsys.readouterr().out

    def test_init_refuses_overwrite(self, isolated_defaults, capsys):
        main(["config", "init"])
        assert main(["config", "init"]) == 1
        assert "already exists" in capsys.readouterr().out

    def test_set_then_show_json(self, isolated_defaults, capsys):
        main(["config", "init"])
        assert main(["config", "set", "azure_deployment_id", "my-dep"]) == 0
        assert main(["config", "set", "http_options.timeout", "30"]) == 0
        capsys.readouterr()

        assert main(["config", "show", "--json"]) == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["azure_deployment_id"] == "my-dep"
        assert shown["http_options"]["timeout"] == 30

    def test_set_keeps_string_fields_as_text(self, isolated_defaults, capsys):
        main(["config", "init"])
        assert main(["config", "set", "azure_api_version", "2.0"]) == 0
        assert main(["config", "set", "azure_deployment_id", "123"]) == 0

        data = yaml.safe_load(isolated_defaults.read_text())
        assert data["azure_api_version"] == "2.0"
        assert data["azure_deployment_id"] == "123"

    def test_show_masks_keys(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-abcdefghijklmnop")
        main(["config", "show", "--json"])
        shown = json.loads(capsys.readouterr().out)
        assert shown["api_key"] == "sk-a...mnop"

    def test_show_reveal_keys(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-abcdefghijklmnop")
        main(["config", "show", "--json", "--reveal-keys"])
        shown = json.loads(capsys.readouterr().out)
        assert shown["api_key"] == "sk-abcdefghijklmnop"

    def test_set_without_file(self, capsys):
        assert main(["config", "set", "api_url", "http://x"]) == 1
        assert "No config found" in capsys.readouterr().out

    def test_set_unknown_key(self, capsys):
        main(["config", "init"])
        assert main(["config", "set", "proxy", "http://x"]) == 1


class TestHelpers:

    def test_mask_key(self):
        assert _mask_key(None) == "(not set)"
        assert _mask_key("short") == "****"
        assert _mask_key("sk-1234567890") == "sk-1...7890"

    @pytest.mark.parametrize("raw,parsed", [
        ("true", True),
        ("30", 30),
        ("1.5", 1.5),
        ('{"a": 1}', {"a": 1}),
        ("2023-05-15", "2023-05-15"),
    ])
    def test_parse_value(self, raw, parsed):
        assert _parse_value(raw) == parsed


class TestApiCommands:

    def test_models_list(self, shared_transport, capsys):
        shared_transport.outcome = HTTPResponse(200, '{"object": "list", "data": []}')
        assert main(["models"]) == 0
        assert shared_transport.last["url"].endswith("/v1/models")
        assert '"object": "list"' in capsys.readouterr().out

    def test_complete_sends_params(self, shared_transport):
        main(["complete", "-m", "gpt-3.5-turbo-instruct", "-p", "hi", "--max-tokens", "4"])
        assert json.loads(shared_transport.last["data"]) == {
            "model": "gpt-3.5-turbo-instruct",
            "prompt": "hi",
            "max_tokens": 4,
        }

    def test_error_exit_code(self, shared_transport):
        shared_transport.outcome = HTTPResponse(401, '{"error": {"message": "bad key"}}')
        assert main(["moderate", "text"]) == 1

    def test_upload_missing_file(self, shared_transport, tmp_path):
        assert main(["files", "upload", str(tmp_path / "missing.jsonl")]) == 1
        assert shared_transport.calls == []

    def test_files_delete(self):
        with patch("openai_api.cli.api.files.delete", return_value=Ok({"deleted": True})) as mock_delete:
            assert main(["files", "delete", "file-1"]) == 0
        mock_delete.assert_called_once_with("file-1")

    def test_transport_failure_prints_reason(self, capsys):
        with patch("openai_api.cli.api.files.list", return_value=Error("timeout")):
            assert main(["files", "list"]) == 1
        assert "timeout" in capsys.readouterr().err
