"""
Tests for openai_api/rest/body.py
"""

import json
from datetime import datetime
from enum import Enum

import pytest

from openai_api.rest.body import encode_json, encode_multipart, params_to_dict


class Param(Enum):
    MODEL = "model"
    MAX_TOKENS = "max_tokens"


class TestEncodeJson:

    def test_mapping(self):
        body = encode_json({"model": "gpt-3.5-turbo-instruct", "max_tokens": 5})
        assert json.loads(body) == {"model": "gpt-3.5-turbo-instruct", "max_tokens": 5}

    def test_pair_list(self):
        body = encode_json([("input", "hello"), ("model", "text-moderation-latest")])
        assert json.loads(body) == {"input": "hello", "model": "text-moderation-latest"}

    def test_enum_keys(self):
        body = encode_json({Param.MODEL: "davinci", Param.MAX_TOKENS: 3})
        assert json.loads(body) == {"model": "davinci", "max_tokens": 3}

    def test_none_is_empty_object(self):
        assert encode_json(None) == "{}"

    def test_non_serializable_raises(self):
        """Encoding failures are local errors, never swallowed."""
        with pytest.raises(TypeError):
            encode_json({"when": datetime(2024, 1, 1)})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_raise(self, value):
        with pytest.raises(ValueError):
            encode_json({"temperature": value})


class TestParamsToDict:

    def test_later_pairs_win(self):
        assert params_to_dict([("a", 1), ("a", 2)]) == {"a": 2}


class TestEncodeMultipart:

    def test_one_file_part_then_fields(self, upload_file):
        body = encode_multipart(upload_file, "file", {"purpose": "fine-tune"})

        assert len(body.parts) == 2
        field, (filename, content) = body.file_part
        assert field == "file"
        assert filename == "training-data.jsonl"
        assert content == upload_file.read_bytes()
        assert body.fields == [("purpose", "fine-tune")]

    def test_filename_is_basename(self, upload_file):
        body = encode_multipart(str(upload_file), "image")
        assert body.file_part[1][0] == "training-data.jsonl"
        assert body.fields == []

    def test_keys_become_strings(self, upload_file):
        body = encode_multipart(upload_file, "file", {Param.MODEL: "whisper-1", 7: "x"})
        assert [name for name, _ in body.fields] == ["model", "7"]

    def test_scalar_values_become_form_strings(self, upload_file):
        body = encode_multipart(upload_file, "file", {"n": 2, "temperature": 0.5, "echo": True})
        assert dict(body.fields) == {"n": "2", "temperature": "0.5", "echo": "true"}

    def test_fields_have_no_filename(self, upload_file):
        body = encode_multipart(upload_file, "file", {"purpose": "fine-tune"})
        name, (filename, value) = body.parts[1]
        assert filename is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            encode_multipart(tmp_path / "nope.jsonl", "file", {"purpose": "fine-tune"})
