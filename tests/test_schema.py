"""Schema validation tests: lgspkctl/schema/*.schema.json

Validates that the shipped schema files are valid JSON Schema and that
requests and replies built by the client and the mock conform to them.
"""

import json

import jsonschema
import pytest

from lgspkctl.const import MESSAGE_KINDS
from lgspkctl.response import SCHEMA_DIR, load_schema

SCHEMA_FILES = ["request.schema.json", "response.schema.json"]


@pytest.mark.parametrize("schema_file", SCHEMA_FILES)
def test_schema_valid_json(schema_file: str) -> None:
    """Each schema file must be valid JSON."""
    with open(SCHEMA_DIR / schema_file) as f:
        data = json.load(f)
    assert isinstance(data, dict)
    assert "$schema" in data


@pytest.mark.parametrize("schema_file", SCHEMA_FILES)
def test_schema_valid_jsonschema(schema_file: str) -> None:
    """Each schema file must be valid JSON Schema (draft-07)."""
    with open(SCHEMA_DIR / schema_file) as f:
        schema = json.load(f)
    jsonschema.Draft7Validator.check_schema(schema)


@pytest.mark.parametrize("kind", MESSAGE_KINDS)
def test_get_request_valid(kind: str) -> None:
    """Every known get request conforms to the request schema."""
    jsonschema.Draft7Validator(load_schema("request")).validate({"cmd": "get", "msg": kind})


def test_request_missing_msg_invalid() -> None:
    assert not jsonschema.Draft7Validator(load_schema("request")).is_valid({"cmd": "get"})


def test_response_example_valid() -> None:
    response = {
        "cmd": "notibyget",
        "msg": "EQ_VIEW_INFO",
        "result": True,
        "data": {"i_curr_eq": 3, "ai_eq_list": [0, 1, 2, 3]},
    }
    jsonschema.Draft7Validator(load_schema("response")).validate(response)
