"""Response envelope parsing and validation."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema.exceptions import best_match

from .errors import MalformedResponseError

SCHEMA_DIR = Path(__file__).parent / "schema"


@lru_cache(maxsize=4)
def load_schema(name: str) -> Dict[str, Any]:
    with open(SCHEMA_DIR / f"{name}.schema.json", encoding="utf-8") as f:
        return json.load(f)


class JsonInt(int):
    """JSON integer that keeps its source spelling in ``raw``."""

    def __new__(cls, raw: str):
        self = super().__new__(cls, raw)
        self.raw = raw
        return self


class JsonFloat(float):
    """JSON real (or Infinity/NaN constant) that keeps its source spelling in ``raw``."""

    def __new__(cls, raw: str):
        self = super().__new__(cls, raw)
        self.raw = raw
        return self


def loads(raw: Union[bytes, str]) -> Any:
    """``json.loads`` with every number wrapped in JsonInt or JsonFloat."""
    return json.loads(raw, parse_int=JsonInt, parse_float=JsonFloat, parse_constant=JsonFloat)


@lru_cache(maxsize=4)
def _validator(name: str) -> jsonschema.Draft7Validator:
    return jsonschema.Draft7Validator(load_schema(name))


def validate_response(kind: str, envelope: Any) -> Dict[str, Any]:
    """Check a parsed envelope and return its ``data`` object.

    Accepted only when ``msg`` equals ``kind``, ``result`` is ``"ok"`` or
    ``true`` and ``data`` is an object.
    """
    if not isinstance(envelope, dict):
        raise MalformedResponseError(kind, f"expected JSON object, got {type(envelope).__name__}")
    msg = envelope.get("msg")
    if not isinstance(msg, str) or msg != kind:
        raise MalformedResponseError(kind, f"response is for {msg!r}")

    error = best_match(_validator("response").iter_errors(envelope))
    if error is not None:
        where = ".".join(str(p) for p in error.absolute_path) or "envelope"
        raise MalformedResponseError(kind, f"{where}: {error.message}")
    return envelope["data"]


def parse_response(kind: str, raw: Union[bytes, str]) -> Dict[str, Any]:
    """Parse decoded payload text and validate it as a reply to ``kind``."""
    try:
        envelope = loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedResponseError(kind, f"invalid JSON: {exc}") from exc
    return validate_response(kind, envelope)
