"""Serialize an assembled document to JSON, YAML or an HTTP response."""

import json
from typing import Any

import yaml
from werkzeug.wrappers import Response

JSON_CONTENT_TYPE = "application/json"


def to_json_bytes(document: dict[str, Any], indent: int | None = 2) -> bytes:
    """Encode the document as UTF-8 JSON, keeping insertion order.

    NaN and infinities are not JSON and raise ValueError.
    """
    return json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False).encode("utf-8")


def to_yaml(document: dict[str, Any]) -> str:
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def to_response(document: dict[str, Any], indent: int | None = 2) -> Response:
    """Wrap the JSON document in a ready-to-send 200 response."""
    return Response(to_json_bytes(document, indent), status=200, content_type=JSON_CONTENT_TYPE)
