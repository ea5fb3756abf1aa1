"""Request body assembly for CKAN actions."""

import json
from collections.abc import Mapping
from typing import Any

from ckanaction.errors import BodyEncodingError


def build_body(
    required: Mapping[str, Any] | None = None,
    optional: Mapping[str, Any] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an action body keyed by wire field name.

    Every ``required`` entry is sent as given, falsy or not. An ``optional``
    entry is sent only when its value is not None, so omitted arguments never
    reach CKAN as ``null``. Keys from ``extra`` are merged last and win over
    same-named fields.
    """
    body: dict[str, Any] = dict(required or {})
    for name, value in (optional or {}).items():
        if value is not None:
            body[name] = value
    if extra is not None:
        if not isinstance(extra, Mapping):
            raise BodyEncodingError(
                f"Extra fields must be a JSON object, got {type(extra).__name__}"
            )
        body.update(extra)
    return body


def encode_json(body: Mapping[str, Any]) -> bytes:
    """Serialize a body for an ``application/json`` request."""
    try:
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise BodyEncodingError(f"Could not serialize request body: {e}") from e


def flatten_form(body: Mapping[str, Any]) -> dict[str, str]:
    """Turn a body into multipart text fields.

    Strings pass through untouched; anything else is sent as its JSON text
    (``5`` -> ``"5"``, ``True`` -> ``"true"``).
    """
    fields = {}
    for name, value in body.items():
        if isinstance(value, str):
            fields[name] = value
            continue
        try:
            fields[name] = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise BodyEncodingError(f"Could not serialize form field '{name}': {e}") from e
    return fields
