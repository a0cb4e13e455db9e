# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : serializers.py
#   file_relpath : src/codepipeline_requests/request/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Pure JSON serialization helpers for request descriptors.

This module is intentionally:
- Console-free (no printing)
- Click-free
- side-effect-free (serialization only)

`serialize_body` produces the exact document a transport would send;
`serialize_request` renders the whole descriptor for inspection (the CLI
``render`` command uses it).

Conventions:
- `json.dumps()` does not append a trailing newline.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from codepipeline_requests.request.descriptor import RequestDescriptor


def to_json_compatible(obj: object) -> object:
    """Convert a payload into JSON-serializable structures.

    Conversions:
      - `Enum` -> its ``.value``
      - object with callable ``.to_dict()`` -> converted ``.to_dict()``
      - `Mapping` -> ``dict`` with ``str`` keys
      - ``list``/``tuple`` -> ``list``

    Args:
        obj: The payload object to convert.

    Returns:
        A JSON-serializable representation of ``obj``.
    """
    if isinstance(obj, Enum):
        return obj.value

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_json_compatible(to_dict())

    if isinstance(obj, Mapping):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [to_json_compatible(v) for v in obj]

    return obj


def serialize_body(request: RequestDescriptor) -> str:
    """Serialize the request body to compact JSON, as sent on the wire.

    Args:
        request: The descriptor whose body to serialize.

    Returns:
        A compact JSON string.
    """
    return json.dumps(to_json_compatible(request.body), separators=(",", ":"))


def serialize_request(request: RequestDescriptor, *, indent: int | None = 2) -> str:
    """Serialize a full descriptor (method, path, headers, body) to JSON.

    Args:
        request: The descriptor to serialize.
        indent: JSON indentation; ``None`` for a single line.

    Returns:
        A JSON string (no trailing newline).
    """
    return json.dumps(to_json_compatible(request), indent=indent)
