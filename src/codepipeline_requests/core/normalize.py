# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : normalize.py
#   file_relpath : src/codepipeline_requests/core/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Structural normalization of caller-supplied request data.

Callers may describe nested request data either with mappings or with
ordered sequences of ``(key, value)`` tuples, mixed freely at any depth:

```python
normalize([("name", "Source"), ("actions", [[("name", "Fetch")]])])
# {"name": "Source", "actions": [{"name": "Fetch"}]}
```

`normalize` folds every such *pair sequence* into a ``dict`` so downstream
code only ever sees mappings, lists and scalars.

Classification rules:
- mapping -> ``dict`` with the same keys and normalized values
- list/tuple whose every element is a 2-tuple with a ``str`` first item
  -> ``dict`` (duplicate keys: last write wins)
- any other list/tuple -> ``list`` of normalized items, order preserved
- everything else (``str``, numbers, ``bool``, ``None``, ...) -> unchanged

An empty container passed to `normalize` yields ``{}``. Empty sequences
nested inside a container stay ``[]`` so list-typed fields such as
``inputArtifacts`` keep their JSON type on the wire.

Both functions are total: malformed or mixed sequences fall back to plain
lists instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

NormalizedValue: TypeAlias = "dict[Any, NormalizedValue] | list[NormalizedValue] | Any"


def _is_pair(item: object) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)


def is_pair_sequence(value: object) -> bool:
    """Return True if ``value`` is a non-empty sequence of ``(str, value)`` tuples.

    Args:
        value: Candidate value.

    Returns:
        True when ``value`` is a non-empty ``list``/``tuple`` and *every*
        element is a 2-tuple whose first item is a ``str``.
    """
    if not isinstance(value, (list, tuple)) or not value:
        return False
    return all(_is_pair(item) for item in value)


def normalize(value: object) -> NormalizedValue:
    """Collapse mappings and pair sequences into a canonical nested ``dict`` shape.

    Args:
        value: Mapping, pair sequence, plain sequence or scalar.

    Returns:
        The canonical form of ``value``. Empty containers yield ``{}``.
    """
    if isinstance(value, (Mapping, list, tuple)) and not value:
        return {}
    return _normalize_value(value)


def _normalize_value(value: object) -> NormalizedValue:
    if isinstance(value, Mapping):
        return {k: _normalize_value(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        if is_pair_sequence(value):
            # dict() semantics: a repeated key keeps its last value
            return {k: _normalize_value(v) for k, v in value}
        return [_normalize_value(item) for item in value]

    return value
